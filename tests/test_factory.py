"""Tests for crumb.factory — CookieMetadataFactory defaults and merging."""

import logging

import pytest

from crumb.config import CookieConfig
from crumb.factory import CookieMetadataFactory
from crumb.metadata import CookieMetadata, PublicCookieMetadata, SensitiveCookieMetadata


class TestFactoryConfig:
    def test_default_config(self) -> None:
        assert CookieMetadataFactory().config == CookieConfig()

    def test_custom_config(self) -> None:
        cfg = CookieConfig(domain=".example.com")
        assert CookieMetadataFactory(cfg).config is cfg


class TestCreateCookieMetadata:
    def test_type(self) -> None:
        metadata = CookieMetadataFactory().create_cookie_metadata()
        assert type(metadata) is CookieMetadata

    def test_scope_defaults_only(self) -> None:
        factory = CookieMetadataFactory(CookieConfig(domain=".example.com"))
        assert factory.create_cookie_metadata().to_dict() == {
            "path": "/",
            "domain": ".example.com",
        }

    def test_none_scope_omitted(self) -> None:
        factory = CookieMetadataFactory(CookieConfig(path=None))
        assert factory.create_cookie_metadata().to_dict() == {}

    def test_caller_values_win(self) -> None:
        metadata = CookieMetadataFactory().create_cookie_metadata({"path": "/shop"})
        assert metadata.get_path() == "/shop"

    def test_non_mapping_treated_as_empty(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="crumb.metadata"):
            metadata = CookieMetadataFactory().create_cookie_metadata(7)  # type: ignore[arg-type]
        assert metadata.to_dict() == {"path": "/"}
        assert "non-mapping" in caplog.text

    def test_each_call_is_fresh(self) -> None:
        factory = CookieMetadataFactory()
        first = factory.create_cookie_metadata().set_path("/a")
        second = factory.create_cookie_metadata()
        assert first is not second
        assert second.get_path() == "/"


class TestCreatePublicCookieMetadata:
    def test_type(self) -> None:
        metadata = CookieMetadataFactory().create_public_cookie_metadata()
        assert isinstance(metadata, PublicCookieMetadata)

    def test_all_defaults(self) -> None:
        metadata = CookieMetadataFactory().create_public_cookie_metadata()
        assert metadata.to_dict() == {
            "path": "/",
            "http_only": True,
            "secure": False,
            "samesite": "Lax",
            "duration": 3600,
        }

    def test_session_cookie_has_no_duration(self) -> None:
        factory = CookieMetadataFactory(CookieConfig(lifetime=None))
        assert factory.create_public_cookie_metadata().get_duration() is None

    def test_caller_values_win(self) -> None:
        metadata = CookieMetadataFactory().create_public_cookie_metadata(
            {"http_only": False, "duration": 10}
        )
        assert metadata.get_http_only() is False
        assert metadata.get_duration() == 10
        assert metadata.get_same_site() == "Lax"


class TestCreateSensitiveCookieMetadata:
    def test_type(self) -> None:
        metadata = CookieMetadataFactory().create_sensitive_cookie_metadata()
        assert isinstance(metadata, SensitiveCookieMetadata)

    def test_defaults(self) -> None:
        factory = CookieMetadataFactory(CookieConfig(samesite="Strict"))
        metadata = factory.create_sensitive_cookie_metadata()
        assert metadata.to_dict() == {
            "path": "/",
            "samesite": "Strict",
            "http_only": True,
            "secure": False,
        }

    def test_config_http_only_not_applied(self) -> None:
        factory = CookieMetadataFactory(CookieConfig(http_only=False))
        metadata = factory.create_sensitive_cookie_metadata()
        assert metadata.get_http_only() is True
        assert "duration" not in metadata.to_dict()

    def test_secure_request_check_passed_through(self) -> None:
        factory = CookieMetadataFactory(is_secure_request=lambda: True)
        assert factory.create_sensitive_cookie_metadata().get_secure() is True

    def test_configured_secure_applies(self) -> None:
        factory = CookieMetadataFactory(CookieConfig(secure=True))

        public = factory.create_public_cookie_metadata()
        sensitive = factory.create_sensitive_cookie_metadata()

        assert public.get_secure() is True
        assert sensitive.get_secure() is True

    def test_configured_secure_beats_plain_http_request(self) -> None:
        factory = CookieMetadataFactory(CookieConfig(secure=True), is_secure_request=lambda: False)
        assert factory.create_sensitive_cookie_metadata().get_secure() is True

    def test_same_site_none_config_is_secure(self) -> None:
        factory = CookieMetadataFactory(CookieConfig(samesite="None", secure=True))
        assert factory.create_sensitive_cookie_metadata().to_dict() == {
            "path": "/",
            "samesite": "None",
            "http_only": True,
            "secure": True,
        }

    def test_caller_same_site_none_is_secure(self) -> None:
        metadata = CookieMetadataFactory().create_sensitive_cookie_metadata({"samesite": "none"})
        assert metadata.get_secure() is True
