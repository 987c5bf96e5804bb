"""Factory for cookie metadata seeded with configured defaults."""

from collections.abc import Mapping

from crumb._internal.types import MetadataValue, SecureRequestCheck
from crumb.config import CookieConfig
from crumb.metadata import (
    KEY_DOMAIN,
    KEY_DURATION,
    KEY_HTTP_ONLY,
    KEY_PATH,
    KEY_SAME_SITE,
    KEY_SECURE,
    CookieMetadata,
    PublicCookieMetadata,
    SensitiveCookieMetadata,
    coerce_mapping,
)


class CookieMetadataFactory:
    """Create cookie metadata pre-filled from a ``CookieConfig``.

    Values in the mapping passed to a ``create_*`` method always win over
    the configured defaults.

    Usage::

        from crumb import CookieConfig, CookieMetadataFactory

        factory = CookieMetadataFactory(
            CookieConfig(domain=".example.com", secure=True),
            is_secure_request=lambda: request.url.scheme == "https",
        )
        public = factory.create_public_cookie_metadata().set_duration_one_year()
        session = factory.create_sensitive_cookie_metadata({"path": "/account"})
    """

    __slots__ = ("_config", "_is_secure_request")

    def __init__(
        self,
        config: CookieConfig | None = None,
        *,
        is_secure_request: SecureRequestCheck | None = None,
    ) -> None:
        self._config = config or CookieConfig()
        self._is_secure_request = is_secure_request

    @property
    def config(self) -> CookieConfig:
        return self._config

    def _scope_defaults(self) -> dict[str, MetadataValue]:
        defaults: dict[str, MetadataValue] = {}
        if self._config.path is not None:
            defaults[KEY_PATH] = self._config.path
        if self._config.domain is not None:
            defaults[KEY_DOMAIN] = self._config.domain
        return defaults

    def _merge(
        self, defaults: dict[str, MetadataValue], metadata: object
    ) -> dict[str, MetadataValue]:
        defaults.update(coerce_mapping(metadata))
        return defaults

    def create_cookie_metadata(
        self, metadata: Mapping[str, MetadataValue] | None = None
    ) -> CookieMetadata:
        """Plain metadata with only the configured path and domain."""
        return CookieMetadata(self._merge(self._scope_defaults(), metadata))

    def create_public_cookie_metadata(
        self, metadata: Mapping[str, MetadataValue] | None = None
    ) -> PublicCookieMetadata:
        """Metadata for script-readable cookies, with every configured default."""
        cfg = self._config
        defaults = self._scope_defaults()
        defaults[KEY_HTTP_ONLY] = cfg.http_only
        defaults[KEY_SECURE] = cfg.secure
        defaults[KEY_SAME_SITE] = cfg.samesite
        if cfg.lifetime is not None:
            defaults[KEY_DURATION] = cfg.lifetime
        return PublicCookieMetadata(self._merge(defaults, metadata))

    def create_sensitive_cookie_metadata(
        self, metadata: Mapping[str, MetadataValue] | None = None
    ) -> SensitiveCookieMetadata:
        """Metadata for session and token cookies.

        ``http_only`` is left to ``SensitiveCookieMetadata``. A configured
        ``secure=True`` makes the cookie secure even on plain HTTP requests.
        """
        defaults = self._scope_defaults()
        defaults[KEY_SAME_SITE] = self._config.samesite
        return SensitiveCookieMetadata(
            self._merge(defaults, metadata),
            is_secure_request=self._is_secure_request,
            secure_default=self._config.secure,
        )
