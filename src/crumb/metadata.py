"""Cookie attribute metadata.

A ``CookieMetadata`` is a small mutable bag of the attributes a response
writer needs when it emits a cookie: domain, path, the ``Secure`` and
``HttpOnly`` flags, a duration, and the SameSite policy. Setters return the
bag itself so calls chain::

    metadata = PublicCookieMetadata().set_path("/").set_duration(3600)

Unset attributes read as ``None``. Nothing here serializes headers; that is
the response writer's job.
"""

import logging
from collections.abc import Mapping
from typing import Self

from crumb._internal.types import MetadataValue, SecureRequestCheck
from crumb.errors import InvalidArgument

logger = logging.getLogger("crumb.metadata")

KEY_DOMAIN = "domain"
KEY_PATH = "path"
KEY_SECURE = "secure"
KEY_HTTP_ONLY = "http_only"
KEY_DURATION = "duration"
KEY_SAME_SITE = "samesite"

# Lower-case input -> canonical directive value
SAME_SITE_ALLOWED_VALUES: Mapping[str, str] = {
    "strict": "Strict",
    "lax": "Lax",
    "none": "None",
}

SAME_SITE_ERROR = (
    "Invalid argument provided for SameSite directive expected one of: Strict, Lax or None"
)

ONE_YEAR_SECONDS = 365 * 24 * 60 * 60


def is_valid_same_site(value: object) -> bool:
    """True if *value* is a string naming an allowed SameSite policy (any case)."""
    return isinstance(value, str) and value.lower() in SAME_SITE_ALLOWED_VALUES


def coerce_mapping(metadata: object) -> dict[str, MetadataValue]:
    """Copy *metadata* into a dict, or return an empty one for non-mappings."""
    if isinstance(metadata, Mapping):
        return dict(metadata)
    if metadata is not None:
        logger.debug(
            "Ignoring non-mapping cookie metadata of type %s", type(metadata).__name__
        )
    return {}


class CookieMetadata:
    """Cookie attributes keyed by the ``KEY_*`` constants.

    Built from an optional mapping. Anything that is not a ``Mapping`` is
    treated as empty rather than rejected. The mapping is copied, so later
    changes to the caller's dict do not leak in.

    ``http_only`` and ``secure`` are read-only here. Use
    ``PublicCookieMetadata`` to set them, or ``SensitiveCookieMetadata`` to
    have them enforced.
    """

    __slots__ = ("_metadata",)

    def __init__(self, metadata: Mapping[str, MetadataValue] | None = None) -> None:
        self._metadata = coerce_mapping(metadata)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._metadata!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._metadata == other._metadata

    __hash__ = None  # type: ignore[assignment]

    # -- Storage --

    def _get(self, name: str) -> MetadataValue:
        """Return the stored value for *name*, or ``None`` if never set."""
        return self._metadata.get(name)

    def _set(self, name: str, value: MetadataValue) -> Self:
        """Store *value* under *name*. No validation at this layer."""
        self._metadata[name] = value
        return self

    def to_dict(self) -> dict[str, MetadataValue]:
        """Return a snapshot of everything stored.

        Attributes that were never set do not appear as keys.
        """
        return dict(self._metadata)

    # -- Accessors --

    def set_domain(self, domain: str | None) -> Self:
        """Set the domain the cookie is sent to."""
        return self._set(KEY_DOMAIN, domain)

    def get_domain(self) -> str | None:
        return self._get(KEY_DOMAIN)  # type: ignore[return-value]

    def set_path(self, path: str | None) -> Self:
        """Set the URL path prefix the cookie is scoped to."""
        return self._set(KEY_PATH, path)

    def get_path(self) -> str | None:
        return self._get(KEY_PATH)  # type: ignore[return-value]

    def get_http_only(self) -> bool | None:
        """Whether the cookie is hidden from client-side scripts."""
        return self._get(KEY_HTTP_ONLY)  # type: ignore[return-value]

    def get_secure(self) -> bool | None:
        """Whether the cookie is only sent over HTTPS."""
        return self._get(KEY_SECURE)  # type: ignore[return-value]

    def set_same_site(self, same_site: str | None) -> Self:
        """Set the SameSite policy.

        Accepts ``Strict``, ``Lax`` or ``None`` in any letter case and stores
        the string exactly as given; no normalization is applied. Raises
        ``InvalidArgument`` for anything else, leaving the bag untouched.
        """
        if not is_valid_same_site(same_site):
            logger.debug("Rejected SameSite value %r", same_site)
            raise InvalidArgument(SAME_SITE_ERROR)
        return self._set(KEY_SAME_SITE, same_site)

    def get_same_site(self) -> str | None:
        return self._get(KEY_SAME_SITE)  # type: ignore[return-value]


class PublicCookieMetadata(CookieMetadata):
    """Metadata for cookies that client-side code may read.

    Adds setters for the duration and both security flags.
    """

    __slots__ = ()

    def set_duration(self, duration: int | float | None) -> Self:
        """Set the number of seconds until the cookie expires."""
        return self._set(KEY_DURATION, duration)

    def set_duration_one_year(self) -> Self:
        return self.set_duration(ONE_YEAR_SECONDS)

    def get_duration(self) -> int | float | None:
        return self._get(KEY_DURATION)  # type: ignore[return-value]

    def set_http_only(self, http_only: bool) -> Self:
        return self._set(KEY_HTTP_ONLY, http_only)

    def set_secure(self, secure: bool) -> Self:
        return self._set(KEY_SECURE, secure)

    def set_same_site(self, same_site: str | None) -> Self:
        """Set the SameSite policy; ``None`` also marks the cookie secure.

        Browsers drop ``SameSite=None`` cookies that lack ``Secure``.
        """
        super().set_same_site(same_site)
        if same_site.lower() == "none":  # type: ignore[union-attr]
            self.set_secure(True)
        return self


class SensitiveCookieMetadata(CookieMetadata):
    """Metadata for cookies carrying session ids, tokens and similar data.

    Always HTTP-only unless the initial mapping says otherwise, defaults to
    ``SameSite=Lax``, and takes its ``secure`` flag from the request scheme
    the first time it is read::

        metadata = SensitiveCookieMetadata(is_secure_request=lambda: request.url.scheme == "https")

    ``secure_default=True`` makes the cookie secure regardless of the request,
    and ``SameSite=None`` always resolves to secure.
    """

    __slots__ = ("_is_secure_request", "_secure_default")

    def __init__(
        self,
        metadata: Mapping[str, MetadataValue] | None = None,
        *,
        is_secure_request: SecureRequestCheck | None = None,
        secure_default: bool = False,
    ) -> None:
        initial = coerce_mapping(metadata)
        initial.setdefault(KEY_HTTP_ONLY, True)
        initial.setdefault(KEY_SAME_SITE, SAME_SITE_ALLOWED_VALUES["lax"])
        super().__init__(initial)
        self._is_secure_request = is_secure_request
        self._secure_default = secure_default

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None  # type: ignore[assignment]

    def _same_site_is_none(self) -> bool:
        same_site = self._get(KEY_SAME_SITE)
        return isinstance(same_site, str) and same_site.lower() == "none"

    def _resolve_secure(self) -> None:
        if self._get(KEY_SECURE) is not None:
            return
        if self._secure_default or self._same_site_is_none():
            secure = True
        elif self._is_secure_request is not None:
            secure = bool(self._is_secure_request())
        else:
            secure = False
        logger.debug("Resolved secure flag for sensitive cookie: %s", secure)
        self._set(KEY_SECURE, secure)

    def set_same_site(self, same_site: str | None) -> Self:
        """Set the SameSite policy; ``None`` also marks the cookie secure."""
        super().set_same_site(same_site)
        if self._same_site_is_none():
            self._set(KEY_SECURE, True)
        return self

    def get_secure(self) -> bool | None:
        self._resolve_secure()
        return super().get_secure()

    def to_dict(self) -> dict[str, MetadataValue]:
        self._resolve_secure()
        return super().to_dict()
