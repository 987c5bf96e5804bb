"""Cookie configuration.

CookieConfig is a frozen dataclass, immutable after creation.
``CookieMetadataFactory`` seeds new metadata from it.
"""

from dataclasses import dataclass

from crumb.errors import ConfigurationError
from crumb.metadata import is_valid_same_site


@dataclass(frozen=True, slots=True)
class CookieConfig:
    """Site-wide cookie defaults. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = CookieConfig(domain=".example.com", secure=True)
    """

    # Scope
    path: str | None = "/"
    domain: str | None = None

    # Expiry in seconds; None means a browser-session cookie
    lifetime: int | None = 3600

    # Security
    http_only: bool = True
    secure: bool = False
    samesite: str = "Lax"

    def __post_init__(self) -> None:
        if not is_valid_same_site(self.samesite):
            msg = (
                f"CookieConfig.samesite must be one of Strict, Lax or None, "
                f"got {self.samesite!r}."
            )
            raise ConfigurationError(msg)
        if self.samesite.lower() == "none" and not self.secure:
            msg = "CookieConfig.samesite=None requires secure=True."
            raise ConfigurationError(msg)
        if self.lifetime is not None and self.lifetime < 0:
            msg = f"CookieConfig.lifetime must not be negative, got {self.lifetime}."
            raise ConfigurationError(msg)
