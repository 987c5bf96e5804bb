"""Crumb — typed cookie attribute metadata for Python web applications.

Holds the attributes a response writer needs when it emits a cookie
(domain, path, Secure, HttpOnly, duration, SameSite) behind chainable
accessors.

Basic usage::

    from crumb import PublicCookieMetadata

    metadata = (
        PublicCookieMetadata()
        .set_domain(".example.com")
        .set_path("/")
        .set_same_site("Strict")
        .set_duration_one_year()
    )
    metadata.to_dict()

Configured defaults::

    from crumb import CookieConfig, CookieMetadataFactory

    factory = CookieMetadataFactory(CookieConfig(secure=True))
    session = factory.create_sensitive_cookie_metadata()
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "CookieConfig",
    "CookieMetadata",
    "CookieMetadataFactory",
    "CrumbError",
    "InvalidArgument",
    "PublicCookieMetadata",
    "SensitiveCookieMetadata",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "crumb.errors",
    "CookieConfig": "crumb.config",
    "CookieMetadata": "crumb.metadata",
    "CookieMetadataFactory": "crumb.factory",
    "CrumbError": "crumb.errors",
    "InvalidArgument": "crumb.errors",
    "PublicCookieMetadata": "crumb.metadata",
    "SensitiveCookieMetadata": "crumb.metadata",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import crumb`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    from importlib import import_module

    return getattr(import_module(module_name), name)
