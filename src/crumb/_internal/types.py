"""Shared type aliases used across crumb modules."""

from collections.abc import Callable
from typing import TypeAlias

# A single stored cookie attribute value
MetadataValue: TypeAlias = str | bool | int | float | None

# Reports whether the current request arrived over HTTPS
SecureRequestCheck: TypeAlias = Callable[[], bool]
