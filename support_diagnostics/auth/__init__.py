"""Authentication types understood by the diagnostics collector."""

from typing import Literal

AuthType = Literal["basic", "cookie"]

__all__ = [
    "AuthType",
]
