"""Naming utilities for code generation."""

from __future__ import annotations

from functools import lru_cache


@lru_cache(maxsize=1024)
def to_pascal_case(value: str) -> str:
    """Convert a snake_case string to PascalCase.

    Only the first character of each underscore-separated segment is
    upper-cased; the rest of the segment is kept as-is.

    Uses caching for repeated calls with the same input.

    Examples:
        >>> to_pascal_case("user_accounts")
        'UserAccounts'
        >>> to_pascal_case("user_ID")
        'UserID'
        >>> to_pascal_case("__id")
        'Id'
    """
    return "".join(part[:1].upper() + part[1:] for part in value.split("_") if part)


@lru_cache(maxsize=1024)
def to_camel_case(value: str) -> str:
    """Convert a snake_case string to camelCase.

    Examples:
        >>> to_camel_case("user_accounts")
        'userAccounts'
    """
    pascal = to_pascal_case(value)
    return pascal[:1].lower() + pascal[1:]
