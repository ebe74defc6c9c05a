"""Lazy import helpers for optional DataFrame backends (pandas, polars)."""

from __future__ import annotations

from types import ModuleType


def require_pandas() -> ModuleType:
    """Import and return pandas, raising a helpful error if not installed.

    Raises:
        ImportError: If pandas is not installed.
    """
    try:
        import pandas  # type: ignore[import-untyped]
    except ImportError:
        raise ImportError(
            "pandas is required for this function. "
            "Install it with: pip install affordkit[pandas]"
        ) from None
    return pandas


def require_polars() -> ModuleType:
    """Import and return polars, raising a helpful error if not installed.

    Raises:
        ImportError: If polars is not installed.
    """
    try:
        import polars  # type: ignore[import-untyped]
    except ImportError:
        raise ImportError(
            "polars is required for this function. "
            "Install it with: pip install affordkit[polars]"
        ) from None
    return polars
