"""Private helper for building a DataFrame with a chosen backend."""

from __future__ import annotations

from typing import Any

from .io._backends import require_pandas, require_polars


def _dicts_to_df(rows: list[dict[str, Any]], backend: str = "pandas") -> Any:
    """Build a DataFrame from a list of row dicts using the specified backend."""
    if backend == "pandas":
        return require_pandas().DataFrame(rows)
    if backend == "polars":
        return require_polars().DataFrame(rows)
    raise ValueError(f"Unsupported backend: {backend!r}. Use 'pandas' or 'polars'.")
