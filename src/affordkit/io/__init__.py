"""DataFrame export for affordkit results.

Converts amortization schedules and resolved scenarios to pandas and
polars DataFrames.

Both pandas and polars are optional dependencies. Install them with::

    pip install affordkit[pandas]
    pip install affordkit[polars]
    pip install affordkit[dataframe]   # both
"""

from .scenarios import scenarios_to_pandas, scenarios_to_polars
from .schedules import schedule_to_pandas, schedule_to_polars

__all__ = [
    "scenarios_to_pandas",
    "scenarios_to_polars",
    "schedule_to_pandas",
    "schedule_to_polars",
]
