"""DataFrame export for amortization schedules."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ._backends import require_pandas, require_polars
from ._columns import COL_INTEREST, COL_PERIOD, COL_PRINCIPAL, COL_REMAINING

if TYPE_CHECKING:
    from ..amortization import AmortizationSchedule


def _schedule_to_rows(schedule: AmortizationSchedule) -> list[dict[str, Any]]:
    """Convert an AmortizationSchedule to a list of row dicts."""
    return [
        {
            COL_PERIOD: row.period_index,
            COL_INTEREST: row.interest_portion,
            COL_PRINCIPAL: row.principal_portion,
            COL_REMAINING: row.remaining_principal,
        }
        for row in schedule
    ]


def schedule_to_pandas(schedule: AmortizationSchedule) -> Any:
    """Export an AmortizationSchedule to a pandas DataFrame.

    Args:
        schedule: Schedule to export.

    Returns:
        pandas.DataFrame with one row per period.

    Raises:
        ImportError: If pandas is not installed.
    """
    pd = require_pandas()
    return pd.DataFrame(_schedule_to_rows(schedule))


def schedule_to_polars(schedule: AmortizationSchedule) -> Any:
    """Export an AmortizationSchedule to a polars DataFrame.

    Raises:
        ImportError: If polars is not installed.
    """
    pl = require_polars()
    return pl.DataFrame(_schedule_to_rows(schedule))
