"""Reporting period utilities."""

from dataclasses import dataclass
from datetime import date, datetime, tzinfo
from typing import Optional

from dateutil import parser as date_parser
from dateutil import tz
from dateutil.relativedelta import relativedelta

from stripeledger.domain.entities import Period

MONTH_CHOICE_COUNT = 6


@dataclass(frozen=True)
class MonthChoice:
    """Selectable month in the interactive menu."""

    title: str
    period: Period


def period_for_month(year: int, month: int, tzinfo_: Optional[tzinfo] = None) -> Period:
    """Get the period covering a calendar month.

    Args:
        year: Calendar year
        month: Month number (1-12)
        tzinfo_: Timezone for the month boundaries, defaults to local time

    Returns:
        Period from the first instant of the month to the first instant of
        the following month

    Raises:
        ValueError: If month is out of range
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be between 1 and 12, got {month}")
    zone = tzinfo_ if tzinfo_ is not None else tz.tzlocal()
    start = datetime(year, month, 1, tzinfo=zone)
    end = start + relativedelta(months=1)
    return Period(start=start, end=end)


def format_period(period: Period) -> str:
    """Human readable period, e.g. ``March 2024``."""
    start = period.start
    is_month = (
        start.day == 1
        and start.time() == datetime.min.time()
        and period.end == start + relativedelta(months=1)
    )
    if is_month:
        return start.strftime("%B %Y")
    return f"{period.start:%Y-%m-%d %H:%M} - {period.end:%Y-%m-%d %H:%M}"


def month_choices(
    today: Optional[date] = None,
    count: int = MONTH_CHOICE_COUNT,
    tzinfo_: Optional[tzinfo] = None,
) -> list[MonthChoice]:
    """List recent calendar months, most recent first.

    The current month is included as the first choice.
    """
    today = today or date.today()
    first = today.replace(day=1)
    choices = []
    for offset in range(count):
        month_start = first - relativedelta(months=offset)
        period = period_for_month(month_start.year, month_start.month, tzinfo_)
        choices.append(MonthChoice(title=format_period(period), period=period))
    return choices


def parse_month(month_str: str, tzinfo_: Optional[tzinfo] = None) -> Period:
    """Parse a month string into a period.

    Supports:
    - "2024-03", "2024/03", "March 2024", "mar 2024"
    - Relative: "this month", "last month"

    Raises:
        ValueError: If month string cannot be parsed
    """
    month_str = month_str.strip().lower()
    today = date.today()

    if month_str == "this month":
        return period_for_month(today.year, today.month, tzinfo_)
    if month_str == "last month":
        previous = today.replace(day=1) - relativedelta(months=1)
        return period_for_month(previous.year, previous.month, tzinfo_)

    try:
        parsed = date_parser.parse(month_str, default=datetime(today.year, 1, 1))
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse month '{month_str}': {e}")
    return period_for_month(parsed.year, parsed.month, tzinfo_)
