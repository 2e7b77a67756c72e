"""
Display formatting used by the demo view-models.
"""

from datetime import date, datetime
from typing import Optional, Union


def formatted_number(value: Union[str, int, float, None]) -> str:
    """'1250000' -> '1,250,000'. Empty or non-numeric input gives ''."""
    try:
        return f"{int(value):,}"
    except (TypeError, ValueError):
        return ""


def time_ago(value: Union[str, date, None], today: Optional[date] = None) -> str:
    """Humanized distance from an ISO date to today, e.g. '41 years ago'."""
    if not value:
        return ""
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value).date()
        except ValueError:
            return ""
    elif isinstance(value, datetime):
        value = value.date()

    today = today or date.today()
    days = (today - value).days
    if days < 0:
        return "in the future"
    if days < 1:
        return "today"
    if days < 31:
        return f"{days} day{'s' if days != 1 else ''} ago"
    if days < 365:
        months = min(days // 30, 11)
        return f"{months} month{'s' if months != 1 else ''} ago"
    years = today.year - value.year - ((today.month, today.day) < (value.month, value.day))
    years = max(years, 1)
    return f"{years} year{'s' if years != 1 else ''} ago"
