"""
Date Resolution.

Visit dates are always local calendar dates in YYYY-MM-DD form.
"""

import re
from datetime import date, datetime

from modules.core.exceptions import ValidationError

DATE_FORMAT = "%Y-%m-%d"
_DATE_PATTERN = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")


def today() -> str:
    """Return the local calendar date as YYYY-MM-DD."""
    return date.today().strftime(DATE_FORMAT)


def resolve_date(value: str | None = None) -> str:
    """
    Return `value` if it is a valid YYYY-MM-DD date, or today when None.

    Raises:
        ValidationError: If value is not a real calendar date in YYYY-MM-DD form.
    """
    if value is None:
        return today()

    value = value.strip()
    if _DATE_PATTERN.match(value):
        try:
            datetime.strptime(value, DATE_FORMAT)
            return value
        except ValueError:
            pass

    raise ValidationError(
        "Invalid date format. Use YYYY-MM-DD",
        details={"date": value},
    )
