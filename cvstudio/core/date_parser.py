"""
Date token parsing for experience/education start and end fields.

Tokens are free-form user strings. Recognised forms (case-insensitive, whole
token, first match wins):
- "present" / "current"  -> today
- "Mar 2021"             -> 2021-03-01
- "2021-03"              -> 2021-03-01
- "2021"                 -> 2021-01-01
Everything else is unparseable and comes back as None. Never raises.
"""

import re
from datetime import date
from typing import Optional

MONTHS = ["jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec"]

ONGOING_TOKENS = {"present", "current"}
MONTH_YEAR_RE = re.compile(r"^(jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)\s+(\d{4})$", re.IGNORECASE)
YEAR_MONTH_RE = re.compile(r"^(\d{4})-(\d{2})$")
YEAR_RE = re.compile(r"^(\d{4})$")


def parse_date(value: Optional[str], today: Optional[date] = None) -> Optional[date]:
    """
    Resolve a date token to a calendar day, or None when it is unparseable.

    `today` pins the value used for "present"/"current" (defaults to date.today()).
    """
    if not value:
        return None
    normalized = value.strip().lower()
    if not normalized:
        return None

    if normalized in ONGOING_TOKENS:
        return today or date.today()

    m = MONTH_YEAR_RE.match(normalized)
    if m:
        year = int(m.group(2))
        if year < 1:
            return None
        return date(year, MONTHS.index(m.group(1).lower()) + 1, 1)

    m = YEAR_MONTH_RE.match(normalized)
    if m:
        month = int(m.group(2))
        # "2021-13" is not a month; treat it like any other garbage token
        if int(m.group(1)) < 1 or not 1 <= month <= 12:
            return None
        return date(int(m.group(1)), month, 1)

    m = YEAR_RE.match(normalized)
    if m:
        year = int(m.group(1))
        if year < 1:
            return None
        return date(year, 1, 1)

    return None
