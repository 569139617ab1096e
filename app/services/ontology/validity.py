"""Expiration status of an extracted document date."""

import re
from datetime import date, datetime
from typing import Optional

from app.models.ontology_models import ExpirationStatus
from app.utils.logging import get_logger

LOGGER = get_logger(__name__)

# (shape, strptime format) after normalising separators to "/"
DATE_FORMATS = (
    (re.compile(r"^\d{4}/\d{1,2}/\d{1,2}$"), "%Y/%m/%d"),
    (re.compile(r"^\d{1,2}/\d{1,2}/\d{4}$"), "%m/%d/%Y"),
    (re.compile(r"^\d{1,2}/\d{1,2}/\d{2}$"), "%m/%d/%y"),
)


def parse_document_date(date_str: Optional[str]) -> Optional[date]:
    """Parse a date as written in a document.

    Accepts month-first dates with two- or four-digit years and ISO-like
    year-first dates, separated by "-" or "/".

    Args:
        date_str: Raw date string

    Returns:
        Parsed date, or None if the string is not a real calendar date
    """
    if not date_str:
        return None

    normalized = date_str.strip().replace("-", "/")
    for shape, date_format in DATE_FORMATS:
        if not shape.match(normalized):
            continue
        try:
            return datetime.strptime(normalized, date_format).date()
        except ValueError:
            LOGGER.debug(f"Not a calendar date: {date_str}")
            return None
    return None


def expiration_status(date_str: Optional[str], as_of: date) -> ExpirationStatus:
    """Compare an expiration date against a reference date.

    Args:
        date_str: Raw expiration date, if any
        as_of: Reference date

    Returns:
        ACTIVE if the document expires after ``as_of``, EXPIRED if on or
        before it, UNKNOWN if there is no usable date
    """
    expires = parse_document_date(date_str)
    if expires is None:
        return ExpirationStatus.UNKNOWN
    return ExpirationStatus.ACTIVE if expires > as_of else ExpirationStatus.EXPIRED
