"""
Utility functions for the SGPKit package.
"""

import warnings
from datetime import datetime, timezone
from typing import List, Type
from .config import config
from .errors import TLEError


def validation_error(message: str, error_class: Type[Exception] = TLEError):
    """
    Raise error or warn based on config.STRICT_VALIDATION.

    This function provides consistent validation behavior across the package.
    When STRICT_VALIDATION is True (default), raises the specified exception.
    When False, issues a UserWarning instead.

    Parameters
    ----------
    message : str
        Validation error message
    error_class : Type[Exception], optional
        Exception class to raise if STRICT_VALIDATION is True.
        Default: TLEError

    Raises
    ------
    Exception (of type error_class)
        If config.STRICT_VALIDATION is True

    Warns
    -----
    UserWarning
        If config.STRICT_VALIDATION is False

    Examples
    --------
    >>> from sgpkit.utils import validation_error
    >>> from sgpkit import config
    >>> config.STRICT_VALIDATION = True
    >>> validation_error("Line 1 must start with '1'")  # Raises TLEError

    >>> config.STRICT_VALIDATION = False
    >>> validation_error("Line 1 must start with '1'")  # Issues warning
    """
    if config.STRICT_VALIDATION:
        raise error_class(message)
    else:
        warnings.warn(message, UserWarning, stacklevel=2)


def to_utc(date: datetime) -> datetime:
    """
    Normalise a datetime to timezone-aware UTC.

    Naive datetimes are interpreted as UTC; aware ones are converted.
    """
    if date.tzinfo is None:
        return date.replace(tzinfo=timezone.utc)
    return date.astimezone(timezone.utc)


def split_tle_lines(text: str) -> List[str]:
    """Split TLE text into stripped, non-blank lines."""
    return [line.strip() for line in text.splitlines() if line.strip()]
