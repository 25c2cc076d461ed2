"""Utility functions for address normalisation, wildcard matching, and logging."""

import fnmatch
import ipaddress
import logging
from typing import Iterable, List, Optional


class AsaParseError(Exception):
    """Raised for unrecoverable ASA configuration parsing errors."""

    def __init__(self, message: str, line_num: int = 0):
        self.line_num = line_num
        super().__init__(f"Line {line_num}: {message}" if line_num else message)


class InvalidInputError(ValueError):
    """Raised when an analysis function is handed a malformed argument."""


class OptionsError(Exception):
    """Raised when an options file cannot be loaded."""

    def __init__(self, errors: list):
        self.errors = errors
        super().__init__(f"{len(errors)} option error(s): " + "; ".join(errors))


def host_value(ip_str: str) -> str:
    """Render a host address the way resolved values are displayed.

    Example: host_value('10.1.1.10') -> '10.1.1.10/32'
    """
    return f"{ip_str}/32"


def subnet_value(ip_str: str, mask_str: str) -> str:
    """Render an 'IP MASK' pair, keeping the dotted mask as written."""
    return f"{ip_str} {mask_str}"


def range_value(low: str, high: str) -> str:
    """Render an address range as 'low-high'."""
    return f"{low}-{high}"


def is_ipv4(text: str) -> bool:
    try:
        ipaddress.IPv4Address(text)
        return True
    except ValueError:
        return False


def unique(values: Iterable[str]) -> List[str]:
    """De-duplicate while keeping first-seen order."""
    return list(dict.fromkeys(values))


def wildcard_match(value: Optional[str], pattern: Optional[str]) -> bool:
    """Case-insensitive shell-style match; an empty pattern matches everything."""
    if not pattern:
        return True
    if value is None:
        return False
    return fnmatch.fnmatchcase(value.lower(), pattern.lower())


def setup_logging(verbose: bool = False):
    """Configure logging for the analyser."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )
