"""
Helpers for validating and checking names like package and target names.

All functions here are pure predicates over a single string. None of them
touch the filesystem or print anything; callers own presentation.
"""

from __future__ import annotations

import os
from pathlib import PurePath
from typing import List, Optional, Union

from ..utils.constants import (
    CONFLICTING_ARTIFACT_NAMES,
    GLOB_PATTERN_CHARS,
    KEYWORDS,
    WINDOWS_RESERVED_NAMES,
)
from ..utils.exceptions import InvalidStartCharError, LeadingDigitError


# =============================================================================
# Character Classes
# =============================================================================

def is_xid_start(ch: str) -> bool:
    """Return True if ``ch`` is a Unicode XID_Start character."""
    return ch != "_" and ch.isidentifier()


def is_xid_continue(ch: str) -> bool:
    """Return True if ``ch`` is a Unicode XID_Continue character."""
    return ("a" + ch).isidentifier()


def is_ascii_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


# =============================================================================
# Advisory Predicates
# =============================================================================

def is_non_ascii(name: str) -> bool:
    """Returns True if the name contains non-ASCII characters."""
    return any(ord(ch) > 0x7F for ch in name)


def is_keyword(name: str) -> bool:
    """A reserved word of the generated source language."""
    return name in KEYWORDS


def is_windows_reserved(name: str) -> bool:
    """These names cannot be used on Windows, even with an extension."""
    # ASCII-only lowering, the table itself is ASCII.
    lowered = "".join(ch.lower() if ch.isascii() else ch for ch in name)
    return lowered in WINDOWS_RESERVED_NAMES


def is_windows_reserved_path(path: Union[str, "os.PathLike[str]"]) -> bool:
    """Check the entire path for names reserved in Windows."""
    for component in PurePath(os.fspath(path)).parts:
        stem = component.split(".")[0]
        if is_windows_reserved(stem):
            return True
    return False


def is_conflicting_artifact_name(name: str) -> bool:
    """An artifact with this name will conflict with one of the build directories."""
    return name in CONFLICTING_ARTIFACT_NAMES


def is_glob_pattern(name: str) -> bool:
    """Returns True if the name contains any glob pattern wildcards."""
    return any(ch in GLOB_PATTERN_CHARS for ch in name)


# =============================================================================
# Base Name Validation
# =============================================================================

def validate_base_name(
    name: str,
    what: str,
    help: str = "",
    *,
    max_depth: Optional[int] = None,
    delimiter: Optional[str] = None,
) -> List[str]:
    """
    Check the base requirements for a package name.

    This can be used for other things than package names, to enforce some
    level of sanity. The first character is checked here; delimiter depth
    and the remaining characters are checked by the namespace codec in the
    same pass.

    An empty name passes vacuously; rejecting it is up to the caller.

    Args:
        name: Name to check
        what: What the name is used as, e.g. "package name"
        help: Suffix appended to every error message
        max_depth: Maximum number of delimiter occurrences (configured default if None)
        delimiter: Namespace delimiter (configured default if None)

    Returns:
        The name split into namespace segments

    Raises:
        NameValidationError: if the name is invalid
    """
    from .namespace import split_and_validate

    if name:
        ch = name[0]
        if is_ascii_digit(ch):
            # A specific error for a potentially common case.
            raise LeadingDigitError(name, what, help)
        if not (is_xid_start(ch) or ch == "_"):
            raise InvalidStartCharError(name, what, ch, help)

    return split_and_validate(name, what, help, max_depth=max_depth, delimiter=delimiter)
