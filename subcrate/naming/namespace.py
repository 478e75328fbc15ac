"""
Namespace Codec for compound ("subcrate") names.

A compound name such as ``foo/bar`` is split on the namespace delimiter,
validated segment-wise and mapped into two one-way encodings:

- the path encoding, safe to use as a file name (``foo~bar``)
- the identifier encoding, safe to reference from generated code (``foo_bar``)

The path encoding is injective over valid names because its token can never
appear in a valid name. The identifier encoding is not: ``foo_bar`` and
``foo/bar`` encode to the same string. Never use it as a lookup key.
"""

from __future__ import annotations

from dataclasses import InitVar, dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from ..utils.config import get_config
from ..utils.constants import (
    DELIMITER_IDENTIFIER_REPLACEMENT,
    DELIMITER_PATH_REPLACEMENT,
    SUBCRATE_DELIMITER,
)
from ..utils.exceptions import (
    AdvisoryError,
    EmptyNameError,
    ExceededNamespaceDepthError,
    InvalidCharacterError,
    NameValidationError,
)
from ..utils.logging import SubcrateLogger
from .restricted import (
    is_conflicting_artifact_name,
    is_glob_pattern,
    is_keyword,
    is_non_ascii,
    is_windows_reserved,
    is_xid_continue,
    validate_base_name,
)

_log = SubcrateLogger(__name__)

# Only validate_name() holds this token, so ValidatedName cannot be built elsewhere.
_CONSTRUCTION_TOKEN = object()


def _resolve_naming(max_depth: Optional[int], delimiter: Optional[str]) -> Tuple[Optional[int], str]:
    naming = get_config().naming
    if delimiter is None:
        delimiter = naming.delimiter
    if max_depth is None:
        max_depth = naming.max_depth
    if max_depth is not None and max_depth < 0:
        raise ValueError(f"max_depth must not be negative, got {max_depth}")
    return max_depth, delimiter


# =============================================================================
# Splitting and Validation
# =============================================================================

def split_and_validate(
    name: str,
    what: str = "package name",
    help: str = "",
    *,
    max_depth: Optional[int] = None,
    delimiter: Optional[str] = None,
) -> List[str]:
    """
    Check the delimiter depth and the non-leading characters of a name.

    The delimiter may be a sequence of characters, so it is stripped out
    (up to ``max_depth`` times, left to right) and the remaining characters
    are checked against the identifier-continue class.

    Args:
        name: Name to check
        what: What the name is used as, for error messages
        help: Suffix appended to every error message
        max_depth: Maximum delimiter occurrences; configured default if None.
            A configured depth of None means unbounded.
        delimiter: Namespace delimiter; configured default if None

    Returns:
        The segments of ``name``

    Raises:
        ExceededNamespaceDepthError: delimiter occurs more than max_depth times
        InvalidCharacterError: a character is not XID_Continue or ``-``
        ValueError: max_depth is negative
    """
    max_depth, delimiter = _resolve_naming(max_depth, delimiter)

    if max_depth is not None:
        stripped = name.replace(delimiter, "", max_depth)
        if delimiter in stripped:
            raise ExceededNamespaceDepthError(name, what, max_depth, help)
    else:
        stripped = name.replace(delimiter, "")

    for ch in stripped:
        if not (is_xid_continue(ch) or ch == "-"):
            raise InvalidCharacterError(name, what, ch, delimiter, help)

    return name.split(delimiter)


# =============================================================================
# Encodings
# =============================================================================

def encode_path(name: str, delimiter: Optional[str] = None) -> str:
    """Replace every delimiter with the filesystem-safe token."""
    if delimiter is None:
        delimiter = get_config().naming.delimiter
    return name.replace(delimiter, DELIMITER_PATH_REPLACEMENT)


def encode_identifier(name: str, delimiter: Optional[str] = None) -> str:
    """
    Replace every delimiter with the identifier-safe token.

    Not injective: a literal ``_`` and a replaced delimiter look the same.
    """
    if delimiter is None:
        delimiter = get_config().naming.delimiter
    return name.replace(delimiter, DELIMITER_IDENTIFIER_REPLACEMENT)


def namespaced_name(parts: Iterable[str], delimiter: Optional[str] = None) -> str:
    """Join name segments into a compound name."""
    if delimiter is None:
        delimiter = get_config().naming.delimiter
    return delimiter.join(parts)


# =============================================================================
# Validated Names
# =============================================================================

@dataclass(frozen=True)
class ValidatedName:
    """
    A name that passed validation, with its derived encodings.

    Only ``validate_name()`` can create instances.
    """

    raw: str
    segments: Tuple[str, ...]
    path_encoding: str
    identifier_encoding: str
    max_depth: Optional[int] = None
    delimiter: str = SUBCRATE_DELIMITER
    # Not stored, so dataclasses.replace() cannot carry it over to a copy.
    _token: InitVar[object] = None

    def __post_init__(self, _token):
        if _token is not _CONSTRUCTION_TOKEN:
            raise TypeError("ValidatedName instances are created by validate_name()")

    @property
    def is_namespaced(self) -> bool:
        return len(self.segments) > 1

    def __str__(self) -> str:
        return self.raw


def validate_name(
    name: str,
    what: str = "package name",
    help: str = "",
    *,
    max_depth: Optional[int] = None,
    delimiter: Optional[str] = None,
) -> ValidatedName:
    """
    Validate a raw name and compute its encodings.

    This is the only way to obtain a ``ValidatedName``.

    Raises:
        NameValidationError: if the name is empty or invalid
    """
    max_depth, delimiter = _resolve_naming(max_depth, delimiter)

    if not name:
        raise EmptyNameError(what, help)

    try:
        segments = validate_base_name(name, what, help, max_depth=max_depth, delimiter=delimiter)
    except NameValidationError as e:
        _log.log_name_rejected(name, type(e).__name__)
        raise

    return ValidatedName(
        raw=name,
        segments=tuple(segments),
        path_encoding=encode_path(name, delimiter),
        identifier_encoding=encode_identifier(name, delimiter),
        max_depth=max_depth,
        delimiter=delimiter,
        _token=_CONSTRUCTION_TOKEN,
    )


# =============================================================================
# Advisory Checks
# =============================================================================

class AdvisoryKind(Enum):
    """Non-fatal findings about a valid name."""

    NON_ASCII = "non_ascii"
    KEYWORD = "keyword"
    WINDOWS_RESERVED = "windows_reserved"
    CONFLICTING_ARTIFACT_NAME = "conflicting_artifact_name"
    GLOB_PATTERN = "glob_pattern"


@dataclass(frozen=True)
class Advisory:
    kind: AdvisoryKind
    message: str


@dataclass(frozen=True)
class NameCheck:
    """A validated name together with its advisory findings."""

    name: ValidatedName
    advisories: Tuple[Advisory, ...] = ()

    @property
    def has_advisories(self) -> bool:
        return bool(self.advisories)

    def kinds(self) -> List[AdvisoryKind]:
        return [advisory.kind for advisory in self.advisories]

    def raise_for_advisories(self) -> None:
        """Turn advisories into a failure, for strict callers."""
        if self.advisories:
            raise AdvisoryError(self.name.raw, self.advisories)


def find_advisories(name: ValidatedName) -> Tuple[Advisory, ...]:
    """
    Evaluate the advisory checks against a validated name.

    The raw name and its identifier encoding are both checked, since the
    encoding is what ends up in generated code and artifact file names.
    """
    findings: List[Advisory] = []
    candidates = [name.raw]
    if name.identifier_encoding != name.raw:
        candidates.append(name.identifier_encoding)
    candidates.extend(segment for segment in name.segments if segment not in candidates)

    if is_non_ascii(name.raw):
        findings.append(Advisory(
            AdvisoryKind.NON_ASCII,
            f"the name `{name.raw}` contains non-ASCII characters, "
            "which are not supported by every registry",
        ))

    keyword = next((c for c in candidates if is_keyword(c)), None)
    if keyword is not None:
        findings.append(Advisory(
            AdvisoryKind.KEYWORD,
            f"the name `{name.raw}` uses the keyword `{keyword}`, "
            "which cannot be used as an identifier in generated code",
        ))

    reserved = next((c for c in candidates if is_windows_reserved(c)), None)
    if reserved is not None:
        findings.append(Advisory(
            AdvisoryKind.WINDOWS_RESERVED,
            f"the name `{name.raw}` uses `{reserved}`, a reserved Windows filename, "
            "so the package will not work on Windows",
        ))

    conflicting = next((c for c in candidates if is_conflicting_artifact_name(c)), None)
    if conflicting is not None:
        findings.append(Advisory(
            AdvisoryKind.CONFLICTING_ARTIFACT_NAME,
            f"the name `{name.raw}` uses `{conflicting}`, which conflicts with "
            "a build output directory",
        ))

    if is_glob_pattern(name.raw):
        findings.append(Advisory(
            AdvisoryKind.GLOB_PATTERN,
            f"the name `{name.raw}` contains glob pattern characters",
        ))

    return tuple(findings)


def check_name(
    name: str,
    what: str = "package name",
    help: str = "",
    *,
    max_depth: Optional[int] = None,
    delimiter: Optional[str] = None,
) -> NameCheck:
    """Validate a name and collect advisories, without failing on them."""
    validated = validate_name(name, what, help, max_depth=max_depth, delimiter=delimiter)
    return NameCheck(name=validated, advisories=find_advisories(validated))
