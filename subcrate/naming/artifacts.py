"""
Artifact name mapping.

Maps validated (possibly namespaced) target names to the file stems used for
compiled outputs, and package names to registry archive names.

Stems use the identifier encoding, which is not injective: ``foo_bar`` and
``foo/bar`` share the stem ``foo_bar``. Stems name files, they are not keys.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from ..utils.constants import ARCHIVE_EXTENSION, BIN_ENTRY_POINT, LIB_ENTRY_POINT, SOURCE_DIR_NAME
from ..utils.exceptions import ArtifactNameError
from .namespace import ValidatedName, encode_path, validate_name
from .restricted import is_conflicting_artifact_name, is_windows_reserved

NameLike = Union[ValidatedName, str]


def _as_validated(name: NameLike, what: str) -> ValidatedName:
    if isinstance(name, ValidatedName):
        return name
    return validate_name(name, what)


def artifact_stem(target_name: NameLike) -> str:
    """
    Return the file stem for a compiled target.

    Args:
        target_name: Validated name, or a raw name that is validated first

    Returns:
        The identifier encoding of the name

    Raises:
        ArtifactNameError: if the stem is a reserved Windows name or
            collides with a build output directory
        NameValidationError: if a raw name is invalid
    """
    name = _as_validated(target_name, "target name")
    stem = name.identifier_encoding

    if is_windows_reserved(stem):
        raise ArtifactNameError(name.raw, stem, f"`{stem}` is a reserved Windows filename")
    if is_conflicting_artifact_name(stem):
        raise ArtifactNameError(
            name.raw, stem, f"`{stem}` conflicts with a build output directory"
        )
    return stem


def archive_entry_prefix(package_name: NameLike, version: str) -> str:
    """Directory prefix of entries inside the registry archive."""
    name = _as_validated(package_name, "package name")
    return f"{encode_path(name.raw, name.delimiter)}-{version}"


def archive_name(package_name: NameLike, version: str) -> str:
    """File name of the registry archive, e.g. ``foo~bar-0.1.0.crate``."""
    return f"{archive_entry_prefix(package_name, version)}{ARCHIVE_EXTENSION}"


# =============================================================================
# Build Targets
# =============================================================================

class TargetKind(Enum):
    """Kind of compiled target."""

    BIN = "bin"
    LIB = "lib"

    @property
    def default_path(self) -> str:
        entry = BIN_ENTRY_POINT if self is TargetKind.BIN else LIB_ENTRY_POINT
        return f"{SOURCE_DIR_NAME}/{entry}"

    @property
    def label(self) -> str:
        return "binary target name" if self is TargetKind.BIN else "library target name"


@dataclass(frozen=True)
class Target:
    """A build target with its resolved artifact stem."""

    name: ValidatedName
    kind: TargetKind
    path: str
    stem: str
    implicit: bool = False


def make_target(
    name: NameLike,
    kind: TargetKind,
    path: Optional[str] = None,
    implicit: bool = False,
) -> Target:
    """Validate a target name and resolve its artifact stem."""
    validated = _as_validated(name, kind.label)
    return Target(
        name=validated,
        kind=kind,
        path=path or kind.default_path,
        stem=artifact_stem(validated),
        implicit=implicit,
    )


def default_targets(package_name: NameLike, has_main: bool, has_lib: bool) -> List[Target]:
    """
    Targets implied by the package layout when the manifest names none.

    Implicit targets take the package name, so a package ``foo/bar`` builds
    a binary and/or library with the stem ``foo_bar``.
    """
    name = _as_validated(package_name, "package name")
    targets = []
    if has_lib:
        targets.append(make_target(name, TargetKind.LIB, implicit=True))
    if has_main:
        targets.append(make_target(name, TargetKind.BIN, implicit=True))
    return targets
