"""
Package manifest reading.

Reads ``Subcrate.yaml`` far enough to resolve the package name and the
names and artifact stems of its build targets.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from .naming.artifacts import Target, TargetKind, default_targets, make_target
from .naming.namespace import ValidatedName, validate_name
from .utils.constants import (
    BIN_ENTRY_POINT,
    DEFAULT_PACKAGE_VERSION,
    LIB_ENTRY_POINT,
    MANIFEST_FILE_NAME,
    SOURCE_DIR_NAME,
)
from .utils.exceptions import ManifestError
from .utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class Manifest:
    """Resolved view of a package manifest."""

    name: ValidatedName
    version: str
    root: Path
    targets: List[Target] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def binaries(self) -> List[Target]:
        return [t for t in self.targets if t.kind is TargetKind.BIN]

    @property
    def library(self) -> Optional[Target]:
        return next((t for t in self.targets if t.kind is TargetKind.LIB), None)


def load_manifest(path: Union[str, Path]) -> Manifest:
    """
    Load a manifest from a file or a package directory.

    Args:
        path: Manifest file, or directory containing ``Subcrate.yaml``

    Returns:
        The resolved manifest

    Raises:
        ManifestError: if the file is missing or malformed
        NameValidationError: if a package or target name is invalid
        ArtifactNameError: if a target name maps to a reserved stem
    """
    path = Path(path)
    if path.is_dir():
        path = path / MANIFEST_FILE_NAME

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise ManifestError("could not find manifest", str(path)) from e
    except (OSError, yaml.YAMLError) as e:
        raise ManifestError(f"failed to parse manifest: {e}", str(path)) from e

    return parse_manifest(data, path.parent, source=str(path))


def parse_manifest(data: Any, root: Union[str, Path], source: Optional[str] = None) -> Manifest:
    """Resolve manifest data that has already been deserialized."""
    root = Path(root)
    if not isinstance(data, dict):
        raise ManifestError("manifest must be a mapping", source)

    package = data.get("package")
    if not isinstance(package, dict):
        raise ManifestError("missing `package` section", source)

    raw_name = package.get("name")
    if not isinstance(raw_name, str):
        raise ManifestError("`package.name` must be a string", source)
    name = validate_name(raw_name, "package name")
    version = str(package.get("version", DEFAULT_PACKAGE_VERSION))

    targets: List[Target] = []
    src = root / SOURCE_DIR_NAME

    lib_data = data.get("lib")
    if lib_data is not None:
        targets.append(_explicit_target(lib_data, TargetKind.LIB, name, source))

    bin_data = data.get("bin")
    if bin_data is not None:
        if not isinstance(bin_data, list):
            raise ManifestError("`bin` must be a list of targets", source)
        targets.extend(_explicit_target(entry, TargetKind.BIN, name, source) for entry in bin_data)

    targets.extend(default_targets(
        name,
        has_main=bin_data is None and (src / BIN_ENTRY_POINT).is_file(),
        has_lib=lib_data is None and (src / LIB_ENTRY_POINT).is_file(),
    ))

    manifest = Manifest(name=name, version=version, root=root, targets=targets)
    manifest.warnings.extend(_shared_source_warnings(manifest))
    for warning in manifest.warnings:
        logger.warning(warning)
    return manifest


def _explicit_target(
    entry: Any, kind: TargetKind, package_name: ValidatedName, source: Optional[str]
) -> Target:
    if not isinstance(entry, dict):
        raise ManifestError(f"`{kind.value}` target must be a mapping", source)

    # Unnamed targets inherit the package name.
    target_name = entry.get("name", package_name)
    if not isinstance(target_name, (str, ValidatedName)):
        raise ManifestError(f"`{kind.value}.name` must be a string", source)
    path = entry.get("path")
    if path is not None and not isinstance(path, str):
        raise ManifestError(f"`{kind.value}.path` must be a string", source)
    return make_target(target_name, kind, path)


def _shared_source_warnings(manifest: Manifest) -> List[str]:
    seen: Dict[str, int] = {}
    for target in manifest.targets:
        seen[target.path] = seen.get(target.path, 0) + 1
    return [
        f"file found to be present in multiple build targets: {manifest.root / path}"
        for path, count in seen.items()
        if count > 1
    ]
