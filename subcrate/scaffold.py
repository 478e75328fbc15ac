"""
New package scaffolding.

Drives the "create a new package" flow as a linear state machine::

    IDLE -> NAME_RESOLVED -> VALIDATED -> SCAFFOLDED
                                   \\-> REJECTED

Nothing is written to disk before the VALIDATED state. If writing the
skeleton fails, every directory created by this run is removed again.
"""

from __future__ import annotations

import json
import os
import shutil
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from .naming.namespace import Advisory, AdvisoryKind, NameCheck, check_name
from .naming.restricted import is_windows_reserved_path
from .utils.config import get_config
from .utils.constants import (
    BIN_ENTRY_POINT,
    DEFAULT_PACKAGE_VERSION,
    LIB_ENTRY_POINT,
    MANIFEST_FILE_NAME,
    SOURCE_DIR_NAME,
    PackageKind,
)
from .utils.exceptions import (
    AdvisoryError,
    NameValidationError,
    ScaffoldError,
    SubcrateError,
)
from .utils.logging import SubcrateLogger

_log = SubcrateLogger(__name__)

PATH_NAME_HELP = (
    "\nIf you need a package name to not match the directory name, "
    "consider using --name flag."
)


class ScaffoldState(Enum):
    """States of the new package flow."""

    IDLE = "idle"
    NAME_RESOLVED = "name_resolved"
    VALIDATED = "validated"
    SCAFFOLDED = "scaffolded"
    REJECTED = "rejected"


@dataclass
class NewOptions:
    """Options of the new package command."""

    path: Union[str, Path]
    name: Optional[str] = None
    kind: Optional[PackageKind] = None
    registry: Optional[str] = None
    quiet: bool = False
    strict: Optional[bool] = None
    version: str = DEFAULT_PACKAGE_VERSION


@dataclass
class ScaffoldOutcome:
    """Result of a scaffolding run, in either terminal state."""

    state: ScaffoldState
    path: Path
    kind: PackageKind
    name: Optional[str] = None
    artifact_stem: Optional[str] = None
    registry: Optional[str] = None
    advisories: Tuple[Advisory, ...] = ()
    error: Optional[SubcrateError] = None
    files: List[Path] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.state is ScaffoldState.SCAFFOLDED

    def status_message(self) -> str:
        """Status line printed after a successful run."""
        return f"Created {self.kind.description} `{self.name}` package"


# =============================================================================
# Template Rendering
# =============================================================================

class TemplateRenderer:
    """Jinja2 renderer for the package skeleton files."""

    def __init__(self, template_dir: Optional[str] = None):
        """Initialize the template renderer."""
        if template_dir is None:
            template_dir = os.path.join(os.path.dirname(__file__), "templates")

        self._template_dir = Path(template_dir)
        self._env = Environment(
            loader=FileSystemLoader(str(self._template_dir)),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

        # JSON strings are valid YAML scalars.
        self._env.filters["quote"] = lambda value: json.dumps(str(value), ensure_ascii=False)

    def render_file(self, template_path: str, context: Dict[str, Any]) -> str:
        """Render a template file with the given context."""
        try:
            template = self._env.get_template(template_path)
            return template.render(**context)
        except TemplateError as e:
            raise ScaffoldError(f"failed to render template `{template_path}`: {e}") from e


# =============================================================================
# Name Resolution
# =============================================================================

def resolve_name(path: Union[str, Path], explicit: Optional[str] = None,
                 delimiter: Optional[str] = None) -> str:
    """
    Derive the candidate package name.

    An explicit name wins. Otherwise the trailing components of ``path``
    that do not exist yet are joined with the namespace delimiter, so
    ``foo/bar`` in an empty directory becomes ``foo/bar``.
    """
    if explicit is not None:
        return explicit
    if delimiter is None:
        delimiter = get_config().naming.delimiter

    target = Path(os.path.abspath(path))
    missing = []
    current = target
    while current.name and not current.exists():
        missing.append(current.name)
        current = current.parent

    if not missing:
        return target.name
    return delimiter.join(reversed(missing))


def _first_missing_dir(path: Path) -> Optional[Path]:
    top = None
    current = path
    while current.name and not current.exists():
        top = current
        current = current.parent
    return top


# =============================================================================
# Scaffolder
# =============================================================================

class PackageScaffolder:
    """
    Creates a new package directory with a manifest and an entry point.

    Each instance runs the flow once; ``state`` reports how far it got.
    """

    def __init__(self, options: NewOptions, renderer: Optional[TemplateRenderer] = None):
        self.options = options
        self.renderer = renderer or TemplateRenderer()
        self.state = ScaffoldState.IDLE
        self.path = Path(options.path)

        config = get_config()
        self.kind = options.kind or config.package_kind
        self.strict = config.scaffold.strict if options.strict is None else options.strict
        self.edition = config.scaffold.edition

        self.candidate: Optional[str] = None
        self.check: Optional[NameCheck] = None

    def run(self) -> ScaffoldOutcome:
        """
        Run the flow to a terminal state.

        Returns:
            SCAFFOLDED outcome with the display name, or REJECTED outcome
            with the error and no filesystem changes

        Raises:
            ScaffoldError: writing the skeleton failed (after rollback)
        """
        if self.state is not ScaffoldState.IDLE:
            raise ScaffoldError("scaffolder has already run", str(self.path))

        self.resolve()
        try:
            self.validate()
        except SubcrateError as e:
            return self._reject(e)
        return self.scaffold()

    def resolve(self) -> str:
        self.candidate = resolve_name(self.path, self.options.name)
        self.state = ScaffoldState.NAME_RESOLVED
        return self.candidate

    def validate(self) -> NameCheck:
        """Validate the candidate name and the destination, without writing."""
        help = PATH_NAME_HELP if self.options.name is None else ""
        self.check = check_name(self.candidate, "package name", help)

        advisories = list(self.check.advisories)
        if is_windows_reserved_path(self.path):
            advisories.append(Advisory(
                AdvisoryKind.WINDOWS_RESERVED,
                f"the path `{self.path}` contains a reserved Windows filename, "
                "so the package will not work on Windows",
            ))
        self.check = NameCheck(name=self.check.name, advisories=tuple(advisories))

        if self.strict:
            self.check.raise_for_advisories()

        if self.path.exists():
            raise ScaffoldError(
                f"destination `{self.path}` already exists",
                str(self.path),
            )

        self.state = ScaffoldState.VALIDATED
        return self.check

    def scaffold(self) -> ScaffoldOutcome:
        if self.state is not ScaffoldState.VALIDATED:
            raise ScaffoldError("package name has not been validated", str(self.path))

        name = self.check.name
        for advisory in self.check.advisories:
            _log.log_advisory(name.raw, advisory.message)

        context = {
            "name": name.raw,
            # Rust paths cannot contain `-`.
            "crate_name": name.identifier_encoding.replace("-", "_"),
            "version": self.options.version,
            "edition": self.edition,
            "registry": self.options.registry,
        }
        entry_point = BIN_ENTRY_POINT if self.kind is PackageKind.BIN else LIB_ENTRY_POINT
        skeleton = [
            (Path(MANIFEST_FILE_NAME), f"{MANIFEST_FILE_NAME}.j2"),
            (Path(SOURCE_DIR_NAME) / entry_point, f"{entry_point}.j2"),
        ]
        rendered = [(rel, self.renderer.render_file(tpl, context)) for rel, tpl in skeleton]

        created_root = _first_missing_dir(Path(os.path.abspath(self.path)))
        files = []
        try:
            for rel, content in rendered:
                file_path = self.path / rel
                file_path.parent.mkdir(parents=True, exist_ok=True)
                with open(file_path, "w", encoding="utf-8") as f:
                    f.write(content)
                files.append(file_path)
        except OSError as e:
            self._rollback(created_root, e)
            raise ScaffoldError(f"failed to create package: {e}", str(self.path)) from e

        self.state = ScaffoldState.SCAFFOLDED
        _log.log_scaffold_created(name.raw, str(self.path))
        return ScaffoldOutcome(
            state=self.state,
            path=self.path,
            kind=self.kind,
            name=name.raw,
            artifact_stem=name.identifier_encoding,
            registry=self.options.registry,
            advisories=self.check.advisories,
            files=files,
        )

    def _reject(self, error: SubcrateError) -> ScaffoldOutcome:
        self.state = ScaffoldState.REJECTED
        if isinstance(error, (NameValidationError, AdvisoryError)):
            _log.log_name_rejected(self.candidate or "", str(error))
        advisories = self.check.advisories if self.check is not None else ()
        return ScaffoldOutcome(
            state=self.state,
            path=self.path,
            kind=self.kind,
            name=self.candidate,
            registry=self.options.registry,
            advisories=advisories,
            error=error,
        )

    def _rollback(self, created_root: Optional[Path], error: Exception) -> None:
        if created_root is None or not created_root.exists():
            return
        _log.log_rollback(str(created_root), str(error))
        shutil.rmtree(created_root, ignore_errors=True)


def new_package(options: NewOptions) -> ScaffoldOutcome:
    """Run the new package flow for ``options``."""
    return PackageScaffolder(options).run()
