"""
Subcrate: package name validation and namespace encoding

Decides whether a package or target name is legal and derives the canonical
forms of namespaced names such as ``foo/bar``:

- ``foo~bar`` for file names like the registry archive
- ``foo_bar`` for generated code and compiled artifact stems

Usage:
    from subcrate import validate_name

    name = validate_name("foo/bar")
    name.segments             # ('foo', 'bar')
    name.identifier_encoding  # 'foo_bar'
"""

__version__ = "0.1.0"
__author__ = "Subcrate Team"
__email__ = "subcrate@example.com"

# Public API exports
from .utils.exceptions import (
    SubcrateError,
    NameValidationError,
    ArtifactNameError,
)

from .utils.config import (
    get_config,
    SubcrateConfig,
)

from .naming import (
    ValidatedName,
    NameCheck,
    validate_name,
    check_name,
    encode_path,
    encode_identifier,
    artifact_stem,
)

from .manifest import Manifest, load_manifest
from .scaffold import NewOptions, PackageScaffolder, new_package

__all__ = [
    "SubcrateError",
    "NameValidationError",
    "ArtifactNameError",
    "get_config",
    "SubcrateConfig",
    "ValidatedName",
    "NameCheck",
    "validate_name",
    "check_name",
    "encode_path",
    "encode_identifier",
    "artifact_stem",
    "Manifest",
    "load_manifest",
    "NewOptions",
    "PackageScaffolder",
    "new_package",
]
