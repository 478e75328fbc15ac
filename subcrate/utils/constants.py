"""
Constants and Enumerations for the Subcrate toolkit.

This module consolidates the fixed lookup tables used by name validation,
providing a single source of truth for reserved words, delimiter tokens,
file names and other constant data.
"""

from __future__ import annotations

from enum import Enum


# =============================================================================
# Namespace Delimiter Constants
# =============================================================================

# Separates namespace segments within a compound package name.
SUBCRATE_DELIMITER = "/"

# Maximum number of delimiter occurrences allowed in one name.
MAX_SUBCRATE_DEPTH = 1

# Used where the full name must be a valid filename, like the registry tarball.
DELIMITER_PATH_REPLACEMENT = "~"

# Used where the full name is referenced from generated source code.
DELIMITER_IDENTIFIER_REPLACEMENT = "_"


# =============================================================================
# Reserved Name Tables
# =============================================================================

# Reserved words of the generated source language (Rust).
KEYWORDS = frozenset([
    "Self", "abstract", "as", "async", "await", "become", "box", "break", "const",
    "continue", "crate", "do", "dyn", "else", "enum", "extern", "false", "final",
    "fn", "for", "if", "impl", "in", "let", "loop", "macro", "match", "mod", "move",
    "mut", "override", "priv", "pub", "ref", "return", "self", "static", "struct",
    "super", "trait", "true", "try", "type", "typeof", "unsafe", "unsized", "use",
    "virtual", "where", "while", "yield",
])

# These names cannot be used on Windows, even with an extension.
WINDOWS_RESERVED_NAMES = frozenset([
    "con", "prn", "aux", "nul",
    "com1", "com2", "com3", "com4", "com5", "com6", "com7", "com8", "com9",
    "lpt1", "lpt2", "lpt3", "lpt4", "lpt5", "lpt6", "lpt7", "lpt8", "lpt9",
])

# Build output directories an artifact name would collide with.
CONFLICTING_ARTIFACT_NAMES = frozenset(["deps", "examples", "build", "incremental"])

GLOB_PATTERN_CHARS = frozenset("*?[]")


# =============================================================================
# Package Layout Constants
# =============================================================================

class PackageKind(Enum):
    """Kind of package created by the scaffolder."""

    BIN = "bin"
    LIB = "lib"

    @property
    def description(self) -> str:
        """Human-readable kind used in status output."""
        if self is PackageKind.BIN:
            return "binary (application)"
        return "library"


MANIFEST_FILE_NAME = "Subcrate.yaml"
SOURCE_DIR_NAME = "src"
BIN_ENTRY_POINT = "main.rs"
LIB_ENTRY_POINT = "lib.rs"
ARCHIVE_EXTENSION = ".crate"

DEFAULT_PACKAGE_VERSION = "0.1.0"
DEFAULT_EDITION = "2018"


# =============================================================================
# Configuration and CLI Constants
# =============================================================================

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FILE = "subcrate.log"
CONFIG_FILE_NAMES = ["subcrate_config.yaml", "subcrate_config.json"]

# Exit status for user-facing failures.
CLI_FAILURE_EXIT_CODE = 101
