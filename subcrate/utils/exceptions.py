"""
Custom exception definitions.

This module defines the exception hierarchy for Subcrate-specific
errors. Name validation errors render exactly the user-facing message;
everything else follows the message-plus-details format.
"""

from typing import Optional, Sequence


class SubcrateError(Exception):
    """
    Base exception for all Subcrate-related errors.

    This is the root exception class for all Subcrate-specific
    errors, providing common functionality and error handling.
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        """
        Initialize Subcrate error.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class NameValidationError(SubcrateError):
    """
    Raised when a package or target name is syntactically invalid.

    These are user input errors: they are raised before any mutation
    and are never retryable, the user has to supply a different name.
    """

    def __init__(self, message: str, name: str, what: str, help: str = ""):
        super().__init__(message, {"name": name, "what": what})
        self.name = name
        self.what = what
        self.help = help

    def __str__(self) -> str:
        return self.message


class EmptyNameError(NameValidationError):
    """Raised when the name is the empty string."""

    def __init__(self, what: str, help: str = ""):
        super().__init__(f"the {what} cannot be empty{help}", "", what, help)


class LeadingDigitError(NameValidationError):
    """Raised when the name starts with an ASCII digit."""

    def __init__(self, name: str, what: str, help: str = ""):
        message = (
            f"the name `{name}` cannot be used as a {what}, "
            f"the name cannot start with a digit{help}"
        )
        super().__init__(message, name, what, help)


class InvalidStartCharError(NameValidationError):
    """Raised when the first character is not an identifier-start character."""

    def __init__(self, name: str, what: str, character: str, help: str = ""):
        message = (
            f"invalid character `{character}` in {what}: `{name}`, "
            f"the first character must be a Unicode XID start character "
            f"(most letters or `_`){help}"
        )
        super().__init__(message, name, what, help)
        self.character = character


class ExceededNamespaceDepthError(NameValidationError):
    """Raised when the delimiter occurs more than ``max_depth`` times."""

    def __init__(self, name: str, what: str, max_depth: int, help: str = ""):
        message = (
            f"the name `{name}` cannot be used as a {what}, "
            f"crates can be namespaced at most {max_depth} levels deep{help}"
        )
        super().__init__(message, name, what, help)
        self.max_depth = max_depth


class InvalidCharacterError(NameValidationError):
    """Raised when a non-leading character is not allowed in a name."""

    def __init__(self, name: str, what: str, character: str, delimiter: str, help: str = ""):
        message = (
            f"invalid character `{character}` in {what}: `{name}`, "
            f"characters must be Unicode XID characters "
            f"(numbers, `-`, `_`, '{delimiter}', or most letters){help}"
        )
        super().__init__(message, name, what, help)
        self.character = character
        self.delimiter = delimiter


class ArtifactNameError(SubcrateError):
    """
    Raised when a target name maps to a reserved build artifact stem.

    This is a configuration error surfaced at target resolution time,
    separate from name syntax validation.
    """

    def __init__(self, target_name: str, stem: str, reason: str):
        message = f"the target name `{target_name}` cannot be used as an artifact name: {reason}"
        super().__init__(message, {"stem": stem})
        self.target_name = target_name
        self.stem = stem
        self.reason = reason


class AdvisoryError(SubcrateError):
    """Raised in strict mode when a valid name still carries advisories."""

    def __init__(self, name: str, advisories: Sequence):
        messages = "; ".join(advisory.message for advisory in advisories)
        super().__init__(f"the name `{name}` is not allowed in strict mode: {messages}")
        self.name = name
        self.advisories = tuple(advisories)


class ManifestError(SubcrateError):
    """Raised when a package manifest cannot be read or is malformed."""

    def __init__(self, message: str, manifest_path: Optional[str] = None):
        details = {}
        if manifest_path is not None:
            details["manifest"] = manifest_path
        super().__init__(message, details)
        self.manifest_path = manifest_path


class ScaffoldError(SubcrateError):
    """Raised when creating a new package on disk fails."""

    def __init__(self, message: str, path: Optional[str] = None):
        details = {}
        if path is not None:
            details["path"] = path
        super().__init__(message, details)
        self.path = path


class ConfigError(SubcrateError):
    """Raised when configuration values are invalid."""
