"""
Utils package for Subcrate.

This module provides the constants, exceptions, logging and configuration
shared by the naming and scaffolding modules.
"""

# Core utilities
from .exceptions import (
    SubcrateError,
    NameValidationError,
    EmptyNameError,
    LeadingDigitError,
    InvalidStartCharError,
    ExceededNamespaceDepthError,
    InvalidCharacterError,
    ArtifactNameError,
    AdvisoryError,
    ManifestError,
    ScaffoldError,
    ConfigError,
)
from .constants import *

# Configuration and logging
from .config import (
    SubcrateConfig,
    NamingConfig,
    ScaffoldConfig,
    LoggingConfig,
    get_config,
    set_config,
    load_config,
)
from .logging import get_logger, setup_logging, SubcrateLogger

__all__ = [
    # Exceptions
    "SubcrateError",
    "NameValidationError",
    "EmptyNameError",
    "LeadingDigitError",
    "InvalidStartCharError",
    "ExceededNamespaceDepthError",
    "InvalidCharacterError",
    "ArtifactNameError",
    "AdvisoryError",
    "ManifestError",
    "ScaffoldError",
    "ConfigError",

    # Constants (exported via *)

    # Configuration
    "SubcrateConfig",
    "NamingConfig",
    "ScaffoldConfig",
    "LoggingConfig",
    "get_config",
    "set_config",
    "load_config",

    # Logging
    "get_logger",
    "setup_logging",
    "SubcrateLogger",
]
