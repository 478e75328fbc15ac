"""
Name validation and namespace encoding.

Pure functions only: nothing in this package touches the filesystem.
"""

from .restricted import (
    is_ascii_digit,
    is_conflicting_artifact_name,
    is_glob_pattern,
    is_keyword,
    is_non_ascii,
    is_windows_reserved,
    is_windows_reserved_path,
    is_xid_continue,
    is_xid_start,
    validate_base_name,
)

from .namespace import (
    Advisory,
    AdvisoryKind,
    NameCheck,
    ValidatedName,
    check_name,
    encode_identifier,
    encode_path,
    find_advisories,
    namespaced_name,
    split_and_validate,
    validate_name,
)

from .artifacts import (
    Target,
    TargetKind,
    archive_entry_prefix,
    archive_name,
    artifact_stem,
    default_targets,
    make_target,
)

__all__ = [
    # Predicates
    "is_ascii_digit",
    "is_conflicting_artifact_name",
    "is_glob_pattern",
    "is_keyword",
    "is_non_ascii",
    "is_windows_reserved",
    "is_windows_reserved_path",
    "is_xid_continue",
    "is_xid_start",
    "validate_base_name",

    # Namespace codec
    "Advisory",
    "AdvisoryKind",
    "NameCheck",
    "ValidatedName",
    "check_name",
    "encode_identifier",
    "encode_path",
    "find_advisories",
    "namespaced_name",
    "split_and_validate",
    "validate_name",

    # Artifacts
    "Target",
    "TargetKind",
    "archive_entry_prefix",
    "archive_name",
    "artifact_stem",
    "default_targets",
    "make_target",
]
