"""
Test package structure and basic imports.

This test module verifies that the package is properly structured
and all modules can be imported without errors.
"""

from pathlib import Path


def test_main_package_import():
    """Test that the main subcrate package can be imported."""
    import subcrate

    assert hasattr(subcrate, '__version__')
    assert hasattr(subcrate, '__author__')
    assert hasattr(subcrate, 'validate_name')
    assert hasattr(subcrate, 'new_package')


def test_naming_imports():
    """Test that naming submodules can be imported."""
    from subcrate.naming import (
        ValidatedName,
        NameCheck,
        validate_name,
        check_name,
        split_and_validate,
        encode_path,
        encode_identifier,
        artifact_stem,
        is_windows_reserved,
        is_keyword,
    )

    assert ValidatedName is not None
    assert NameCheck is not None
    assert callable(validate_name)
    assert callable(check_name)
    assert callable(split_and_validate)
    assert callable(encode_path)
    assert callable(encode_identifier)
    assert callable(artifact_stem)
    assert callable(is_windows_reserved)
    assert callable(is_keyword)


def test_utils_imports():
    """Test that utility modules can be imported."""
    from subcrate.utils import (
        SubcrateError,
        NameValidationError,
        SubcrateConfig,
        get_config,
        get_logger,
        SUBCRATE_DELIMITER,
        MAX_SUBCRATE_DEPTH,
    )

    assert issubclass(NameValidationError, SubcrateError)
    assert SubcrateConfig is not None
    assert callable(get_config)
    assert callable(get_logger)
    assert SUBCRATE_DELIMITER == "/"
    assert MAX_SUBCRATE_DEPTH == 1


def test_templates_are_packaged():
    """Test that the skeleton templates sit next to the scaffolder."""
    import subcrate.scaffold

    template_dir = Path(subcrate.scaffold.__file__).parent / "templates"
    for name in ("Subcrate.yaml.j2", "main.rs.j2", "lib.rs.j2"):
        assert (template_dir / name).is_file()
