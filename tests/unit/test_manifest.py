"""
Unit tests for manifest reading.

Mirrors the build scenarios for namespaced packages: implicit targets take
the encoded package name, explicit targets keep their own.
"""

import pytest

from subcrate.manifest import load_manifest, parse_manifest
from subcrate.naming.artifacts import TargetKind
from subcrate.utils.exceptions import (
    ArtifactNameError,
    ExceededNamespaceDepthError,
    InvalidCharacterError,
    ManifestError,
)


MAIN_RS = 'fn main() { println!("i am foo"); }\n'


class TestLoadManifest:
    """Test loading manifests from disk."""

    def test_explicit_bin_keeps_its_name(self, package_dir):
        root = package_dir(
            "package:\n"
            "  name: foo/bar\n"
            "  version: 0.5.0\n"
            "bin:\n"
            "  - name: foo\n"
            "    path: src/foo.rs\n",
            {"src/foo.rs": MAIN_RS},
        )
        manifest = load_manifest(root)

        assert manifest.name.raw == "foo/bar"
        assert manifest.version == "0.5.0"
        assert [t.stem for t in manifest.binaries] == ["foo"]
        assert manifest.library is None

    def test_implicit_binary_uses_package_name(self, package_dir):
        root = package_dir("package:\n  name: foo/bar\n", {"src/main.rs": MAIN_RS})
        manifest = load_manifest(root / "Subcrate.yaml")

        assert len(manifest.binaries) == 1
        binary = manifest.binaries[0]
        assert binary.stem == "foo_bar"
        assert binary.implicit
        assert binary.path == "src/main.rs"

    def test_implicit_library(self, package_dir):
        root = package_dir("package:\n  name: foo/bar\n", {"src/lib.rs": "pub fn bar() {}\n"})
        manifest = load_manifest(root)

        assert manifest.library.stem == "foo_bar"
        assert manifest.binaries == []

    def test_namespaced_target_names(self, package_dir):
        root = package_dir(
            "package:\n"
            "  name: foo/bar\n"
            "bin:\n"
            "  - name: the_foo_bin/bar\n"
            "    path: src/bin.rs\n"
            "lib:\n"
            "  name: the_foo_lib/bar\n"
            "  path: src/foo.rs\n",
            {"src/bin.rs": "pub fn main() {}\n", "src/foo.rs": "pub fn bar() {}\n"},
        )
        manifest = load_manifest(root)

        assert [t.stem for t in manifest.binaries] == ["the_foo_bin_bar"]
        assert manifest.library.stem == "the_foo_lib_bar"
        assert manifest.warnings == []

    def test_unnamed_explicit_target_inherits_package_name(self, package_dir):
        root = package_dir(
            "package:\n  name: foo/bar\nlib:\n  path: src/foo.rs\n",
            {"src/foo.rs": "pub fn bar() {}\n"},
        )
        assert load_manifest(root).library.stem == "foo_bar"

    def test_duplicate_build_targets_warning(self, package_dir):
        root = package_dir(
            "package:\n"
            "  name: foo/bar\n"
            "lib:\n"
            "  name: main\n"
            "  path: src/main.rs\n",
            {"src/main.rs": "fn main() {}\n"},
        )
        manifest = load_manifest(root)

        assert len(manifest.targets) == 2
        assert len(manifest.warnings) == 1
        assert manifest.warnings[0].startswith(
            "file found to be present in multiple build targets:"
        )
        assert manifest.warnings[0].endswith("main.rs")

    def test_missing_manifest(self, tmp_path):
        with pytest.raises(ManifestError) as exc_info:
            load_manifest(tmp_path)
        assert "could not find manifest" in str(exc_info.value)

    def test_malformed_yaml(self, package_dir):
        root = package_dir("package: [unclosed\n")
        with pytest.raises(ManifestError):
            load_manifest(root)


class TestParseManifest:
    """Test validation of manifest data."""

    def test_package_name_grammar(self, tmp_path):
        with pytest.raises(ExceededNamespaceDepthError):
            parse_manifest({"package": {"name": "a/b/c"}}, tmp_path)

    def test_invalid_target_name(self, tmp_path):
        data = {"package": {"name": "foo"}, "bin": [{"name": "foo bar"}]}
        with pytest.raises(InvalidCharacterError) as exc_info:
            parse_manifest(data, tmp_path)
        assert "binary target name" in str(exc_info.value)

    def test_reserved_target_stem(self, tmp_path):
        data = {"package": {"name": "foo"}, "bin": [{"name": "build"}]}
        with pytest.raises(ArtifactNameError):
            parse_manifest(data, tmp_path)

    @pytest.mark.parametrize("data", [
        None,
        [],
        {},
        {"package": "foo"},
        {"package": {}},
        {"package": {"name": 5}},
        {"package": {"name": "foo"}, "bin": {"name": "foo"}},
        {"package": {"name": "foo"}, "bin": ["foo"]},
        {"package": {"name": "foo"}, "lib": {"path": 3}},
    ])
    def test_malformed_data(self, tmp_path, data):
        with pytest.raises(ManifestError):
            parse_manifest(data, tmp_path)

    def test_default_version(self, tmp_path):
        manifest = parse_manifest({"package": {"name": "foo"}}, tmp_path)
        assert manifest.version == "0.1.0"
        assert manifest.targets == []

    def test_target_kinds(self, tmp_path):
        data = {"package": {"name": "foo"}, "bin": [{"name": "a"}, {"name": "b", "path": "src/b.rs"}]}
        manifest = parse_manifest(data, tmp_path)
        assert [t.kind for t in manifest.targets] == [TargetKind.BIN, TargetKind.BIN]
        assert [t.path for t in manifest.targets] == ["src/main.rs", "src/b.rs"]
