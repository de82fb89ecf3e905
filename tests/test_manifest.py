"""Tests for pkgreadme.manifest."""

from __future__ import annotations

from pathlib import Path

import pytest

from pkgreadme.errors import ManifestNotFoundError, ManifestParseError
from pkgreadme.manifest import derive_info, is_scoped, load_manifest, parse_repository
from pkgreadme.stores import FileSystemStore
from tests._fixtures.project_builder import ProjectBuilder


def test_scoped_package_with_bin_mapping() -> None:
    info = derive_info({"name": "@scope/pkg", "bin": {"pkg": "./cli.js"}})

    assert info.is_scoped is True
    assert info.npx_executable == "-p @scope/pkg pkg"
    assert info.global_executable == "pkg"


def test_unscoped_package_with_string_bin() -> None:
    info = derive_info({"name": "tool", "bin": "./cli.js"})

    assert info.is_scoped is False
    assert info.npx_executable == "tool"
    assert info.global_executable == "tool"


def test_scoped_package_with_string_bin_uses_unscoped_command() -> None:
    info = derive_info({"name": "@scope/tool", "bin": "./cli.js"})

    assert info.npx_executable == "-p @scope/tool"
    assert info.global_executable == "tool"


def test_bin_mapping_primary_is_first_inserted_key() -> None:
    info = derive_info({"name": "tool", "bin": {"tool-cli": "./a.js", "aaa": "./b.js"}})

    assert info.npx_executable == "tool tool-cli"
    assert info.global_executable == "tool-cli"


def test_bin_mapping_primary_matching_name_collapses() -> None:
    info = derive_info({"name": "tool", "bin": {"tool": "./cli.js", "other": "./o.js"}})

    assert info.npx_executable == "tool"
    assert info.global_executable == "tool"


def test_no_bin_means_no_executables() -> None:
    info = derive_info({"name": "tool"})

    assert info.npx_executable is None
    assert info.global_executable is None


def test_empty_bin_mapping_is_treated_as_absent() -> None:
    info = derive_info({"name": "tool", "bin": {}})

    assert info.npx_executable is None
    assert info.global_executable is None


def test_string_bin_without_name_has_no_global_command() -> None:
    info = derive_info({"bin": "./cli.js"})

    assert info.npx_executable is None
    assert info.global_executable is None


def test_bin_mapping_without_name_still_names_global_command() -> None:
    info = derive_info({"bin": {"run": "./cli.js"}})

    assert info.global_executable == "run"


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("@scope/pkg", True),
        ("pkg", False),
        ("a/b/c", False),
        (None, False),
        ("", False),
    ],
)
def test_is_scoped_requires_exactly_one_separator(name, expected) -> None:
    assert is_scoped(name) is expected


def test_parse_repository_extracts_user_and_repo() -> None:
    ref = parse_repository("https://github.com/acme/widgets.git")

    assert ref.github_user == "acme"
    assert ref.repo_name == "widgets"
    assert ref.url_match == "https://github.com/acme/widgets.git"


def test_parse_repository_accepts_git_plus_prefix_and_http() -> None:
    ref = parse_repository("git+http://github.com/acme/widgets.git")

    assert (ref.github_user, ref.repo_name) == ("acme", "widgets")


@pytest.mark.parametrize(
    "url",
    [None, "", "https://gitlab.com/acme/widgets.git", "https://github.com/acme/widgets"],
)
def test_parse_repository_without_match_is_empty(url) -> None:
    ref = parse_repository(url)

    assert ref.github_user is None
    assert ref.repo_name is None
    assert ref.url_match is None


def test_heading_prefers_repo_name_over_package_name() -> None:
    info = derive_info(
        {"name": "widgets-cli", "repository": {"type": "git", "url": "https://github.com/acme/widgets.git"}}
    )

    assert info.heading == "widgets"
    assert info.npm_name == "widgets-cli"


def test_heading_falls_back_to_name_then_none() -> None:
    assert derive_info({"name": "tool"}).heading == "tool"
    assert derive_info({}).heading is None


def test_non_string_fields_are_ignored() -> None:
    info = derive_info({"name": 42, "description": ["x"], "repository": "https://github.com/a/b.git"})

    assert info.npm_name is None
    assert info.description is None
    assert info.github_user is None


def test_usage_substitutes_first_placeholder() -> None:
    info = derive_info({"usage": "run CMD --flag"})

    assert info.usage("mytool") == "run mytool --flag"


def test_usage_only_replaces_first_placeholder() -> None:
    info = derive_info({"usage": "CMD && CMD"})

    assert info.usage("go") == "go && CMD"


def test_usage_returns_command_when_empty_or_untemplated() -> None:
    templated = derive_info({"usage": "run CMD --flag"})
    plain = derive_info({})

    assert templated.usage("") == ""
    assert plain.usage("mytool") == "mytool"


def test_load_manifest_preserves_key_order(project_builder: ProjectBuilder) -> None:
    path = project_builder.write_manifest({"name": "tool", "bin": {"zeta": "./z.js", "alpha": "./a.js"}})

    record = load_manifest(path, FileSystemStore())

    assert list(record["bin"]) == ["zeta", "alpha"]


def test_load_manifest_missing_raises_not_found(tmp_path: Path) -> None:
    with pytest.raises(ManifestNotFoundError, match="no package.json found"):
        load_manifest(tmp_path / "package.json", FileSystemStore())


def test_load_manifest_directory_counts_as_missing(tmp_path: Path) -> None:
    (tmp_path / "package.json").mkdir()

    with pytest.raises(ManifestNotFoundError):
        load_manifest(tmp_path / "package.json", FileSystemStore())


@pytest.mark.parametrize("content", ["{not json", "", "[1, 2]", '"tool"'])
def test_load_manifest_invalid_content_raises_parse_error(
    project_builder: ProjectBuilder, content: str
) -> None:
    path = project_builder.write("package.json", content)

    with pytest.raises(ManifestParseError) as excinfo:
        load_manifest(path, FileSystemStore())

    assert str(excinfo.value) == "there was an issue parsing the package.json file"


def test_load_manifest_undecodable_bytes_raise_parse_error(project_builder: ProjectBuilder) -> None:
    path = project_builder.path() / "package.json"
    path.write_bytes(b'{"name": "tool", "description": "caf\xe9"}')

    with pytest.raises(ManifestParseError) as excinfo:
        load_manifest(path, FileSystemStore())

    assert str(excinfo.value) == "there was an issue parsing the package.json file"
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
