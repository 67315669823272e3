"""Tests for vrbuild.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from vrbuild.config import (
    DEFAULT_EXCLUDES,
    BuildConfig,
    ConfigError,
    config_from_environment,
    default_node_executable,
    load_project_config,
)


def test_defaults_match_react_vr_layout(tmp_path: Path) -> None:
    config = config_from_environment(tmp_path, environ={})

    assert config.start_dir == tmp_path.resolve()
    assert config.cli_location is None
    assert config.framework_dependency == "react-vr"
    assert config.build_dir_name == "build"
    assert config.static_assets_dir == "static_assets"
    assert config.platform == "vr"
    assert config.client_bundle_name == "client.bundle.js"
    assert config.exclude == DEFAULT_EXCLUDES
    assert config.resolve_cli_location(tmp_path) == (
        tmp_path / "node_modules" / "react-native" / "local-cli" / "cli.js"
    )


def test_default_node_executable_per_platform() -> None:
    assert default_node_executable("win32") == "node.exe"
    assert default_node_executable("linux") == "node"
    assert default_node_executable("darwin") == "node"


def test_environment_override_for_cli_location(tmp_path: Path) -> None:
    config = config_from_environment(tmp_path, environ={"RN_CLI_LOCATION": "/opt/rn/cli.js"})

    assert config.cli_location == Path("/opt/rn/cli.js")
    assert config.resolve_cli_location(tmp_path) == Path("/opt/rn/cli.js")


def test_explicit_override_beats_environment(tmp_path: Path) -> None:
    config = config_from_environment(
        tmp_path,
        environ={"RN_CLI_LOCATION": "/opt/rn/cli.js"},
        cli_location=Path("tools/cli.js"),
        platform=None,
    )

    assert config.resolve_cli_location(tmp_path) == (tmp_path / "tools" / "cli.js").resolve()
    assert config.platform == "vr"


def test_exclusions_always_cover_output_and_assets(tmp_path: Path) -> None:
    config = BuildConfig(start_dir=tmp_path, build_dir_name="dist", static_assets_dir="media", exclude=())

    assert config.exclusions() == {"dist", "media"}


def test_load_project_config_without_file_returns_same_config(tmp_path: Path) -> None:
    config = config_from_environment(tmp_path, environ={})

    assert load_project_config(config, tmp_path) is config


def test_load_project_config_merges_fields(tmp_path: Path) -> None:
    (tmp_path / ".vrbuild.yml").write_text(
        """
build_dir: dist
static_assets: media
platform: vr
cli_location: tools/cli.js
exclude:
  - storybook
  - docs
""",
        encoding="utf-8",
    )
    config = config_from_environment(tmp_path, environ={})

    merged = load_project_config(config, tmp_path)

    assert merged.build_dir_name == "dist"
    assert merged.static_assets_dir == "media"
    assert merged.cli_location == Path("tools/cli.js")
    assert merged.exclude[: len(DEFAULT_EXCLUDES)] == DEFAULT_EXCLUDES
    assert merged.exclude[-2:] == ("storybook", "docs")


def test_load_project_config_keeps_explicit_cli_location(tmp_path: Path) -> None:
    (tmp_path / ".vrbuild.yml").write_text("cli_location: tools/cli.js\n", encoding="utf-8")
    config = config_from_environment(tmp_path, environ={"RN_CLI_LOCATION": "/opt/rn/cli.js"})

    assert load_project_config(config, tmp_path).cli_location == Path("/opt/rn/cli.js")


@pytest.mark.parametrize(
    "content",
    [
        "- just\n- a list\n",
        "build_dir: [unclosed\n",
        "exclude:\n  nested: mapping\n",
    ],
)
def test_load_project_config_rejects_malformed_files(tmp_path: Path, content: str) -> None:
    (tmp_path / ".vrbuild.yml").write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_project_config(config_from_environment(tmp_path, environ={}), tmp_path)
