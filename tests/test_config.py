"""Unit tests for loading site settings from YAML and overrides."""

from __future__ import annotations

import typing as typ

import pytest

from folio_pages.config import SiteConfigError, load_settings

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    WriteFile = cabc.Callable[[Path, str], Path]


def test_settings_from_yaml_resolve_relative_workspace(
    tmp_path: Path, workspace: Path, write: WriteFile
) -> None:
    """Relative workspaces are resolved against the settings file's folder."""
    config_path = write(
        tmp_path / "folio.yaml",
        "site:\n  workspace: site\n  project: write\n  watch: 'yes'\n  port: 8080\n",
    )

    settings = load_settings(config_path)

    assert settings.workspace_root == workspace.resolve()
    assert settings.project == "write"
    assert settings.project_dir == workspace.resolve() / "projects" / "write"
    assert settings.public_dir == workspace.resolve() / "public"
    assert settings.watch is True
    assert settings.port == 8080
    assert settings.host == "127.0.0.1"


def test_overrides_take_precedence(
    tmp_path: Path, workspace: Path, write: WriteFile
) -> None:
    """Explicit arguments win over the settings file."""
    config_path = write(
        tmp_path / "folio.yaml", "site:\n  project: write\n  watch: true\n"
    )

    settings = load_settings(
        config_path, workspace_root=workspace, project="main", watch=False, port=5000
    )

    assert settings.project == "main"
    assert settings.watch is False
    assert settings.port == 5000


def test_defaults_without_a_file(workspace: Path) -> None:
    """Without a settings file the defaults apply."""
    settings = load_settings(workspace_root=workspace)
    assert settings.project == "main"
    assert settings.watch is False
    assert settings.port == 3000


def test_missing_settings_file_raises(tmp_path: Path) -> None:
    """A named settings file must exist."""
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "missing.yaml")


def test_non_mapping_settings_file_raises(tmp_path: Path, write: WriteFile) -> None:
    """The top level of the file must be a mapping."""
    config_path = write(tmp_path / "folio.yaml", "- just\n- a list\n")
    with pytest.raises(SiteConfigError, match="must be a mapping"):
        load_settings(config_path)


def test_invalid_values_raise(tmp_path: Path, write: WriteFile) -> None:
    """Booleans and ports are validated."""
    bad_watch = write(tmp_path / "watch.yaml", "site:\n  watch: sometimes\n")
    bad_port = write(tmp_path / "port.yaml", "site:\n  port: http\n")
    with pytest.raises(SiteConfigError, match="watch"):
        load_settings(bad_watch)
    with pytest.raises(SiteConfigError, match="port"):
        load_settings(bad_port)


def test_missing_workspace_raises(tmp_path: Path) -> None:
    """The workspace root has to be an existing folder."""
    with pytest.raises(SiteConfigError, match="not a directory"):
        load_settings(workspace_root=tmp_path / "nowhere")
