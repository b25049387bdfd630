"""Load folio site settings from YAML and command-line overrides."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import _optional_str, _parse_bool, _parse_port
from .models import SiteConfigError, SiteSettings


def _read_site_mapping(path: Path) -> dict[str, typ.Any]:
    """Return the ``site`` mapping of a YAML settings file."""
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise SiteConfigError(msg)
    site = loaded.get("site") or {}
    if not isinstance(site, dict):
        msg = "The 'site' section must be a mapping."
        raise SiteConfigError(msg)
    return dict(site)


def load_settings(
    config_path: Path | None = None,
    *,
    workspace_root: Path | None = None,
    project: str | None = None,
    watch: bool | None = None,
    host: str | None = None,
    port: int | None = None,
) -> SiteSettings:
    """Build :class:`SiteSettings` from an optional YAML file and overrides.

    Parameters
    ----------
    config_path : Path, optional
        YAML file with a top-level ``site`` mapping (``workspace``,
        ``project``, ``watch``, ``host``, ``port``). A relative ``workspace``
        is resolved against the file's directory.
    workspace_root, project, watch, host, port : optional
        Values taking precedence over the file when not ``None``.

    Returns
    -------
    SiteSettings
        Settings with an absolute workspace root.

    Raises
    ------
    FileNotFoundError
        If ``config_path`` is given but does not exist.
    SiteConfigError
        If the file is not a mapping, a value has the wrong type, or the
        workspace root is not a directory.

    Examples
    --------
    >>> from pathlib import Path
    >>> settings = load_settings(workspace_root=Path("."), project="write")
    >>> settings.project_dir.name
    'write'
    """
    raw: dict[str, typ.Any] = {}
    base_dir = Path.cwd()
    if config_path is not None:
        raw = _read_site_mapping(config_path)
        base_dir = config_path.resolve().parent

    defaults = SiteSettings()
    if workspace_root is None:
        configured = _optional_str(raw.get("workspace"))
        workspace_root = base_dir / configured if configured else base_dir
    workspace_root = workspace_root.resolve()
    if not workspace_root.is_dir():
        msg = f"Workspace root '{workspace_root}' is not a directory."
        raise SiteConfigError(msg)

    if project is None:
        project = _optional_str(raw.get("project")) or defaults.project
    if not project.strip():
        msg = "Setting 'project' must not be empty."
        raise SiteConfigError(msg)
    if watch is None:
        watch = _parse_bool(raw.get("watch", defaults.watch), key="watch")
    if host is None:
        host = _optional_str(raw.get("host")) or defaults.host
    if port is None:
        port = _parse_port(raw.get("port", defaults.port))

    return SiteSettings(
        workspace_root=workspace_root,
        project=project,
        watch=watch,
        host=host,
        port=port,
    )


__all__ = ["load_settings"]
