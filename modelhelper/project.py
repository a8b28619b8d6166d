"""Locating, loading and saving the project configuration."""

from __future__ import annotations

import os
from typing import Any

import yaml

from modelhelper.paths import current_directory, find_base_dir_from_foldername

PROJECT_ROOT_FOLDER_NAME = ".modelhelper"
PROJECT_CONFIG_FILE_NAME = "project"
_RELATED_CONFIG_FILE = "project.yaml"
_NEAREST_SEARCH_LEVELS = 5


def create_dir(name: str) -> None:
    """Create a single directory; raises OSError when that fails."""
    os.mkdir(name, 0o755)


def default_dir() -> str:
    """The project folder inside the current working directory."""
    return os.path.join(os.getcwd(), PROJECT_ROOT_FOLDER_NAME)


def default_location() -> str:
    """The project configuration file inside :func:`default_dir`."""
    return os.path.join(default_dir(), f"{PROJECT_CONFIG_FILE_NAME}.yaml")


def file_exists(path: str | os.PathLike[str]) -> bool:
    """True when ``path`` exists and is not a directory."""
    path = os.fspath(path)
    return bool(path) and os.path.exists(path) and not os.path.isdir(path)


def merge_string(current: str, target: str) -> str:
    """``target`` when it is non-empty, otherwise ``current``."""
    return target if target else current


def _read_config(path: str) -> Any:
    with open(path, encoding="utf-8") as handle:
        text = handle.read()
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as error:
        raise ValueError(f"cannot unmarshal data: {error}") from error


def _has_project_folder(directory: str) -> bool:
    with os.scandir(directory) as entries:
        return any(
            entry.is_dir(follow_symlinks=False) and entry.name == PROJECT_ROOT_FOLDER_NAME
            for entry in entries
        )


class ProjectConfigService:
    """Finds and reads project configuration files."""

    def __init__(self, path: str | os.PathLike[str] = "") -> None:
        self.path = os.fspath(path)

    def template_path(self) -> str:
        """The templates folder of the enclosing project, or "" when there is none."""
        base = self.base_path()
        if not base:
            return ""
        return os.path.join(base, PROJECT_ROOT_FOLDER_NAME, "templates")

    def base_path(self) -> str:
        """The nearest ancestor of the working directory holding a project folder."""
        found = find_base_dir_from_foldername(current_directory(), PROJECT_ROOT_FOLDER_NAME)
        return found or ""

    def load(self) -> Any:
        return self.load_from_file(default_location())

    def load_from_file(self, path: str | os.PathLike[str]) -> Any:
        """Parsed configuration, or None when the file does not exist.

        Raises OSError when the file cannot be read and ValueError when it is
        not valid YAML.
        """
        path = os.fspath(path)
        if not file_exists(path):
            return None
        return _read_config(path)

    def save(self, data: Any) -> None:
        """Write ``data`` as YAML to :func:`default_location`."""
        text = yaml.safe_dump(data, sort_keys=False)
        path = default_location()
        if not file_exists(path) and not os.path.isdir(default_dir()):
            create_dir(default_dir())
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(text)

    def exists(self) -> bool:
        return file_exists(self.path)

    def find_related_projects(self, start_path: str) -> list[str]:
        """Project files on the way from the volume root down to ``start_path``.

        The list runs from least to most important, the last one being nearest
        to ``start_path``. Raises OSError when a directory cannot be read.
        """
        dirs = start_path.split(os.sep)
        if dirs:
            dirs[0] = os.path.splitdrive(start_path)[0] + os.sep
        found: list[str] = []
        for depth in range(1, len(dirs) + 1):
            base = os.path.join(*dirs[:depth])
            if not base:
                continue
            if depth < len(dirs) and dirs[depth] == PROJECT_ROOT_FOLDER_NAME:
                found.append(os.path.join(base, PROJECT_ROOT_FOLDER_NAME, _RELATED_CONFIG_FILE))
                break
            if _has_project_folder(base):
                found.append(os.path.join(base, PROJECT_ROOT_FOLDER_NAME, _RELATED_CONFIG_FILE))
        return found

    def find_nearest_project_dir(self) -> str | None:
        """Relative path of the nearest project file up to five levels up, or None."""
        for level in range(_NEAREST_SEARCH_LEVELS):
            base = os.path.join(*([os.pardir] * level)) if level else os.curdir
            if _has_project_folder(base):
                return os.path.normpath(
                    os.path.join(base, PROJECT_ROOT_FOLDER_NAME, _RELATED_CONFIG_FILE)
                )
        return None