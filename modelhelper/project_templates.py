"""Project templates described by YAML files found under template locations."""

from __future__ import annotations

import os
import stat
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

import yaml

PROJECT_TEMPLATE_FILE_NAME = "project-template"


@dataclass
class ProjectTemplate:
    name: str = ""
    version: str = ""
    description: str = ""
    language: str = ""
    sources: list[str] = field(default_factory=list)
    template_file_path: str = ""
    template_file_name: str = ""


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _template_from_mapping(data: Any) -> ProjectTemplate:
    if not isinstance(data, dict):
        raise ValueError("cannot unmarshal data: project template must be a mapping")
    sources = data.get("sources") or []
    if isinstance(sources, str) or not isinstance(sources, list):
        raise ValueError("cannot unmarshal data: sources must be a list")
    return ProjectTemplate(
        name=_text(data.get("name")),
        version=_text(data.get("version")),
        description=_text(data.get("description")),
        language=_text(data.get("language")),
        sources=[_text(source) for source in sources],
    )


def _walk_files(root: str) -> list[str]:
    """Files under ``root`` in lexical depth-first order; stops at the first error."""
    found: list[str] = []

    def visit(path: str) -> None:
        info = os.lstat(path)
        if not stat.S_ISDIR(info.st_mode):
            found.append(path)
            return
        for name in sorted(os.listdir(path)):
            visit(os.path.join(path, name))

    try:
        visit(root)
    except OSError:
        pass
    return found


def load_project_template(path: str) -> ProjectTemplate | None:
    """Read a template file; None for an empty document.

    Raises OSError when the file cannot be read and ValueError when it does not
    hold a valid template.
    """
    with open(path, encoding="utf-8") as handle:
        text = handle.read()
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as error:
        raise ValueError(f"cannot unmarshal data: {error}") from error
    if data is None:
        return None
    template = _template_from_mapping(data)
    file_name = os.path.basename(path)
    template.template_file_path = path[: len(path) - len(file_name)]
    template.template_file_name = file_name
    return template


def get_project_template_files(path: str) -> list[str]:
    """Paths of the project template files below ``path``."""
    suffixes = (
        f"{PROJECT_TEMPLATE_FILE_NAME}.yaml",
        f"{PROJECT_TEMPLATE_FILE_NAME}.yml",
    )
    return [file for file in _walk_files(path) if file.endswith(suffixes)]


def _report_failure(file: str, error: Exception) -> None:
    print(f"\nCould not load file '{file}'\n\t{error}", end="")


def create_template_map(files: Iterable[str]) -> dict[str, ProjectTemplate]:
    """Templates keyed by name; unnamed or unreadable templates are skipped."""
    templates: dict[str, ProjectTemplate] = {}
    for file in files:
        try:
            template = load_project_template(file)
        except (OSError, ValueError) as error:
            _report_failure(file, error)
            continue
        if template is not None and template.name:
            templates[template.name] = template
    return templates


class ProjectTemplateService:
    """Finds project templates in a set of template locations."""

    def __init__(self, locations: Iterable[str] = ()) -> None:
        self.locations = list(locations)

    def _files(self) -> list[str]:
        return [
            file
            for location in self.locations
            for file in get_project_template_files(location)
        ]

    def list(self) -> dict[str, ProjectTemplate]:
        return create_template_map(self._files())

    def load(self, name: str) -> ProjectTemplate | None:
        """The first template whose name matches ``name`` ignoring case."""
        wanted = name.lower()
        for file in self._files():
            try:
                template = load_project_template(file)
            except (OSError, ValueError) as error:
                _report_failure(file, error)
                continue
            if template is not None and template.name and template.name.lower() == wanted:
                return template
        return None