"""Code templates described by YAML files and ways to filter and group them."""

from __future__ import annotations

import os
import stat
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

import yaml

_DATABASE_TYPES = {
    "sqlserver": "mssql",
    "ms": "mssql",
    "mssql": "mssql",
    "mysql": "mysql",
    "postgres": "postgres",
    "postgresql": "postgres",
    "pg": "postgres",
}

TemplateMap = dict[str, "CodeTemplate"]
GroupedTemplates = dict[str, dict[str, "CodeTemplate"]]


@dataclass
class CodeTemplate:
    name: str = ""
    description: str = ""
    language: str = ""
    type: str = ""
    key: str = ""
    model: str = ""
    features: list[str] = field(default_factory=list)
    body: str = ""
    template_file_path: str = ""


@dataclass
class CodeTemplateListOptions:
    filter_keys: list[str] = field(default_factory=list)
    filter_languages: list[str] = field(default_factory=list)
    filter_types: list[str] = field(default_factory=list)
    filter_groups: list[str] = field(default_factory=list)
    filter_models: list[str] = field(default_factory=list)
    database_type: str = ""


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _template_from_mapping(data: Any) -> CodeTemplate:
    if not isinstance(data, Mapping):
        raise ValueError("cannot unmarshal data: code template must be a mapping")
    features = data.get("features") or []
    if isinstance(features, str) or not isinstance(features, list):
        raise ValueError("cannot unmarshal data: features must be a list")
    return CodeTemplate(
        name=_text(data.get("name")),
        description=_text(data.get("description")),
        language=_text(data.get("language")),
        type=_text(data.get("type")),
        key=_text(data.get("key")),
        model=_text(data.get("model")),
        features=[_text(feature) for feature in features],
        body=_text(data.get("body")),
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


def convert_file_name_to_template_name(root_path: str, name: str) -> str:
    """Template name from a file path: relative, dashed, without extension, lower case."""
    out = name.replace(root_path, "")
    for char in ("\\", "/", " "):
        out = out.replace(char, "-")
    start = 1 if out[:1] == "-" else 0
    dot = out.rfind(".")
    end = dot if dot > -1 else len(out)
    return out[start:end].lower()


def get_code_template_files(path: str) -> list[tuple[str, str]]:
    """(full path, template name) of every YAML file below ``path``."""
    return [
        (full_path, convert_file_name_to_template_name(path, full_path))
        for full_path in _walk_files(path)
        if full_path.endswith(("yaml", "yml"))
    ]


def get_database_template_files(path: str, db_type: str) -> list[tuple[str, str]]:
    """Template files in the sub-folder of ``path`` for the given database type."""
    folder = _DATABASE_TYPES.get(db_type, "")
    return get_code_template_files(os.path.normpath(os.path.join(path, folder)))


def filter_templates(
    filter_type: str, templates: Mapping[str, CodeTemplate], values: Iterable[str]
) -> TemplateMap:
    """Templates whose key, language, type, model or features match ``values``.

    An unknown filter type matches nothing.
    """
    wanted = list(values)
    attribute = {"type": "type", "key": "key", "model": "model", "language": "language"}
    output: TemplateMap = {}
    for name, template in templates.items():
        if filter_type in attribute:
            if getattr(template, attribute[filter_type]) in wanted:
                output[name] = template
        elif filter_type == "groups":
            if any(feature in wanted for feature in template.features):
                output[name] = template
    return output


def group_by_list(groups: Iterable[str], templates: Mapping[str, CodeTemplate]) -> GroupedTemplates:
    """Every non-block template under each of ``groups``, or under "empty" when there are none."""
    group_names = list(groups)
    grouped: GroupedTemplates = {}
    empty: TemplateMap = {}
    for name, template in templates.items():
        if template.type == "block":
            continue
        if not group_names:
            empty[name] = template
        else:
            for group in group_names:
                grouped.setdefault(group, {})[name] = template
    if empty:
        grouped["empty"] = empty
    return grouped


def list_grouper(key: str, template: CodeTemplate, groups: Iterable[str]) -> GroupedTemplates:
    """A single template placed under each of ``groups``, or under "empty"."""
    group_names = list(groups)
    if not group_names:
        return {"empty": {key: template}}
    return {group: {key: template} for group in group_names}


def load_template_files(path: str) -> dict[str, str]:
    """Template name to file path for every ".yaml" file below ``path``."""
    return {
        convert_file_name_to_template_name(path, full_path): full_path
        for full_path in _walk_files(path)
        if full_path.endswith("yaml")
    }


def load_template_from_file(path: str) -> CodeTemplate | None:
    """Read a code template; None for an empty document.

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
    template.template_file_path = path
    return template


class CodeTemplateService:
    """Finds code templates in code, database and project template locations."""

    def __init__(
        self,
        code_locations: Iterable[str] = (),
        database_locations: Iterable[str] | None = None,
        project_template_path: str = "",
    ) -> None:
        self.code_locations = list(code_locations)
        self.database_locations = (
            None if database_locations is None else list(database_locations)
        )
        self.project_template_path = project_template_path

    def _files(self, options: CodeTemplateListOptions | None) -> list[tuple[str, str]]:
        files = [
            code_file
            for location in self.code_locations
            for code_file in get_code_template_files(location)
        ]
        if self.database_locations is not None and options is not None and options.database_type:
            for location in self.database_locations:
                files.extend(get_database_template_files(location, options.database_type))
        return files

    @staticmethod
    def _add(templates: TemplateMap, files: Iterable[tuple[str, str]]) -> None:
        for full_path, name in files:
            template = load_template_from_file(full_path)
            if template is not None:
                template.name = name
                templates[name] = template

    def list(self, options: CodeTemplateListOptions | None = None) -> TemplateMap:
        """Templates by name; project templates replace those of the same name."""
        if not self.code_locations:
            return {}
        templates: TemplateMap = {}
        self._add(templates, self._files(options))
        if self.project_template_path:
            self._add(templates, get_code_template_files(self.project_template_path))

        if options is not None:
            for filter_type, values in (
                ("key", options.filter_keys),
                ("language", options.filter_languages),
                ("type", options.filter_types),
                ("groups", options.filter_groups),
                ("model", options.filter_models),
            ):
                if values:
                    templates = filter_templates(filter_type, templates, values)
        return templates

    def load(self, name: str) -> CodeTemplate | None:
        return self.list(None).get(name)

    def group(self, by: str, templates: Mapping[str, CodeTemplate]) -> GroupedTemplates:
        """Group by language, key, model or, for any other non-empty value, type.

        Templates with no value for the grouping go under "empty".
        """
        grouped: GroupedTemplates = {}
        empty: TemplateMap = {}
        for name, template in templates.items():
            key = ""
            if by:
                if by == "language":
                    key = template.language
                elif by == "key":
                    key = template.key
                elif by == "model":
                    key = template.model
                else:
                    key = template.type
            if key:
                grouped.setdefault(key, {})[name] = template
            else:
                empty[name] = template
        if empty:
            grouped["empty"] = empty
        return grouped