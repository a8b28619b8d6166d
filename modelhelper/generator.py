"""Generation of project files from template sources."""

from __future__ import annotations

import dataclasses
import os
import re
import stat
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

import jinja2

from modelhelper import casing
from modelhelper.project_templates import ProjectTemplate

_SNIPPET = re.compile(r"%%(\w+)%%")
_DEFAULT_VERSION = "0.0.1"

# Plural and singular forms are left unchanged for project templates.
_FILTERS: dict[str, Callable[..., Any]] = {
    "plural": str,
    "singular": str,
    "lower": casing.lower_case,
    "upper": casing.upper_case,
    "words": casing.as_words,
    "sentence": casing.as_sentence,
    "snake": casing.snake_case,
    "macro": casing.macro_case,
    "train": casing.train_case,
    "kebab": casing.kebab_case,
    "dot": casing.dot_case,
    "title": casing.title_case,
    "pascal": casing.pascal_case,
    "camel": casing.camel_case,
}


def _environment() -> jinja2.Environment:
    env = jinja2.Environment(keep_trailing_newline=True, autoescape=False)
    env.filters.update(_FILTERS)
    env.globals.update(_FILTERS)
    return env


@dataclass
class ProjectTemplateModel:
    name: str = ""
    version: str = ""


@dataclass
class SourceFile:
    directory_name: str = ""
    relative_path: str = ""
    file_name: str = ""
    content: bytes = b""
    snippets: list[str] = field(default_factory=list)


def coalesce_string(*args: str) -> str:
    """The first non-empty argument, or an empty string."""
    return next((value for value in args if value), "")


def relative_path(path: str, file: str) -> str:
    """``file`` with every occurrence of ``path`` removed."""
    return file.replace(path, "")


def extract_snippet_identifiers(content: bytes | str) -> list[str]:
    """Distinct ``%%name%%`` identifiers in order; fewer than two markers give []."""
    text = content.decode("utf-8", errors="replace") if isinstance(content, bytes) else content
    matches = _SNIPPET.findall(text)
    if len(matches) < 2:
        return []
    return list(dict.fromkeys(matches))


def render_template(body: str, model: ProjectTemplateModel) -> str:
    """Render ``body`` with the model's fields; a body that does not parse is returned as is."""
    env = _environment()
    try:
        template = env.from_string(body)
    except jinja2.TemplateError:
        return body
    chunks: list[str] = []
    try:
        for chunk in template.generate(**dataclasses.asdict(model)):
            chunks.append(chunk)
    except jinja2.TemplateError:
        pass
    return "".join(chunks)


def _walk_files(root: str) -> list[str]:
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


def get_project_source_files(path: str) -> list[SourceFile]:
    """Every file below ``path`` with its content and snippet identifiers."""
    files = []
    for full_path in _walk_files(path):
        file_name = os.path.basename(full_path)
        directory = full_path[: len(full_path) - len(file_name)]
        try:
            with open(full_path, "rb") as handle:
                content = handle.read()
        except OSError:
            content = b""
        files.append(
            SourceFile(
                directory_name=directory,
                relative_path=relative_path(path, directory),
                file_name=file_name,
                content=content,
                snippets=extract_snippet_identifiers(content),
            )
        )
    return files


def parse_body(model: ProjectTemplateModel, files: Iterable[SourceFile]) -> list[SourceFile]:
    """New source files whose content is rendered against ``model``."""
    parsed = []
    for source in files:
        try:
            body = source.content.decode("utf-8")
        except UnicodeDecodeError:
            content = source.content
        else:
            content = render_template(body, model).encode("utf-8")
        parsed.append(
            SourceFile(
                directory_name=source.directory_name,
                relative_path=source.relative_path,
                file_name=source.file_name,
                content=content,
            )
        )
    return parsed


class ProjectGenerator:
    """Builds template models and renders the sources of project templates."""

    def __init__(self, config: Any = None) -> None:
        self.config = config

    def build_template_model(
        self, name: str, version: str, template: ProjectTemplate
    ) -> ProjectTemplateModel:
        return ProjectTemplateModel(
            name=name,
            version=coalesce_string(template.version, version, _DEFAULT_VERSION),
        )

    def generate_root_directory_name(
        self, template_text: str, model: ProjectTemplateModel
    ) -> str:
        return render_template(template_text, model)

    def generate(
        self, template: ProjectTemplate, model: ProjectTemplateModel
    ) -> list[SourceFile]:
        files: list[SourceFile] = []
        for source in template.sources:
            files.extend(
                get_project_source_files(os.path.join(template.template_file_path, source))
            )
        return parse_body(model, files)