"""Functions made available to code templates."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from modelhelper import casing

FuncMap = dict[str, Callable[..., Any]]


def full_func_map(
    datatypes: Mapping[str, str], nullable_datatypes: Mapping[str, str]
) -> FuncMap:
    return merge_func_maps(
        standard_map(), string_map(), datatype_map(datatypes, nullable_datatypes)
    )


def simple_func_map() -> FuncMap:
    return merge_func_maps(standard_map(), string_map())


def merge_func_maps(*args: Mapping[str, Callable[..., Any]]) -> FuncMap:
    """Merge maps from left to right; later entries replace earlier ones."""
    merged: FuncMap = {}
    for mapping in args:
        merged.update(mapping)
    return merged


def standard_map() -> FuncMap:
    return {"increment": incrementer}


def incrementer(value: int) -> int:
    return value + 1


def string_map() -> FuncMap:
    return {
        "plural": casing.plural_form,
        "singular": casing.singular_form,
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
        "append": casing.add_word,
    }


def datatype_map(
    datatypes: Mapping[str, str], nullable_datatypes: Mapping[str, str]
) -> FuncMap:
    """Datatype lookups; unknown types are returned unchanged."""

    def not_null(name: str) -> str:
        return datatypes.get(name, name)

    def nullable(is_nullable: bool, name: str) -> str:
        if is_nullable:
            return nullable_datatypes.get(name, name)
        return not_null(name)

    return {"datatype": not_null, "datatypeN": nullable, "nullable": nullable}