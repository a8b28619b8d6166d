"""Word splitting, case conversion and simple text statistics."""

from __future__ import annotations

import re

_SPLITTERS = frozenset(" _-")
_SPLIT_PATTERN = re.compile(r"[ _\-]+")

_UNCOUNTABLE = frozenset(
    {
        "advice",
        "aircraft",
        "bison",
        "data",
        "deer",
        "equipment",
        "feedback",
        "fish",
        "furniture",
        "hardware",
        "homework",
        "information",
        "luggage",
        "metadata",
        "money",
        "moose",
        "music",
        "news",
        "police",
        "rice",
        "series",
        "sheep",
        "software",
        "species",
        "staff",
        "swine",
        "traffic",
        "weather",
    }
)

_IRREGULAR_PLURALS = {
    "cactus": "cacti",
    "child": "children",
    "criterion": "criteria",
    "foot": "feet",
    "goose": "geese",
    "man": "men",
    "mouse": "mice",
    "ox": "oxen",
    "person": "people",
    "phenomenon": "phenomena",
    "tooth": "teeth",
    "woman": "women",
}
_IRREGULAR_SINGULARS = {plural: single for single, plural in _IRREGULAR_PLURALS.items()}


def _rules(pairs: list[tuple[str, str]]) -> list[tuple[re.Pattern[str], str]]:
    return [(re.compile(pattern, re.IGNORECASE), repl) for pattern, repl in pairs]


_PLURAL_RULES = _rules(
    [
        (r"(quiz)$", r"\1zes"),
        (r"(matr)ix$", r"\1ices"),
        (r"(vert|ind)ex$", r"\1ices"),
        (r"(alias|status|bus|campus)$", r"\1es"),
        (r"(octop|vir)us$", r"\1i"),
        (r"(x|ch|ss|sh|zz)$", r"\1es"),
        (r"([^aeiouy]|qu)y$", r"\1ies"),
        (r"([lr])f$", r"\1ves"),
        (r"([^f])fe$", r"\1ves"),
        (r"sis$", "ses"),
        (r"([ti])um$", r"\1a"),
        (r"(buffal|tomat|potat|her)o$", r"\1oes"),
        (r"([^su])s$", r"\1s"),
        (r"$", "s"),
    ]
)

_SINGULAR_RULES = _rules(
    [
        (r"(quiz)zes$", r"\1"),
        (r"(matr)ices$", r"\1ix"),
        (r"(vert|ind)ices$", r"\1ex"),
        (r"(octop|vir)i$", r"\1us"),
        (r"(alias|status|bus|campus)es$", r"\1"),
        (r"(analy|ba|diagno|parenthe|progno|synop|the)ses$", r"\1sis"),
        (r"(x|ch|ss|sh|zz)es$", r"\1"),
        (r"([^aeiouy]|qu)ies$", r"\1y"),
        (r"([lr])ves$", r"\1f"),
        (r"([^f])ves$", r"\1fe"),
        (r"([ti])a$", r"\1um"),
        (r"(buffal|tomat|potat|her)oes$", r"\1o"),
        (r"([^s])s$", r"\1"),
    ]
)


def _restore_case(original: str, replacement: str) -> str:
    if len(original) > 1 and original.isupper():
        return replacement.upper()
    if original[:1].isupper():
        return replacement[:1].upper() + replacement[1:]
    return replacement


def _inflect(
    word: str,
    target_forms: dict[str, str],
    irregular: dict[str, str],
    rules: list[tuple[re.Pattern[str], str]],
) -> str:
    lower = word.lower()
    if not word or lower in _UNCOUNTABLE or lower in target_forms:
        return word
    if lower in irregular:
        return _restore_case(word, irregular[lower])
    for pattern, repl in rules:
        if pattern.search(word):
            result = pattern.sub(repl, word, count=1)
            return result.upper() if len(word) > 1 and word.isupper() else result
    return word


def get_stat(body: bytes | str) -> tuple[int, int, int]:
    """Return the byte count, line count and word count of ``body``."""
    if isinstance(body, str):
        text, size = body, len(body.encode("utf-8"))
    else:
        text, size = body.decode("utf-8", errors="replace"), len(body)
    return size, get_lines(text), get_words(text)


def get_words(text: str) -> int:
    """Count whitespace separated words."""
    return len(text.split())


def get_lines(text: str) -> int:
    """Count lines; a trailing newline does not start a new line."""
    if not text:
        return 0
    parts = text.split("\n")
    if text.endswith("\n"):
        parts.pop()
    return len(parts)


def plural_form(word: str) -> str:
    """Return the plural form of ``word``; "data" is kept as is."""
    if word.lower() == "data":
        return word
    return _inflect(word, _IRREGULAR_SINGULARS, _IRREGULAR_PLURALS, _PLURAL_RULES)


def singular_form(word: str) -> str:
    """Return the singular form of ``word``; "data" is kept as is."""
    if word.lower() == "data":
        return word
    return _inflect(word, _IRREGULAR_PLURALS, _IRREGULAR_SINGULARS, _SINGULAR_RULES)


def snake_case(text: str) -> str:
    return "_".join(as_word_array(text)).lower()


def macro_case(text: str) -> str:
    return "_".join(as_word_array(text)).upper()


def train_case(text: str) -> str:
    return "_".join(as_word_array(capital(text)))


def dot_case(text: str) -> str:
    return ".".join(as_word_array(capital(text)))


def kebab_case(text: str) -> str:
    return "-".join(as_word_array(text)).lower()


def capital(text: str) -> str:
    """Capitalise every word and join them with spaces."""
    words = (word.lower() for word in as_word_array(text))
    return " ".join(word[:1].upper() + word[1:] for word in words)


def upper_case(text: str) -> str:
    return text.upper()


def lower_case(text: str) -> str:
    return text.lower()


def as_sentence(text: str) -> str:
    """Words joined by spaces, first letter upper case, the rest lower case."""
    sentence = as_words(text)
    return sentence[:1].upper() + sentence[1:].lower()


def title_case(text: str) -> str:
    """Words joined by spaces, each starting with a capital letter."""
    return " ".join(
        word[:1].upper() + word[1:].lower() for word in as_words(text).split(" ")
    )


def as_words(text: str) -> str:
    return " ".join(as_word_array(text))


def _is_title_separator(char: str) -> bool:
    if char.isascii():
        return not (char.isalnum() or char == "_")
    if char.isalpha() or char.isdigit():
        return False
    return char.isspace()


def _title(word: str) -> str:
    out = []
    previous = " "
    for char in word:
        out.append(char.upper() if _is_title_separator(previous) else char)
        previous = char
    return "".join(out)


def pascal_case(text: str) -> str:
    return "".join(_title(word) for word in as_word_array(text))


def camel_case(text: str) -> str:
    words = [_title(word) for word in as_word_array(text)]
    if words:
        words[0] = words[0].lower()
    return "".join(words)


def split_on_casing(text: str) -> list[str]:
    """Split a single word where its letters change from lower to upper case."""
    upper = [char.isupper() for char in text]
    starts = [
        index
        for index, is_upper in enumerate(upper)
        if index == 0
        or (
            is_upper
            and (
                not upper[index - 1]
                or (index + 1 < len(upper) and not upper[index + 1])
            )
        )
    ]
    ends = starts[1:] + [len(text)]
    return [text[start:end] for start, end in zip(starts, ends)]


def split_on_splitter(text: str) -> list[str]:
    """Split on spaces, underscores and hyphens, dropping empty parts."""
    return [part for part in _SPLIT_PATTERN.split(text) if part]


def is_splitter(char: str) -> bool:
    return char in _SPLITTERS


def as_word_array(text: str) -> list[str]:
    """Split ``text`` on separators and then on case changes."""
    return [
        word
        for part in split_on_splitter(text)
        for word in split_on_casing(part)
    ]


def add_word(what: str, text: str) -> str:
    """Append ``what`` to ``text``."""
    return text + what if what else text


def abbreviate(text: str) -> str:
    """Lower-cased first character plus every upper-case character."""
    return "".join(
        char for index, char in enumerate(text) if index == 0 or char.isupper()
    ).lower()