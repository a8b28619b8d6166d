"""Interactive console prompts."""

from __future__ import annotations

import getpass
import os
import re
import subprocess
import sys
from collections.abc import Sequence

_LANGUAGES = {
    "C#": "cs",
    "Go": "go",
    "TypeScript": "ts",
    "JavaScript": "js",
    "Python": "py",
    "Java": "java",
}
_ANSWERS = {"Yes": True, "No": False}
_TRUE = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE = frozenset({"0", "f", "F", "FALSE", "false", "False"})
_INTEGER = re.compile(r"[+-]?\d+")


def _select(question: str, items: Sequence[str], add_label: str | None = None) -> str:
    """Show a numbered menu until a valid choice is made."""
    while True:
        print(question)
        for number, item in enumerate(items, 1):
            print(f"  {number}) {item}")
        if add_label:
            print(f"  {len(items) + 1}) {add_label}")
        choice = input("> ").strip()
        if not choice.isdigit():
            continue
        index = int(choice) - 1
        if 0 <= index < len(items):
            return items[index]
        if add_label and index == len(items):
            value = input(f"{add_label}: ").strip()
            if value:
                return value


def prompt_for_string(question: str) -> str:
    """Ask for a line of text; an aborted prompt gives an empty string."""
    try:
        return input(f"{question}: ")
    except (EOFError, KeyboardInterrupt):
        return ""


def prompt_for_multiline_string(question: str) -> str:
    """Read from standard input up to and including the first '|'."""
    print(question, end="", flush=True)
    chars = []
    while True:
        char = sys.stdin.read(1)
        if not char:
            break
        chars.append(char)
        if char == "|":
            break
    return "".join(chars)


def prompt_for_yes_no(question: str, default: str) -> bool:
    text = prompt_for_string(question) or default
    return text.lower().startswith("y")


def prompt_for_password(question: str) -> str:
    try:
        return getpass.getpass("Password: ")
    except (EOFError, KeyboardInterrupt) as error:
        print(f"Prompt failed {error!r}")
        return ""


def prompt_for_bool(question: str) -> bool:
    text = prompt_for_string(question)
    if text in _TRUE:
        return True
    return False


def prompt_for_int(question: str) -> int:
    text = prompt_for_string(question)
    print(text)
    if not _INTEGER.fullmatch(text):
        print(f"invalid integer: {text!r}")
        return 0
    return int(text)


def prompt_for_editor(question: str) -> str:
    """Give the question's text back as the answer, without asking."""
    return str(question)


def prompt_for_language(question: str) -> str:
    """Pick a language; known ones map to their file extension."""
    try:
        result = _select(question, list(_LANGUAGES), add_label="Other")
    except (EOFError, KeyboardInterrupt):
        return ""
    return _LANGUAGES.get(result, result)


def prompt_for_yes_no_list(question: str) -> bool:
    try:
        key = _select(question, list(_ANSWERS))
    except (EOFError, KeyboardInterrupt):
        return False
    return _ANSWERS.get(key, False)


def clear_screen() -> None:
    """Clear the terminal; failures are ignored."""
    command = "cls" if os.name == "nt" else "clear"
    try:
        subprocess.run(command, shell=True, check=False)
    except OSError:
        pass