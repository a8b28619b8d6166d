"""Locating directories on disk."""

from __future__ import annotations

import os


def current_directory() -> str:
    return os.getcwd()


def find_base_dir_from_foldername(start_path: str, foldername: str) -> str | None:
    """Walk up from ``start_path`` to the first directory holding ``foldername``.

    Returns that directory, or None when no ancestor holds it. Raises OSError
    when a directory on the way cannot be read.
    """
    if not start_path:
        start_path = current_directory()
    folders = start_path.split(os.sep)

    for depth in range(len(folders), 2, -1):
        test_path = os.sep.join(folders[:depth])
        with os.scandir(test_path) as entries:
            for entry in entries:
                if entry.is_dir(follow_symlinks=False) and entry.name == foldername:
                    return test_path
    return None