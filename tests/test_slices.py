import pytest

from modelhelper import slices

NAMES = ["Ola", "Kari", "Hubert", "Mike", "ruPerT"]


@pytest.mark.parametrize(
    "name, found",
    [("ola", True), ("karin", False), ("", False), ("ruppert", False), ("RUPERT", True)],
)
def test_contains(name, found):
    assert slices.contains(NAMES, name) is found


@pytest.mark.parametrize(
    "expected, items",
    [
        (13, ["one", "two", "three", "max-len-is-13"]),
        (3, ["one", "two"]),
        (0, []),
    ],
)
def test_max_len(expected, items):
    assert slices.max_len(items) == expected