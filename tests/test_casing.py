import pytest

from modelhelper import casing

VARIANTS = [
    "ThisIsTheCase",
    "thisIsTheCase",
    "this-is-the-case",
    "this_is_the_case",
    "this is the case",
]


@pytest.mark.parametrize("text", VARIANTS)
def test_train_case(text):
    assert casing.train_case(text) == "This_Is_The_Case"


@pytest.mark.parametrize("text", VARIANTS)
def test_kebab_case(text):
    assert casing.kebab_case(text) == "this-is-the-case"


@pytest.mark.parametrize("text", VARIANTS)
def test_pascal_case(text):
    assert casing.pascal_case(text) == "ThisIsTheCase"


@pytest.mark.parametrize("text", VARIANTS)
def test_camel_case(text):
    assert casing.camel_case(text) == "thisIsTheCase"


@pytest.mark.parametrize("text", VARIANTS)
def test_snake_case(text):
    assert casing.snake_case(text) == "this_is_the_case"


@pytest.mark.parametrize("text", VARIANTS)
def test_dot_case(text):
    assert casing.dot_case(text) == "This.Is.The.Case"


@pytest.mark.parametrize(
    "text",
    [
        "ThisIsTheCase",
        "thisIsTheCase",
        "This Is The Case",
        "this is the case",
        "this-is-the-case",
        "this_is_the_case",
    ],
)
def test_sentence(text):
    assert casing.as_sentence(text) == "This is the case"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("ThisIsTheCase", "This Is The Case"),
        ("This is the case", "This Is The Case"),
        ("This-is-the-case", "This Is The Case"),
        ("TitleOfManAndMice", "Title Of Man And Mice"),
    ],
)
def test_title_case(text, expected):
    assert casing.title_case(text) == expected


@pytest.mark.parametrize(
    "text", ["ThisIsTheCase", "This is the case", "This-is-the-case"]
)
def test_capital(text):
    assert casing.capital(text) == "This Is The Case"


def test_macro_case():
    assert casing.macro_case("ThisIsTheCase") == "THIS_IS_THE_CASE"


@pytest.mark.parametrize(
    "word, expected",
    [
        ("PascalAPIController", ["Pascal", "API", "Controller"]),
        ("PascalHTTPControllerAPI", ["Pascal", "HTTP", "Controller", "API"]),
        ("PascalCase", ["Pascal", "Case"]),
        ("API", ["API"]),
    ],
)
def test_split_on_casing(word, expected):
    assert casing.split_on_casing(word) == expected


@pytest.mark.parametrize(
    "word, expected",
    [
        ("PascalCase", ["PascalCase"]),
        ("camelCase", ["camelCase"]),
        ("Kebab-case", ["Kebab", "case"]),
        ("snake_case", ["snake", "case"]),
        ("space_case", ["space", "case"]),
    ],
)
def test_split_on_splitter(word, expected):
    assert casing.split_on_splitter(word) == expected


@pytest.mark.parametrize(
    "word, expected",
    [
        ("PascalCase", ["Pascal", "Case"]),
        ("camelCase", ["camel", "Case"]),
        ("Kebab-case", ["Kebab", "case"]),
        ("snake_case", ["snake", "case"]),
        ("space_case", ["space", "case"]),
        ("PascalAPIController", ["Pascal", "API", "Controller"]),
        ("PascalHTTPControllerAPI", ["Pascal", "HTTP", "Controller", "API"]),
        ("API", ["API"]),
    ],
)
def test_as_word_array(word, expected):
    assert casing.as_word_array(word) == expected


def test_split_on_splitter_drops_empty_parts():
    assert casing.split_on_splitter("__a--b  c_") == ["a", "b", "c"]


def test_is_splitter():
    assert [casing.is_splitter(c) for c in " _-a."] == [True, True, True, False, False]


def test_as_words():
    assert casing.as_words("PascalAPIController") == "Pascal API Controller"


def test_upper_and_lower():
    assert casing.upper_case("MixedCase") == "MIXEDCASE"
    assert casing.lower_case("MixedCase") == "mixedcase"


def test_camel_case_lowers_leading_acronym():
    assert casing.camel_case("APIController") == "apiController"


def test_add_word():
    assert casing.add_word("Id", "Customer") == "CustomerId"
    assert casing.add_word("", "Customer") == "Customer"


def test_abbreviate():
    assert casing.abbreviate("OrderLine") == "ol"
    assert casing.abbreviate("customerOrderLine") == "col"


def test_get_stat():
    assert casing.get_stat(b"hello world\nsecond line\n") == (24, 2, 4)


def test_get_lines_without_trailing_newline():
    assert casing.get_lines("one\ntwo") == 2
    assert casing.get_lines("") == 0


def test_get_words():
    assert casing.get_words("  a  b\tc\n") == 3


@pytest.mark.parametrize("word", ["data", "Data", "DATA"])
def test_data_is_kept(word):
    assert casing.plural_form(word) == word
    assert casing.singular_form(word) == word


@pytest.mark.parametrize(
    "single, plural",
    [
        ("Customer", "Customers"),
        ("category", "categories"),
        ("person", "people"),
        ("Address", "Addresses"),
        ("OrderLine", "OrderLines"),
    ],
)
def test_plural_and_singular(single, plural):
    assert casing.plural_form(single) == plural
    assert casing.singular_form(plural) == single


def test_plural_of_plural_is_unchanged():
    assert casing.plural_form("people") == "people"
    assert casing.plural_form("Customers") == "Customers"