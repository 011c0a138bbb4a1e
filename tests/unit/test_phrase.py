"""Tests for phrase parsing and name validation."""

import pytest

from torrow_mcp.core.phrase import parse_phrase, validate_name
from torrow_mcp.errors import EmptyInputError, EmptyNameError, InvalidNameError


@pytest.mark.parametrize("phrase", ["Recipes", "  Shopping list  ", "Купить хлеб"])
def test_phrase_without_dot_or_tag_is_all_name(phrase: str) -> None:
    parsed = parse_phrase(phrase)
    assert parsed.name == phrase.strip()
    assert parsed.text is None
    assert parsed.tags == ()


def test_name_text_and_tag() -> None:
    parsed = parse_phrase("Recipes. Dishes and how to cook them. #Food")
    assert parsed.name == "Recipes"
    assert parsed.text == "Dishes and how to cook them."
    assert parsed.tags == ("Food",)


def test_compact_name_text_tag() -> None:
    parsed = parse_phrase("Pasta.Boil 10 min.#Food")
    assert parsed.name == "Pasta"
    assert parsed.text == "Boil 10 min."
    assert parsed.tags == ("Food",)


def test_tags_keep_order_and_duplicates() -> None:
    parsed = parse_phrase("Note #b #a #b")
    assert parsed.tags == ("b", "a", "b")


def test_tags_removed_from_middle_of_sentence() -> None:
    parsed = parse_phrase("Trip #travel plan. Pack #gear the bags")
    assert parsed.name == "Trip  plan"
    assert parsed.text == "Pack  the bags"
    assert parsed.tags == ("travel", "gear")


def test_only_first_dot_splits() -> None:
    parsed = parse_phrase("Version. Use 1.2.3 or v2.0...")
    assert parsed.name == "Version"
    assert parsed.text == "Use 1.2.3 or v2.0..."


def test_dot_with_nothing_after_gives_empty_text() -> None:
    parsed = parse_phrase("Title. #tag")
    assert parsed.name == "Title"
    assert parsed.text == ""
    assert parsed.tags == ("tag",)


@pytest.mark.parametrize("phrase", ["", "   ", "\n\t"])
def test_blank_phrase_is_rejected(phrase: str) -> None:
    with pytest.raises(EmptyInputError):
        parse_phrase(phrase)


def test_missing_name_before_dot_is_rejected() -> None:
    with pytest.raises(EmptyNameError):
        parse_phrase(".only text")


def test_tags_only_phrase_has_no_name() -> None:
    with pytest.raises(EmptyNameError):
        parse_phrase("#just #tags")


def test_empty_name_error_is_an_invalid_name_error() -> None:
    with pytest.raises(InvalidNameError):
        parse_phrase(". text")


def test_validate_name_accepts_100_code_points() -> None:
    validate_name("я" * 100)


def test_validate_name_rejects_101_code_points() -> None:
    with pytest.raises(InvalidNameError, match="100"):
        validate_name("a" * 101)


@pytest.mark.parametrize("name", ["", "   ", None])
def test_validate_name_rejects_blank(name: str | None) -> None:
    with pytest.raises(InvalidNameError):
        validate_name(name)
