"""Unit tests for newline normalization and token splitting."""

from __future__ import annotations

from stringcalc.models.expression import ParsedExpression
from stringcalc.parsing.tokenizer import normalize_newlines, tokenize


def test_normalize_newlines_to_separator():
    assert normalize_newlines("1\n2,3", ",") == "1,2,3"


def test_normalize_newlines_to_long_separator():
    assert normalize_newlines("1\n2", "sep") == "1sep2"


def test_tokenize_on_comma_and_newline():
    parsed = ParsedExpression(separator=",", body="2,2,1\n3,6,6\n3,4")
    assert tokenize(parsed) == ["2", "2", "1", "3", "6", "6", "3", "4"]


def test_tokenize_keeps_empty_tokens():
    parsed = ParsedExpression(separator=",", body="1,,2\n")
    assert tokenize(parsed) == ["1", "", "2", ""]


def test_tokenize_multi_character_separator():
    parsed = ParsedExpression(separator="sep", body="3sep5sep2", declared=True)
    assert tokenize(parsed) == ["3", "5", "2"]


def test_tokenize_without_separator_yields_single_token():
    parsed = ParsedExpression(separator=",", body="42")
    assert tokenize(parsed) == ["42"]


def test_comma_is_plain_text_under_custom_separator():
    parsed = ParsedExpression(separator=";", body="1,2;3", declared=True)
    assert tokenize(parsed) == ["1,2", "3"]
