# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import pytest

from bsjsdoc.tags.grammar import format_description, parse_tag_line
from bsjsdoc.tags.tagset import TagKind


@pytest.mark.parametrize("line", ["just text", "", "@example foo()", "@module utils", "email me @param"])
def test_unrecognized_lines_are_passthrough(line: str) -> None:
	assert parse_tag_line(line) is None


def test_param_with_type_and_dash_description() -> None:
	tag = parse_tag_line("@param {integer} x - the first number")
	assert tag is not None
	assert tag.kind is TagKind.PARAM
	assert (tag.type_text, tag.name, tag.optional) == ("integer", "x", False)
	assert tag.description == "- the first number"


def test_param_without_type() -> None:
	tag = parse_tag_line("@param name who to greet")
	assert tag is not None
	assert tag.type_text is None
	assert tag.name == "name"
	assert tag.description == "who to greet"


def test_nested_braces_in_type() -> None:
	tag = parse_tag_line("@param {Object<string, {a: int}>} opts - options")
	assert tag is not None
	assert tag.type_text == "Object<string, {a: int}>"
	assert tag.name == "opts"


def test_bracketed_optional_name_with_default() -> None:
	tag = parse_tag_line("@param {object} [opts={}] - settings")
	assert tag is not None
	assert tag.optional
	assert (tag.name, tag.default) == ("opts", "{}")
	assert tag.description == "- settings"


def test_bracketed_optional_name_without_default() -> None:
	tag = parse_tag_line("@param [count] how many")
	assert tag is not None
	assert (tag.name, tag.default, tag.optional) == ("count", None, True)


def test_unbalanced_type_clause_ends_at_whitespace() -> None:
	tag = parse_tag_line("@param {integer x - first")
	assert tag is not None
	assert tag.kind is TagKind.PARAM
	assert (tag.type_text, tag.name, tag.malformed) == ("integer", "x", True)
	assert tag.description == "- first"

	ret = parse_tag_line("@return {Object the thing")
	assert ret is not None
	assert ret.kind is TagKind.RETURN
	assert (ret.type_text, ret.description, ret.malformed) == ("Object", "the thing", True)


def test_unbalanced_bracket_clause_ends_at_whitespace() -> None:
	tag = parse_tag_line("@param [x=1 the count")
	assert tag is not None
	assert (tag.name, tag.default, tag.optional, tag.malformed) == ("x", "1", True, True)
	assert tag.description == "the count"


def test_param_without_name_stays_a_tag() -> None:
	tag = parse_tag_line("@param {int}")
	assert tag is not None
	assert tag.kind is TagKind.PARAM
	assert (tag.type_text, tag.name, tag.malformed) == ("int", None, True)


def test_well_formed_lines_are_not_malformed() -> None:
	assert not parse_tag_line("@param {int} x").malformed  # type: ignore[union-attr]
	assert not parse_tag_line("@return").malformed  # type: ignore[union-attr]


def test_tag_word_aliases() -> None:
	assert parse_tag_line("@ARG x").kind is TagKind.PARAM  # type: ignore[union-attr]
	assert parse_tag_line("@argument x").kind is TagKind.PARAM  # type: ignore[union-attr]
	assert parse_tag_line("@returns").kind is TagKind.RETURN  # type: ignore[union-attr]


def test_return_with_type_and_text() -> None:
	tag = parse_tag_line("@returns {string} the name")
	assert tag is not None
	assert tag.kind is TagKind.RETURN
	assert tag.type_text == "string"
	assert tag.description == "the name"


def test_extends_name_forms() -> None:
	assert parse_tag_line("@extends Base").name == "Base"  # type: ignore[union-attr]
	assert parse_tag_line("@augments {Base}").name == "Base"  # type: ignore[union-attr]


def test_name_match_is_case_insensitive() -> None:
	tag = parse_tag_line("@param NAME")
	assert tag is not None
	assert tag.names("name")
	assert not tag.names("names")


@pytest.mark.parametrize(
	"raw, expected",
	[
		("", ""),
		("   ", ""),
		("- already dashed", "- already dashed"),
		("-tight", "-tight"),
		(", after a comma", "- after a comma"),
		(",", ""),
		("plain words", "- plain words"),
	],
)
def test_format_description(raw: str, expected: str) -> None:
	assert format_description(raw) == expected
