# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from bsjsdoc.locate import effective_start_line, find_comment
from bsjsdoc.test_support import annotation, comment, func


def test_comment_on_previous_line_documents_declaration() -> None:
	doc = comment(1, "' adds", "' @param a")
	fn = func("add", 3)
	assert find_comment([doc], fn) is doc


def test_blank_line_breaks_association() -> None:
	doc = comment(1, "' adds")
	fn = func("add", 3)
	assert find_comment([doc], fn) is None


def test_annotations_move_the_effective_start() -> None:
	doc = comment(1, "' handler")
	fn = func("onKey", 4, annotations=[annotation("deprecated", 2), annotation("inline", 3)])
	assert effective_start_line(fn) == 2
	assert find_comment([doc], fn) is doc


def test_comment_above_declaration_but_below_annotation_does_not_match() -> None:
	doc = comment(3, "' not it")
	fn = func("onKey", 5, annotations=[annotation("deprecated", 2)])
	assert find_comment([doc], fn) is None


def test_trailing_comment_on_same_line() -> None:
	doc = comment(5, "' quick helper")
	fn = func("helper", 5)
	assert find_comment([doc], fn) is doc


def test_first_matching_comment_wins() -> None:
	above = comment(3, "' above")
	trailing = comment(4, "' trailing")
	fn = func("f", 4)
	assert find_comment([above, trailing], fn) is above
	assert find_comment([trailing, above], fn) is trailing


def test_no_comments() -> None:
	assert find_comment([], func("f", 1)) is None
