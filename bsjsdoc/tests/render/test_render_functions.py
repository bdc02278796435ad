# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from bsjsdoc.core.span import SourcePosition, SourceRange
from bsjsdoc.render import RenderContext, render_statements
from bsjsdoc.stage0.ast import Param, ValueKind
from bsjsdoc.test_support import comment, func, other, param, param_default


def _ctx(source: str = "", module: str | None = "utils") -> RenderContext:
	return RenderContext(module_name=module, source_lines=source.split("\n"), filename="utils.bs")


def test_documented_function() -> None:
	stmts = [
		comment(1, "' Greets someone.", "' @param {string} name - who"),
		func("greet", 3, [param("name", ValueKind.STRING)], ValueKind.VOID),
	]
	out = render_statements(stmts, _ctx())
	assert out == "\n".join([
		"/**",
		" * Greets someone.",
		" * @param {string} name - who",
		" * @return {void}",
		" * @memberof module:utils",
		" */",
		"function greet(name) { };",
		"",
	])


def test_undocumented_function_still_gets_tags() -> None:
	out = render_statements([func("tick", 1)], _ctx())
	assert out == "/**\n * @return {dynamic}\n * @memberof module:utils\n */\nfunction tick() { };\n"


def test_default_value_is_sliced_from_source() -> None:
	source = 'function greet(name as string, greeting = "hello" + "!")\nend function'
	stmts = [
		func(
			"greet",
			1,
			[
				param("name", ValueKind.STRING),
				param_default(source, 1, "greeting", '"hello" + "!"', ValueKind.STRING),
			],
		),
	]
	out = render_statements(stmts, _ctx(source))
	assert ' * @param {string} [greeting="hello" + "!"]' in out
	assert "function greet(name, greeting) { };" in out


def test_blank_default_slice_keeps_bracketed_name() -> None:
	source = "function f(x = )\nend function"
	blank = SourceRange(SourcePosition(1, 15), SourcePosition(1, 15))
	out = render_statements([func("f", 1, [Param(name="x", default=blank)])], _ctx(source))
	assert " * @param {dynamic} [x]" in out


def test_block_closer_in_comment_text_is_escaped() -> None:
	stmts = [
		comment(1, "' Loads every file matching pkg:/**/*.brs"),
		func("load", 2, [param("root")]),
	]
	out = render_statements(stmts, _ctx())
	assert " * Loads every file matching pkg:/**\\/*.brs" in out
	assert out.count("*/") == 1
	assert out.index("*/") > out.index("@memberof module:utils")


def test_types_stay_out_of_synthetic_signature() -> None:
	stmts = [func("add", 1, [param("a", ValueKind.INTEGER), param("b", ValueKind.FLOAT)], ValueKind.FLOAT)]
	out = render_statements(stmts, _ctx())
	assert "function add(a, b) { };" in out
	assert " * @param {integer} a" in out
	assert " * @param {float} b" in out
	assert " * @return {float}" in out


def test_functions_render_in_source_order() -> None:
	stmts = [func("first", 1), other(3), func("second", 4)]
	out = render_statements(stmts, _ctx())
	assert out.index("function first()") < out.index("function second()")


def test_no_module_means_no_membership() -> None:
	out = render_statements([func("f", 1)], _ctx(module=None))
	assert "@memberof" not in out


def test_unknown_param_tag_is_reported_with_location() -> None:
	ctx = _ctx()
	stmts = [comment(1, "' @param nope - not a param"), func("f", 2)]
	out = render_statements(stmts, ctx)
	assert " * @param nope - not a param" in out
	assert len(ctx.diagnostics) == 1
	diag = ctx.diagnostics[0]
	assert diag.code == "unknown-param-tag"
	assert diag.span.file == "utils.bs"
	assert diag.span.line == 2
	assert diag.notes == ["function f @ 2:0-3:0"]


def test_empty_scopes_render_nothing() -> None:
	assert render_statements([], _ctx()) == ""
	assert render_statements([other(1, 'import "lib.brs"')], _ctx()) == ""
	# Comments alone document nothing.
	assert render_statements([comment(1, "' orphan")], _ctx()) == ""
