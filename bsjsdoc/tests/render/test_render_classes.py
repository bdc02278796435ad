# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from bsjsdoc.render import RenderContext, render_statements
from bsjsdoc.stage0.ast import TypeRef, ValueKind, Visibility
from bsjsdoc.test_support import comment, field, klass, method, namespace, param


def _ctx(module: str = "game") -> RenderContext:
	return RenderContext(module_name=module, filename="game.bs")


def test_constructor_method_uses_constructor_spelling() -> None:
	stmts = [klass("Player", 1, [method("new", 2)], end_line=4)]
	out = render_statements(stmts, _ctx())
	assert out == "\n".join([
		"/**",
		" * @memberof module:game",
		" */",
		"class Player {",
		"",
		"/**",
		" * @return {dynamic}",
		" * @constructor",
		" */",
		"constructor() { };",
		"",
		"}",
		"",
	])
	assert "new() { };" not in out


def test_class_with_fields_methods_and_parent() -> None:
	stmts = [
		comment(1, "' A playable character", "' @extends Sprite"),
		klass(
			"Hero",
			3,
			[
				comment(4, "' display name"),
				field("name", 5, ValueKind.STRING),
				field("_hp", 6, ValueKind.INTEGER),
				field("inventory", 7, TypeRef("Bag"), access=Visibility.PRIVATE),
				comment(9, "' Moves the hero.", "' @param {float} dx - horizontal step"),
				method("move", 11, [param("dx", ValueKind.FLOAT)], overrides=True),
				method("_heal", 14, [param("amount", ValueKind.INTEGER)], ValueKind.BOOLEAN),
			],
			parent="Character",
			end_line=17,
		),
	]
	out = render_statements(stmts, _ctx())
	assert out.count("@extends") == 1
	assert " * @extends Character" in out
	assert "Sprite" not in out
	assert " * @property {string} name - display name" in out
	assert "_hp" not in out
	assert "inventory" not in out
	assert "class Hero extends Character {" in out
	assert " * @param {float} dx - horizontal step\n * @return {dynamic}\n * @override\n */\nmove(dx) { };" in out
	assert " * @access private\n * @return {boolean}\n */\n_heal(amount) { };" in out
	# Methods are scoped by the class body, not by module membership.
	assert out.count("@memberof") == 1


def test_class_in_namespace_is_assigned_to_namespace() -> None:
	stmts = [namespace("UI", 1, [klass("Button", 2, parent="UI.Control")], end_line=4)]
	out = render_statements(stmts, _ctx())
	assert "class Button extends UI.Control {" in out
	assert " * @extends UI.Control\n * @memberof module:UI\n */" in out
	assert out.endswith("}\n\nUI.Button = Button;")
