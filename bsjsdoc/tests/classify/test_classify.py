# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from bsjsdoc.classify import classify
from bsjsdoc.test_support import comment, field, func, klass, method, namespace, other


def test_groups_preserve_relative_order() -> None:
	c1 = comment(1, "' one")
	f1 = func("a", 2)
	k1 = klass("K", 4)
	c2 = comment(6, "' two")
	n1 = namespace("N", 7)
	f2 = func("b", 9)
	code = classify([c1, f1, k1, c2, n1, f2])
	assert code.comments == [c1, c2]
	assert code.functions == [f1, f2]
	assert code.classes == [k1]
	assert code.namespaces == [n1]


def test_other_statements_and_fields_are_dropped() -> None:
	code = classify([other(1, "import \"x.brs\""), field("f", 2)])
	assert code.is_empty()


def test_methods_count_as_functions() -> None:
	m = method("run", 3)
	assert classify([m]).functions == [m]


def test_declarations_come_back_in_source_order() -> None:
	n1 = namespace("N", 1, end_line=3)
	f1 = func("a", 5)
	k1 = klass("K", 8)
	f2 = func("b", 12)
	code = classify([n1, f1, k1, f2])
	assert code.declarations() == [n1, f1, k1, f2]


def test_empty_input() -> None:
	code = classify([])
	assert code.is_empty()
	assert code.declarations() == []
