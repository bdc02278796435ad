# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Shared builders for tests that need statement trees.

There is no BrightScript parser in this package, so tests spell statement
trees by hand. These helpers keep that readable: ranges are given as line
numbers, comment ranges are derived from the comment text, and defaults are
located by searching the source line for the default expression.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Sequence

from bsjsdoc.core.span import SourcePosition, SourceRange
from bsjsdoc.stage0.ast import (
	Annotation,
	ClassStmt,
	CommentStmt,
	FieldStmt,
	FunctionStmt,
	MethodStmt,
	NamespaceStmt,
	OtherStmt,
	Param,
	Stmt,
	TypeLike,
	Visibility,
)


def lines(start: int, end: Optional[int] = None) -> SourceRange:
	return SourceRange.lines(start, end)


def comment(line: int, *text_lines: str) -> CommentStmt:
	"""A comment starting at `line`, one statement spanning all `text_lines`."""
	return CommentStmt(range=lines(line, line + len(text_lines) - 1), text="\n".join(text_lines))


def param(name: str, type: TypeLike = None) -> Param:
	return Param(name=name, type=type)


def param_default(source: str, line: int, name: str, default_text: str, type: TypeLike = None) -> Param:
	"""A defaulted parameter whose default range points at `default_text` on `line`."""
	src_line = source.split("\n")[line - 1]
	col = src_line.index(default_text, src_line.index(name) + len(name))
	rng = SourceRange(SourcePosition(line, col), SourcePosition(line, col + len(default_text)))
	return Param(name=name, type=type, default=rng)


def annotation(name: str, line: int) -> Annotation:
	return Annotation(name=name, range=lines(line))


def func(
	name: str,
	line: int,
	params: Sequence[Param] = (),
	returns: TypeLike = None,
	*,
	end_line: Optional[int] = None,
	access: Optional[Visibility] = None,
	annotations: Iterable[Annotation] = (),
) -> FunctionStmt:
	return FunctionStmt(
		name=name,
		range=lines(line, end_line if end_line is not None else line + 1),
		params=list(params),
		returns=returns,
		annotations=list(annotations),
		access=access,
	)


def method(
	name: str,
	line: int,
	params: Sequence[Param] = (),
	returns: TypeLike = None,
	*,
	end_line: Optional[int] = None,
	access: Optional[Visibility] = None,
	overrides: bool = False,
	annotations: Iterable[Annotation] = (),
) -> MethodStmt:
	return MethodStmt(
		name=name,
		range=lines(line, end_line if end_line is not None else line + 1),
		params=list(params),
		returns=returns,
		annotations=list(annotations),
		access=access,
		overrides=overrides,
	)


def field(name: str, line: int, type: TypeLike = None, *, access: Optional[Visibility] = None) -> FieldStmt:
	return FieldStmt(name=name, range=lines(line), type=type, access=access)


def klass(
	name: str,
	line: int,
	body: Sequence[Stmt] = (),
	*,
	parent: Optional[str] = None,
	end_line: Optional[int] = None,
) -> ClassStmt:
	return ClassStmt(
		name=name,
		range=lines(line, end_line if end_line is not None else line + 1),
		body=list(body),
		parent_name=parent,
	)


def namespace(name: str, line: int, body: Sequence[Stmt] = (), *, end_line: Optional[int] = None) -> NamespaceStmt:
	return NamespaceStmt(
		name=name,
		range=lines(line, end_line if end_line is not None else line + 1),
		body=list(body),
	)


def other(line: int, text: str = "") -> OtherStmt:
	return OtherStmt(range=lines(line), text=text)


def fixed_parser(statements: Sequence[Stmt]) -> Callable[[str], List[Stmt]]:
	"""A parse() stand-in that returns `statements` whatever the source."""

	def parse(_source: str) -> List[Stmt]:
		return list(statements)

	return parse


__all__ = [
	"lines",
	"comment",
	"param",
	"param_default",
	"annotation",
	"func",
	"method",
	"field",
	"klass",
	"namespace",
	"other",
	"fixed_parser",
]
