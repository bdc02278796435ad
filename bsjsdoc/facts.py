# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Structural facts recovered from declarations.

The reconciler never looks at statements directly: it sees these facts,
which carry only what the doc tags need (resolved type names, exact default
slices, visibility). Fact variants form a closed set mirroring the
declaration statements.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Sequence, Tuple, Union

from bsjsdoc.classify import classify
from bsjsdoc.locate import find_comment
from bsjsdoc.options import DEFAULT_OPTIONS, ConvertOptions
from bsjsdoc.stage0.ast import (
	ClassStmt,
	CommentStmt,
	FieldStmt,
	FunctionStmt,
	NamespaceStmt,
	Param,
	StmtKind,
	Visibility,
)
from bsjsdoc.stage0.types import type_name
from bsjsdoc.tags.normalize import normalize_comment


@dataclass(frozen=True)
class ParameterFact:
	name: str
	declared_type: str
	# Present whenever the parameter has a default, even if the slice is empty.
	default_source: Optional[str] = None


@dataclass(frozen=True)
class FunctionFact:
	name: str
	visibility: Visibility = Visibility.PUBLIC
	parameters: Tuple[ParameterFact, ...] = ()
	return_type: str = "dynamic"


@dataclass(frozen=True)
class MethodFact(FunctionFact):
	overrides: bool = False


@dataclass(frozen=True)
class FieldFact:
	name: str
	visibility: Visibility = Visibility.PUBLIC
	type_name: str = "dynamic"
	description: str = ""


@dataclass(frozen=True)
class ClassFact:
	name: str
	visibility: Visibility = Visibility.PUBLIC
	parent_type_name: Optional[str] = None
	# Fields first, then methods, each in declaration order.
	members: Tuple[Union[FieldFact, MethodFact], ...] = ()

	@property
	def fields(self) -> Tuple[FieldFact, ...]:
		return tuple(m for m in self.members if isinstance(m, FieldFact))

	@property
	def methods(self) -> Tuple[MethodFact, ...]:
		return tuple(m for m in self.members if isinstance(m, MethodFact))


@dataclass(frozen=True)
class NamespaceFact:
	# Name as declared (may be dotted).
	name: str
	qualified_name: str
	parent_name: Optional[str] = None
	members: Tuple["DeclarationFact", ...] = ()


DeclarationFact = Union[FunctionFact, MethodFact, FieldFact, ClassFact, NamespaceFact]


def _visibility(access: Optional[Visibility]) -> Visibility:
	# Protected members are documented like public ones.
	return Visibility.PRIVATE if access is Visibility.PRIVATE else Visibility.PUBLIC


def parameter_fact(param: Param, source_lines: Sequence[str], options: ConvertOptions = DEFAULT_OPTIONS) -> ParameterFact:
	default_source: Optional[str] = None
	if param.default is not None:
		default_source = param.default.slice(source_lines).strip()
	return ParameterFact(
		name=param.name,
		declared_type=type_name(param.type, options.untyped),
		default_source=default_source,
	)


def callable_facts(
	stmt: FunctionStmt,
	source_lines: Sequence[str],
	options: ConvertOptions = DEFAULT_OPTIONS,
) -> FunctionFact:
	params = tuple(parameter_fact(p, source_lines, options) for p in stmt.params)
	common = dict(
		name=stmt.name,
		visibility=_visibility(stmt.access),
		parameters=params,
		return_type=type_name(stmt.returns, options.untyped),
	)
	if stmt.kind is StmtKind.METHOD:
		return MethodFact(overrides=bool(getattr(stmt, "overrides", False)), **common)
	return FunctionFact(**common)


def field_facts(
	stmt: FieldStmt,
	comment: Optional[CommentStmt],
	options: ConvertOptions = DEFAULT_OPTIONS,
) -> FieldFact:
	description = " ".join(line for line in normalize_comment(comment, options) if line)
	return FieldFact(
		name=stmt.name,
		visibility=_visibility(stmt.access),
		type_name=type_name(stmt.type, options.untyped),
		description=description,
	)


def class_facts(
	stmt: ClassStmt,
	source_lines: Sequence[str],
	options: ConvertOptions = DEFAULT_OPTIONS,
) -> ClassFact:
	comments = classify(stmt.body).comments
	members: list[Union[FieldFact, MethodFact]] = []
	for fld in stmt.fields:
		members.append(field_facts(fld, find_comment(comments, fld), options))
	for method in stmt.methods:
		members.append(callable_facts(method, source_lines, options))  # type: ignore[arg-type]
	parent = stmt.parent_name.strip() if stmt.parent_name else None
	return ClassFact(
		name=stmt.name,
		visibility=Visibility.PUBLIC,
		parent_type_name=parent or None,
		members=tuple(members),
	)


def qualify(parent: Optional[str], name: str) -> str:
	return f"{parent}.{name}" if parent else name


def namespace_header(stmt: NamespaceStmt, parent: Optional[str]) -> NamespaceFact:
	"""Name and nesting of a namespace, without walking its body."""
	qualified = qualify(parent, stmt.name)
	return NamespaceFact(
		name=stmt.name,
		qualified_name=qualified,
		parent_name=qualified.rpartition(".")[0] or None,
	)


def namespace_facts(
	stmt: NamespaceStmt,
	parent: Optional[str],
	source_lines: Sequence[str],
	options: ConvertOptions = DEFAULT_OPTIONS,
) -> NamespaceFact:
	header = namespace_header(stmt, parent)
	qualified = header.qualified_name
	body = classify(stmt.body)
	members: list[DeclarationFact] = []
	for decl in body.declarations():
		if decl.kind is StmtKind.CLASS:
			members.append(class_facts(decl, source_lines, options))  # type: ignore[arg-type]
		elif decl.kind is StmtKind.NAMESPACE:
			members.append(namespace_facts(decl, qualified, source_lines, options))  # type: ignore[arg-type]
		else:
			members.append(callable_facts(decl, source_lines, options))  # type: ignore[arg-type]
	return replace(header, members=tuple(members))


__all__ = [
	"ParameterFact",
	"FunctionFact",
	"MethodFact",
	"FieldFact",
	"ClassFact",
	"NamespaceFact",
	"DeclarationFact",
	"parameter_fact",
	"callable_facts",
	"field_facts",
	"class_facts",
	"namespace_header",
	"namespace_facts",
	"qualify",
]
