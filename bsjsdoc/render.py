# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Declaration renderer: statement scopes → doc blocks + synthetic JS.

For every declaration in a scope the renderer locates its comment, builds
its facts, reconciles its tags and emits the block followed by a synthetic
declaration the documentation generator can parse:

  function name(a, b) { };        free function
  name(a, b) { };                 method (inside `class X { ... }`)
  constructor(a) { };             method named like the constructor
  var Ns = {};  /  Ns.Sub = {};   namespace containers
  Ns.name = name;                 namespace membership assignment

Nested scopes are handled by recursion: namespace bodies go back through
`render_statements`, class bodies render their methods. The per-file state
(created namespace containers, diagnostics) lives on `RenderContext`, which
must be created fresh for each file.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Set

from bsjsdoc.classify import classify
from bsjsdoc.core.diagnostics import Diagnostic
from bsjsdoc.core.span import Span
from bsjsdoc.facts import NamespaceFact, callable_facts, class_facts, namespace_header
from bsjsdoc.locate import find_comment
from bsjsdoc.options import DEFAULT_OPTIONS, ConvertOptions
from bsjsdoc.stage0.ast import (
	ClassStmt,
	CommentStmt,
	FunctionStmt,
	NamespaceStmt,
	Stmt,
	StmtKind,
	describe_statement,
)
from bsjsdoc.tags.normalize import is_doc_block, normalize_comment
from bsjsdoc.tags.reconcile import reconcile_callable, reconcile_class, reconcile_namespace
from bsjsdoc.tags.tagset import TagKind, TagSet


@dataclass
class RenderContext:
	"""Per-file render state. Never reuse across files."""

	module_name: Optional[str]
	source_lines: Sequence[str] = ()
	options: ConvertOptions = DEFAULT_OPTIONS
	filename: Optional[str] = None
	namespaces_created: Set[str] = field(default_factory=set)
	diagnostics: List[Diagnostic] = field(default_factory=list)

	def span(self, stmt: Stmt) -> Span:
		return Span.from_range(stmt.range, self.filename)


def render_function(
	stmt: FunctionStmt,
	comment: Optional[CommentStmt],
	ctx: RenderContext,
	namespace: Optional[str] = None,
	*,
	in_class: bool = False,
) -> str:
	fact = callable_facts(stmt, ctx.source_lines, ctx.options)
	tags = reconcile_callable(
		fact,
		normalize_comment(comment, ctx.options),
		# Methods are scoped by their class body.
		module_name=None if in_class else ctx.module_name,
		namespace_name=None if in_class else namespace,
		options=ctx.options,
		diagnostics=ctx.diagnostics,
		span=ctx.span(stmt),
		subject=describe_statement(stmt),
	)
	params = ", ".join(p.name for p in fact.parameters)
	if stmt.kind is StmtKind.METHOD:
		name = ctx.options.constructor_spelling if TagKind.CONSTRUCTOR in tags else fact.name
		declaration = f"{name}({params}) {{ }};\n"
	else:
		declaration = f"function {fact.name}({params}) {{ }};\n"

	output = [tags.render(), declaration]
	if namespace and not in_class:
		output.append(f"{namespace}.{fact.name} = {fact.name};")
	return "\n".join(output)


def render_class(
	stmt: ClassStmt,
	comment: Optional[CommentStmt],
	ctx: RenderContext,
	namespace: Optional[str] = None,
) -> str:
	fact = class_facts(stmt, ctx.source_lines, ctx.options)
	tags = reconcile_class(
		fact,
		normalize_comment(comment, ctx.options),
		module_name=ctx.module_name,
		namespace_name=namespace,
		options=ctx.options,
	)
	output = [tags.render()]
	if fact.parent_type_name:
		output.append(f"class {fact.name} extends {fact.parent_type_name} {{\n")
	else:
		output.append(f"class {fact.name} {{\n")

	body_comments = classify(stmt.body).comments
	for method in stmt.methods:
		output.append(render_function(method, find_comment(body_comments, method), ctx, in_class=True))

	output.append("}\n")
	if namespace:
		output.append(f"{namespace}.{fact.name} = {fact.name};")
	return "\n".join(output)


def _container_declaration(fact: NamespaceFact) -> str:
	if fact.parent_name:
		leaf = fact.qualified_name[len(fact.parent_name) + 1 :]
		return f"{fact.parent_name}.{leaf} = {{}};"
	return f"var {fact.qualified_name} = {{}};"


def render_namespace(
	stmt: NamespaceStmt,
	comment: Optional[CommentStmt],
	ctx: RenderContext,
	parent: Optional[str] = None,
) -> str:
	# Members render through their own scope below.
	fact = namespace_header(stmt, parent)
	qualified = fact.qualified_name
	output: List[str] = []

	# `namespace A.B.C` needs `A` and `A.B` to exist before `A.B.C`.
	segments = qualified.split(".")
	for idx in range(1, len(segments) + 1):
		prefix = ".".join(segments[:idx])
		if prefix in ctx.namespaces_created:
			continue
		if prefix == qualified:
			container, lines = fact, normalize_comment(comment, ctx.options)
		else:
			container = NamespaceFact(
				name=segments[idx - 1],
				qualified_name=prefix,
				parent_name=".".join(segments[: idx - 1]) or None,
			)
			lines = []
		tags = reconcile_namespace(container, lines, module_name=ctx.module_name)
		output.append(tags.render())
		output.append(_container_declaration(container))
		ctx.namespaces_created.add(prefix)

	body = render_statements(stmt.body, ctx, qualified)
	if body:
		output.append(body)
	return "\n".join(output)


def render_detached_comment(comment: CommentStmt, ctx: RenderContext) -> str:
	tags = TagSet()
	tags.extend(TagKind.TEXT, normalize_comment(comment, ctx.options))
	return tags.freeze().render()


def render_statements(
	statements: Sequence[Stmt],
	ctx: RenderContext,
	namespace: Optional[str] = None,
) -> str:
	"""Render one scope. Scopes with nothing to document render to ''."""
	code = classify(statements)
	if code.is_empty():
		return ""

	items: List[tuple] = []
	claimed: Set[int] = set()
	for decl in code.declarations():
		comment = find_comment(code.comments, decl)
		if comment is not None:
			claimed.add(id(comment))
		items.append((decl.range.start, decl, comment))
	if ctx.options.keep_detached_comments:
		for comment in code.comments:
			if id(comment) not in claimed and is_doc_block(comment, ctx.options):
				items.append((comment.range.start, comment, None))
		items.sort(key=lambda item: item[0])

	output: List[str] = []
	for _start, stmt, comment in items:
		kind = stmt.kind
		if kind is StmtKind.FUNCTION or kind is StmtKind.METHOD:
			piece = render_function(stmt, comment, ctx, namespace)
		elif kind is StmtKind.CLASS:
			piece = render_class(stmt, comment, ctx, namespace)
		elif kind is StmtKind.NAMESPACE:
			piece = render_namespace(stmt, comment, ctx, namespace)
		elif kind is StmtKind.COMMENT:
			piece = render_detached_comment(stmt, ctx)
		else:
			raise AssertionError(f"unhandled statement kind {kind!r}")
		# A namespace reopened with an empty body contributes nothing.
		if piece:
			output.append(piece)
	return "\n".join(output)


__all__ = [
	"RenderContext",
	"render_function",
	"render_class",
	"render_namespace",
	"render_detached_comment",
	"render_statements",
]
