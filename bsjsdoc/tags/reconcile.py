# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Tag reconciler: merges author-written comment tags with structural facts.

Each reconcile_* call starts from the normalized comment body and a fact
record and returns a fresh, frozen TagSet:

  1. Every comment line is parsed once into a pool entry (tag or passthrough).
  2. Structural items (parameters, return, parent class) claim matching pool
     entries; a claimed entry is consumed and never reused.
  3. Whatever is left in the pool is passthrough text, emitted first and in
     its original order, followed by the synthesized tags.

Mismatches are never fatal. A `@param` naming no parameter stays in the
pool; duplicates that would break the one-tag-per-parameter and
one-return-tag rules are dropped, and so is a `@param` whose name could not
be recovered. Each case leaves a warning diagnostic when a sink is given.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from bsjsdoc.core.diagnostics import Diagnostic
from bsjsdoc.core.span import Span
from bsjsdoc.facts import ClassFact, FieldFact, FunctionFact, MethodFact, NamespaceFact, ParameterFact
from bsjsdoc.options import DEFAULT_OPTIONS, ConvertOptions
from bsjsdoc.stage0.ast import Visibility

from .grammar import TagLine, format_description, parse_tag_line
from .tagset import TagKind, TagSet

_PHASE = "reconcile"


@dataclass
class _PoolEntry:
	line: str
	tag: Optional[TagLine]
	consumed: bool = False


class _Pool:
	"""Normalized comment lines, partitioned into consumed and passthrough."""

	def __init__(self, lines: Sequence[str]) -> None:
		self.entries = [_PoolEntry(line, parse_tag_line(line)) for line in lines]

	def take(self, kind: TagKind, name: Optional[str] = None) -> Optional[TagLine]:
		for entry in self.entries:
			if entry.consumed or entry.tag is None or entry.tag.kind is not kind:
				continue
			if name is not None and not entry.tag.names(name):
				continue
			entry.consumed = True
			return entry.tag
		return None

	def remaining(self, kind: TagKind) -> List[_PoolEntry]:
		return [e for e in self.entries if not e.consumed and e.tag is not None and e.tag.kind is kind]

	def passthrough(self) -> List[str]:
		return [e.line for e in self.entries if not e.consumed]


def _warn(
	diagnostics: Optional[List[Diagnostic]],
	message: str,
	code: str,
	span: Optional[Span],
	subject: Optional[str] = None,
) -> None:
	if diagnostics is None:
		return
	notes = [subject] if subject else []
	diagnostics.append(Diagnostic(message=message, code=code, phase=_PHASE, span=span or Span(), notes=notes))


def member_of(module_name: Optional[str], namespace_name: Optional[str]) -> Optional[str]:
	"""Membership tag for the innermost scope, or None at no scope at all."""
	if namespace_name:
		return f"@memberof module:{namespace_name}"
	if module_name:
		return f"@memberof module:{module_name}"
	return None


def is_private(name: str, visibility: Visibility, options: ConvertOptions = DEFAULT_OPTIONS) -> bool:
	return options.is_private_name(name) or visibility is Visibility.PRIVATE


def _with_description(head: str, description: str) -> str:
	desc = format_description(description)
	return f"{head} {desc}" if desc else head


def param_line(param: ParameterFact, tag: Optional[TagLine]) -> str:
	ptype = param.declared_type
	description = ""
	if tag is not None:
		if tag.type_text:
			ptype = tag.type_text
		description = tag.description
	if param.default_source:
		shown = f"[{param.name}={param.default_source}]"
	elif param.default_source is not None:
		shown = f"[{param.name}]"
	else:
		shown = param.name
	return _with_description(f"@param {{{ptype}}} {shown}", description)


def return_line(structural_type: str, tag: Optional[TagLine]) -> str:
	if tag is None:
		return f"@return {{{structural_type}}}"
	# A case-insensitive match keeps the author's spelling (`Integer` vs
	# `integer`); a mismatch still prefers what the author wrote.
	rtype = tag.type_text if tag.type_text else structural_type
	return _with_description(f"@return {{{rtype}}}", tag.description)


def reconcile_callable(
	fact: FunctionFact,
	comment_lines: Sequence[str],
	*,
	module_name: Optional[str] = None,
	namespace_name: Optional[str] = None,
	options: ConvertOptions = DEFAULT_OPTIONS,
	diagnostics: Optional[List[Diagnostic]] = None,
	span: Optional[Span] = None,
	subject: Optional[str] = None,
) -> TagSet:
	"""
	Reconcile a function or method. `subject` describes the declaration and
	is attached to every diagnostic as a note.
	"""
	pool = _Pool(comment_lines)

	params: List[str] = []
	for param in fact.parameters:
		params.append(param_line(param, pool.take(TagKind.PARAM, param.name)))

	known = {p.name.lower() for p in fact.parameters}
	for entry in pool.remaining(TagKind.PARAM):
		assert entry.tag is not None
		if entry.tag.name is None:
			entry.consumed = True
			_warn(
				diagnostics,
				f"malformed @param in docs of '{fact.name}' dropped",
				"malformed-param-tag",
				span,
				subject,
			)
		elif entry.tag.name.lower() in known:
			entry.consumed = True
			_warn(
				diagnostics,
				f"duplicate @param for '{entry.tag.name}' in docs of '{fact.name}' dropped",
				"duplicate-param-tag",
				span,
				subject,
			)
		else:
			_warn(
				diagnostics,
				f"@param '{entry.tag.name}' does not name a parameter of '{fact.name}'",
				"unknown-param-tag",
				span,
				subject,
			)

	ret = return_line(fact.return_type, pool.take(TagKind.RETURN))
	for entry in pool.remaining(TagKind.RETURN):
		entry.consumed = True
		_warn(
			diagnostics,
			f"extra @return in docs of '{fact.name}' dropped",
			"duplicate-return-tag",
			span,
			subject,
		)

	tags = TagSet()
	tags.extend(TagKind.TEXT, pool.passthrough())
	tags.extend(TagKind.PARAM, params)
	if is_private(fact.name, fact.visibility, options):
		tags.add(TagKind.ACCESS, "@access private")
	tags.add(TagKind.RETURN, ret)
	membership = member_of(module_name, namespace_name)
	if membership:
		tags.add(TagKind.MEMBEROF, membership)
	if isinstance(fact, MethodFact):
		if fact.overrides:
			tags.add(TagKind.OVERRIDE, "@override")
		if options.is_constructor(fact.name):
			tags.add(TagKind.CONSTRUCTOR, "@constructor")
	return tags.freeze()


def reconcile_field(fact: FieldFact, options: ConvertOptions = DEFAULT_OPTIONS) -> TagSet:
	tags = TagSet()
	tags.add(TagKind.PROPERTY, _with_description(f"@property {{{fact.type_name}}} {fact.name}", fact.description))
	if is_private(fact.name, fact.visibility, options):
		tags.add(TagKind.ACCESS, "@access private")
	return tags.freeze()


def reconcile_class(
	fact: ClassFact,
	comment_lines: Sequence[str],
	*,
	module_name: Optional[str] = None,
	namespace_name: Optional[str] = None,
	options: ConvertOptions = DEFAULT_OPTIONS,
) -> TagSet:
	pool = _Pool(comment_lines)
	# The structural parent always wins over hand-written inheritance tags.
	while pool.take(TagKind.EXTENDS) is not None:
		pass

	tags = TagSet()
	tags.extend(TagKind.TEXT, pool.passthrough())
	if fact.parent_type_name:
		tags.add(TagKind.EXTENDS, f"@extends {fact.parent_type_name}")
	membership = member_of(module_name, namespace_name)
	if membership:
		tags.add(TagKind.MEMBEROF, membership)
	for fld in fact.fields:
		field_tags = reconcile_field(fld, options)
		if TagKind.ACCESS in field_tags:
			continue
		tags.extend(TagKind.PROPERTY, field_tags.get(TagKind.PROPERTY))
	return tags.freeze()


def reconcile_namespace(
	fact: NamespaceFact,
	comment_lines: Sequence[str],
	*,
	module_name: Optional[str] = None,
) -> TagSet:
	tags = TagSet()
	tags.extend(TagKind.TEXT, comment_lines)
	membership = member_of(module_name, fact.parent_name)
	if membership:
		tags.add(TagKind.MEMBEROF, membership)
	tags.add(TagKind.NAMESPACE, f"@namespace {fact.qualified_name}")
	return tags.freeze()


def reconcile_module(module_name: str) -> TagSet:
	tags = TagSet()
	tags.add(TagKind.MODULE, f"@module {module_name}")
	return tags.freeze()


__all__ = [
	"member_of",
	"is_private",
	"param_line",
	"return_line",
	"reconcile_callable",
	"reconcile_field",
	"reconcile_class",
	"reconcile_namespace",
	"reconcile_module",
]
