# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
File-level entry points.

`convert_source` runs one file through the injected parser and the
classify → locate → reconcile → render pipeline and returns the replacement
text for the documentation generator. `before_parse` is the same thing
shaped as the generator's plugin hook: it rewrites `event.source` in place.

Parser failures are not handled here: whatever the parser raises reaches the
caller unchanged and no partial output is produced.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePath
from typing import Callable, List, Optional, Protocol, Sequence, Tuple

from bsjsdoc.core.diagnostics import Diagnostic
from bsjsdoc.options import DEFAULT_OPTIONS, ConvertOptions
from bsjsdoc.render import RenderContext, render_statements
from bsjsdoc.stage0.ast import Stmt
from bsjsdoc.tags.reconcile import reconcile_module

# parse(source_text) -> top-level statements
ParseFn = Callable[[str], Sequence[Stmt]]

_MODULE_TAG = "@module"


class SourceEvent(Protocol):
	filename: str
	source: str


@dataclass
class ParseEvent:
	"""Minimal concrete event for `before_parse` callers without their own."""

	filename: str
	source: str


@dataclass
class ConversionResult:
	text: str
	module_name: str
	# True when the module name came from an `@module` tag in the source.
	explicit_module: bool = False
	diagnostics: List[Diagnostic] = field(default_factory=list)


def find_module_tag(source: str) -> Optional[str]:
	"""
	Return the identifier of the first `@module <identifier>` in `source`.

	The identifier runs up to the next whitespace or `*`; a tag with nothing
	after it is skipped.
	"""
	pos = source.find(_MODULE_TAG)
	while pos >= 0:
		idx = pos + len(_MODULE_TAG)
		if idx < len(source) and source[idx] in " \t":
			while idx < len(source) and source[idx] in " \t":
				idx += 1
			end = idx
			while end < len(source) and not source[end].isspace() and source[end] != "*":
				end += 1
			if end > idx:
				return source[idx:end]
		pos = source.find(_MODULE_TAG, pos + 1)
	return None


def module_name_from_filename(filename: str) -> str:
	return PurePath(filename).stem.replace(".", "_")


def resolve_module_name(source: str, filename: str) -> Tuple[str, bool]:
	"""Module name for a file, and whether it was explicit in the source."""
	explicit = find_module_tag(source)
	if explicit is not None:
		return explicit, True
	return module_name_from_filename(filename), False


def convert_source(
	source: str,
	filename: str,
	parse: ParseFn,
	options: ConvertOptions = DEFAULT_OPTIONS,
) -> ConversionResult:
	statements = parse(source)
	module_name, explicit = resolve_module_name(source, filename)
	ctx = RenderContext(
		module_name=module_name,
		source_lines=source.split("\n"),
		options=options,
		filename=filename,
	)

	output: List[str] = []
	if not explicit and options.emit_module_tag:
		output.append(reconcile_module(module_name).render_inline())
	output.append(render_statements(statements, ctx))
	return ConversionResult(
		text="\n".join(output),
		module_name=module_name,
		explicit_module=explicit,
		diagnostics=ctx.diagnostics,
	)


def before_parse(
	event: SourceEvent,
	parse: ParseFn,
	options: ConvertOptions = DEFAULT_OPTIONS,
) -> ConversionResult:
	"""Replace `event.source` with its converted text."""
	result = convert_source(event.source, event.filename, parse, options)
	event.source = result.text
	return result


__all__ = [
	"ParseFn",
	"SourceEvent",
	"ParseEvent",
	"ConversionResult",
	"find_module_tag",
	"module_name_from_filename",
	"resolve_module_name",
	"convert_source",
	"before_parse",
]
