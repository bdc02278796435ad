# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
bsjsdoc: BrightScript doc comments → JSDoc tag blocks + synthetic JS.

Pipeline (per file, leaves first):
  parse (external) → classify → locate → reconcile → render

The entry points are `bsjsdoc.convert.convert_source` and the
generator-hook form `bsjsdoc.convert.before_parse`.
"""

from .convert import ConversionResult, ParseEvent, before_parse, convert_source, resolve_module_name
from .options import ConvertOptions, OptionsError

__all__ = [
	"ConversionResult",
	"ParseEvent",
	"before_parse",
	"convert_source",
	"resolve_module_name",
	"ConvertOptions",
	"OptionsError",
]
