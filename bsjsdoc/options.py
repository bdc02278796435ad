# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Conversion options.

Options are a frozen value passed explicitly to every stage that needs them;
there is no global configuration and nothing is read from disk.
"""

from __future__ import annotations

from dataclasses import dataclass


class OptionsError(ValueError):
	"""Raised when a ConvertOptions value is internally inconsistent."""


@dataclass(frozen=True)
class ConvertOptions:
	# Method name (case-insensitive) treated as the class constructor.
	constructor_name: str = "new"
	# Spelling of the constructor in the synthetic class body.
	constructor_spelling: str = "constructor"
	# Leading sigil marking a name as private by convention.
	private_prefix: str = "_"
	# Line-comment markers stripped from the start of each comment line.
	comment_markers: tuple[str, ...] = ("'", "REM")
	untyped: str = "dynamic"
	# Emit `/** @module name */` when the source has no explicit module tag.
	emit_module_tag: bool = True
	# Emit `/** ... */` comments that document no declaration.
	keep_detached_comments: bool = False

	def __post_init__(self) -> None:
		if not self.constructor_name.strip():
			raise OptionsError("constructor_name must be non-empty")
		if not self.constructor_spelling.strip():
			raise OptionsError("constructor_spelling must be non-empty")
		if not self.untyped.strip():
			raise OptionsError("untyped marker must be non-empty")
		if isinstance(self.comment_markers, str):
			raise OptionsError("comment_markers must be a sequence of markers, not a string")
		for marker in self.comment_markers:
			if not marker or marker != marker.strip():
				raise OptionsError(f"invalid comment marker {marker!r}")

	def is_constructor(self, name: str) -> bool:
		return name.lower() == self.constructor_name.lower()

	def is_private_name(self, name: str) -> bool:
		return bool(self.private_prefix) and name.startswith(self.private_prefix)


DEFAULT_OPTIONS = ConvertOptions()


__all__ = ["ConvertOptions", "OptionsError", "DEFAULT_OPTIONS"]
