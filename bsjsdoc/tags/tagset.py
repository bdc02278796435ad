# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
TagSet: the reconciled tag lines of one declaration.

A TagSet maps tag kinds to rendered tag lines (without the leading ` * `).
Kinds keep their first-insertion order, and lines keep their order within a
kind, so rendering is deterministic. A TagSet is built by exactly one
reconciler call and frozen before it is returned.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Dict, Iterable, Iterator, List, Tuple


class TagKind(Enum):
	TEXT = auto()         # passthrough comment lines
	MODULE = auto()       # @module
	NAMESPACE = auto()    # @namespace
	EXTENDS = auto()      # @extends
	PARAM = auto()        # @param
	ACCESS = auto()       # @access private
	RETURN = auto()       # @return
	MEMBEROF = auto()     # @memberof
	OVERRIDE = auto()     # @override
	CONSTRUCTOR = auto()  # @constructor
	PROPERTY = auto()     # @property


# A `*/` inside a line would close the block early.
_CLOSER = "*/"
_CLOSER_ESCAPED = "*\\/"


def escape_closer(line: str) -> str:
	return line.replace(_CLOSER, _CLOSER_ESCAPED)


class TagSet:
	def __init__(self) -> None:
		self._entries: Dict[TagKind, List[str]] = {}
		self._frozen = False

	def add(self, kind: TagKind, line: str) -> None:
		if self._frozen:
			raise RuntimeError("TagSet is frozen")
		self._entries.setdefault(kind, []).append(line)

	def extend(self, kind: TagKind, lines: Iterable[str]) -> None:
		for line in lines:
			self.add(kind, line)

	def freeze(self) -> "TagSet":
		self._frozen = True
		return self

	@property
	def frozen(self) -> bool:
		return self._frozen

	def get(self, kind: TagKind) -> Tuple[str, ...]:
		return tuple(self._entries.get(kind, ()))

	def count(self, kind: TagKind) -> int:
		return len(self._entries.get(kind, ()))

	def kinds(self) -> Tuple[TagKind, ...]:
		return tuple(self._entries)

	def __contains__(self, kind: object) -> bool:
		return kind in self._entries

	def __iter__(self) -> Iterator[Tuple[TagKind, str]]:
		for kind, lines in self._entries.items():
			for line in lines:
				yield kind, line

	def lines(self) -> List[str]:
		return [line for _kind, line in self]

	def render(self) -> str:
		"""Render as a `/** ... */` block."""
		out = ["/**"]
		for line in self.lines():
			out.append(f" * {escape_closer(line)}" if line else " *")
		out.append(" */")
		return "\n".join(out)

	def render_inline(self) -> str:
		"""Render as a single-line `/** ... */` block."""
		return f"/** {escape_closer(' '.join(self.lines()))} */"

	def __repr__(self) -> str:
		return f"TagSet({self.lines()!r})"


__all__ = ["TagKind", "TagSet", "escape_closer"]
