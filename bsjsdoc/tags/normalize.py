# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Comment normalization: BrightScript comment text → doc-comment body lines.

Input is the raw text of a `CommentStmt` (one or more physical lines, each
carrying its own `'` or `REM` marker). Output is the list of body lines
without any comment syntax; the renderer adds the ` * ` prefix back.

Per physical line:
  1. trim,
  2. strip one leading comment marker (`'`, `REM`, ...; see ConvertOptions),
  3. strip a trailing block closer (`*/`, `**/`),
  4. strip any run of leading asterisks,
  5. on the first line only, strip a block opener (`/*`, `/**`).

Blank lines at either end of the body are dropped; interior blank lines are
kept as paragraph breaks.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from bsjsdoc.options import DEFAULT_OPTIONS, ConvertOptions
from bsjsdoc.stage0.ast import CommentStmt


def _strip_marker(text: str, markers: Sequence[str]) -> str:
	for marker in markers:
		n = len(marker)
		head = text[:n]
		if marker.isalpha():
			# Keyword markers are case-insensitive and must end at a word boundary.
			if head.upper() != marker.upper():
				continue
			if len(text) > n and (text[n].isalnum() or text[n] == "_"):
				continue
		elif head != marker:
			continue
		return text[n:].strip()
	return text


def normalize_line(line: str, markers: Sequence[str], first: bool = False) -> str:
	text = _strip_marker(line.strip(), markers)
	if text.endswith("*/"):
		text = text[:-2].rstrip("*").rstrip()
	text = text.lstrip("*").strip()
	if first and text.startswith("/*"):
		text = text[1:].lstrip("*").strip()
	return text


def normalize_text(text: str, options: ConvertOptions = DEFAULT_OPTIONS) -> List[str]:
	lines = [
		normalize_line(raw, options.comment_markers, first=(idx == 0))
		for idx, raw in enumerate(text.split("\n"))
	]
	while lines and not lines[0]:
		lines.pop(0)
	while lines and not lines[-1]:
		lines.pop()
	return lines


def normalize_comment(comment: Optional[CommentStmt], options: ConvertOptions = DEFAULT_OPTIONS) -> List[str]:
	"""Body lines for `comment`; no comment yields an empty body."""
	if comment is None or not comment.text:
		return []
	return normalize_text(comment.text, options)


def is_doc_block(comment: CommentStmt, options: ConvertOptions = DEFAULT_OPTIONS) -> bool:
	"""True when the comment opens with a `/**` doc-block marker."""
	first = comment.text.split("\n", 1)[0]
	return _strip_marker(first.strip(), options.comment_markers).startswith("/**")


__all__ = ["normalize_line", "normalize_text", "normalize_comment", "is_doc_block"]
