# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Tag-line grammar.

Only the tags the reconciler rewrites are recognized; every other line is
passthrough. Grammar of a recognized line (after comment normalization):

  tag-line   := '@' word ws* type? ws* clause? ws* description
  type       := '{' balanced-braces '}'
  clause     := PARAM:   ident | '[' ident ('=' default)? ']'
                EXTENDS: ident   (when no type clause named the parent)
  word       := param | arg | argument | return | returns | extends | augments

Braces and brackets are matched with a depth counter, so type expressions
like `{Object<string, {a: int}>}` and defaults like `[opts={}]` parse
as one clause. An unbalanced clause ends at the next whitespace and marks the
line malformed; a recognized tag word is never demoted to passthrough.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .tagset import TagKind

TAG_WORDS: dict[str, TagKind] = {
	"param": TagKind.PARAM,
	"arg": TagKind.PARAM,
	"argument": TagKind.PARAM,
	"return": TagKind.RETURN,
	"returns": TagKind.RETURN,
	"extends": TagKind.EXTENDS,
	"augments": TagKind.EXTENDS,
}


@dataclass(frozen=True)
class TagLine:
	kind: TagKind
	raw: str
	type_text: Optional[str] = None
	# PARAM: parameter name; EXTENDS: parent name.
	name: Optional[str] = None
	optional: bool = False
	default: Optional[str] = None
	description: str = ""
	# A clause was unbalanced or the PARAM name was missing.
	malformed: bool = False

	def names(self, name: str) -> bool:
		return self.name is not None and self.name.lower() == name.lower()


def _skip_ws(text: str, pos: int) -> int:
	while pos < len(text) and text[pos].isspace():
		pos += 1
	return pos


def _scan_word(text: str, pos: int) -> int:
	while pos < len(text) and text[pos].isalnum():
		pos += 1
	return pos


def _scan_ident(text: str, pos: int) -> int:
	while pos < len(text) and (text[pos].isalnum() or text[pos] in "_$."):
		pos += 1
	return pos


def _match_close(text: str, pos: int, open_ch: str, close_ch: str) -> int:
	"""Index of the bracket closing `text[pos]`, or -1 when unbalanced."""
	depth = 0
	for idx in range(pos, len(text)):
		ch = text[idx]
		if ch == open_ch:
			depth += 1
		elif ch == close_ch:
			depth -= 1
			if depth == 0:
				return idx
	return -1


def _scan_to_ws(text: str, pos: int) -> int:
	while pos < len(text) and not text[pos].isspace():
		pos += 1
	return pos


def _clause(text: str, pos: int, open_ch: str, close_ch: str) -> tuple[str, int, bool]:
	"""
	Inner text of the clause opening at `text[pos]` and the position after it.

	An unbalanced clause ends at the next whitespace instead; the third value
	reports that recovery.
	"""
	close = _match_close(text, pos, open_ch, close_ch)
	if close >= 0:
		return text[pos + 1 : close], close + 1, False
	end = _scan_to_ws(text, pos)
	return text[pos + 1 : end], end, True


def parse_tag_line(line: str) -> Optional[TagLine]:
	"""
	Parse one normalized comment line; None means passthrough.

	Once the tag word is recognized the line stays a tag of that kind even
	when a clause is malformed; `malformed` is set and `name` may be None.
	"""
	text = line.strip()
	if not text.startswith("@"):
		return None
	word_end = _scan_word(text, 1)
	kind = TAG_WORDS.get(text[1:word_end].lower())
	if kind is None:
		return None

	malformed = False
	pos = _skip_ws(text, word_end)
	type_text: Optional[str] = None
	if pos < len(text) and text[pos] == "{":
		inner, pos, broken = _clause(text, pos, "{", "}")
		malformed = malformed or broken
		type_text = inner.strip() or None
		pos = _skip_ws(text, pos)

	name: Optional[str] = None
	optional = False
	default: Optional[str] = None
	if kind is TagKind.PARAM:
		if pos < len(text) and text[pos] == "[":
			inner, pos, broken = _clause(text, pos, "[", "]")
			malformed = malformed or broken
			inner_name, sep, inner_default = inner.partition("=")
			name = inner_name.strip() or None
			default = inner_default.strip() if sep else None
			optional = True
		else:
			end = _scan_ident(text, pos)
			name = text[pos:end] or None
			pos = end
		if name is None:
			malformed = True
	elif kind is TagKind.EXTENDS:
		if type_text is not None:
			name = type_text
		else:
			end = _scan_ident(text, pos)
			name = text[pos:end] or None
			pos = end

	return TagLine(
		kind=kind,
		raw=line,
		type_text=type_text,
		name=name,
		optional=optional,
		default=default,
		description=text[pos:].strip(),
		malformed=malformed,
	)


def format_description(text: str) -> str:
	"""
	Normalize a free-text tag description to its ` - text` form.

	Empty stays empty; `-text` is kept as written; `, text` loses the comma;
	anything else gains a `- ` prefix.
	"""
	desc = text.strip()
	if not desc:
		return ""
	if desc.startswith("-"):
		return desc
	if desc.startswith(","):
		desc = desc[1:].strip()
		if not desc:
			return ""
	return f"- {desc}"


__all__ = ["TAG_WORDS", "TagLine", "parse_tag_line", "format_description"]
