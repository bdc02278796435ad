# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Doc-tag handling: comment normalization, the tag-line grammar and TagSet.

The reconciler lives in `bsjsdoc.tags.reconcile`; it depends on
`bsjsdoc.facts` and is not re-exported here.
"""

from .grammar import TAG_WORDS, TagLine, format_description, parse_tag_line
from .normalize import is_doc_block, normalize_comment, normalize_line, normalize_text
from .tagset import TagKind, TagSet

__all__ = [
	"TAG_WORDS",
	"TagLine",
	"format_description",
	"parse_tag_line",
	"is_doc_block",
	"normalize_comment",
	"normalize_line",
	"normalize_text",
	"TagKind",
	"TagSet",
]
