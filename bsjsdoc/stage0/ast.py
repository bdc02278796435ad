# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Statement tree consumed by the converter.

The BrightScript parser is an external collaborator: whatever front-end is
used, its adapter must produce these nodes. Every node carries a
`SourceRange` (1-based lines, 0-based columns, exclusive ends; see
`bsjsdoc.core.span`).

Statement kinds form a closed set (`StmtKind`). Consumers dispatch on
`stmt.kind`, never on arbitrary runtime types, so adding a kind means
updating the classifier and renderer explicitly.

Pipeline placement:
  parser adapter → statement tree (this file) → classify → locate →
  reconcile → render
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar, List, Optional, Union

from bsjsdoc.core.span import SourceRange


class StmtKind(Enum):
	COMMENT = auto()
	FUNCTION = auto()
	METHOD = auto()
	FIELD = auto()
	CLASS = auto()
	NAMESPACE = auto()
	OTHER = auto()


class Visibility(Enum):
	PUBLIC = auto()
	PROTECTED = auto()
	PRIVATE = auto()


class ValueKind(Enum):
	"""Built-in BrightScript value kinds as reported by the parser."""
	INVALID = auto()
	BOOLEAN = auto()
	STRING = auto()
	INTEGER = auto()
	LONG_INTEGER = auto()
	FLOAT = auto()
	DOUBLE = auto()
	CALLABLE = auto()
	OBJECT = auto()
	INTERFACE = auto()
	DYNAMIC = auto()
	VOID = auto()
	UNINITIALIZED = auto()


@dataclass(frozen=True)
class TypeRef:
	"""Reference to a user-defined type (class/interface/enum), by declared name."""
	text: str


# What a parser adapter may hand us for a declared type. `None` means the
# declaration carried no type at all.
TypeLike = Union[ValueKind, TypeRef, str, None]


# Base class

class Stmt:
	"""Base class for all statements."""
	kind: ClassVar[StmtKind] = StmtKind.OTHER
	range: SourceRange


@dataclass(frozen=True)
class Annotation:
	"""An `@annotation(...)` line attached to the declaration that follows it."""
	name: str
	range: SourceRange


@dataclass
class Param:
	name: str
	type: TypeLike = None
	# Range of the default-value expression; sliced from the source text.
	default: Optional[SourceRange] = None
	range: Optional[SourceRange] = None


@dataclass
class CommentStmt(Stmt):
	kind: ClassVar[StmtKind] = StmtKind.COMMENT
	range: SourceRange
	text: str


@dataclass
class FunctionStmt(Stmt):
	kind: ClassVar[StmtKind] = StmtKind.FUNCTION
	name: str
	range: SourceRange
	params: List[Param] = field(default_factory=list)
	returns: TypeLike = None
	annotations: List[Annotation] = field(default_factory=list)
	access: Optional[Visibility] = None


@dataclass
class MethodStmt(FunctionStmt):
	kind: ClassVar[StmtKind] = StmtKind.METHOD
	overrides: bool = False


@dataclass
class FieldStmt(Stmt):
	kind: ClassVar[StmtKind] = StmtKind.FIELD
	name: str
	range: SourceRange
	type: TypeLike = None
	access: Optional[Visibility] = None
	annotations: List[Annotation] = field(default_factory=list)


@dataclass
class ClassStmt(Stmt):
	kind: ClassVar[StmtKind] = StmtKind.CLASS
	name: str
	range: SourceRange
	body: List[Stmt] = field(default_factory=list)
	parent_name: Optional[str] = None
	annotations: List[Annotation] = field(default_factory=list)

	@property
	def fields(self) -> List[FieldStmt]:
		return [s for s in self.body if s.kind is StmtKind.FIELD]  # type: ignore[misc]

	@property
	def methods(self) -> List[MethodStmt]:
		return [s for s in self.body if s.kind is StmtKind.METHOD]  # type: ignore[misc]


@dataclass
class NamespaceStmt(Stmt):
	kind: ClassVar[StmtKind] = StmtKind.NAMESPACE
	# May be dotted (`namespace Net.Http`).
	name: str
	range: SourceRange
	body: List[Stmt] = field(default_factory=list)


@dataclass
class OtherStmt(Stmt):
	"""Any statement the converter does not document (imports, enums, ...)."""
	kind: ClassVar[StmtKind] = StmtKind.OTHER
	range: SourceRange
	text: str = ""


def describe_statement(stmt: Stmt) -> str:
	"""One-line debug description: kind, name (when present) and range."""
	rng = stmt.range
	where = f"{rng.start.line}:{rng.start.column}-{rng.end.line}:{rng.end.column}"
	name = getattr(stmt, "name", None)
	if name:
		return f"{stmt.kind.name.lower()} {name} @ {where}"
	return f"{stmt.kind.name.lower()} @ {where}"


__all__ = [
	"StmtKind",
	"Visibility",
	"ValueKind",
	"TypeRef",
	"TypeLike",
	"Stmt",
	"Annotation",
	"Param",
	"CommentStmt",
	"FunctionStmt",
	"MethodStmt",
	"FieldStmt",
	"ClassStmt",
	"NamespaceStmt",
	"OtherStmt",
	"describe_statement",
]
