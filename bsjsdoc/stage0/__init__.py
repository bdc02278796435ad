# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Stage 0 package: the statement tree handed to the converter.

Pipeline placement:
  parser adapter → stage0 (statements) → classify/locate → tags → render

Public API:
  - statement node classes and the closed `StmtKind` enumeration
  - `type_name` for readable parameter/return/field types
"""

from .ast import (
	StmtKind,
	Visibility,
	ValueKind,
	TypeRef,
	TypeLike,
	Stmt,
	Annotation,
	Param,
	CommentStmt,
	FunctionStmt,
	MethodStmt,
	FieldStmt,
	ClassStmt,
	NamespaceStmt,
	OtherStmt,
	describe_statement,
)
from .types import UNTYPED, type_name

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
	"UNTYPED",
	"type_name",
]
