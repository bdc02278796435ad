# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Readable names for parser-reported types.

Built-in kinds render with their BrightScript keyword spelling; user-defined
types render their declared name. Anything unresolvable renders as the
untyped marker.
"""

from __future__ import annotations

from .ast import TypeLike, TypeRef, ValueKind

UNTYPED = "dynamic"

_KIND_SPELLING: dict[ValueKind, str] = {
	ValueKind.INVALID: "invalid",
	ValueKind.BOOLEAN: "boolean",
	ValueKind.STRING: "string",
	ValueKind.INTEGER: "integer",
	ValueKind.LONG_INTEGER: "longinteger",
	ValueKind.FLOAT: "float",
	ValueKind.DOUBLE: "double",
	ValueKind.CALLABLE: "function",
	ValueKind.OBJECT: "object",
	ValueKind.INTERFACE: "object",
	ValueKind.DYNAMIC: UNTYPED,
	ValueKind.VOID: "void",
	# Uninitialized means the parser saw no type; treat as untyped.
	ValueKind.UNINITIALIZED: UNTYPED,
}


def type_name(ty: TypeLike, untyped: str = UNTYPED) -> str:
	if ty is None:
		return untyped
	if isinstance(ty, TypeRef):
		return ty.text.strip() or untyped
	if isinstance(ty, ValueKind):
		spelled = _KIND_SPELLING.get(ty, untyped)
		return untyped if spelled == UNTYPED else spelled
	if isinstance(ty, str):
		return ty.strip() or untyped
	return untyped


__all__ = ["UNTYPED", "type_name"]
