"""
bsjsdoc.core: shared positions/diagnostics used across stages.

Modules:
  - span: SourcePosition/SourceRange (1-based lines, 0-based columns) and Span
  - diagnostics: Diagnostic records collected by the converter
"""

from .diagnostics import Diagnostic, diag_to_json
from .span import SourcePosition, SourceRange, Span

__all__ = [
	"Diagnostic",
	"diag_to_json",
	"SourcePosition",
	"SourceRange",
	"Span",
]
