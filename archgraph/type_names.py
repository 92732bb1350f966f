from __future__ import annotations

from typing import Optional, Tuple

from tree_sitter import Node

from .go_parse import named_children, text

# Go type identifiers that never name a declared type.
PRIMITIVES = frozenset({
	"bool", "string", "int", "int8", "int16", "int32", "int64",
	"uint", "uint8", "uint16", "uint32", "uint64", "uintptr",
	"byte", "rune", "float32", "float64", "complex64", "complex128",
	"error",
})

UNRESOLVED: Tuple[str, str] = ("", "")


def is_primitive(name: str) -> bool:
	return name in PRIMITIVES


def _pointee(node: Node) -> Optional[Node]:
	return next(named_children(node), None)


def resolve_type_name(node: Optional[Node], current_package: str) -> Tuple[str, str]:
	"""Return ``(short_name, package)`` for a type expression.

	Pointers, slices, arrays and map values are unwrapped; a qualified
	``pkg.Name`` yields the literal qualifier as package. Channel, function,
	generic and literal struct/interface types are not resolved and give
	``("", "")``.
	"""
	if node is None:
		return UNRESOLVED
	kind = node.type
	if kind == "type_identifier":
		return text(node), current_package
	if kind == "qualified_type":
		return (
			text(node.child_by_field_name("name")),
			text(node.child_by_field_name("package")),
		)
	if kind == "pointer_type":
		return resolve_type_name(_pointee(node), current_package)
	if kind in ("slice_type", "array_type", "implicit_length_array_type"):
		return resolve_type_name(node.child_by_field_name("element"), current_package)
	if kind == "map_type":
		return resolve_type_name(node.child_by_field_name("value"), current_package)
	return UNRESOLVED


def receiver_type_name(node: Optional[Node]) -> str:
	"""Identifier of a method receiver type, pointer stripped.

	Only ``T`` and ``*T`` are recognised; anything else gives ``""``.
	"""
	if node is None:
		return ""
	if node.type == "pointer_type":
		node = _pointee(node)
		if node is None:
			return ""
	if node.type == "type_identifier":
		return text(node)
	return ""
