from __future__ import annotations

from typing import List, Optional

from tree_sitter import Node

from .go_parse import line_of, text
from .model import CallSite

BUILTINS = frozenset({
	"make", "new", "len", "cap", "append", "copy", "delete", "close",
	"panic", "recover", "print", "println", "complex", "real", "imag",
})


def is_builtin(name: str) -> bool:
	return name in BUILTINS


def classify_call(call: Node) -> Optional[CallSite]:
	"""CallSite for a ``call_expression``, or None when it is not recorded.

	Bare identifiers that are not builtins become free-function call-sites;
	``x.Name(...)`` with a plain identifier ``x`` becomes a selector call-site.
	Longer selector chains and other callee shapes are dropped.
	"""
	callee = call.child_by_field_name("function")
	if callee is None:
		return None
	if callee.type == "identifier":
		name = text(callee)
		if is_builtin(name):
			return None
		return CallSite(target=name, line=line_of(call))
	if callee.type == "selector_expression":
		operand = callee.child_by_field_name("operand")
		if operand is None or operand.type != "identifier":
			return None
		return CallSite(
			target=text(callee.child_by_field_name("field")),
			is_selector=True,
			receiver=text(operand),
			line=line_of(call),
		)
	return None


def collect_calls(body: Optional[Node]) -> List[CallSite]:
	"""Call-sites inside *body* in source order.

	The walk is an explicit pre-order traversal of the whole body. Function
	literals are entered like any other block, so calls inside closures land
	in the list of the declaration that owns *body*.
	"""
	calls: List[CallSite] = []
	if body is None:
		return calls
	stack = [body]
	while stack:
		node = stack.pop()
		if node.type == "call_expression":
			site = classify_call(node)
			if site is not None:
				calls.append(site)
		stack.extend(reversed(node.children))
	return calls
