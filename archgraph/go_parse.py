"""tree-sitter adapter: one cached parser per language, fail-fast parsing."""

from __future__ import annotations

import logging
from typing import Dict, Iterator, Optional

import tree_sitter
import tree_sitter_go
from tree_sitter import Node, Parser, Tree

from .errors import ParseError, UnsupportedInputError

logger = logging.getLogger(__name__)

_GRAMMARS = {
	"go": tree_sitter_go.language,
}

_PARSER_CACHE: Dict[str, Parser] = {}


def get_parser(language: str) -> Parser:
	if language in _PARSER_CACHE:
		return _PARSER_CACHE[language]
	grammar = _GRAMMARS.get(language)
	if grammar is None:
		raise UnsupportedInputError(language)
	parser = Parser(tree_sitter.Language(grammar()))
	_PARSER_CACHE[language] = parser
	logger.debug("tree-sitter parser initialized for %s", language)
	return parser


def _first_error(node: Node) -> Optional[Node]:
	if node.type == "ERROR" or node.is_missing:
		return node
	for child in node.children:
		if child.has_error:
			found = _first_error(child)
			if found is not None:
				return found
	return None


def parse_source(path: str, language: str = "go") -> Tree:
	"""Parse *path*; any read failure or syntax error raises ParseError."""
	try:
		with open(path, "rb") as fh:
			source = fh.read()
	except OSError as exc:
		raise ParseError(path, exc) from exc

	tree = get_parser(language).parse(source)
	if tree.root_node.has_error:
		bad = _first_error(tree.root_node) or tree.root_node
		row, col = bad.start_point
		raise ParseError(path, f"syntax error at {row + 1}:{col + 1}")
	return tree


def text(node: Optional[Node]) -> str:
	if node is None or node.text is None:
		return ""
	return node.text.decode("utf-8")


def line_of(node: Node) -> int:
	return node.start_point[0] + 1


def named_children(node: Node) -> Iterator[Node]:
	"""Named children with comments skipped."""
	for child in node.named_children:
		if child.type != "comment":
			yield child
