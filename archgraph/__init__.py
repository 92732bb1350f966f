"""Architecture graph extraction for Go module trees.

Modules:
- fs_scan.py: Source file discovery and module path detection.
- go_parse.py: tree-sitter parsing of Go files.
- extract.py: Symbol tables of packages, types, functions and methods.
- type_names.py: Short name and package of type expressions.
- calls.py: Call-site classification inside function bodies.
- builder.py: Node and edge passes producing the graph.
- engine.py: The analysis pipeline.
- model.py: Symbol-table and graph data structures.
- summarize.py: Entity and link statistics.
- serialize.py: YAML and JSON output.
"""

from .engine import analyze
from .errors import (
	AnalysisError,
	ConfigError,
	ParseError,
	PathResolutionError,
	TraversalError,
	UnsupportedInputError,
)
from .model import Edge, Graph, Node

__all__ = [
	"analyze",
	"AnalysisError",
	"ConfigError",
	"ParseError",
	"PathResolutionError",
	"TraversalError",
	"UnsupportedInputError",
	"Edge",
	"Graph",
	"Node",
]
