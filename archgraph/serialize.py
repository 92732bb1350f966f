from __future__ import annotations

import json
from pathlib import Path

import yaml

from .model import Graph


def to_yaml(graph: Graph) -> str:
	return yaml.safe_dump(
		graph.to_document(), indent=2, sort_keys=False, allow_unicode=True
	)


def to_json(graph: Graph) -> str:
	return json.dumps(graph.to_document(), indent=2)


def save_graph(graph: Graph, path: str) -> None:
	"""Write *graph* to *path*: JSON for ``.json`` files, YAML otherwise."""
	if Path(path).suffix.lower() == ".json":
		content = to_json(graph)
	else:
		content = to_yaml(graph)
	with open(path, "w", encoding="utf-8") as fh:
		fh.write(content)
