from __future__ import annotations

from collections import Counter
from typing import Dict, List

from pydantic import BaseModel

from .model import Graph


class GraphStats(BaseModel):
	components: int
	links: int
	by_entity: Dict[str, int] = {}
	by_link_type: Dict[str, int] = {}


def graph_stats(graph: Graph) -> GraphStats:
	return GraphStats(
		components=len(graph.components),
		links=len(graph.links),
		by_entity=dict(Counter(n.entity for n in graph.components)),
		by_link_type=dict(Counter(e.type for e in graph.links)),
	)


def format_stats(stats: GraphStats) -> str:
	parts: List[str] = []
	parts.append(f"Found components: {stats.components}")
	for entity, count in sorted(stats.by_entity.items()):
		parts.append(f"  - {entity}: {count}")
	parts.append(f"Found links: {stats.links}")
	for link_type, count in sorted(stats.by_link_type.items()):
		parts.append(f"  - {link_type}: {count}")
	return "\n".join(parts)
