import json

import yaml

from archgraph.model import Edge, Graph, Node
from archgraph.serialize import save_graph, to_yaml
from archgraph.summarize import format_stats, graph_stats


def _graph():
	return Graph(
		components=[
			Node(id="m", title="m", entity="package"),
			Node(id="m.f", title="f", entity="function"),
			Node(id="m.g", title="g", entity="function"),
		],
		links=[
			Edge(from_="m", to="m.f", type="contains"),
			Edge(from_="m.f", to="m.g", type="calls", method="g"),
		],
	)


def test_document_shape():
	doc = _graph().to_document()
	assert list(doc) == ["components", "links"]
	assert doc["components"][0] == {"id": "m", "title": "m", "entity": "package"}
	assert doc["links"][0] == {"from": "m", "to": "m.f", "type": "contains"}
	assert doc["links"][1]["method"] == "g"


def test_yaml_output():
	text = to_yaml(_graph())
	assert text.startswith("components:")
	assert yaml.safe_load(text) == _graph().to_document()


def test_save_graph_picks_format(tmp_path):
	save_graph(_graph(), str(tmp_path / "g.json"))
	save_graph(_graph(), str(tmp_path / "g.yaml"))
	assert json.loads((tmp_path / "g.json").read_text())["links"][1]["from"] == "m.f"
	assert yaml.safe_load((tmp_path / "g.yaml").read_text())["components"][2]["id"] == "m.g"


def test_stats():
	stats = graph_stats(_graph())
	assert stats.components == 3
	assert stats.links == 2
	assert stats.by_entity == {"package": 1, "function": 2}
	assert stats.by_link_type == {"contains": 1, "calls": 1}
	text = format_stats(stats)
	assert "Found components: 3" in text
	assert "  - function: 2" in text
	assert "Found links: 2" in text
