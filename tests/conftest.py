from pathlib import Path
from textwrap import dedent
from typing import Dict

import pytest


@pytest.fixture
def go_tree(tmp_path):
	"""Write ``{relative_path: source}`` under tmp_path and return the root."""

	def _write(files: Dict[str, str], module: str = "example.com/app") -> Path:
		if module:
			(tmp_path / "go.mod").write_text(f"module {module}\n\ngo 1.21\n")
		for rel, source in files.items():
			path = tmp_path / rel
			path.parent.mkdir(parents=True, exist_ok=True)
			path.write_text(dedent(source).lstrip("\n"))
		return tmp_path

	return _write
