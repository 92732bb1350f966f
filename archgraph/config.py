"""Analyzer configuration.

Defaults describe a Go module tree. A project can override them with a
``[tool.archgraph]`` table in ``pyproject.toml`` or an ``[archgraph]`` table
in ``.archgraph.toml`` at the analysis root.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILE = ".archgraph.toml"


class AnalyzerConfig(BaseModel):
	model_config = ConfigDict(extra="forbid")

	language: str = "go"
	excluded_dirs: List[str] = ["vendor", "node_modules", ".git", "bin"]
	source_suffix: str = ".go"
	test_suffix: str = "_test.go"
	module_descriptor: str = "go.mod"


def _read_table(path: Path, keys: List[str]) -> Optional[Dict[str, Any]]:
	try:
		with open(path, "rb") as f:
			data = tomllib.load(f)
	except (OSError, tomllib.TOMLDecodeError) as exc:
		logger.warning("Ignoring unreadable config %s: %s", path, exc)
		return None
	for key in keys:
		data = data.get(key, {})
		if not isinstance(data, dict):
			raise ConfigError(str(path), TypeError(f"[{key}] must be a table"))
	return data or None


def load_config(root: Path) -> AnalyzerConfig:
	"""Return the configuration for the tree at *root*, defaults if none."""
	candidates = [
		(root / CONFIG_FILE, ["archgraph"]),
		(root / "pyproject.toml", ["tool", "archgraph"]),
	]
	for path, keys in candidates:
		if not path.is_file():
			continue
		table = _read_table(path, keys)
		if table is None:
			continue
		try:
			config = AnalyzerConfig(**table)
		except ValidationError as exc:
			raise ConfigError(str(path), exc) from exc
		logger.debug("Loaded config from %s", path)
		return config
	return AnalyzerConfig()
