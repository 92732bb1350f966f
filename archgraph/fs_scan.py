from __future__ import annotations

import logging
import os
from typing import List

from .config import AnalyzerConfig
from .errors import TraversalError

logger = logging.getLogger(__name__)

MODULE_KEYWORD = "module "


def detect_module_path(root: str, config: AnalyzerConfig | None = None) -> str:
	"""Module path declared in the descriptor at *root*, or ``""``."""
	config = config or AnalyzerConfig()
	descriptor = os.path.join(root, config.module_descriptor)
	try:
		with open(descriptor, "r", encoding="utf-8") as fh:
			lines = fh.read().splitlines()
	except OSError:
		logger.debug("No module descriptor at %s", descriptor)
		return ""

	for line in lines:
		line = line.strip()
		if line.startswith(MODULE_KEYWORD):
			module_path = line[len(MODULE_KEYWORD):].strip()
			logger.debug("Module path: %s", module_path)
			return module_path
	return ""


def is_source_file(filename: str, config: AnalyzerConfig) -> bool:
	if not filename.endswith(config.source_suffix):
		return False
	return not filename.endswith(config.test_suffix)


def walk_sources(root: str, config: AnalyzerConfig | None = None) -> List[str]:
	"""Source files under *root*, depth-first in sorted order.

	Excluded directories are pruned, not descended into. Any error raised
	while listing a directory aborts the walk.
	"""
	config = config or AnalyzerConfig()
	excluded = set(config.excluded_dirs)

	def _raise(exc: OSError) -> None:
		raise TraversalError(exc.filename or root, exc) from exc

	if not os.path.isdir(root):
		raise TraversalError(root, NotADirectoryError(root))

	files: List[str] = []
	for dirpath, dirnames, filenames in os.walk(root, onerror=_raise):
		dirnames[:] = sorted(d for d in dirnames if d not in excluded)
		for filename in sorted(filenames):
			if is_source_file(filename, config):
				files.append(os.path.join(dirpath, filename))
	return files
