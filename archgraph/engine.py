from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from .builder import build_graph
from .config import AnalyzerConfig, load_config
from .context import AnalysisContext
from .errors import PathResolutionError, UnsupportedInputError
from .extract import extract_file
from .fs_scan import detect_module_path, walk_sources
from .go_parse import parse_source
from .model import Graph

logger = logging.getLogger(__name__)

SUPPORTED_LANGUAGES = ("go",)


def collect_symbols(root: str, config: AnalyzerConfig) -> AnalysisContext:
	"""Walk *root* and fill a fresh context; every file is parsed before returning."""
	ctx = AnalysisContext(
		base_dir=root,
		module_path=detect_module_path(root, config),
		config=config,
	)
	for path in walk_sources(root, config):
		logger.debug("Parsing %s", path)
		tree = parse_source(path, config.language)
		extract_file(ctx, path, tree)

	logger.info(
		"Collected %d packages, %d types, %d functions, %d methods",
		len(ctx.packages), len(ctx.types), len(ctx.functions), len(ctx.methods),
	)
	return ctx


def analyze(
	path: str,
	language: Optional[str] = None,
	config: Optional[AnalyzerConfig] = None,
) -> Graph:
	"""Analyze the source tree at *path* and return its architecture graph.

	Raises an AnalysisError subclass on any failure; no partial graph is
	ever returned.
	"""
	try:
		root = os.path.abspath(path)
	except (OSError, ValueError) as exc:
		raise PathResolutionError(path, exc) from exc

	if config is None:
		config = load_config(Path(root))
	if language is not None:
		config = config.model_copy(update={"language": language})
	if config.language not in SUPPORTED_LANGUAGES:
		raise UnsupportedInputError(config.language)

	ctx = collect_symbols(root, config)
	return build_graph(ctx)
