import os

import pytest

from archgraph.config import AnalyzerConfig
from archgraph.errors import TraversalError
from archgraph.fs_scan import detect_module_path, walk_sources


def _rel(root, files):
	return [os.path.relpath(f, root).replace(os.sep, "/") for f in files]


def test_walk_prunes_excluded_dirs_and_skips_tests(tmp_path):
	for rel in [
		"main.go",
		"main_test.go",
		"README.md",
		"internal/svc/svc.go",
		"vendor/lib/lib.go",
		"node_modules/x/x.go",
		".git/hooks/h.go",
		"bin/tool.go",
		"cmd/bin/keep.go",
	]:
		p = tmp_path / rel
		p.parent.mkdir(parents=True, exist_ok=True)
		p.write_text("package x\n")

	files = _rel(tmp_path, walk_sources(str(tmp_path)))
	assert files == ["main.go", "internal/svc/svc.go"]


def test_walk_is_sorted_within_directory(tmp_path):
	for name in ["b.go", "a.go", "c.go"]:
		(tmp_path / name).write_text("package x\n")
	assert _rel(tmp_path, walk_sources(str(tmp_path))) == ["a.go", "b.go", "c.go"]


def test_walk_respects_configured_exclusions(tmp_path):
	(tmp_path / "gen").mkdir()
	(tmp_path / "gen" / "gen.go").write_text("package gen\n")
	(tmp_path / "a.go").write_text("package x\n")
	config = AnalyzerConfig(excluded_dirs=["gen"])
	assert _rel(tmp_path, walk_sources(str(tmp_path), config)) == ["a.go"]


def test_walk_missing_root_raises(tmp_path):
	with pytest.raises(TraversalError):
		walk_sources(str(tmp_path / "nope"))


def test_detect_module_path(tmp_path):
	(tmp_path / "go.mod").write_text("\n  module github.com/acme/tool  \n\ngo 1.22\n")
	assert detect_module_path(str(tmp_path)) == "github.com/acme/tool"


def test_detect_module_path_missing_descriptor(tmp_path):
	assert detect_module_path(str(tmp_path)) == ""


def test_detect_module_path_without_keyword(tmp_path):
	(tmp_path / "go.mod").write_text("go 1.22\n")
	assert detect_module_path(str(tmp_path)) == ""
