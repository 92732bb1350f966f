from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator, List

from tree_sitter import Node, Tree

from .calls import collect_calls
from .context import AnalysisContext
from .go_parse import line_of, named_children, text
from .model import FieldInfo, Function, Method, TypeDeclaration
from .type_names import receiver_type_name, resolve_type_name

logger = logging.getLogger(__name__)

# Standard distribution namespaces. A bare prefix also matches longer paths
# that start with it; a trailing slash prefix also matches its own stem.
STDLIB_PREFIXES = (
	"archive/", "bufio", "bytes", "compress/", "container/",
	"context", "crypto/", "database/", "debug/", "embed",
	"encoding/", "errors", "expvar", "flag", "fmt",
	"go/", "hash/", "html/", "image/", "index/",
	"io", "log", "math/", "mime/", "net/",
	"os", "path/", "plugin", "reflect", "regexp",
	"runtime/", "sort", "strconv", "strings", "sync",
	"syscall", "testing", "text/", "time", "unicode/",
	"unsafe",
)

_TYPE_KINDS = {
	"struct_type": "record",
	"interface_type": "interface",
}


def is_stdlib(import_path: str) -> bool:
	if "." not in import_path.split("/", 1)[0]:
		return True
	for prefix in STDLIB_PREFIXES:
		if import_path.startswith(prefix) or import_path == prefix.rstrip("/"):
			return True
	return False


def _import_paths(root: Node) -> Iterator[str]:
	for decl in named_children(root):
		if decl.type != "import_declaration":
			continue
		for spec in named_children(decl):
			specs = named_children(spec) if spec.type == "import_spec_list" else [spec]
			for item in specs:
				if item.type == "import_spec":
					yield text(item.child_by_field_name("path")).strip('"`')


def _package_name(root: Node) -> str:
	for child in named_children(root):
		if child.type == "package_clause":
			for ident in named_children(child):
				return text(ident)
	return ""


def _struct_members(struct: Node, decl: TypeDeclaration) -> None:
	for field_list in named_children(struct):
		if field_list.type != "field_declaration_list":
			continue
		for field in named_children(field_list):
			if field.type != "field_declaration":
				continue
			type_name, type_pkg = resolve_type_name(
				field.child_by_field_name("type"), decl.package
			)
			if not type_name:
				continue
			names = field.children_by_field_name("name")
			if not names:
				decl.embeds.append(type_name)
				continue
			for name in names:
				decl.fields.append(
					FieldInfo(name=text(name), type_name=type_name, type_package=type_pkg)
				)


def _type_declarations(
	decl: Node, package: str, filename: str
) -> List[TypeDeclaration]:
	found: List[TypeDeclaration] = []
	for spec in named_children(decl):
		if spec.type != "type_spec":
			continue
		name = text(spec.child_by_field_name("name"))
		underlying = spec.child_by_field_name("type")
		kind = _TYPE_KINDS.get(underlying.type if underlying is not None else "")
		if kind is None:
			logger.debug("Skipping non-struct/interface type %s.%s", package, name)
			continue
		info = TypeDeclaration(
			name=name,
			package=package,
			kind=kind,
			file=filename,
			line=line_of(spec),
		)
		if kind == "record":
			_struct_members(underlying, info)
		found.append(info)
	return found


def _receiver(decl: Node) -> str:
	params = decl.child_by_field_name("receiver")
	if params is None:
		return ""
	for param in named_children(params):
		return receiver_type_name(param.child_by_field_name("type"))
	return ""


def extract_file(ctx: AnalysisContext, path: str, tree: Tree) -> None:
	"""Add the package, types, functions and methods of one parsed file."""
	root = tree.root_node
	directory = os.path.dirname(path)
	rel_dir = Path(os.path.relpath(directory, ctx.base_dir)).as_posix()
	package_path = ctx.package_path(rel_dir)

	package = ctx.ensure_package(package_path, _package_name(root), directory)
	for import_path in _import_paths(root):
		if not is_stdlib(import_path):
			package.imports.append(import_path)

	for decl in named_children(root):
		if decl.type == "type_declaration":
			for info in _type_declarations(decl, package_path, path):
				ctx.add_type(info)
		elif decl.type == "function_declaration":
			ctx.add_function(
				Function(
					name=text(decl.child_by_field_name("name")),
					package=package_path,
					file=path,
					line=line_of(decl),
					calls=collect_calls(decl.child_by_field_name("body")),
				)
			)
		elif decl.type == "method_declaration":
			ctx.add_method(
				Method(
					name=text(decl.child_by_field_name("name")),
					receiver=_receiver(decl),
					package=package_path,
					file=path,
					line=line_of(decl),
					calls=collect_calls(decl.child_by_field_name("body")),
				)
			)
