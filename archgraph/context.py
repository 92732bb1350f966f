from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from .config import AnalyzerConfig
from .model import Function, Method, Package, SymbolKey, TypeDeclaration


@dataclass
class AnalysisContext:
	"""Symbol tables of one analysis run.

	A context is built for a single invocation, filled by the extractor and
	then read by the graph builder. Nothing in it outlives the run.
	"""

	base_dir: str
	module_path: str = ""
	config: AnalyzerConfig = field(default_factory=AnalyzerConfig)
	packages: Dict[SymbolKey, Package] = field(default_factory=dict)
	types: Dict[SymbolKey, TypeDeclaration] = field(default_factory=dict)
	functions: Dict[SymbolKey, Function] = field(default_factory=dict)
	methods: Dict[SymbolKey, Method] = field(default_factory=dict)

	def package_path(self, rel_dir: str) -> str:
		"""Package identity for a directory relative to ``base_dir``.

		Without a module path the identity keeps its leading slash, so package
		ids never collide with the dotted ids of root-package symbols.
		"""
		if rel_dir in ("", "."):
			return self.module_path
		return f"{self.module_path}/{rel_dir}"

	def ensure_package(self, path: str, name: str, directory: str) -> Package:
		key = SymbolKey.for_package(path)
		package = self.packages.get(key)
		if package is None:
			package = Package(path=path, name=name, dir=directory)
			self.packages[key] = package
		return package

	def add_type(self, decl: TypeDeclaration) -> None:
		self.types[SymbolKey.for_type(decl.package, decl.name)] = decl

	def add_function(self, fn: Function) -> None:
		self.functions[SymbolKey.for_function(fn.package, fn.name)] = fn

	def add_method(self, method: Method) -> None:
		key = SymbolKey.for_method(method.package, method.receiver, method.name)
		self.methods[key] = method

	def has_type(self, package: str, name: str) -> bool:
		return SymbolKey.for_type(package, name) in self.types
