from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Literal, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field


class SymbolKind(str, Enum):
	PACKAGE = "package"
	TYPE = "type"
	FUNCTION = "function"
	METHOD = "method"


class SymbolKey(NamedTuple):
	"""Composite identity of a symbol-table entry.

	Two keys of different kinds never compare equal, even when their dotted
	renderings would. ``id`` is the string written to the graph.
	"""

	package: str
	kind: SymbolKind
	name: str = ""
	receiver: str = ""

	@property
	def id(self) -> str:
		if self.kind is SymbolKind.PACKAGE:
			return self.package
		parts = [self.package]
		if self.kind is SymbolKind.METHOD:
			parts.append(self.receiver)
		parts.append(self.name)
		return ".".join(parts)

	@classmethod
	def for_package(cls, package: str) -> "SymbolKey":
		return cls(package, SymbolKind.PACKAGE)

	@classmethod
	def for_type(cls, package: str, name: str) -> "SymbolKey":
		return cls(package, SymbolKind.TYPE, name)

	@classmethod
	def for_function(cls, package: str, name: str) -> "SymbolKey":
		return cls(package, SymbolKind.FUNCTION, name)

	@classmethod
	def for_method(cls, package: str, receiver: str, name: str) -> "SymbolKey":
		return cls(package, SymbolKind.METHOD, name, receiver)


# Symbol tables


class Package(BaseModel):
	path: str
	name: str
	dir: str
	imports: List[str] = []


class FieldInfo(BaseModel):
	name: str
	type_name: str
	type_package: str


class TypeDeclaration(BaseModel):
	name: str
	package: str
	kind: Literal["record", "interface"]
	file: str
	line: int
	fields: List[FieldInfo] = []
	embeds: List[str] = []


class CallSite(BaseModel):
	target: str
	is_selector: bool = False
	receiver: str = ""
	line: int


class Function(BaseModel):
	name: str
	package: str
	file: str
	line: int
	calls: List[CallSite] = []


class Method(BaseModel):
	name: str
	receiver: str
	package: str
	file: str
	line: int
	calls: List[CallSite] = []


# Graph output

Entity = Literal["package", "struct", "interface", "function", "method"]
EdgeType = Literal["import", "contains", "calls", "uses", "embeds"]


class Node(BaseModel):
	id: str
	title: str
	entity: Entity


class Edge(BaseModel):
	model_config = ConfigDict(populate_by_name=True)

	from_: str = Field(alias="from")
	to: str
	type: EdgeType
	method: Optional[str] = None


class Graph(BaseModel):
	components: List[Node] = []
	links: List[Edge] = []

	def to_document(self) -> Dict[str, Any]:
		"""Plain dict in the wire shape: ``components``/``links``, edge key ``from``."""
		return {
			"components": [n.model_dump() for n in self.components],
			"links": [
				e.model_dump(by_alias=True, exclude_none=True) for e in self.links
			],
		}
