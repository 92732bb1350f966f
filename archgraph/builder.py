from __future__ import annotations

import logging
from typing import List, Optional

from .context import AnalysisContext
from .model import CallSite, Edge, Graph, Node, SymbolKey
from .type_names import is_primitive

logger = logging.getLogger(__name__)


class GraphBuilder:
    """Derives the architecture graph from a filled AnalysisContext.

    Each pass reads only the symbol tables, never edges produced by an
    earlier pass, so pass order decides edge order and nothing else.
    """

    def __init__(self, ctx: AnalysisContext):
        self.ctx = ctx
        self.nodes: List[Node] = []
        self.edges: List[Edge] = []

    def build(self) -> Graph:
        self.build_nodes()
        self.build_import_edges()
        self.build_contains_edges()
        self.build_call_edges()
        self.build_type_dependency_edges()
        logger.info(
            "Built graph: %d components, %d links", len(self.nodes), len(self.edges)
        )
        return Graph(components=self.nodes, links=self.edges)

    def _edge(self, src: str, dst: str, kind: str, method: Optional[str] = None):
        self.edges.append(Edge(from_=src, to=dst, type=kind, method=method))

    def build_nodes(self):
        """One node per package, type, function and method."""
        ctx = self.ctx
        for key, pkg in ctx.packages.items():
            self.nodes.append(Node(id=key.id, title=pkg.name, entity="package"))
        for key, decl in ctx.types.items():
            entity = "interface" if decl.kind == "interface" else "struct"
            self.nodes.append(Node(id=key.id, title=decl.name, entity=entity))
        for key, fn in ctx.functions.items():
            self.nodes.append(Node(id=key.id, title=fn.name, entity="function"))
        for key, method in ctx.methods.items():
            self.nodes.append(Node(id=key.id, title=method.name, entity="method"))

    def build_import_edges(self):
        """Imports lexically under the module path; targets are not checked."""
        module_path = self.ctx.module_path
        for key, pkg in self.ctx.packages.items():
            for imp in pkg.imports:
                if imp.startswith(module_path):
                    self._edge(key.id, imp, "import")

    def build_contains_edges(self):
        ctx = self.ctx
        for key, decl in ctx.types.items():
            self._edge(SymbolKey.for_package(decl.package).id, key.id, "contains")
        for key, fn in ctx.functions.items():
            self._edge(SymbolKey.for_package(fn.package).id, key.id, "contains")
        for key, method in ctx.methods.items():
            type_key = SymbolKey.for_type(method.package, method.receiver)
            if type_key in ctx.types:
                self._edge(type_key.id, key.id, "contains")

    def resolve_call_target(self, call: CallSite, package: str) -> Optional[SymbolKey]:
        """Same-package free function named by a bare call, if declared.

        Selector calls and everything else stay unresolved.
        """
        if call.is_selector:
            return None
        key = SymbolKey.for_function(package, call.target)
        if key in self.ctx.functions:
            return key
        return None

    def build_call_edges(self):
        callers = list(self.ctx.functions.items()) + list(self.ctx.methods.items())
        for key, caller in callers:
            for call in caller.calls:
                target = self.resolve_call_target(call, caller.package)
                if target is not None:
                    self._edge(key.id, target.id, "calls", method=call.target)

    def build_type_dependency_edges(self):
        """``embeds`` and ``uses`` edges between types of one package."""
        ctx = self.ctx
        for key, decl in ctx.types.items():
            for embed in decl.embeds:
                if is_primitive(embed):
                    continue
                if ctx.has_type(decl.package, embed):
                    self._edge(
                        key.id, SymbolKey.for_type(decl.package, embed).id, "embeds"
                    )
            for field in decl.fields:
                if is_primitive(field.type_name) or field.type_package != decl.package:
                    continue
                if ctx.has_type(decl.package, field.type_name):
                    self._edge(
                        key.id,
                        SymbolKey.for_type(decl.package, field.type_name).id,
                        "uses",
                    )


def build_graph(ctx: AnalysisContext) -> Graph:
    return GraphBuilder(ctx).build()
