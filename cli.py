from __future__ import annotations

import argparse
import logging
import os
import sys

import uvicorn

from archgraph import AnalysisError, analyze
from archgraph.serialize import save_graph
from archgraph.summarize import format_stats, graph_stats


def cmd_collect(args: argparse.Namespace) -> int:
	if not os.path.exists(args.path):
		print(f"directory does not exist: {args.path}", file=sys.stderr)
		return 1

	print(f"Analyzing code: {args.path} (language: {args.language})")
	try:
		graph = analyze(args.path, language=args.language)
	except AnalysisError as exc:
		print(f"analysis failed: {exc}", file=sys.stderr)
		return 1

	print(format_stats(graph_stats(graph)))

	try:
		save_graph(graph, args.output)
	except OSError as exc:
		print(f"failed to write {args.output}: {exc}", file=sys.stderr)
		return 1
	print(f"Graph saved to {args.output}")
	return 0


def cmd_serve(args: argparse.Namespace) -> int:
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)
	return 0


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(
		prog="archgraph", description="Build architecture graphs from Go source code"
	)
	parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
	sub = parser.add_subparsers(dest="cmd", required=True)

	pc = sub.add_parser("collect", help="Collect architecture from source code")
	pc.add_argument("path", help="Path to the source tree")
	pc.add_argument("-o", "--output", default="architecture.yaml", help="Output file (.yaml or .json)")
	pc.add_argument("-l", "--language", default="go", help="Programming language (go)")
	pc.set_defaults(func=cmd_collect)

	ps = sub.add_parser("serve", help="Run FastAPI server")
	ps.add_argument("--host", default="127.0.0.1")
	ps.add_argument("--port", type=int, default=8000)
	ps.add_argument("--reload", action="store_true")
	ps.set_defaults(func=cmd_serve)
	return parser


def main(argv: list[str] | None = None) -> int:
	args = build_parser().parse_args(argv)
	logging.basicConfig(
		level=logging.DEBUG if args.verbose else logging.WARNING,
		format="%(levelname)s %(name)s: %(message)s",
	)
	return args.func(args)


if __name__ == "__main__":
	sys.exit(main())
