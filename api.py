from __future__ import annotations

import os
from typing import Any, Dict

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from archgraph import (
	ConfigError,
	ParseError,
	PathResolutionError,
	TraversalError,
	UnsupportedInputError,
	analyze,
)


app = FastAPI(title="Architecture Graph Analyzer")


class AnalyzeRequest(BaseModel):
	root_path: str
	language: str = "go"


@app.get("/health")
def health() -> Dict[str, str]:
	return {"status": "ok"}


@app.post("/analyze")
def analyze_tree(req: AnalyzeRequest) -> Dict[str, Any]:
	if not os.path.isdir(req.root_path):
		raise HTTPException(status_code=400, detail=f"Invalid root_path: {req.root_path}")
	try:
		graph = analyze(req.root_path, language=req.language)
	except (UnsupportedInputError, PathResolutionError, ConfigError) as exc:
		raise HTTPException(status_code=400, detail=str(exc)) from exc
	except (ParseError, TraversalError) as exc:
		raise HTTPException(status_code=422, detail=str(exc)) from exc
	return graph.to_document()
