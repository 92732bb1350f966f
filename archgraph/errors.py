from __future__ import annotations


class AnalysisError(Exception):
	"""Base class for errors that abort an analysis run."""


class PathResolutionError(AnalysisError):
	def __init__(self, path: str, cause: Exception) -> None:
		super().__init__(f"failed to get absolute path of {path}: {cause}")
		self.path = path
		self.cause = cause


class TraversalError(AnalysisError):
	def __init__(self, path: str, cause: Exception) -> None:
		super().__init__(f"failed to walk directory {path}: {cause}")
		self.path = path
		self.cause = cause


class ParseError(AnalysisError):
	def __init__(self, filename: str, cause: object) -> None:
		super().__init__(f"failed to parse file {filename}: {cause}")
		self.filename = filename
		self.cause = cause


class UnsupportedInputError(AnalysisError):
	def __init__(self, language: str) -> None:
		super().__init__(f"unsupported language: {language}")
		self.language = language


class ConfigError(AnalysisError):
	def __init__(self, source: str, cause: Exception) -> None:
		super().__init__(f"invalid configuration in {source}: {cause}")
		self.source = source
		self.cause = cause
