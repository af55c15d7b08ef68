"""Exceptions raised while decoding source files."""

from __future__ import annotations

from pathlib import Path


class ParseError(ValueError):
    """Raised when a parser cannot decode a source file into a mapping."""

    def __init__(self, path: Path | str, reason: str) -> None:
        """Record the offending ``path`` alongside the failure ``reason``."""
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


__all__ = ["ParseError"]
