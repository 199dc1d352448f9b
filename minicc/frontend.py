"""Common interface of the front-end parsers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .syntax_tree import AstNode

__all__ = ["FrontEndExecutor"]


class FrontEndExecutor(ABC):
    """Parses a source file into an abstract syntax tree held in ``ast_root``."""

    def __init__(self, filename: str) -> None:
        self.filename = filename
        self.ast_root: AstNode | None = None

    @abstractmethod
    def run(self) -> bool:
        """Parse ``filename``, set ``ast_root`` and report success."""