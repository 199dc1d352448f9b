"""Code generator base classes."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import Any, TextIO

__all__ = ["CodeGenerator", "CodeGeneratorAsm"]


class CodeGenerator(ABC):
    """Turns a module into output text written to a file or standard output.

    ``fp`` is the stream that ``generate`` writes to while ``run`` is active.
    """

    def __init__(self, module: Any) -> None:
        self.module = module
        self.fp: TextIO | None = None
        self.show_linear_ir = False

    def run(self, out_file_name: str = "") -> bool:
        """Generate into ``out_file_name``, or standard output when it is empty.

        Raises OSError when the file cannot be opened.
        """
        if not out_file_name:
            self.fp = sys.stdout
            try:
                return self.generate()
            finally:
                self.fp = None

        with open(out_file_name, "w", encoding="utf-8") as stream:
            self.fp = stream
            try:
                return self.generate()
            finally:
                self.fp = None

    @abstractmethod
    def generate(self) -> bool:
        """Write the output to ``self.fp`` and report success."""


class CodeGeneratorAsm(CodeGenerator):
    """Emits an assembly file: header, data section, then one block per function.

    The module must expose ``functions``; each function has ``is_builtin``.
    Built-in functions produce no code.
    """

    def __init__(self, module: Any) -> None:
        super().__init__(module)
        self.label_index = 0

    def generate(self) -> bool:
        """Emit header, data section and code section."""
        self.gen_header()
        self.gen_data_section()
        self.gen_code_section()
        return True

    @abstractmethod
    def gen_header(self) -> None:
        """Emit the assembly header."""

    @abstractmethod
    def gen_data_section(self) -> None:
        """Emit initialised and uninitialised global data."""

    @abstractmethod
    def gen_function_code(self, func: Any) -> None:
        """Emit the instructions of one function."""

    @abstractmethod
    def register_allocation(self, func: Any) -> None:
        """Assign registers and stack slots for one function."""

    def gen_code_section(self) -> None:
        """Emit code for every non-built-in function; label numbering restarts."""
        self.label_index = 0
        for func in self.module.functions:
            if not func.is_builtin:
                self.gen_function_code(func)