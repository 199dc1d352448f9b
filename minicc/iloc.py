"""ARM32 assembly instruction sequence (ILOC) building and output."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO

from .arm32_platform import FP_REG_NO, REG_NAMES, SP_REG_NO, const_expr, is_disp

__all__ = ["ArmInst", "ILocArm32"]


@dataclass
class ArmInst:
    """A single ARM32 assembly instruction, label or comment."""

    opcode: str
    result: str = ""
    arg1: str = ""
    arg2: str = ""
    cond: str = ""
    addition: str = ""
    dead: bool = False

    def replace(
        self,
        opcode: str,
        result: str = "",
        arg1: str = "",
        arg2: str = "",
        cond: str = "",
        addition: str = "",
    ) -> None:
        """Overwrite the instruction's contents."""
        self.opcode = opcode
        self.result = result
        self.arg1 = arg1
        self.arg2 = arg2
        self.cond = cond
        self.addition = addition

    def set_dead(self) -> None:
        """Mark the instruction as dead so that it renders as nothing."""
        self.dead = True

    @property
    def is_label(self) -> bool:
        return self.result == ":"

    def render(self) -> str:
        """Return the instruction text, or an empty string when dead or empty."""
        if self.dead or not self.opcode:
            return ""

        text = self.opcode + self.cond
        if self.result:
            text += self.result if self.result == ":" else " " + self.result
        for extra in (self.arg1, self.arg2, self.addition):
            if extra:
                text += "," + extra
        return text


class ILocArm32:
    """An ordered sequence of ARM32 assembly instructions."""

    def __init__(self) -> None:
        self.code: list[ArmInst] = []

    def __iter__(self):
        return iter(self.code)

    def __len__(self) -> int:
        return len(self.code)

    def _emit(self, *fields: str) -> None:
        self.code.append(ArmInst(*fields))

    def comment(self, text: str) -> None:
        """Append an assembly comment line."""
        self._emit("@", text)

    def to_str(self, num: int, flag: bool = True) -> str:
        """Format a number, prefixed with ``#`` for immediate addressing when ``flag``."""
        return ("#" if flag else "") + str(num)

    def load_imm(self, rs_reg_no: int, constant: int) -> None:
        """Load an immediate into a register with movw and, if needed, movt."""
        reg = REG_NAMES[rs_reg_no]
        self._emit("movw", reg, f"#:lower16:{constant}")
        if (constant >> 16) & 0xFFFF:
            self._emit("movt", reg, f"#:upper16:{constant}")

    def load_symbol(self, rs_reg_no: int, name: str) -> None:
        """Load the address of a symbol into a register."""
        reg = REG_NAMES[rs_reg_no]
        self._emit("movw", reg, "#:lower16:" + name)
        self._emit("movt", reg, "#:upper16:" + name)

    def load_base(self, rs_reg_no: int, base_reg_no: int, disp: int) -> None:
        """Load from base register plus offset: ``ldr rs,[base,#disp]``."""
        rs_reg = REG_NAMES[rs_reg_no]
        base = REG_NAMES[base_reg_no]

        if is_disp(disp):
            if disp:
                base += "," + self.to_str(disp)
        else:
            self.load_imm(rs_reg_no, disp)
            base += "," + rs_reg

        self._emit("ldr", rs_reg, f"[{base}]")

    def store_base(
        self, src_reg_no: int, base_reg_no: int, disp: int, tmp_reg_no: int
    ) -> None:
        """Store to base register plus offset: ``str src,[base,#disp]``."""
        base = REG_NAMES[base_reg_no]

        if is_disp(disp):
            if disp:
                base += "," + self.to_str(disp)
        else:
            self.load_imm(tmp_reg_no, disp)
            base += "," + REG_NAMES[tmp_reg_no]

        self._emit("str", REG_NAMES[src_reg_no], f"[{base}]")

    def label(self, name: str) -> None:
        """Append a label definition."""
        self._emit(name, ":")

    def inst(self, op: str, rs: str, *args: str) -> None:
        """Append an instruction with a result operand and up to two sources."""
        if len(args) > 2:
            raise ValueError(f"at most two source operands, got {len(args)}")
        self._emit(op, rs, *args)

    def mov_reg(self, rs_reg_no: int, src_reg_no: int) -> None:
        """Append a register-to-register move."""
        self._emit("mov", REG_NAMES[rs_reg_no], REG_NAMES[src_reg_no])

    def lea_stack(self, rs_reg_no: int, base_reg_no: int, offset: int) -> None:
        """Compute the address base plus offset into a register."""
        rs_reg = REG_NAMES[rs_reg_no]
        base_reg = REG_NAMES[base_reg_no]

        if const_expr(offset):
            self._emit("add", rs_reg, base_reg, self.to_str(offset))
        else:
            self.load_imm(rs_reg_no, offset)
            self._emit("add", rs_reg, base_reg, rs_reg)

    def call_fun(self, name: str) -> None:
        """Append a call to the named function."""
        self._emit("bl", name)

    def alloc_stack(self, frame_size: int, tmp_reg_no: int) -> None:
        """Set fp to sp and reserve ``frame_size`` bytes of stack; nothing when zero."""
        if frame_size == 0:
            return

        self.mov_reg(FP_REG_NO, SP_REG_NO)

        if const_expr(frame_size):
            self._emit("sub", "sp", "sp", self.to_str(frame_size))
        else:
            self.load_imm(tmp_reg_no, frame_size)
            self._emit("sub", "sp", "sp", REG_NAMES[tmp_reg_no])

    def nop(self) -> None:
        """Append an empty placeholder instruction."""
        self._emit("")

    def jump(self, label: str) -> None:
        """Append an unconditional branch to ``label``."""
        self._emit("b", label)

    def output(self, file: TextIO, output_empty: bool = False) -> None:
        """Write the assembly to ``file``; labels are not indented."""
        for arm in self.code:
            text = arm.render()
            if arm.is_label:
                file.write(text + "\n")
            elif text:
                file.write("\t" + text + "\n")
            elif output_empty:
                file.write("\n")

    def delete_unused_label(self) -> None:
        """Mark labels that no live branch targets as dead."""
        labels = [
            arm
            for arm in self.code
            if not arm.dead and arm.opcode.startswith(".") and arm.is_label
        ]
        for label in labels:
            used = any(
                not arm.dead and arm.opcode.startswith("b") and arm.result == label.opcode
                for arm in self.code
            )
            if not used:
                label.set_dead()