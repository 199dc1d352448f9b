"""ARM32 platform facts: register names and immediate/offset encodability."""

from __future__ import annotations

__all__ = [
    "MAX_REG_NUM",
    "MAX_USABLE_REG_NUM",
    "REG_NAMES",
    "TMP_REG_NO",
    "SP_REG_NO",
    "FP_REG_NO",
    "LX_REG_NO",
    "const_expr",
    "is_disp",
    "is_reg",
]

MAX_REG_NUM = 16
"""Number of ARM32 core registers."""

MAX_USABLE_REG_NUM = 11
"""General purpose registers available to the allocator, r0-r10."""

REG_NAMES: tuple[str, ...] = (
    "r0",  # argument / return value, caller saved
    "r1",  # argument / high word of 64-bit results, caller saved
    "r2",  # argument, caller saved
    "r3",  # argument, caller saved
    "r4",
    "r5",
    "r6",
    "r7",
    "r8",  # operand 1 / expression result
    "r9",  # operand 2 / immediates / label addresses
    "r10",  # scratch register for large immediates
    "fp",  # r11, frame pointer
    "ip",  # r12, intra-procedure scratch
    "sp",  # r13, stack pointer
    "lr",  # r14, link register
    "pc",  # r15, program counter
)
"""Register names indexed by register number."""

TMP_REG_NO = 10
"""Register borrowed for temporary values such as large immediates."""

SP_REG_NO = 13
FP_REG_NO = 11
LX_REG_NO = 14

_MASK32 = 0xFFFFFFFF
_REG_NAME_SET = frozenset(REG_NAMES)


def _rotate_left_two(num: int) -> int:
    """Rotate a 32-bit unsigned value left by two bits."""
    return ((num << 2) | (num >> 30)) & _MASK32


def _is_rotated_imm8(num: int) -> bool:
    """Whether ``num`` is an 8-bit value rotated right by an even amount."""
    value = num & _MASK32
    for _ in range(16):
        if value <= 0xFF:
            return True
        value = _rotate_left_two(value)
    return False


def const_expr(num: int) -> bool:
    """Whether ``num`` or its negation is encodable as an ARM data-processing immediate."""
    return _is_rotated_imm8(num) or _is_rotated_imm8(-num)


def is_disp(num: int) -> bool:
    """Whether ``num`` is a valid load/store offset (strictly between -4096 and 4096)."""
    return -4096 < num < 4096


def is_reg(name: str) -> bool:
    """Whether ``name`` is a valid ARM32 register name."""
    return name in _REG_NAME_SET