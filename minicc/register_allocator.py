"""A simple register allocator for the ARM32 back end."""

from __future__ import annotations

from typing import Any

from .arm32_platform import MAX_USABLE_REG_NUM

__all__ = ["SimpleRegisterAllocator"]


def _check_reg(no: int) -> None:
    if not 0 <= no < MAX_USABLE_REG_NUM:
        raise IndexError(f"register {no} is outside r0-r{MAX_USABLE_REG_NUM - 1}")


class SimpleRegisterAllocator:
    """Hands out r0-r10 and spills the longest-held value when none is free.

    Values are any objects with a ``load_reg_id`` attribute, ``-1`` meaning
    that the value holds no load register.
    """

    def __init__(self) -> None:
        self._occupied: set[int] = set()
        self._used: set[int] = set()
        self._values: list[Any] = []

    @property
    def occupied(self) -> frozenset[int]:
        """Registers currently taken."""
        return frozenset(self._occupied)

    @property
    def used(self) -> frozenset[int]:
        """Every register taken at some point."""
        return frozenset(self._used)

    @property
    def values(self) -> tuple[Any, ...]:
        """Values holding a register, oldest first."""
        return tuple(self._values)

    def _take(self, no: int) -> None:
        self._occupied.add(no)
        self._used.add(no)

    def allocate(self, var: Any = None, no: int = -1) -> int:
        """Give a register to ``var``, preferring ``no`` when it is free.

        Without a free register, the value that has held one longest is
        spilled and its register reused.
        """
        if var is not None and var.load_reg_id != -1:
            return var.load_reg_id

        if no != -1:
            _check_reg(no)

        if no != -1 and no not in self._occupied:
            regno = no
        else:
            regno = next(
                (k for k in range(MAX_USABLE_REG_NUM) if k not in self._occupied), -1
            )

        if regno != -1:
            self._take(regno)
        else:
            if not self._values:
                raise RuntimeError("no register is free and none can be spilled")
            oldest = self._values.pop(0)
            regno = oldest.load_reg_id
            oldest.load_reg_id = -1

        if var is not None:
            var.load_reg_id = regno
            self._values.append(var)

        return regno

    def reserve(self, no: int) -> None:
        """Take register ``no``, spilling whatever value holds it."""
        _check_reg(no)
        if no in self._occupied:
            self.free_reg(no)
        self._take(no)

    def free(self, var: Any) -> None:
        """Release the register held by ``var``, if any."""
        if var is None or var.load_reg_id == -1:
            return
        self._occupied.discard(var.load_reg_id)
        if var in self._values:
            self._values.remove(var)
        var.load_reg_id = -1

    def free_reg(self, no: int) -> None:
        """Release register ``no``; ``-1`` is ignored."""
        if no == -1:
            return
        self._occupied.discard(no)
        for value in self._values:
            if value.load_reg_id == no:
                value.load_reg_id = -1
                self._values.remove(value)
                break