import pytest

from minicc.arm32_platform import (
    FP_REG_NO,
    LX_REG_NO,
    MAX_REG_NUM,
    MAX_USABLE_REG_NUM,
    REG_NAMES,
    SP_REG_NO,
    TMP_REG_NO,
    const_expr,
    is_disp,
    is_reg,
)


def test_register_table_layout():
    assert len(REG_NAMES) == MAX_REG_NUM
    assert REG_NAMES[FP_REG_NO] == "fp"
    assert REG_NAMES[SP_REG_NO] == "sp"
    assert REG_NAMES[LX_REG_NO] == "lr"
    assert REG_NAMES[TMP_REG_NO] == "r10"
    assert MAX_USABLE_REG_NUM < MAX_REG_NUM
    special = [FP_REG_NO, SP_REG_NO, LX_REG_NO, TMP_REG_NO]
    assert [is_reg(REG_NAMES[no]) for no in special] == [True, True, True, True]


@pytest.mark.parametrize("name", REG_NAMES)
def test_every_register_name_is_reg(name):
    assert is_reg(name) is True


@pytest.mark.parametrize("name", ["r11", "r16", "R0", "", "x0", "r-1"])
def test_non_register_names(name):
    assert is_reg(name) is False


@pytest.mark.parametrize("num", [0, 1, 4095, -4095, -16, 100])
def test_is_disp_inside_range(num):
    assert is_disp(num) is True


@pytest.mark.parametrize("num", [4096, -4096, 100000, -100000])
def test_is_disp_outside_range(num):
    assert is_disp(num) is False


@pytest.mark.parametrize("num", [0, 0xFF, 0x100, 0x3FC, 0xFF000000, 0xF000000F, 16, -16, -256])
def test_const_expr_encodable(num):
    assert const_expr(num) is True


@pytest.mark.parametrize("num", [0x101, 257, -257, 0x1FF, 0x12345678])
def test_const_expr_not_encodable(num):
    assert const_expr(num) is False


@pytest.mark.parametrize("num", [0, 0xFF, 0x101, 4096, 0x12345678, 65535])
def test_const_expr_symmetric_under_negation(num):
    assert const_expr(num) == const_expr(-num)


@pytest.mark.parametrize("num", [0xFF, 0xAB, 0x7F])
def test_const_expr_invariant_under_even_shifts(num):
    assert all(const_expr(num << shift) for shift in range(0, 25, 2))