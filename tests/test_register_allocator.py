import pytest

from minicc.arm32_platform import MAX_USABLE_REG_NUM
from minicc.register_allocator import SimpleRegisterAllocator


class _Var:
    def __init__(self):
        self.load_reg_id = -1


def test_allocates_lowest_free_register_first():
    alloc = SimpleRegisterAllocator()
    assert alloc.allocate() == 0
    assert alloc.allocate() == 1
    assert alloc.occupied == {0, 1}


def test_preferred_register_used_when_free():
    alloc = SimpleRegisterAllocator()
    var = _Var()
    assert alloc.allocate(var, 5) == 5
    assert var.load_reg_id == 5
    assert alloc.values == (var,)


def test_preferred_register_taken_falls_back():
    alloc = SimpleRegisterAllocator()
    alloc.allocate(no=0)
    assert alloc.allocate(no=0) == 1


def test_value_with_register_keeps_it():
    alloc = SimpleRegisterAllocator()
    var = _Var()
    first = alloc.allocate(var)
    assert alloc.allocate(var) == first
    assert alloc.values == (var,)


def test_free_releases_value_register():
    alloc = SimpleRegisterAllocator()
    var = _Var()
    reg = alloc.allocate(var)
    alloc.free(var)
    assert var.load_reg_id == -1
    assert reg not in alloc.occupied
    assert reg in alloc.used
    assert alloc.values == ()


def test_spills_oldest_value_when_full():
    alloc = SimpleRegisterAllocator()
    held = [_Var() for _ in range(MAX_USABLE_REG_NUM)]
    for var in held:
        alloc.allocate(var)
    newcomer = _Var()
    reg = alloc.allocate(newcomer)
    assert reg == 0
    assert held[0].load_reg_id == -1
    assert newcomer.load_reg_id == 0
    assert alloc.values[-1] is newcomer
    assert held[0] not in alloc.values


def test_full_without_values_raises():
    alloc = SimpleRegisterAllocator()
    for _ in range(MAX_USABLE_REG_NUM):
        alloc.allocate()
    with pytest.raises(RuntimeError):
        alloc.allocate()


def test_reserve_evicts_holder():
    alloc = SimpleRegisterAllocator()
    var = _Var()
    alloc.allocate(var, 2)
    alloc.reserve(2)
    assert var.load_reg_id == -1
    assert 2 in alloc.occupied
    assert alloc.values == ()


def test_free_reg_clears_value_and_ignores_minus_one():
    alloc = SimpleRegisterAllocator()
    var = _Var()
    reg = alloc.allocate(var)
    alloc.free_reg(-1)
    assert reg in alloc.occupied
    alloc.free_reg(reg)
    assert var.load_reg_id == -1
    assert alloc.occupied == frozenset()


def test_out_of_range_register_rejected():
    alloc = SimpleRegisterAllocator()
    with pytest.raises(IndexError):
        alloc.reserve(MAX_USABLE_REG_NUM)