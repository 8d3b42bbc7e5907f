import pytest

from procmon_lite.memory_info import MemoryInfo, MemoryUnit, to_unit


@pytest.mark.parametrize(
    "unit, shift",
    [(MemoryUnit.BYTE, 0), (MemoryUnit.KB, 10), (MemoryUnit.MB, 20), (MemoryUnit.GB, 30)],
)
def test_to_unit_exact_multiples(unit, shift):
    assert to_unit(7 << shift, unit) == 7


def test_to_unit_truncates_partial_units():
    assert to_unit((3 << 10) + 1023, MemoryUnit.KB) == 3
    assert to_unit((2 << 20) - 1, MemoryUnit.MB) == 1


def test_to_unit_returns_float():
    result = to_unit(5 << 20, MemoryUnit.MB)
    assert isinstance(result, float) and result == 5


def test_defaults_are_zero():
    info = MemoryInfo()
    assert info.total(MemoryUnit.GB) == 0
    assert info.available(MemoryUnit.BYTE) == 0
    assert info.used(MemoryUnit.KB) == 0


def test_total_and_available_in_kb():
    info = MemoryInfo(total_bytes=16329928 << 10, available_bytes=9601144 << 10)
    assert info.total(MemoryUnit.KB) == 16329928
    assert info.available(MemoryUnit.KB) == 9601144


@pytest.mark.parametrize("unit", list(MemoryUnit))
def test_used_is_total_minus_available_after_conversion(unit):
    info = MemoryInfo(total_bytes=16329928 << 10, available_bytes=9601144 << 10)
    assert info.used(unit) == info.total(unit) - info.available(unit)


def test_used_converts_before_subtracting():
    info = MemoryInfo(total_bytes=(4 << 30) + (1 << 29), available_bytes=(1 << 30) + (1 << 29))
    # each side truncates separately, so the halves are dropped before subtracting
    assert info.used(MemoryUnit.GB) == 4 - 1


def test_fields_can_be_updated():
    info = MemoryInfo()
    info.total_bytes = 9 << 20
    info.available_bytes = 4 << 20
    assert info.used(MemoryUnit.MB) == 9 - 4