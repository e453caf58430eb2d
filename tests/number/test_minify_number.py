from __future__ import annotations

from decimal import Decimal

import pytest
from minify_core.numbers import EPSILON, minify_number, number_is_zero

# 覆盖符号、前导/尾随零、小数、指数等组合的字面量样本
LITERALS = [
    "0",
    "-0",
    "+0",
    "00",
    "0.0",
    "-0.0",
    ".0",
    "1",
    "-5",
    "+7",
    "1.0",
    "1.50",
    "-1.50",
    "+1.5",
    "5.",
    ".5",
    "-.5",
    "10.00",
    "100",
    "1000",
    "1200",
    "12000",
    "00100",
    "123456789",
    "0.1",
    "0.01",
    "0.001",
    "0.0001",
    "0.0123",
    "123.456",
    "1e10",
    "1E10",
    "1e+5",
    "1e05",
    "1e-05",
    "1e-2",
    "1e-3",
    "1e2",
    "12e1",
    "1.5e9",
    "0.5e-3",
    "2.5E-3",
    "15e-4",
    "10e9",
    "100e99",
    "-3.000e+2",
    "0e5",
    "0.000",
    "1e100",
]


@pytest.mark.parametrize(
    ("literal", "expected"),
    [
        ("1.0", "1"),
        ("0.0", "0"),
        ("+1.5", "1.5"),
        ("-0.0", "0"),
        ("10.00", "10"),
        ("1e10", "1e10"),
        ("0.0123", ".0123"),
        ("1000", "1e3"),
        ("12000", "12e3"),
        ("0.0001", "1e-4"),
        ("-1.50", "-1.5"),
        ("0.5e-3", "5e-4"),
        ("1.5e9", "15e8"),
        ("2.5E-3", ".0025"),
        ("1e+5", "1e5"),
        ("1e-05", "1e-5"),
        ("-.5", "-.5"),
        ("5.", "5"),
        (".0", "0"),
        ("00100", "100"),
        ("10e9", "1e10"),
        ("123456789", "123456789"),
    ],
)
def test_minify_number_known_forms(literal: str, expected: str) -> None:
    """验证：典型字面量被改写为预期的最短形式。"""
    assert minify_number(literal.encode()) == expected.encode()


@pytest.mark.parametrize(
    ("literal", "expected"),
    [
        ("100", "100"),
        ("1200", "1200"),
        ("1e2", "100"),
        ("0.001", ".001"),
        ("1e-3", ".001"),
    ],
)
def test_minify_number_keeps_fixed_form_at_thresholds(literal: str, expected: str) -> None:
    """验证：指数恰为 2 或相对指数恰为 -2 时保持定点形式。"""
    assert minify_number(literal.encode()) == expected.encode()


@pytest.mark.parametrize("literal", LITERALS)
def test_minify_number_preserves_value(literal: str) -> None:
    """验证：改写后数值不变。"""
    result = minify_number(literal.encode())

    assert Decimal(result.decode()) == Decimal(literal)


@pytest.mark.parametrize("literal", LITERALS)
def test_minify_number_never_grows(literal: str) -> None:
    """验证：改写结果长度不超过输入。"""
    assert len(minify_number(literal.encode())) <= len(literal)


@pytest.mark.parametrize("literal", LITERALS)
def test_minify_number_is_idempotent(literal: str) -> None:
    """验证：对结果再次改写不会发生变化。"""
    once = minify_number(literal.encode())

    assert minify_number(once) == once


def test_minify_number_zero_drops_sign() -> None:
    """验证：任何零值都输出单字节 0，负号被丢弃。"""
    for literal in (b"-0", b"-0.000", b"+00.0e7", b"-.0"):
        assert minify_number(literal) == b"0"


@pytest.mark.parametrize("literal", [b"1e", b"+1e", b"1e+", b"2.5e-", b"1ex"])
def test_minify_number_returns_input_when_exponent_invalid(literal: bytes) -> None:
    """验证：指数部分无法解析时原样返回输入。"""
    assert minify_number(literal) == literal


def test_minify_number_does_not_mutate_caller_buffer() -> None:
    """验证：调用方传入的 bytearray 不会被修改。"""
    buf = bytearray(b"-1.50")

    result = minify_number(buf)

    assert result == b"-1.5"
    assert buf == bytearray(b"-1.50")


def test_number_is_zero() -> None:
    """验证：绝对值小于 epsilon 的数值视为零，非法输入返回 False。"""
    assert number_is_zero(b"0.000001")
    assert number_is_zero(b"-1e-6")
    assert not number_is_zero(b"0.1")
    assert not number_is_zero(str(EPSILON).encode())
    assert number_is_zero(b"0.01", epsilon=0.1)
    assert not number_is_zero(b"abc")
