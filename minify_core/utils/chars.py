from __future__ import annotations

WHITESPACE = frozenset(b" \t\n\r\f")


def is_whitespace(c: int) -> bool:
    """判断单个字节是否为空白字符。"""
    return c in WHITESPACE


def trim_whitespace(b: bytes) -> bytes:
    """去除首尾空白字节。"""
    return b.strip(b" \t\n\r\f")


def to_lower(c: int) -> int:
    """ASCII 大写字母转小写，其余字节原样返回。"""
    if 0x41 <= c <= 0x5A:
        return c + 0x20
    return c


def parse_int(b: bytes) -> int | None:
    """严格解析十进制整数，允许一个前导符号；非法输入返回 None。"""
    digits = b
    if digits[:1] in (b"+", b"-"):
        digits = digits[1:]
    if not digits or not digits.isdigit():
        return None
    return int(b)
