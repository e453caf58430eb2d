from __future__ import annotations

import logging

from ..utils.chars import parse_int
from ..utils.log import StructuredLogEmitter

structured_log = StructuredLogEmitter(logger=logging.getLogger(__name__))

EPSILON = 0.00001
"""最接近零但仍不视为零的数值。"""

ZERO = b"0"


def _move(buf: bytearray, dst: int, src_start: int, src_end: int) -> int:
    """在同一缓冲区内搬移 `buf[src_start:src_end]` 到 `dst`，超出缓冲区的部分截断。"""
    n = min(src_end - src_start, len(buf) - dst)
    if n > 0:
        buf[dst : dst + n] = buf[src_start : src_start + n]
    return n


def minify_number(num: bytes | bytearray) -> bytes:
    """
    将数值字面量改写为数值相同的最短形式。

    输入需已被词法分析识别为十进制数（可带符号、小数与指数）。
    改写只在输入副本内左移压缩，结果长度不超过输入；指数部分无法解析时原样返回输入。
    """
    buf = bytearray(num)
    neg = False
    start = 0
    dot = -1
    end = len(buf)
    exp = 0

    # 去掉前导 +，记录负号
    if buf[:1] == b"+":
        del buf[0]
        end -= 1
    elif buf[:1] == b"-":
        neg = True
        start = 1

    for i, c in enumerate(buf):
        if c == 0x2E:  # .
            dot = i
        elif c in (0x65, 0x45):  # e E
            end = i
            j = i + 1
            if j < len(buf) and buf[j] == 0x2B:
                j += 1
            parsed = parse_int(bytes(buf[j:]))
            if parsed is None:
                structured_log.debug(
                    "number.exponent_invalid",
                    {"number": bytes(num)},
                )
                return bytes(num)
            exp = parsed
            break
    if dot == -1:
        dot = end

    # 去掉整数部分前导零与小数部分尾随零
    while start < end and buf[start] == 0x30:
        start += 1
    i = end - 1
    while i > dot:
        if buf[i] != 0x30:
            end = i + 1
            break
        i -= 1
    if i == dot:
        end = dot
    if start == end:
        return ZERO

    # 把尾随零或小数点位移折算进指数
    if end == dot:
        i = end - 1
        while i >= start:
            if buf[i] != 0x30:
                exp += end - i - 1
                end = i + 1
                break
            i -= 1
    else:
        exp -= end - dot - 1
        if start == dot:
            for i in range(dot + 1, end):
                if buf[i] != 0x30:
                    _move(buf, dot, i, end)
                    end -= i - dot
                    break
        else:
            _move(buf, dot, dot + 1, end)
            end -= 1

    rel_exp = exp + end - start
    if exp == 0:
        pass
    elif rel_exp < -2 or exp > 2:
        buf[end] = 0x65  # e
        end += 1
        if exp < 0:
            buf[end] = 0x2D  # -
            end += 1
            exp = -exp
        digits = str(exp).encode("ascii")
        buf[end : end + len(digits)] = digits
        end += len(digits)
    elif exp < 0:
        if rel_exp > 0:
            point = start + rel_exp
            _move(buf, point + 1, point, end)
            buf[point] = 0x2E
            end += 1
        else:
            _move(buf, start - rel_exp + 1, start, end)
            buf[start] = 0x2E
            for i in range(1, -rel_exp + 1):
                buf[start + i] = 0x30
            end += 1 - rel_exp
    else:
        # 0 < exp <= 2，直接补零
        for i in range(exp):
            buf[end + i] = 0x30
        end += exp

    if neg:
        start -= 1
        buf[start] = 0x2D
    return bytes(buf[start:end])


def number_is_zero(num: bytes | bytearray, epsilon: float = EPSILON) -> bool:
    """数值绝对值小于 epsilon 时视为零；无法解析为浮点数时返回 False。"""
    try:
        value = float(bytes(num).decode("ascii"))
    except (UnicodeDecodeError, ValueError):
        return False
    return abs(value) < epsilon
