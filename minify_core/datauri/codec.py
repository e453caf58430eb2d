from __future__ import annotations

import base64
import binascii
from typing import NamedTuple
from urllib.parse import quote_plus, unquote_to_bytes

from ..utils.chars import trim_whitespace
from ..utils.errors import MinifyErrorCode, MinifyException

DATA_URI_SCHEME = b"data:"
BASE64_MARKER = b";base64"
DEFAULT_MEDIATYPE = b"text/plain"

# 百分号编码中无需转义的字节；空格会被编码为 `+`
_UNRESERVED = frozenset(
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_.~ "
)


class DataUri(NamedTuple):
    mediatype: bytes
    data: bytes


def _bad_data_uri(message: str, data_uri: bytes) -> MinifyException:
    return MinifyException(
        MinifyErrorCode.BAD_DATA_URI,
        message,
        {"data_uri": data_uri},
    )


def decode_base64_payload(value: bytes) -> bytes:
    """base64 => bytes 同时校验 value 是否有效"""
    try:
        return base64.b64decode(value, validate=True)
    except (ValueError, binascii.Error) as exc:
        raise ValueError("base64 payload is invalid.") from exc


def encode_base64_payload(data: bytes) -> bytes:
    """bytes => base64"""
    return base64.b64encode(data)


def encode_percent_payload(data: bytes) -> bytes:
    """按 URL 查询串规则转义，并把 `"` 转义为 `\\"` 以便嵌入带引号的属性值。"""
    escaped = quote_plus(data, safe="").encode("ascii")
    return escaped.replace(b'"', b'\\"')


def base64_encoded_len(n: int) -> int:
    return (n + 2) // 3 * 4


def estimate_percent_len(data: bytes, limit: int) -> int:
    """
    估算百分号编码长度：保留字符计 1，其余计 2。

    超过 limit 即停止扫描，此时返回值只保证大于 limit。
    """
    total = 0
    for c in data:
        total += 1 if c in _UNRESERVED else 2
        if total > limit:
            break
    return total


def parse_data_uri(data_uri: bytes | bytearray) -> DataUri:
    """
    按 RFC 2397 解析 data URI，返回 `(mediatype, 解码后的数据)`。

    mediatype 缺省为 `text/plain`；带 `;base64` 标记时严格解码 base64，
    否则按查询串规则反转义（`+` 视为空格）。格式错误时抛出 BAD_DATA_URI。
    """
    raw = bytes(data_uri)
    if len(raw) <= len(DATA_URI_SCHEME) or not raw.startswith(DATA_URI_SCHEME):
        raise _bad_data_uri("data uri must start with 'data:'.", raw)

    # data:[meta],[payload]
    header_and_data = raw[len(DATA_URI_SCHEME) :]
    meta, sep, payload = header_and_data.partition(b",")
    if not sep:
        raise _bad_data_uri("data uri must contain ',' separator.", raw)

    mediatype = bytearray()
    is_base64 = False
    i = 0
    for j, c in enumerate(meta + b","):
        if c not in b"=;,":
            continue
        token = trim_whitespace(meta[i:j])
        if c != 0x3D and token == b"base64":  # 不是 =
            if mediatype.endswith(b";"):
                del mediatype[-1]
            is_base64 = True
        else:
            mediatype += token
            if c != 0x2C:
                mediatype.append(c)
        i = j + 1

    if not mediatype:
        mediatype = bytearray(DEFAULT_MEDIATYPE)
    elif mediatype.startswith(b";"):
        mediatype[:0] = DEFAULT_MEDIATYPE

    if is_base64:
        try:
            data = decode_base64_payload(payload)
        except ValueError as exc:
            raise _bad_data_uri("data uri contains invalid base64 payload.", raw) from exc
    else:
        data = unquote_to_bytes(payload.replace(b"+", b" "))
    return DataUri(mediatype=bytes(mediatype), data=data)
