from __future__ import annotations

from ..utils.chars import is_whitespace, to_lower, trim_whitespace


def minify_content_type(content_type: bytes | bytearray) -> bytes:
    """
    压缩 MIME content-type：移除引号外的全部空白，并把引号外的字符转小写。

    引号状态在每个 `"` 处翻转，不处理转义；引号内的内容（含空白与大小写）原样保留。
    """
    buf = bytearray(content_type)
    j = 0
    in_string = False
    for c in buf:
        if not in_string and is_whitespace(c):
            continue
        if c == 0x22:  # "
            in_string = not in_string
        elif not in_string:
            c = to_lower(c)
        buf[j] = c
        j += 1
    del buf[j:]
    return bytes(buf)


def split_mediatype(content_type: bytes | bytearray) -> tuple[bytes, dict[str, str]]:
    """拆分 content-type，返回 `(规范化 mediatype, 参数字典)`；参数键转小写，值去掉引号。"""
    mediatype, _, raw_params = bytes(content_type).partition(b";")
    params: dict[str, str] = {}
    for segment in raw_params.split(b";"):
        key, sep, value = segment.partition(b"=")
        key = trim_whitespace(key)
        if not sep or not key:
            continue
        value = trim_whitespace(value)
        if len(value) >= 2 and value.startswith(b'"') and value.endswith(b'"'):
            value = value[1:-1]
        params[key.decode("latin-1").lower()] = value.decode("latin-1")
    return minify_content_type(mediatype), params
