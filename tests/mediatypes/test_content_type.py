from __future__ import annotations

import pytest
from minify_core.mediatypes import minify_content_type, split_mediatype


def test_minify_content_type_keeps_quoted_region() -> None:
    """验证：引号外空白被移除并转小写，引号内空白与大小写保持不变。"""
    result = minify_content_type(b' Text/HTML ; Charset="UTF 8" ')

    assert result == b'text/html;charset="UTF 8"'


@pytest.mark.parametrize(
    ("content_type", "expected"),
    [
        (b"text/html", b"text/html"),
        (b"TEXT/CSS", b"text/css"),
        (b"\ttext/plain;\r\n charset=utf-8\f", b"text/plain;charset=utf-8"),
        (b"", b""),
        (b'a; b="x y" ;C="D E"', b'a;b="x y";c="D E"'),
    ],
)
def test_minify_content_type_cases(content_type: bytes, expected: bytes) -> None:
    """验证：不同空白与大小写组合的压缩结果。"""
    assert minify_content_type(content_type) == expected


def test_minify_content_type_unterminated_quote_keeps_tail() -> None:
    """验证：引号未闭合时，其后的内容按引号内处理。"""
    assert minify_content_type(b'A; b="X Y') == b'a;b="X Y'


def test_minify_content_type_never_grows() -> None:
    """验证：输出长度不超过输入。"""
    content_type = b'  Multipart/Form-Data ;  Boundary="--AbC 123"  '

    assert len(minify_content_type(content_type)) <= len(content_type)


def test_split_mediatype_returns_params() -> None:
    """验证：split_mediatype 返回规范化 mediatype 与去引号的参数。"""
    mediatype, params = split_mediatype(b'Image/SVG+XML ; Charset="UTF-8"; bad')

    assert mediatype == b"image/svg+xml"
    assert params == {"charset": "UTF-8"}
