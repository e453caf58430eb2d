from __future__ import annotations

import logging
from collections.abc import Callable

from ..utils.errors import MinifyErrorCode, MinifyException
from ..utils.log import StructuredLogEmitter
from .codec import (
    BASE64_MARKER,
    DATA_URI_SCHEME,
    DEFAULT_MEDIATYPE,
    base64_encoded_len,
    encode_base64_payload,
    encode_percent_payload,
    estimate_percent_len,
    parse_data_uri,
)

structured_log = StructuredLogEmitter(logger=logging.getLogger(__name__))

# 调用方注入的 mediatype 分发函数签名：dispatch(mediatype, data) -> data
MediatypeDispatch = Callable[[bytes, bytes], bytes]


def minify_data_uri(dispatch: MediatypeDispatch, data_uri: bytes | bytearray) -> bytes:
    """
    压缩 data URI：按 mediatype 分发压缩负载，再在 base64 与百分号编码中择短重新编码。

    输入无法解析时原样返回；dispatch 抛出的异常不做拦截。
    """
    try:
        mediatype, data = parse_data_uri(data_uri)
    except MinifyException as exc:
        if exc.code is not MinifyErrorCode.BAD_DATA_URI:
            raise
        structured_log.debug("data_uri.decode_failed", exc.to_dict())
        return bytes(data_uri)

    data = dispatch(mediatype, data)

    base64_len = len(BASE64_MARKER) + base64_encoded_len(len(data))
    percent_len = estimate_percent_len(data, base64_len)
    if percent_len > base64_len:
        payload = encode_base64_payload(data)
        mediatype += BASE64_MARKER
    else:
        payload = encode_percent_payload(data)
    structured_log.debug(
        "data_uri.encoded",
        {
            "mediatype": mediatype,
            "base64": percent_len > base64_len,
            "size": len(payload),
        },
    )

    # text/plain 是 data URI 的缺省类型，可省略
    if mediatype.startswith(DEFAULT_MEDIATYPE):
        mediatype = mediatype[len(DEFAULT_MEDIATYPE) :]
    return DATA_URI_SCHEME + mediatype + b"," + payload
