from __future__ import annotations

import logging
import re
from collections.abc import Callable

import filetype

from ..datauri.minify import minify_data_uri
from ..numbers.minify import minify_number, number_is_zero
from ..settings.schema import MinifyConfig
from ..utils.errors import MinifyErrorCode, MinifyException
from ..utils.log import StructuredLogEmitter
from .normalize import minify_content_type, split_mediatype

GENERIC_MEDIATYPE = b"application/octet-stream"

# 子压缩器签名：func(minifier, data, params) -> data
# 传入 minifier 自身，便于子压缩器递归调用（如 SVG 压缩器再压缩其中的数值）。
MinifierFunc = Callable[["Minifier", bytes, dict[str, str]], bytes]


def sniff_mediatype(data: bytes) -> bytes:
    """根据字节内容嗅探 MIME，无法识别时返回空字节串。"""
    guessed = filetype.guess(data)
    mime = getattr(guessed, "mime", "") or ""
    return mime.encode("ascii")


class Minifier:
    """按 mediatype 分发的压缩器注册表，实例即为 `minify_data_uri` 所需的 dispatch。"""

    def __init__(self, config: MinifyConfig | None = None) -> None:
        self.config = config or MinifyConfig()
        self.structured_log = StructuredLogEmitter(
            logger=logging.getLogger(__name__),
            compress=self.config.compress_logs,
        )
        self._literal: dict[bytes, MinifierFunc] = {}
        self._patterns: list[tuple[re.Pattern[bytes], MinifierFunc]] = []

    def add(self, mediatype: bytes | str, func: MinifierFunc) -> None:
        """按精确 mediatype 注册子压缩器，参数部分会被忽略。"""
        if isinstance(mediatype, str):
            mediatype = mediatype.encode("ascii")
        key, _ = split_mediatype(mediatype)
        if not key:
            raise ValueError("mediatype must not be empty.")
        self._literal[key] = func

    def add_regexp(self, pattern: re.Pattern[bytes] | bytes, func: MinifierFunc) -> None:
        """按正则注册子压缩器；精确匹配优先，正则按注册顺序尝试。"""
        if isinstance(pattern, bytes):
            pattern = re.compile(pattern)
        self._patterns.append((pattern, func))

    def match(self, mediatype: bytes) -> MinifierFunc | None:
        func = self._literal.get(mediatype)
        if func is not None:
            return func
        for pattern, func in self._patterns:
            if pattern.match(mediatype):
                return func
        return None

    def minify(self, mediatype: bytes | str, data: bytes) -> bytes:
        """调用 mediatype 对应的子压缩器；未注册时抛出 NOT_EXIST。"""
        if isinstance(mediatype, str):
            mediatype = mediatype.encode("ascii")
        key, params = split_mediatype(mediatype)
        func = self.match(key)
        if func is None:
            raise MinifyException(
                MinifyErrorCode.NOT_EXIST,
                "no minifier registered for mediatype.",
                {"mediatype": key},
            )
        return func(self, data, params)

    def __call__(self, mediatype: bytes, data: bytes) -> bytes:
        key, params = split_mediatype(mediatype)
        func = self.match(key)
        if func is None and self.config.sniff_mediatype and key == GENERIC_MEDIATYPE:
            sniffed = sniff_mediatype(data)
            if sniffed:
                func = self.match(sniffed)
                self.structured_log.debug(
                    "dispatch.sniffed",
                    {"mediatype": key, "sniffed": sniffed, "matched": func is not None},
                )
        if func is None:
            self.structured_log.debug("dispatch.miss", {"mediatype": key})
            return data
        return func(self, data, params)

    def number(self, num: bytes) -> bytes:
        return minify_number(num)

    def content_type(self, content_type: bytes) -> bytes:
        return minify_content_type(content_type)

    def data_uri(self, data_uri: bytes) -> bytes:
        return minify_data_uri(self, data_uri)

    def is_zero(self, num: bytes) -> bool:
        return number_is_zero(num, self.config.epsilon)
