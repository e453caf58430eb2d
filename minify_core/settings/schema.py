from __future__ import annotations

from dataclasses import dataclass

from ..numbers import EPSILON


@dataclass(slots=True)
class MinifyConfig:
    epsilon: float = EPSILON
    """绝对值小于该阈值的数值视为零"""
    sniff_mediatype: bool = False
    """data URI 声明为通用二进制类型时，是否嗅探负载类型用于分发"""
    compress_logs: bool = True
    """结构化日志是否压缩复杂字段"""
