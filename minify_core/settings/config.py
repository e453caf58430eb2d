from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import fields
from typing import Any

from .keys import (
    CONFIG_COMPRESS_LOGS_KEY,
    CONFIG_EPSILON_KEY,
    CONFIG_SNIFF_MEDIATYPE_KEY,
    ENV_COMPRESS_LOGS_KEY,
    ENV_EPSILON_KEY,
    ENV_SNIFF_MEDIATYPE_KEY,
)
from .schema import MinifyConfig

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _require_mapping(raw_config: Any) -> Mapping[str, Any]:
    """确保原始配置是键值映射。"""
    if not isinstance(raw_config, Mapping):
        raise TypeError("Minify config must be a mapping object.")
    return raw_config


def _read_epsilon(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{CONFIG_EPSILON_KEY} must be a number.")
    if value < 0:
        raise ValueError(f"{CONFIG_EPSILON_KEY} must be >= 0.")
    return float(value)


def _read_flag(key: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"{key} must be a bool.")
    return value


def read_minify_config(raw_config: Any) -> MinifyConfig:
    """读取并返回压缩配置；缺失字段使用默认值，额外字段忽略。"""
    cfg = _require_mapping(raw_config)
    known = {f.name for f in fields(MinifyConfig)}
    payload: dict[str, Any] = {}
    for key in known & cfg.keys():
        value = cfg[key]
        if key == CONFIG_EPSILON_KEY:
            payload[key] = _read_epsilon(value)
        else:
            payload[key] = _read_flag(key, value)
    return MinifyConfig(**payload)


def is_env_enabled(value: str) -> bool:
    return value.strip().lower() in _TRUE_VALUES


def load_minify_config_from_env(
    environ: Mapping[str, str] | None = None,
) -> MinifyConfig:
    """从环境变量读取压缩配置，未设置的字段使用默认值。"""
    env = os.environ if environ is None else environ
    raw: dict[str, Any] = {}

    epsilon = env.get(ENV_EPSILON_KEY, "").strip()
    if epsilon:
        try:
            raw[CONFIG_EPSILON_KEY] = float(epsilon)
        except ValueError as exc:
            raise ValueError(f"{ENV_EPSILON_KEY} must be a number.") from exc

    for env_key, config_key in (
        (ENV_SNIFF_MEDIATYPE_KEY, CONFIG_SNIFF_MEDIATYPE_KEY),
        (ENV_COMPRESS_LOGS_KEY, CONFIG_COMPRESS_LOGS_KEY),
    ):
        value = env.get(env_key)
        if value is not None and value.strip():
            raw[config_key] = is_env_enabled(value)

    return read_minify_config(raw)
