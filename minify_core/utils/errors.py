from __future__ import annotations

import json
from collections.abc import Mapping
from enum import Enum
from typing import Any

from .log import summarize_log_value


class MinifyErrorCode(str, Enum):
    BAD_DATA_URI = "BAD_DATA_URI"
    NOT_EXIST = "NOT_EXIST"


class MinifyException(Exception):
    def __init__(
        self,
        code: MinifyErrorCode,
        message: str,
        detail: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.detail = dict(detail) if detail else {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "message": self.message,
            "detail": self.detail,
        }

    def __str__(self) -> str:
        base = f"[{self.code.value}] {self.message}"
        if not self.detail:
            return base
        detail_json = json.dumps(
            summarize_log_value(self.detail), ensure_ascii=False, default=str
        )
        return f"{base} detail={detail_json}"
