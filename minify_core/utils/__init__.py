from .errors import MinifyErrorCode, MinifyException
from .log import StructuredLogEmitter, get_structured_logger

__all__ = [
    "MinifyErrorCode",
    "MinifyException",
    "StructuredLogEmitter",
    "get_structured_logger",
]
