from .dispatch import Minifier, MinifierFunc, sniff_mediatype
from .normalize import minify_content_type, split_mediatype

__all__ = [
    "Minifier",
    "MinifierFunc",
    "minify_content_type",
    "sniff_mediatype",
    "split_mediatype",
]
