from .codec import DataUri, parse_data_uri
from .minify import MediatypeDispatch, minify_data_uri

__all__ = [
    "DataUri",
    "MediatypeDispatch",
    "minify_data_uri",
    "parse_data_uri",
]
