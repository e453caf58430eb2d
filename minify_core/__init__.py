from .datauri import DataUri, minify_data_uri, parse_data_uri
from .mediatypes import Minifier, minify_content_type
from .numbers import EPSILON, minify_number, number_is_zero
from .settings import MinifyConfig, load_minify_config_from_env, read_minify_config
from .utils.errors import MinifyErrorCode, MinifyException

__all__ = [
    "EPSILON",
    "DataUri",
    "Minifier",
    "MinifyConfig",
    "MinifyErrorCode",
    "MinifyException",
    "load_minify_config_from_env",
    "minify_content_type",
    "minify_data_uri",
    "minify_number",
    "number_is_zero",
    "parse_data_uri",
    "read_minify_config",
]
