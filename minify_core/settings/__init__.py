from .config import load_minify_config_from_env, read_minify_config
from .schema import MinifyConfig

__all__ = [
    "MinifyConfig",
    "load_minify_config_from_env",
    "read_minify_config",
]
