from .minify import EPSILON, minify_number, number_is_zero

__all__ = [
    "EPSILON",
    "minify_number",
    "number_is_zero",
]
