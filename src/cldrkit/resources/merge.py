"""Deep merge of custom overrides into bundled resource data.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping

__all__ = ["deep_merge"]


def deep_merge(base: object, override: object) -> object:
    """Merge override over base without mutating either.

    Merging recurses only where both sides are mappings; override keys take
    precedence. Wherever either side is not a mapping the override value
    replaces the base value whole, so lists are never merged element-wise.

    Args:
        base: Bundled value
        override: Custom value taking precedence

    Returns:
        Merged value (a new dict at every merged mapping node)

    Example:
        >>> deep_merge({"a": {"x": 1, "y": 2}}, {"a": {"x": 9}})
        {'a': {'x': 9, 'y': 2}}
        >>> deep_merge({"a": [1, 2]}, {"a": [9]})
        {'a': [9]}
    """
    if not (isinstance(base, Mapping) and isinstance(override, Mapping)):
        return override

    merged = dict(base)
    for key, value in override.items():
        merged[key] = deep_merge(base[key], value) if key in base else value
    return merged
