"""Dictionary merge helper.

"""

from __future__ import annotations

from typing import Any, Dict

def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge ``override`` into a copy of ``base``, recursing into nested mappings.

    Args:
        base (Dict[str, Any]): Mapping providing default values.
        override (Dict[str, Any]): Mapping whose values win on conflict.

    Returns:
        Dict[str, Any]: New merged mapping; neither input is mutated at the
        top level.
    """
    merged: Dict[str, Any] = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged
