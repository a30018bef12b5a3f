"""Helpers for YAML parsing quirks that affect graph documents."""

from typing import Any, Dict, TypeVar

V = TypeVar("V")


def normalize_yaml_dict_keys(data: Dict[Any, V]) -> Dict[str, V]:
    """Return a copy of ``data`` whose keys are all strings.

    Node and edge identifiers are mapping keys in graph documents. YAML 1.1
    turns unquoted keys such as ``yes``, ``no``, ``on`` or ``off`` into Python
    booleans and bare numbers into ints, which would never match the string
    ``source``/``target`` references of edges. Booleans become "True"/"False",
    every other key goes through ``str``.

    Examples:
        >>> normalize_yaml_dict_keys({True: "a", 7: "b", "c": "c"})
        {'True': 'a', '7': 'b', 'c': 'c'}
    """
    normalized = {}
    for key, value in data.items():
        if isinstance(key, bool):
            key = str(key)
        normalized[str(key)] = value
    return normalized
