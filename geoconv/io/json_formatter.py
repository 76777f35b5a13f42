"""
JSON Formatter
==============

Token-level builder for PROJJSON-like output. Exporters open objects and
arrays, write keys and scalar values; the formatter assembles plain Python
containers and serialises them with the standard ``json`` module.

Usage:
    from geoconv.io.json_formatter import JSONFormatter

    f = JSONFormatter.create(indent=0)
    with f.object_context('Conversion'):
        f.add_obj_key('name')
        f.add('UTM zone 31N')
    f.to_string()  # '{"type": "Conversion", "name": "UTM zone 31N"}'
"""

import json
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Union

from geoconv.utils.config import get_json_indent

Container = Union[Dict[str, Any], List[Any]]


class JSONFormatter:
    """
    JSON builder.

    Parameters
    ----------
    indent : int
        Indentation of ``to_string`` output, 0 for a single line

    Attributes
    ----------
    output_id : bool
        Whether exporters write ``id`` members
    """

    def __init__(self, indent: int = 2):
        self.indent = indent
        self.output_id = True
        self._root: Optional[Container] = None
        self._stack: List[Container] = []
        self._pending_key: Optional[str] = None

    @classmethod
    def create(cls, indent: Optional[int] = None) -> 'JSONFormatter':
        """Formatter with the given indentation, else GEOCONV_JSON_INDENT."""
        return cls(get_json_indent(indent))

    def _attach(self, value: Any) -> None:
        if not self._stack:
            if self._root is not None:
                raise RuntimeError("JSON document already has a root value")
            self._root = value
            return
        parent = self._stack[-1]
        if isinstance(parent, list):
            parent.append(value)
            return
        if self._pending_key is None:
            raise RuntimeError("add_obj_key() must precede a value inside an object")
        parent[self._pending_key] = value
        self._pending_key = None

    @contextmanager
    def object_context(self, type_name: Optional[str] = None) -> Iterator[Dict[str, Any]]:
        """Open an object, with a leading ``"type"`` member when given."""
        obj: Dict[str, Any] = {}
        if type_name:
            obj['type'] = type_name
        self._attach(obj)
        self._stack.append(obj)
        try:
            yield obj
        finally:
            self._stack.pop()

    @contextmanager
    def array_context(self) -> Iterator[List[Any]]:
        array: List[Any] = []
        self._attach(array)
        self._stack.append(array)
        try:
            yield array
        finally:
            self._stack.pop()

    def add_obj_key(self, key: str) -> None:
        if not self._stack or not isinstance(self._stack[-1], dict):
            raise RuntimeError(f"add_obj_key('{key}') outside of an object")
        self._pending_key = key

    def add(self, value: Union[str, int, float, bool, None]) -> None:
        if isinstance(value, float) and value.is_integer() and abs(value) < 1e15:
            value = int(value)
        self._attach(value)

    def to_dict(self) -> Optional[Container]:
        return self._root

    def to_string(self) -> str:
        return json.dumps(self._root, indent=self.indent or None)
