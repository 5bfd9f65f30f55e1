from __future__ import annotations

import logging
from abc import ABC
from typing import Dict, Any, Union, Optional, List, Tuple

from armlib.types import Json

log = logging.getLogger("arm." + __name__)

Path = Tuple[Union[str, int], ...]


# General idea is taken from: https://github.com/Onyo/jsonbender
class Bender(ABC):
    """
    Base bending class: takes a wire json value and returns the value to use.
    Benders are chained with `>>`: the result of the left side is the source of the right side.
    """

    def __call__(self, source: Any) -> Any:
        return self.execute(source)

    def execute(self, source: Any) -> Any:
        return source

    def __rshift__(self, other: Bender) -> Bender:
        return Compose(self, other)

    # benders are used as values in mappings and are compared by identity
    __hash__ = object.__hash__


class BendingError(Exception):
    pass


Mapping = Union[Bender, Dict[str, Any], List[Any]]


class S(Bender):
    """
    Select the value under the given path of a json object.
    Missing keys and non object values on the way yield the default.
    """

    def __init__(self, *path: Union[str, int], default: Optional[Any] = None):
        if not path:
            raise ValueError("No path given")
        self._path = path
        self._default = default

    @property
    def path(self) -> Path:
        return self._path

    def execute(self, source: Any) -> Any:
        try:
            for key in self._path:
                source = source[key]
            return source
        except (KeyError, TypeError, IndexError):
            return self._default


class Compose(Bender):
    """
    Feed the result of the first bender into the second one.
    A missing (None) value stops the chain.
    """

    def __init__(self, first: Bender, second: Bender):
        self._first = first
        self._second = second

    @property
    def first(self) -> Bender:
        return self._first

    @property
    def second(self) -> Bender:
        return self._second

    def execute(self, source: Any) -> Any:
        value = self._first(source)
        return self._second(value) if value is not None else None


class Bend(Bender):
    """
    Bend a nested json object with the given mapping.
    """

    def __init__(self, mapping: Mapping):
        self._mapping = mapping

    def execute(self, value: Optional[Json]) -> Any:
        return bend(self._mapping, value) if isinstance(value, dict) else None


class ForallBend(Bender):
    """
    Bend every element of a json array with the given mapping.

    >>> bend({"names": S("items") >> ForallBend({"n": S("name")})}, {"items": [{"name": "a"}]})
    {'names': [{'n': 'a'}]}
    """

    def __init__(self, mapping: Mapping):
        self._mapping = mapping

    def execute(self, source: Any) -> Any:
        if source is None:
            return None
        return [bend(self._mapping, elem) for elem in source]


class MapDict(Bender):
    """
    Map the keys and/or values of a json object.
    A json array is turned into an object: the key bender computes the key of each element.
    """

    def __init__(self, key_bender: Optional[Bender] = None, value_bender: Optional[Bender] = None):
        self._key_bender = key_bender
        self._value_bender = value_bender

    def execute(self, value: Union[List[Any], Dict[Any, Any]]) -> Dict[Any, Any]:
        def do_bend(v: Any, bender: Optional[Bender]) -> Any:
            return bender(v) if bender else v

        if isinstance(value, list):
            return {do_bend(v, self._key_bender): do_bend(v, self._value_bender) for v in value}
        elif isinstance(value, dict):
            return {do_bend(k, self._key_bender): do_bend(v, self._value_bender) for k, v in value.items()}
        else:
            raise ValueError(f"Expected a list or dict, got {type(value)}")


def source_path(bender: Bender) -> Optional[Path]:
    """
    The path in the source document a bender reads from.
    For a composition the path of the first element is used: S("a", "b") >> Bend(...) -> ("a", "b").
    Returns None, if the bender does not select a path.
    """
    if isinstance(bender, S):
        return bender.path
    elif isinstance(bender, Compose):
        return source_path(bender.first)
    else:
        return None


def bend(mapping: Mapping, source: Any) -> Any:
    """
    Create a new json structure from the given mapping.
    Benders in the mapping are called with the source, nested objects and arrays are bent recursively,
    all other values are taken as is.
    """
    if isinstance(mapping, list):
        return [bend(v, source) for v in mapping]
    elif isinstance(mapping, dict):
        result = {}
        for k, v in mapping.items():
            try:
                result[k] = bend(v, source)
            except Exception as e:
                log.error(e, exc_info=True)
                raise BendingError(f"Error for key {k}: {e}") from e
        return result
    elif isinstance(mapping, Bender):
        return mapping(source)
    else:
        return mapping
