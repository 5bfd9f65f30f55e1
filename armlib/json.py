from datetime import datetime, date
from types import UnionType, NoneType
from typing import TypeVar, Any, Type, Optional, Union, List, get_args, Literal, get_origin, Callable

import attrs
import cattrs
from cattrs import override
from cattrs.gen import make_dict_unstructure_fn
from dateutil.parser import isoparse

from armlib.logger import log
from armlib.types import Json, JsonElement
from armlib.utils import rfc3339_str

AnyT = TypeVar("AnyT")

# the global converter instance
__converter = cattrs.Converter()

# ignore all private attributes
__converter.register_unstructure_hook_factory(
    attrs.has,
    lambda cls: make_dict_unstructure_fn(
        cls,
        __converter,
        _cattrs_omit_if_default=False,
        _cattrs_use_linecache=True,
        _cattrs_use_alias=False,
        _cattrs_include_init_false=False,
        **{a.name: override(omit=True) for a in attrs.fields(cls) if a.name.startswith("_")},
    ),
)


# work around until this is solved: https://github.com/python-attrs/cattrs/issues/278
def is_primitive_or_primitive_union(t: Any) -> bool:
    if t in (str, bytes, int, float, bool, NoneType):
        return True
    origin = get_origin(t)
    if origin is Literal:
        return True
    if (base := getattr(t, "__supertype__", None)) is not None:
        return is_primitive_or_primitive_union(base)
    if origin in (UnionType, Union):
        return all(is_primitive_or_primitive_union(ty) for ty in get_args(t))
    return False


__converter.register_structure_hook_func(is_primitive_or_primitive_union, lambda v, ty: v)


def register_json(
    cls: Type[AnyT],
    to_json_fn: Optional[Callable[[AnyT], JsonElement]] = None,
    from_json_fn: Optional[Callable[[Any], AnyT]] = None,
) -> None:
    """
    Register a json marshaller/unmarshaller for the given class.
    :param cls: the class to register
    :param to_json_fn: the function to convert the class to json
    :param from_json_fn: the function to convert json to the class
    """
    log.trace("Register json structure hooks for class %s", cls.__name__)  # type: ignore
    if from_json_fn is not None:
        __converter.register_structure_hook(cls, lambda obj, _: from_json_fn(obj))
    if to_json_fn is not None:
        __converter.register_unstructure_hook(cls, to_json_fn)


def register_json_factory(
    predicate: Callable[[Any], bool],
    structure_factory: Optional[Callable[[Any], Callable[[Any, Any], Any]]] = None,
    unstructure_factory: Optional[Callable[[Any], Callable[[Any], Any]]] = None,
) -> None:
    """
    Register marshaller/unmarshaller factories for a whole family of classes.
    The factory is called once per class that matches the predicate.
    :param predicate: selects the classes handled by the factories.
    :param structure_factory: creates the function to convert json to the class.
    :param unstructure_factory: creates the function to convert the class to json.
    """
    if structure_factory is not None:
        __converter.register_structure_hook_factory(predicate, structure_factory)
    if unstructure_factory is not None:
        __converter.register_unstructure_hook_factory(predicate, unstructure_factory)


# Register some default types not covered in cattrs
register_json(datetime, rfc3339_str, isoparse)
register_json(date, lambda obj: obj.isoformat(), date.fromisoformat)


def to_json(node: Any) -> Json:
    """
    Use this method, if the given node is known as complex object,
    so the result will be a json object.
    """
    return __converter.unstructure(node)  # type: ignore


def to_json_element(node: Any) -> JsonElement:
    """
    Same as to_json, but for values that are not known to be complex objects.
    """
    return __converter.unstructure(node)  # type: ignore


def from_json(js: JsonElement, clazz: Type[AnyT]) -> AnyT:
    """
    Loads a json object into a python object.
    :param js: the json object to load.
    :param clazz: the type of the python object.
    :return: the loaded python object.
    """
    try:
        return __converter.structure(js, clazz)
    except Exception as e:
        log.debug(f"Can not deserialize json into class {clazz.__name__}: {js}. Error: {e}")
        raise


def value_in_path(element: JsonElement, path_or_name: Union[List[str], str]) -> Optional[Any]:
    """
    Access a value in a json object by a defined path.
    {"a": {"b": {"c": 1}}} -> value_in_path({"a": {"b": {"c": 1}}}, ["a", "b", "c"]) -> 1
    The path can be defined as a list of strings or as a string with dots as separator.
    """
    path = path_or_name if isinstance(path_or_name, list) else path_or_name.split(".")
    at = len(path)

    def at_idx(current: JsonElement, idx: int) -> Optional[Any]:
        if at == idx:
            return current
        elif current is None or not isinstance(current, dict) or path[idx] not in current:
            return None
        else:
            return at_idx(current[path[idx]], idx + 1)

    return at_idx(element, 0)


def set_value_in_path(element: JsonElement, path_or_name: Union[List[str], str], js: Optional[Json] = None) -> Json:
    path = path_or_name if isinstance(path_or_name, list) else path_or_name.split(".")
    at = len(path) - 1

    def at_idx(current: Json, idx: int) -> None:
        if at == idx:
            current[path[-1]] = element
        else:
            value = current.get(path[idx])
            if not isinstance(value, dict):
                value = {}
                current[path[idx]] = value
            at_idx(value, idx + 1)

    js = js if js is not None else {}
    at_idx(js, 0)
    return js

