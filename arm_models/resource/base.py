import logging
from datetime import datetime
from enum import Enum, StrEnum
from functools import lru_cache
from typing import (
    Any,
    Callable,
    ClassVar,
    Dict,
    Iterator,
    List,
    Optional,
    Tuple,
    Type,
    TypeVar,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)

import attrs
from attr import define, field
from dateutil.parser import isoparse

from arm_models.config import arm_models_config
from armlib.json import from_json as structure, register_json, register_json_factory, to_json_element
from armlib.json import set_value_in_path, value_in_path
from armlib.json_bender import Bender, S, Bend, ForallBend, bend, source_path
from armlib.types import Json, JsonElement

log = logging.getLogger("arm.models")

T = TypeVar("T")
M = TypeVar("M", bound="AzureModel")
E = TypeVar("E", bound="ExtensibleEnum")
WirePath = Tuple[str, ...]


class DeserializationError(ValueError):
    """
    A payload could not be decoded into a model.
    Raised if a required field is missing or null, or if a value has an incompatible primitive type.
    """

    def __init__(self, path: str, clazz: type, message: str) -> None:
        super().__init__(f"{message} at {path} (decoding {clazz.__name__})")
        self.path = path
        self.clazz = clazz
        self.message = message


class ExtensibleEnum(StrEnum):
    """
    String enumeration that accepts values introduced by the service after this version was released.

    Known wire values resolve to their member, every other string resolves to a pseudo member named
    `UNKNOWN_VALUE` that carries the received string as value:

    >>> HugepagesSize("4M").is_unknown_value
    True
    >>> str(HugepagesSize("4M"))
    '4M'
    """

    @classmethod
    def _missing_(cls, value: object) -> Any:
        if isinstance(value, str):
            return cls._unknown_value(value)
        return None

    @classmethod
    def _unknown_value(cls: Type[E], value: str) -> E:
        if arm_models_config().log_unknown_enum_values:
            log.debug(f"Unknown value {value} for {cls.__name__}")
        # pseudo members are not cached: every unknown value is a new instance
        member = str.__new__(cls, value)
        member._name_ = "UNKNOWN_VALUE"
        member._value_ = value
        return member

    @classmethod
    def parse(cls: Type[E], value: str) -> E:
        return cls(value)

    @property
    def is_unknown_value(self) -> bool:
        return self._name_ == "UNKNOWN_VALUE"


register_json(ExtensibleEnum, lambda e: e.value)


@lru_cache(maxsize=None)
def _field_types(clazz: type) -> Dict[str, Any]:
    return get_type_hints(clazz)


@lru_cache(maxsize=None)
def _wire_fields(clazz: type) -> List[Tuple[attrs.Attribute, WirePath]]:  # type: ignore
    mapping: Dict[str, Bender] = getattr(clazz, "mapping", {})
    result = []
    for a in attrs.fields(clazz):
        if (bender := mapping.get(a.name)) is not None and (path := source_path(bender)) is not None:
            result.append((a, tuple(str(p) for p in path)))
    return result


def wire_names(clazz: type) -> Dict[str, str]:
    """
    The rename table of the given model class: python attribute name -> wire name.
    Nested wire paths are joined with a dot.
    """
    return {a.name: ".".join(path) for a, path in _wire_fields(clazz)}


def _is_collection_default(a: attrs.Attribute) -> bool:  # type: ignore
    return isinstance(a.default, attrs.Factory)  # type: ignore


def _is_required(a: attrs.Attribute) -> bool:  # type: ignore
    return a.default is attrs.NOTHING


@define(slots=False, kw_only=True)
class AzureModel:
    kind: ClassVar[str] = "azure_model"
    # The mapping from the wire json into the python representation.
    mapping: ClassVar[Dict[str, Bender]] = {}
    # Wire name of the property that selects the concrete subtype.
    discriminator: ClassVar[Optional[str]] = None
    # The value of the discriminator property for registered subtypes.
    discriminator_value: ClassVar[Optional[str]] = None
    _subtypes: ClassVar[Dict[str, type]] = {}

    @classmethod
    def register_subtype(cls, *values: str) -> Callable[[Type[M]], Type[M]]:
        """
        Class decorator: decode payloads with one of the given discriminator values into the decorated class.
        """

        def register(subtype: Type[M]) -> Type[M]:
            if "_subtypes" not in cls.__dict__:
                cls._subtypes = {}
            for value in values:
                cls._subtypes[value] = subtype
            if "discriminator_value" not in subtype.__dict__ and values:
                subtype.discriminator_value = values[0]
            return subtype

        return register

    @classmethod
    def subtypes(cls) -> Dict[str, type]:
        return {k: v for k, v in cls._subtypes.items() if issubclass(v, cls)}

    @classmethod
    def subtype_for(cls: Type[M], js: Json) -> Type[M]:
        """
        Select the class to decode the given wire json into.
        Unknown discriminator values are decoded into the requested class.
        """
        if cls.discriminator is None:
            return cls
        value = value_in_path(js, cls.discriminator.split("."))
        if isinstance(value, str) and (subtype := cls.subtypes().get(value)) is not None:
            return subtype
        return cls

    @classmethod
    def _python_subtype_for(cls: Type[M], js: Json) -> Type[M]:
        if cls.discriminator is None:
            return cls
        for a, path in _wire_fields(cls):
            if ".".join(path) == cls.discriminator:
                value = js.get(a.name)
                if isinstance(value, str) and (subtype := cls.subtypes().get(value)) is not None:
                    return subtype
        return cls

    @classmethod
    def from_json(cls: Type[M], js: Json) -> M:
        """
        Decode the wire json into an instance of this class (or a registered subtype).
        Unknown properties are ignored. Absent and null properties get the field default.
        :raises DeserializationError: if a required property is missing or a value has the wrong type.
        """
        if not isinstance(js, dict):
            raise DeserializationError("$", cls, f"Expected a json object but got {type(js).__name__}")
        validate(js, cls)
        clazz = cls.subtype_for(js)
        return structure(bend(clazz.mapping, js), clazz)

    def to_json(self) -> Json:
        """
        Encode this model as wire json.
        Absent values and empty collections are omitted.
        """
        return to_json_element(self)  # type: ignore

    def value_or_default(self, name: str) -> Any:
        """
        The value of the given attribute.
        Optional values the service fills in when absent declare this fallback as `default_value` in the metadata.
        """
        value = getattr(self, name)
        if value is None:
            return attrs.fields_dict(type(self))[name].metadata.get("default_value")
        return value


def _unstructure_model(cls: type) -> Callable[[Any], Json]:
    def unstructure(obj: Any) -> Json:
        result: Json = {}
        for a, path in _wire_fields(type(obj)):
            value = getattr(obj, a.name)
            if value is None:
                continue
            if not _is_required(a) and _is_collection_default(a) and isinstance(value, (list, dict)) and not value:
                continue
            set_value_in_path(to_json_element(value), list(path), result)
        return result

    return unstructure


def _structure_model(cls: Type[M]) -> Callable[[Any, Any], M]:
    def structure_model(js: Any, _: Any) -> M:
        if isinstance(js, cls):
            return js
        if not isinstance(js, dict):
            raise ValueError(f"Expected a json object to create {cls.__name__}, but got: {js!r}")
        clazz = cls._python_subtype_for(js)
        types = _field_types(clazz)
        kwargs: Dict[str, Any] = {}
        for a in attrs.fields(clazz):
            # null and absent values both leave the attribute default in place
            if a.init and (value := js.get(a.name)) is not None:
                kwargs[a.alias] = structure(value, types[a.name])
        return clazz(**kwargs)

    return structure_model


def _is_model(cls: Any) -> bool:
    return isinstance(cls, type) and issubclass(cls, AzureModel)


register_json_factory(_is_model, _structure_model, _unstructure_model)


class Discriminated(Bender):
    """
    Bend a json object with the mapping of the subtype selected by its discriminator.
    Use this bender instead of `Bend(Base.mapping)` for polymorphic models.
    """

    def __init__(self, clazz: Type["AzureModel"]):
        self._clazz = clazz

    def execute(self, source: Any) -> Any:
        if isinstance(source, dict):
            return bend(self._clazz.subtype_for(source).mapping, source)
        return None


def _check_value(value: JsonElement, tpe: Any, path: str, clazz: type) -> None:
    origin = get_origin(tpe)
    if tpe is Any:
        return
    elif origin is Union:
        args = [a for a in get_args(tpe) if a is not type(None)]
        if value is not None and len(args) == 1:
            _check_value(value, args[0], path, clazz)
    elif value is None:
        raise DeserializationError(path, clazz, "Unexpected null value")
    elif origin in (list, List):
        if not isinstance(value, list):
            raise DeserializationError(path, clazz, f"Expected a list but got {type(value).__name__}")
        (item_type,) = get_args(tpe) or (Any,)
        for idx, item in enumerate(value):
            _check_value(item, item_type, f"{path}[{idx}]", clazz)
    elif origin in (dict, Dict):
        if not isinstance(value, dict):
            raise DeserializationError(path, clazz, f"Expected a json object but got {type(value).__name__}")
        _, value_type = get_args(tpe) or (str, Any)
        for key, item in value.items():
            _check_value(item, value_type, f"{path}.{key}", clazz)
    elif _is_model(tpe):
        if not isinstance(value, dict):
            raise DeserializationError(path, clazz, f"Expected a json object but got {type(value).__name__}")
        validate(value, tpe, path)
    elif isinstance(tpe, type):
        _check_primitive(value, tpe, path, clazz)


def _check_primitive(value: JsonElement, tpe: type, path: str, clazz: type) -> None:
    if issubclass(tpe, (Enum, str)):
        valid = isinstance(value, str)
    elif tpe is bool:
        valid = isinstance(value, bool)
    elif tpe is int:
        valid = isinstance(value, int) and not isinstance(value, bool)
    elif tpe is float:
        valid = isinstance(value, (int, float)) and not isinstance(value, bool)
    elif tpe is datetime:
        if not isinstance(value, str):
            valid = False
        else:
            try:
                isoparse(value)
                valid = True
            except ValueError as e:
                raise DeserializationError(path, clazz, f"Invalid RFC 3339 timestamp {value!r}: {e}") from e
    else:
        valid = True
    if not valid:
        raise DeserializationError(path, clazz, f"Expected {tpe.__name__} but got {type(value).__name__}")


def validate(js: Json, clazz: Type["AzureModel"], path: str = "$") -> None:
    """
    Check the wire json against the model definition.
    :raises DeserializationError: with the json path of the first offending property.
    """
    concrete = clazz.subtype_for(js)
    types = _field_types(concrete)
    for a, wire_path in _wire_fields(concrete):
        field_path = path + "".join(f".{p}" for p in wire_path)
        value = value_in_path(js, list(wire_path))
        if value is None:
            if _is_required(a):
                raise DeserializationError(field_path, concrete, f"Missing required property {'.'.join(wire_path)}")
        else:
            _check_value(value, types[a.name], field_path, concrete)


def parse_json(json: Json, clazz: Type[T], mapping: Optional[Dict[str, Bender]] = None) -> Optional[T]:
    """
    Use this method to parse json into a class.
    Based on configuration, either the exception is raised or None is returned.
    :param json: the json to parse.
    :param clazz: the class to parse into.
    :param mapping: the optional mapping to apply before parsing.
    :return: The parsed object or None.
    """
    try:
        if mapping is None and _is_model(clazz):
            return clazz.from_json(json)  # type: ignore
        mapped = bend(mapping, json) if mapping is not None else json
        return structure(mapped, clazz)
    except Exception as e:
        message = f"Failed to parse json into {clazz.__name__}: {e}. Source: {json}"
        if arm_models_config().raise_on_parse_error:
            log.debug(message)
            raise
        log.warning(message)
        return None


def model_classes(root: Type[AzureModel] = AzureModel) -> Dict[str, Type[AzureModel]]:
    """
    All model classes derived from root, by kind.
    """
    result: Dict[str, Type[AzureModel]] = {}

    def walk(cls: Type[AzureModel]) -> None:
        for sub in cls.__subclasses__():
            result[sub.kind] = sub
            walk(sub)

    walk(root)
    return result


class CreatedByType(ExtensibleEnum):
    USER = "User"
    APPLICATION = "Application"
    MANAGED_IDENTITY = "ManagedIdentity"
    KEY = "Key"


@define(slots=False, kw_only=True)
class AzureSystemData(AzureModel):
    kind: ClassVar[str] = "azure_system_data"
    mapping: ClassVar[Dict[str, Bender]] = {
        "created_by": S("createdBy"),
        "created_by_type": S("createdByType"),
        "created_at": S("createdAt"),
        "last_modified_by": S("lastModifiedBy"),
        "last_modified_by_type": S("lastModifiedByType"),
        "last_modified_at": S("lastModifiedAt"),
    }
    created_by: Optional[str] = field(default=None, metadata={"description": "The identity that created the resource."})  # fmt: skip
    created_by_type: Optional[CreatedByType] = field(default=None, metadata={'description': 'The type of identity that created the resource.'})  # fmt: skip
    created_at: Optional[datetime] = field(default=None, metadata={'description': 'The timestamp of resource creation (UTC).'})  # fmt: skip
    last_modified_by: Optional[str] = field(default=None, metadata={'description': 'The identity that last modified the resource.'})  # fmt: skip
    last_modified_by_type: Optional[CreatedByType] = field(default=None, metadata={'description': 'The type of identity that last modified the resource.'})  # fmt: skip
    last_modified_at: Optional[datetime] = field(default=None, metadata={'description': 'The timestamp of resource last modification (UTC)'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureResource(AzureModel):
    kind: ClassVar[str] = "azure_resource"
    mapping: ClassVar[Dict[str, Bender]] = {
        "id": S("id"),
        "name": S("name"),
        "type": S("type"),
        "system_data": S("systemData") >> Bend(AzureSystemData.mapping),
    }
    id: Optional[str] = field(default=None, metadata={'description': 'Fully qualified resource ID for the resource. E.g. /subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/{resourceProviderNamespace}/{resourceType}/{resourceName}'})  # fmt: skip
    name: Optional[str] = field(default=None, metadata={"description": "The name of the resource"})
    type: Optional[str] = field(default=None, metadata={'description': 'The type of the resource. E.g. Microsoft.Compute/virtualMachines or Microsoft.Storage/storageAccounts'})  # fmt: skip
    system_data: Optional[AzureSystemData] = field(default=None, metadata={'description': 'Azure Resource Manager metadata containing createdBy and modifiedBy information.'})  # fmt: skip


@define(slots=False, kw_only=True)
class AzureTrackedResource(AzureResource):
    kind: ClassVar[str] = "azure_tracked_resource"
    mapping: ClassVar[Dict[str, Bender]] = AzureResource.mapping | {
        "location": S("location"),
        "tags": S("tags"),
    }
    location: str = field(metadata={"description": "The geo-location where the resource lives"})
    tags: Dict[str, Any] = field(factory=dict, metadata={"description": "Resource tags."})


@define(slots=False, kw_only=True)
class AzureExtendedLocation(AzureModel):
    kind: ClassVar[str] = "azure_extended_location"
    mapping: ClassVar[Dict[str, Bender]] = {"name": S("name"), "type": S("type")}
    name: str = field(metadata={"description": "The resource ID of the extended location on which the resource will be created."})  # fmt: skip
    type: str = field(metadata={"description": "The extended location type, for example, CustomLocation."})


@define(slots=False, kw_only=True)
class AzureErrorAdditionalInfo(AzureModel):
    kind: ClassVar[str] = "azure_error_additional_info"
    mapping: ClassVar[Dict[str, Bender]] = {"type": S("type"), "info": S("info")}
    type: Optional[str] = field(default=None, metadata={"description": "The additional info type."})
    info: Optional[Any] = field(default=None, metadata={"description": "The additional info."})


@define(slots=False, kw_only=True)
class AzureErrorDetail(AzureModel):
    kind: ClassVar[str] = "azure_error_detail"
    mapping: ClassVar[Dict[str, Bender]] = {
        "code": S("code"),
        "message": S("message"),
        "target": S("target"),
        "additional_info": S("additionalInfo") >> ForallBend(AzureErrorAdditionalInfo.mapping),
    }
    code: Optional[str] = field(default=None, metadata={"description": "The error code."})
    message: Optional[str] = field(default=None, metadata={"description": "The error message."})
    target: Optional[str] = field(default=None, metadata={"description": "The error target."})
    details: List["AzureErrorDetail"] = field(factory=list, metadata={"description": "The error details."})
    additional_info: List[AzureErrorAdditionalInfo] = field(factory=list, metadata={'description': 'The error additional info.'})  # fmt: skip


# the detail list refers to the class itself
AzureErrorDetail.mapping["details"] = S("details") >> ForallBend(AzureErrorDetail.mapping)


@define(slots=False, kw_only=True)
class AzureErrorResponse(AzureModel):
    kind: ClassVar[str] = "azure_error_response"
    mapping: ClassVar[Dict[str, Bender]] = {"error": S("error") >> Bend(AzureErrorDetail.mapping)}
    error: Optional[AzureErrorDetail] = field(default=None, metadata={"description": "The error object."})

    def continuation(self) -> Optional[str]:
        # an error is never continued
        return None


@define(slots=False, kw_only=True)
class AzurePagedList(AzureModel):
    """
    One page of a server driven listing.
    The next page is available via `continuation()`.
    """

    kind: ClassVar[str] = "azure_paged_list"
    mapping: ClassVar[Dict[str, Bender]] = {"value": S("value"), "next_link": S("nextLink")}
    value: List[Any] = field(factory=list, metadata={"description": "The items on this page."})
    next_link: Optional[str] = field(default=None, metadata={"description": "The link used to get the next page."})

    def continuation(self) -> Optional[str]:
        return self.next_link if self.next_link else None

    def __iter__(self) -> Iterator[Any]:
        return iter(self.value)

    def __len__(self) -> int:
        return len(self.value)
