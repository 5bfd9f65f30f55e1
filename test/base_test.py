import logging
from datetime import datetime, timedelta, timezone
from typing import ClassVar, Dict, List, Optional

import pytest
from pytest import LogCaptureFixture
from attr import define, field

from arm_models.config import ArmModelsConfig
from arm_models.resource.base import (
    AzureErrorResponse,
    AzureExtendedLocation,
    AzureModel,
    AzurePagedList,
    AzureResource,
    AzureSystemData,
    AzureTrackedResource,
    CreatedByType,
    DeserializationError,
    Discriminated,
    ExtensibleEnum,
    parse_json,
    wire_names,
)
from armlib.json_bender import Bender, S, Bend, ForallBend


class Color(ExtensibleEnum):
    RED = "Red"
    GREEN = "Green"


@define(slots=False, kw_only=True)
class AzureTestThing(AzureModel):
    kind: ClassVar[str] = "azure_test_thing"
    mapping: ClassVar[Dict[str, Bender]] = {
        "name": S("name"),
        "count": S("count"),
        "ratio": S("ratio"),
        "enabled": S("enabled"),
        "color": S("color"),
        "labels": S("labels"),
        "created": S("createdAt"),
        "location": S("location") >> Bend(AzureExtendedLocation.mapping),
        "locations": S("locations") >> ForallBend(AzureExtendedLocation.mapping),
    }
    name: str = field()
    count: Optional[int] = field(default=None)
    ratio: Optional[float] = field(default=None)
    enabled: Optional[bool] = field(default=None)
    color: Optional[Color] = field(default=None, metadata={"default_value": Color.RED})
    labels: List[str] = field(factory=list)
    created: Optional[datetime] = field(default=None)
    location: Optional[AzureExtendedLocation] = field(default=None)
    locations: List[AzureExtendedLocation] = field(factory=list)


@define(slots=False, kw_only=True)
class AzureTestShape(AzureModel):
    kind: ClassVar[str] = "azure_test_shape"
    discriminator: ClassVar[Optional[str]] = "shapeType"
    mapping: ClassVar[Dict[str, Bender]] = {"shape_type": S("shapeType"), "name": S("name")}
    shape_type: str = field()
    name: Optional[str] = field(default=None)


@AzureTestShape.register_subtype("circle")
@define(slots=False, kw_only=True)
class AzureTestCircle(AzureTestShape):
    kind: ClassVar[str] = "azure_test_circle"
    mapping: ClassVar[Dict[str, Bender]] = AzureTestShape.mapping | {"radius": S("radius")}
    shape_type: str = field(default="circle")
    radius: int = field()


@define(slots=False, kw_only=True)
class AzureTestDrawing(AzureModel):
    kind: ClassVar[str] = "azure_test_drawing"
    mapping: ClassVar[Dict[str, Bender]] = {
        "main": S("main") >> Discriminated(AzureTestShape),
        "shapes": S("shapes") >> ForallBend(Discriminated(AzureTestShape)),
    }
    main: Optional[AzureTestShape] = field(default=None)
    shapes: List[AzureTestShape] = field(factory=list)


def test_extensible_enum() -> None:
    assert Color("Green") is Color.GREEN
    assert not Color.GREEN.is_unknown_value
    assert Color.parse("Red") is Color.RED
    blue = Color("Blue")
    assert isinstance(blue, Color)
    assert blue.is_unknown_value
    assert blue.name == "UNKNOWN_VALUE"
    assert blue.value == "Blue"
    assert str(blue) == "Blue"
    # wire values are compared case sensitive
    assert Color("green").is_unknown_value
    assert str(Color("green")) == "green"
    assert CreatedByType("ManagedIdentity") is CreatedByType.MANAGED_IDENTITY


def test_enum_roundtrip() -> None:
    thing = AzureTestThing.from_json({"name": "a", "color": "Blue"})
    assert thing.color is not None and thing.color.is_unknown_value
    assert thing.to_json() == {"name": "a", "color": "Blue"}


def test_defaults() -> None:
    thing = AzureTestThing.from_json({"name": "a"})
    assert thing.count is None
    assert thing.color is None
    assert thing.value_or_default("color") is Color.RED
    assert thing.value_or_default("count") is None
    assert thing.labels == []
    assert thing.locations == []
    # absent values and empty collections are omitted
    assert thing.to_json() == {"name": "a"}
    # a value sent explicitly is kept, even if the service would use the same value when absent
    explicit = AzureTestThing.from_json({"name": "a", "color": "Red"})
    assert explicit.color is Color.RED
    assert explicit.to_json() == {"name": "a", "color": "Red"}
    assert AzureTestThing(name="b").to_json() == {"name": "b"}


def test_null_and_absent_collections() -> None:
    thing = AzureTestThing.from_json({"name": "a", "labels": None, "locations": None, "count": None})
    assert thing.labels == []
    assert thing.locations == []
    assert thing.count is None
    assert "labels" not in thing.to_json()


def test_unknown_properties_are_ignored() -> None:
    thing = AzureTestThing.from_json({"name": "a", "foo": {"bar": [1, 2, 3]}, "location": {"name": "n", "type": "t", "x": 1}})  # fmt: skip
    assert thing.to_json() == {"name": "a", "location": {"name": "n", "type": "t"}}


def test_missing_required_property() -> None:
    with pytest.raises(DeserializationError) as ex:
        AzureTestThing.from_json({"count": 1})
    assert ex.value.path == "$.name"
    assert ex.value.clazz is AzureTestThing
    # null is handled like an absent value
    with pytest.raises(DeserializationError) as ex:
        AzureTestThing.from_json({"name": None})
    assert ex.value.path == "$.name"
    with pytest.raises(DeserializationError) as ex:
        AzureTestThing.from_json({"name": "a", "locations": [{"name": "n", "type": "t"}, {"name": "n"}]})
    assert ex.value.path == "$.locations[1].type"
    assert ex.value.clazz is AzureExtendedLocation
    with pytest.raises(DeserializationError) as ex:
        AzureTrackedResource.from_json({"id": "/some/id"})
    assert ex.value.path == "$.location"


def test_wrong_primitive_type() -> None:
    def error_path(js: Dict[str, object]) -> str:
        with pytest.raises(DeserializationError) as ex:
            AzureTestThing.from_json(js)
        return ex.value.path

    assert error_path({"name": 12}) == "$.name"
    assert error_path({"name": "a", "count": "12"}) == "$.count"
    assert error_path({"name": "a", "count": True}) == "$.count"
    assert error_path({"name": "a", "count": 1.5}) == "$.count"
    assert error_path({"name": "a", "enabled": "true"}) == "$.enabled"
    assert error_path({"name": "a", "color": 1}) == "$.color"
    assert error_path({"name": "a", "labels": "a"}) == "$.labels"
    assert error_path({"name": "a", "labels": ["a", 2]}) == "$.labels[1]"
    assert error_path({"name": "a", "location": "west"}) == "$.location"
    assert error_path({"name": "a", "createdAt": "yesterday"}) == "$.createdAt"
    assert error_path({"name": "a", "createdAt": 1688108028}) == "$.createdAt"
    # a json integer is a valid float
    assert AzureTestThing.from_json({"name": "a", "ratio": 1}).ratio == 1


def test_not_a_json_object() -> None:
    with pytest.raises(DeserializationError) as ex:
        AzureTestThing.from_json([{"name": "a"}])  # type: ignore
    assert ex.value.path == "$"


def test_timestamps() -> None:
    thing = AzureTestThing.from_json({"name": "a", "createdAt": "2023-01-01T10:00:00Z"})
    assert thing.created == datetime(2023, 1, 1, 10, tzinfo=timezone.utc)
    assert thing.to_json()["createdAt"] == "2023-01-01T10:00:00Z"
    thing = AzureTestThing.from_json({"name": "a", "createdAt": "2023-01-01T10:00:00.5+02:00"})
    assert thing.created == datetime(2023, 1, 1, 10, 0, 0, 500000, tzinfo=timezone(timedelta(hours=2)))
    assert thing.to_json()["createdAt"] == "2023-01-01T10:00:00.500000+02:00"
    created = datetime(2023, 1, 1, 10, 0, 0, 123456, tzinfo=timezone.utc)
    assert AzureTestThing(name="a", created=created).to_json()["createdAt"] == "2023-01-01T10:00:00.123456Z"


def test_empty_nested_model() -> None:
    resource = AzureResource(name="a", system_data=AzureSystemData())
    assert resource.to_json() == {"name": "a", "systemData": {}}
    again = AzureResource.from_json(resource.to_json())
    assert again.system_data == AzureSystemData()


def test_tags_hold_any_json() -> None:
    js = {"location": "westeurope", "tags": {"team": "infra", "cost": 42, "owner": {"name": "ops"}, "active": True}}
    resource = AzureTrackedResource.from_json(js)
    assert resource.tags["cost"] == 42
    assert resource.tags["owner"] == {"name": "ops"}
    assert resource.to_json() == js


def test_wire_names() -> None:
    names = wire_names(AzureTestThing)
    assert names["created"] == "createdAt"
    assert names["locations"] == "locations"
    assert wire_names(AzureSystemData)["last_modified_by_type"] == "lastModifiedByType"


def test_parse_json(config: ArmModelsConfig) -> None:
    assert parse_json({"name": "a"}, AzureTestThing) == AzureTestThing(name="a")
    with pytest.raises(DeserializationError):
        parse_json({"count": 1}, AzureTestThing)
    config.raise_on_parse_error = False
    assert parse_json({"count": 1}, AzureTestThing) is None
    # a custom mapping is applied before the class is created
    loc = parse_json({"n": "x", "t": "y"}, AzureExtendedLocation, {"name": S("n"), "type": S("t")})
    assert loc == AzureExtendedLocation(name="x", type="y")


def test_error_response() -> None:
    js = {
        "error": {
            "code": "ResourceNotFound",
            "message": "The resource was not found.",
            "target": "name",
            "details": [{"code": "Inner", "details": [{"code": "Deeper", "message": "really"}]}],
            "additionalInfo": [{"type": "PolicyViolation", "info": {"policy": "deny", "level": 2}}],
        }
    }
    response = AzureErrorResponse.from_json(js)
    assert response.continuation() is None
    assert response.error is not None
    assert response.error.code == "ResourceNotFound"
    assert response.error.details[0].details[0].message == "really"
    assert response.error.additional_info[0].info == {"policy": "deny", "level": 2}
    assert response.to_json() == js
    assert AzureErrorResponse.from_json({}).error is None


def test_paged_list() -> None:
    page = AzurePagedList.from_json({"value": [1, 2, 3], "nextLink": "https://next"})
    assert len(page) == 3
    assert list(page) == [1, 2, 3]
    assert page.continuation() == "https://next"
    assert AzurePagedList.from_json({"value": [], "nextLink": ""}).continuation() is None
    assert AzurePagedList.from_json({"nextLink": None}).continuation() is None
    assert AzurePagedList.from_json({}).value == []


def test_polymorphic_models() -> None:
    assert AzureTestShape.subtypes() == {"circle": AzureTestCircle}
    assert AzureTestCircle.discriminator_value == "circle"
    circle = AzureTestShape.from_json({"shapeType": "circle", "radius": 3, "name": "c"})
    assert isinstance(circle, AzureTestCircle)
    assert circle.radius == 3
    assert circle.to_json() == {"shapeType": "circle", "name": "c", "radius": 3}
    # required properties of the subtype are checked
    with pytest.raises(DeserializationError) as ex:
        AzureTestShape.from_json({"shapeType": "circle"})
    assert ex.value.path == "$.radius"
    # unknown discriminator values are decoded into the base class
    square = AzureTestShape.from_json({"shapeType": "square", "size": 2})
    assert type(square) is AzureTestShape
    assert square.to_json() == {"shapeType": "square"}


def test_polymorphic_properties() -> None:
    js = {
        "main": {"shapeType": "circle", "radius": 1},
        "shapes": [{"shapeType": "circle", "radius": 2}, {"shapeType": "square", "name": "s"}],
    }
    drawing = AzureTestDrawing.from_json(js)
    assert isinstance(drawing.main, AzureTestCircle)
    assert [type(s) for s in drawing.shapes] == [AzureTestCircle, AzureTestShape]
    assert drawing.to_json() == js
    with pytest.raises(DeserializationError) as ex:
        AzureTestDrawing.from_json({"shapes": [{"shapeType": "circle", "radius": "2"}]})
    assert ex.value.path == "$.shapes[0].radius"


def test_log_unknown_enum_values(config: ArmModelsConfig, caplog: LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="arm.models"):
        Color("Purple")
        assert "Purple" not in caplog.text
        config.log_unknown_enum_values = True
        Color("Purple")
        assert "Unknown value Purple for Color" in caplog.text
