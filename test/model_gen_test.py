import json
import sys
import types
from pathlib import Path
from typing import Any, Iterator

import pytest
from pytest import CaptureFixture

from arm_models.model_gen import (
    AzureClassModel,
    AzureEnumModel,
    AzureProperty,
    classes_from_shapes,
    clean_description,
    enum_member_name,
    load_definitions,
    main,
    render_module,
    sorted_models,
    to_snake,
)
from armlib.config import Config
from armlib.types import Json

definitions: Json = {
    "Widget": {
        "description": "A widget.",
        "allOf": [{"$ref": "#/definitions/TrackedResource"}],
        "properties": {
            "extendedLocation": {"$ref": "#/definitions/ExtendedLocation"},
            "properties": {"$ref": "#/definitions/WidgetProperties"},
        },
        "required": ["extendedLocation", "properties"],
    },
    "WidgetProperties": {
        "properties": {
            "count": {"type": "integer", "description": "The number of \"things\".<br/>Really."},
            "createdAt": {"type": "string", "format": "date-time"},
            "hugepagesSize": {
                "type": "string",
                "enum": ["2M", "1G"],
                "x-ms-enum": {"name": "HugepagesSize", "modelAsString": True},
                "default": "2M",
            },
            "labels": {"type": "array", "items": {"$ref": "#/definitions/KubernetesLabel"}},
            "annotations": {"type": "object", "additionalProperties": {"type": "string"}},
        },
        "required": ["count"],
    },
    "KubernetesLabel": {
        "properties": {"key": {"type": "string"}, "value": {"type": "string"}},
        "required": ["key", "value"],
    },
    "Node": {
        "properties": {
            "name": {"type": "string"},
            "children": {"type": "array", "items": {"$ref": "#/definitions/Node"}},
        },
    },
    "Animal": {
        "discriminator": "animalType",
        "properties": {"animalType": {"type": "string"}, "name": {"type": "string"}},
        "required": ["animalType"],
    },
    "Dog": {
        "x-ms-discriminator-value": "dog",
        "allOf": [{"$ref": "#/definitions/Animal"}],
        "properties": {"barks": {"type": "boolean"}},
    },
    "ErrorResponse": {"properties": {"error": {"$ref": "#/definitions/ErrorDetail"}}},
}


@pytest.fixture
def generated() -> Iterator[types.ModuleType]:
    name = "generated_models"
    module = types.ModuleType(name)
    # type hints of the generated classes are resolved via the module registry
    sys.modules[name] = module
    try:
        exec(compile(render_module(classes_from_shapes(definitions)), name, "exec"), module.__dict__)
        yield module
    finally:
        del sys.modules[name]


def test_names() -> None:
    assert to_snake("hugepagesSize") == "hugepages_size"
    assert to_snake("diskSizeGB") == "disk_size_gb"
    assert to_snake("eTag") == "e_tag"
    assert AzureEnumModel("hugepagesSize", []).class_name == "HugepagesSize"
    assert AzureClassModel("widget_properties").class_name == "AzureWidgetProperties"
    assert enum_member_name("DualStack") == "DUAL_STACK"
    assert enum_member_name("2M") == "VALUE_2_M"
    assert enum_member_name("IPV4") == "IPV4"
    assert enum_member_name("Microsoft.Compute/virtualMachines") == "MICROSOFT_COMPUTE_VIRTUAL_MACHINES"
    assert enum_member_name("") == "EMPTY"
    assert clean_description('The "size"<br/> of\nthe   disk. ') == "The size of the disk."


def test_property_rendering() -> None:
    required = AzureProperty("rack_slot", "rackSlot", "int", "The slot.", required=True)
    assert required.type_string() == "int"
    assert required.mapping() == '"rack_slot": S("rackSlot")'
    assert required.assignment() == "field(metadata={'description': 'The slot.'})"
    optional = AzureProperty("labels", "labels", "AzureKubernetesLabel", "", is_array=True, is_complex=True)
    assert optional.type_string() == "List[AzureKubernetesLabel]"
    assert optional.mapping_from() == 'S("labels") >> ForallBend(AzureKubernetesLabel.mapping)'
    assert optional.assignment().startswith("field(factory=list")
    tags = AzureProperty("tags", "tags", "str", "", is_dict=True)
    assert tags.type_string() == "Dict[str, str]"
    assert tags.assignment().startswith("field(factory=dict")
    simple = AzureProperty("name", "name", "str", "")
    assert simple.type_string() == "Optional[str]"
    assert simple.assignment().startswith("field(default=None")
    size = AzureProperty("size", "size", "HugepagesSize", "The size.", default_value="HugepagesSize.VALUE_2_M")
    assert size.type_string() == "Optional[HugepagesSize]"
    assert size.assignment().startswith(
        "field(default=None, metadata={'description': 'The size.', 'default_value': HugepagesSize.VALUE_2_M})"
    )


def test_classes_from_shapes() -> None:
    models = classes_from_shapes(definitions)
    # common types are provided by the base module
    assert "AzureErrorResponse" not in models
    widget = models["AzureWidget"]
    assert isinstance(widget, AzureClassModel)
    assert widget.base_classes == ["AzureTrackedResource"]
    assert widget.props["properties"].is_complex
    assert widget.props["properties"].required
    assert widget.props["extended_location"].type == "AzureExtendedLocation"
    props = models["AzureWidgetProperties"]
    assert isinstance(props, AzureClassModel)
    assert props.props["count"].required
    assert props.props["created_at"].type == "datetime"
    assert props.props["hugepages_size"].default_value == "HugepagesSize.VALUE_2_M"
    assert props.props["hugepages_size"].type_string() == "Optional[HugepagesSize]"
    assert props.props["labels"].is_array and props.props["labels"].type == "AzureKubernetesLabel"
    assert props.props["annotations"].is_dict
    size = models["HugepagesSize"]
    assert isinstance(size, AzureEnumModel)
    assert size.values == ["2M", "1G"]
    dog = models["AzureDog"]
    assert isinstance(dog, AzureClassModel)
    assert dog.polymorphic_base == "AzureAnimal"
    assert dog.discriminator_value == "dog"
    assert dog.props["animal_type"].field_default == 'default="dog"'
    # only the requested definitions and what they refer to
    only = classes_from_shapes(definitions, {"WidgetProperties"})
    assert set(only) == {"AzureWidgetProperties", "HugepagesSize", "AzureKubernetesLabel"}


def test_sorted_models() -> None:
    names = [m.class_name for m in sorted_models(classes_from_shapes(definitions))]
    assert names[0] == "HugepagesSize"
    assert names.index("AzureKubernetesLabel") < names.index("AzureWidgetProperties") < names.index("AzureWidget")
    assert names.index("AzureAnimal") < names.index("AzureDog")


def test_render_module() -> None:
    source = render_module(classes_from_shapes(definitions))
    assert "class HugepagesSize(ExtensibleEnum):" in source
    assert '    VALUE_2_M = "2M"' in source
    assert '@AzureAnimal.register_subtype("dog")' in source
    assert 'kind: ClassVar[str] = "azure_widget_properties"' in source
    assert 'discriminator: ClassVar[Optional[str]] = "animalType"' in source
    assert 'children: List["AzureNode"]' in source
    assert 'AzureNode.mapping["children"] = S("children") >> ForallBend(AzureNode.mapping)' in source


def test_generated_models(generated: Any) -> None:
    dog_js = {"animalType": "dog", "name": "rex", "barks": True}
    dog = generated.AzureAnimal.from_json(dog_js)
    assert isinstance(dog, generated.AzureDog)
    assert dog.to_json() == dog_js
    cat = generated.AzureAnimal.from_json({"animalType": "cat", "name": "tom"})
    assert type(cat) is generated.AzureAnimal

    widget_js = {
        "id": "/subscriptions/sub/resourceGroups/rg/providers/Test/widgets/w1",
        "name": "w1",
        "location": "westeurope",
        "extendedLocation": {"name": "/custom/location", "type": "CustomLocation"},
        "properties": {
            "count": 1,
            "createdAt": "2023-01-01T10:00:00Z",
            "labels": [{"key": "a", "value": "b"}],
        },
    }
    widget = generated.AzureWidget.from_json(widget_js)
    assert widget.properties.hugepages_size is None
    assert widget.properties.value_or_default("hugepages_size") is generated.HugepagesSize.VALUE_2_M
    assert widget.properties.labels[0].key == "a"
    assert widget.properties.annotations == {}
    assert widget.to_json() == widget_js

    tree = generated.AzureNode.from_json({"name": "root", "children": [{"name": "leaf", "children": None}]})
    assert tree.children[0].name == "leaf"
    assert tree.children[0].children == []


def test_load_definitions(tmp_path: Path) -> None:
    document = {
        "swagger": "2.0",
        "info": {"title": "Widgets", "version": "2023-07-01"},
        "paths": {},
        "definitions": definitions,
    }
    path = tmp_path / "widgets.json"
    path.write_text(json.dumps(document))
    loaded = load_definitions(path)
    assert set(loaded) == set(definitions)
    # references are kept, so the definition names can be used as class names
    assert loaded["Widget"]["allOf"] == [{"$ref": "#/definitions/TrackedResource"}]


def test_main(tmp_path: Path, capsys: CaptureFixture[str], restore_logging: None) -> None:
    document = {"swagger": "2.0", "info": {"title": "Nodes", "version": "1"}, "paths": {}, "definitions": definitions}
    path = tmp_path / "nodes.json"
    path.write_text(json.dumps(document))
    config_file = tmp_path / "config.yaml"
    config_file.write_text("logging:\n  json_format: false\n")
    Config.reset()
    try:
        main([str(path), "--only", "Node", "--config", str(config_file), "--override", "logging.quiet=true"])
        assert Config.logging.json_format is False
        assert Config.logging.quiet is True
    finally:
        Config.reset()
    out = capsys.readouterr().out
    assert "class AzureNode(AzureModel):" in out
    assert "AzureWidget" not in out
