from __future__ import annotations

import argparse
import logging
import re
from pathlib import Path
from typing import Dict, List, Optional, Set, Tuple, Union

from attr import define, field
from jsons import pascalcase
from prance import BaseParser

import arm_models.config  # noqa: F401 # registers the config sections
from armlib.config import Config
from armlib.json import value_in_path
from armlib.logger import LoggingConfig, setup_logger_from_config
from armlib.types import Json

log = logging.getLogger("arm.models.gen")

# shapes of the common types are not generated: they are provided by arm_models.resource.base
known_types: Dict[str, str] = {
    "Resource": "AzureResource",
    "ProxyResource": "AzureResource",
    "AzureEntityResource": "AzureResource",
    "TrackedResource": "AzureTrackedResource",
    "ExtendedLocation": "AzureExtendedLocation",
    "SystemData": "AzureSystemData",
    "ErrorResponse": "AzureErrorResponse",
    "ErrorDetail": "AzureErrorDetail",
    "ErrorAdditionalInfo": "AzureErrorAdditionalInfo",
}

simple_type_map = {
    "string": "str",
    "boolean": "bool",
    "integer": "int",
    "number": "float",
}


def to_snake(name: str) -> str:
    name = re.sub("(.)([A-Z][a-z]+)", r"\1_\2", name)
    name = re.sub("__([A-Z])", r"_\1", name)
    name = re.sub("([a-z0-9])([A-Z])", r"\1_\2", name)
    return name.lower()


def enum_member_name(value: str) -> str:
    """
    Python member name for an enum wire value: DualStack -> DUAL_STACK, 2M -> VALUE_2_M.
    """
    name = re.sub("[^0-9a-zA-Z]+", "_", to_snake(value)).strip("_").upper()
    if not name:
        return "EMPTY"
    return f"VALUE_{name}" if name[0].isdigit() else name


def clean_description(description: str) -> str:
    desc = re.sub("[\n\r'\"]", " ", description)  # remove invalid characters
    desc = re.sub("<br\\s*/?>", " ", desc)  # replace <br/> tags
    return re.sub("\\s\\s+", " ", desc).strip()  # remove multiple spaces


@define
class AzureProperty:
    name: str
    from_name: str
    type: str
    description: str
    is_array: bool = False
    is_complex: bool = False
    is_dict: bool = False
    required: bool = False
    field_default: Optional[str] = None
    # enum member used by the service if the value is absent
    default_value: Optional[str] = None

    def assignment(self) -> str:
        if self.required:
            default = ""
        elif self.field_default:
            default = self.field_default
        elif self.is_array:
            default = "factory=list"
        elif self.is_dict:
            default = "factory=dict"
        else:
            default = "default=None"
        metadata = f"metadata={{'description': '{clean_description(self.description)}'"
        if self.default_value:
            metadata += f", 'default_value': {self.default_value}"
        metadata += "}"
        result = "field(" + ", ".join(a for a in (default, metadata) if a) + ")"
        if (len(result) + len(self.name) + len(self.type_string())) > 100:
            result += "  # fmt: skip"
        return result

    def type_string(self, quote: bool = False) -> str:
        tpe = f'"{self.type}"' if quote else self.type
        if self.is_array:
            return f"List[{tpe}]"
        elif self.is_dict:
            return f"Dict[str, {tpe}]"
        elif self.required or self.field_default:
            return tpe
        else:
            return f"Optional[{tpe}]"

    def mapping(self) -> str:
        return f'"{self.name}": ' + self.mapping_from()

    def mapping_from(self) -> str:
        base = f'S("{self.from_name}")'
        if self.is_complex and self.is_array:
            base += f" >> ForallBend({self.type}.mapping)"
        elif self.is_complex and self.is_dict:
            base += f" >> MapDict(value_bender=Bend({self.type}.mapping))"
        elif self.is_complex:
            base += f" >> Bend({self.type}.mapping)"
        return base


@define
class AzureEnumModel:
    name: str
    values: List[str]
    description: str = ""

    @property
    def class_name(self) -> str:
        return pascalcase(self.name)

    def member(self, value: str) -> str:
        return f"{self.class_name}.{enum_member_name(value)}"

    def dependencies(self) -> Set[str]:
        return set()

    def to_class(self) -> str:
        members = "\n".join(f'    {enum_member_name(v)} = "{v}"' for v in self.values)
        return f"class {self.class_name}(ExtensibleEnum):\n{members}\n"


@define
class AzureClassModel:
    name: str
    props: Dict[str, AzureProperty] = field(factory=dict)
    base_classes: List[str] = field(factory=list)
    discriminator: Optional[str] = None
    # the class that registers this class as subtype
    polymorphic_base: Optional[str] = None
    discriminator_value: Optional[str] = None

    @property
    def class_name(self) -> str:
        return "Azure" + pascalcase(self.name)

    def sorted_props(self) -> List[AzureProperty]:
        return sorted(self.props.values(), key=lambda p: p.name)

    def dependencies(self) -> Set[str]:
        complex_props = {p.type for p in self.props.values() if p.is_complex or p.default_value}
        return (complex_props | set(self.base_classes)) - {self.class_name}

    def to_class(self) -> str:
        lines = []
        if self.polymorphic_base and self.discriminator_value:
            lines.append(f'@{self.polymorphic_base}.register_subtype("{self.discriminator_value}")')
        lines.append("@define(slots=False, kw_only=True)")
        lines.append(f"class {self.class_name}({', '.join(self.base_classes) or 'AzureModel'}):")
        lines.append(f'    kind: ClassVar[str] = "azure_{to_snake(self.name)}"')
        if self.discriminator:
            lines.append(f'    discriminator: ClassVar[Optional[str]] = "{self.discriminator}"')
        props = self.sorted_props()
        # a property of the class type itself can only be mapped once the class exists
        recursive = [p for p in props if p.is_complex and p.type == self.class_name]
        inline = [p for p in props if p not in recursive]
        if inline or recursive or not self.base_classes:
            base_mappings = "".join(f"{b}.mapping | " for b in self.base_classes)
            lines.append(f"    mapping: ClassVar[Dict[str, Bender]] = {base_mappings}{{")
            lines.extend(f"        {p.mapping()}," for p in inline)
            lines.append("    }")
        for p in props:
            lines.append(f"    {p.name}: {p.type_string(quote=p in recursive)} = {p.assignment()}")
        for p in recursive:
            lines.append("")
            lines.append("")
            lines.append(f'{self.class_name}.mapping["{p.name}"] = {p.mapping_from()}')
        return "\n".join(lines) + "\n"


Model = Union[AzureClassModel, AzureEnumModel]


def is_complex_type(s: Json) -> bool:
    return "allOf" in s or "properties" in s


def simple_shape(s: Json) -> Optional[str]:
    if s.get("type") == "string" and s.get("format") == "date-time":
        return "datetime"
    elif spl := simple_type_map.get(s.get("type")):  # type: ignore
        return spl
    else:
        return None


def ref_name(s: Json) -> Optional[str]:
    if isinstance(ref := s.get("$ref"), str):
        return ref.split("/")[-1]
    return None


def enum_model(s: Json, name_hint: str) -> Optional[AzureEnumModel]:
    if s.get("type") != "string" or "enum" not in s:
        return None
    name = value_in_path(s, ["x-ms-enum", "name"]) or name_hint
    return AzureEnumModel(name, [str(v) for v in s["enum"]], s.get("description", ""))


def resolve_type(s: Json, name_hint: str, definitions: Json, result: Dict[str, Model]) -> Tuple[str, bool]:
    """
    Python type name of the given shape and whether the type is a model class.
    Enums and classes found on the way are added to result.
    """
    if (ref := ref_name(s)) is not None:
        if ref in known_types:
            return known_types[ref], True
        if (target := definitions.get(ref)) is None:
            log.warning(f"Can not resolve reference {s['$ref']}. Use Any.")
            return "Any", False
        return resolve_type(target, ref, definitions, result)
    elif (enum := enum_model(s, name_hint)) is not None:
        result.setdefault(enum.class_name, enum)
        return enum.class_name, False
    elif simple := simple_shape(s):
        return simple, False
    elif is_complex_type(s):
        return class_method(name_hint, s, definitions, result).class_name, True
    else:
        return "Any", False


def enum_default(s: Json, definitions: Json, tpe: str, result: Dict[str, Model]) -> Optional[str]:
    target = definitions.get(ref) if (ref := ref_name(s)) else s
    default = s.get("default", target.get("default") if isinstance(target, dict) else None)
    if default is not None and isinstance(enum := result.get(tpe), AzureEnumModel):
        return enum.member(str(default))
    return None


def property_from_shape(
    owner: str, prop_name: str, s: Json, required: bool, definitions: Json, result: Dict[str, Model]
) -> AzureProperty:
    description = s.get("description", "")
    name = to_snake(prop_name)
    if s.get("type") == "array":
        tpe, is_complex = resolve_type(s.get("items", {}), owner + pascalcase(prop_name), definitions, result)
        return AzureProperty(name, prop_name, tpe, description, is_array=True, is_complex=is_complex, required=required)  # fmt: skip
    elif isinstance(add_props := s.get("additionalProperties"), dict):
        tpe, is_complex = resolve_type(add_props, owner + pascalcase(prop_name), definitions, result)
        return AzureProperty(name, prop_name, tpe, description, is_dict=True, is_complex=is_complex, required=required)  # fmt: skip
    else:
        tpe, is_complex = resolve_type(s, owner + pascalcase(prop_name), definitions, result)
        default = None if required else enum_default(s, definitions, tpe, result)
        return AzureProperty(name, prop_name, tpe, description, is_complex=is_complex, required=required, default_value=default)  # fmt: skip


def class_method(name: str, shape: Json, definitions: Json, result: Dict[str, Model]) -> AzureClassModel:
    """
    Create the class model for the given shape (and for all shapes it refers to).
    """
    model = AzureClassModel(name)
    if isinstance(existing := result.get(model.class_name), AzureClassModel):
        return existing
    # register before the properties are visited: the shape might refer to itself
    result[model.class_name] = model
    model.discriminator = shape.get("discriminator")

    def add_props(part: Json) -> None:
        required = set(part.get("required", []))
        for prop_name, prop_shape in part.get("properties", {}).items():
            prop = property_from_shape(name, prop_name, prop_shape, prop_name in required, definitions, result)
            model.props[prop.name] = prop

    for base in shape.get("allOf", []):
        if ref_name(base) is None:
            add_props(base)
            continue
        base_type, is_complex = resolve_type(base, name, definitions, result)
        if not is_complex:
            continue
        model.base_classes.append(base_type)
        if isinstance(base_model := result.get(base_type), AzureClassModel):
            if base_model.discriminator:
                model.polymorphic_base = base_model.class_name
            elif base_model.polymorphic_base:
                model.polymorphic_base = base_model.polymorphic_base
            if model.polymorphic_base:
                model.discriminator_value = shape.get("x-ms-discriminator-value", name)
    add_props(shape)

    # subtypes define their discriminator value as default
    if model.polymorphic_base and model.discriminator_value:
        root = result[model.polymorphic_base]
        if isinstance(root, AzureClassModel) and root.discriminator:
            value = model.discriminator_value
            model.props[to_snake(root.discriminator)] = AzureProperty(
                to_snake(root.discriminator), root.discriminator, "str", "", field_default=f'default="{value}"'
            )
    return model


def classes_from_shapes(definitions: Json, allowed_names: Optional[Set[str]] = None) -> Dict[str, Model]:
    """
    Create the models for all definitions of a swagger document.
    :param definitions: the definitions section of the document.
    :param allowed_names: only generate the given definitions (and what they refer to).
    :return: all models by class name.
    """
    result: Dict[str, Model] = {}
    for name, shape in definitions.items():
        if name in known_types or (allowed_names and name not in allowed_names):
            continue
        resolve_type({"$ref": f"#/definitions/{name}"}, name, definitions, result)
    return result


def sorted_models(models: Dict[str, Model]) -> List[Model]:
    """
    Enums first, then all classes so that every class is defined before it is used.
    """
    ordered: List[Model] = sorted((m for m in models.values() if isinstance(m, AzureEnumModel)), key=lambda m: m.name)
    visited: Set[str] = {m.class_name for m in ordered}

    def visit(model: Model) -> None:
        if model.class_name in visited:
            return
        visited.add(model.class_name)
        for dependency in sorted(model.dependencies()):
            if (dm := models.get(dependency)) is not None:
                visit(dm)
        ordered.append(model)

    for m in sorted(models.values(), key=lambda m: m.name):
        if isinstance(m, AzureClassModel):
            visit(m)
    return ordered


def render_module(models: Dict[str, Model]) -> str:
    header = (
        "from datetime import datetime\n"
        "from typing import Any, ClassVar, Dict, Optional, List\n\n"
        "from attr import define, field\n\n"
        "from arm_models.resource.base import (\n"
        + "".join(f"    {n},\n" for n in sorted(set(known_types.values()) | {"AzureModel", "ExtensibleEnum"}))
        + ")\n"
        "from armlib.json_bender import Bender, S, Bend, ForallBend, MapDict\n"
    )
    return header + "".join(f"\n\n{m.to_class()}" for m in sorted_models(models))


class SwaggerParser(BaseParser):
    """
    Loads a swagger document without resolving references, so the definition names stay intact.
    Azure documents use vendor extensions, that do not pass strict validation: validation is skipped.
    """

    def _validate(self) -> None:
        if not isinstance(self.specification, dict):
            raise ValueError(f"Can not parse swagger document {self.url}")


def load_definitions(path: Union[str, Path]) -> Json:
    parser = SwaggerParser(str(path), strict=False)
    return parser.specification.get("definitions", {})  # type: ignore


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Generate arm-models classes from an Azure swagger document.")
    parser.add_argument("swagger_file", type=Path, help="The swagger document (json or yaml).")
    parser.add_argument("--only", nargs="*", default=None, help="Only generate the given definitions.")
    parser.add_argument("--config", type=Path, default=None, help="Yaml file with config sections (e.g. logging).")
    parser.add_argument(
        "--override", nargs="*", default=[], help="Override config values: --override logging.json_format=false"
    )
    parser.add_argument("--debug", action="store_true", default=False, help="Enable debug logging.")
    args = parser.parse_args(argv)
    if args.config:
        Config.load_file(args.config)
    Config.override_config(args.override)
    logging_config: LoggingConfig = Config.logging  # type: ignore
    if args.debug:
        logging_config.verbose = True
    setup_logger_from_config("arm-model-gen", logging_config)
    definitions = load_definitions(args.swagger_file)
    log.debug(f"Found {len(definitions)} definitions in {args.swagger_file}")
    models = classes_from_shapes(definitions, set(args.only) if args.only else None)
    print(render_module(models))


if __name__ == "__main__":
    main()
