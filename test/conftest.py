from __future__ import annotations

import json
import logging
import os
from typing import Iterator, List, Optional, Set, Type, TypeVar

from attr import fields
from pytest import fixture

from arm_models.config import ArmModelsConfig, arm_models_config
from arm_models.resource.base import AzureModel, AzurePagedList
from armlib.config import Config
from armlib.types import Json

P = TypeVar("P", bound=AzurePagedList)


def load_json(service: str, name: str) -> Json:
    path = os.path.dirname(__file__) + f"/files/{service}/{name}.json"
    with open(path) as f:
        return json.load(f)  # type: ignore


@fixture
def config() -> Iterator[ArmModelsConfig]:
    Config.reset()
    yield arm_models_config()
    Config.reset()


@fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    arm = logging.getLogger("arm")
    handlers, root_level, arm_level = root.handlers[:], root.level, arm.level
    yield None
    root.handlers = handlers
    root.setLevel(root_level)
    arm.setLevel(arm_level)


def all_props_set(obj: AzureModel, ignore_props: Optional[Set[str]] = None) -> None:
    for field in fields(type(obj)):
        prop = field.name
        if not prop.startswith("_") and prop not in (ignore_props or set()):
            value = getattr(obj, prop)
            if value is None or (isinstance(value, (list, dict)) and not value):
                raise Exception(f"Prop >{prop}< is not set: {obj}")


def roundtrip_check(
    list_clazz: Type[P],
    service: str,
    name: str,
    *,
    all_props: bool = False,
    check_source: bool = True,
    ignore_props: Optional[Set[str]] = None,
) -> List[AzureModel]:
    """
    Decode the page stored in files/<service>/<name>.json and make sure no information is lost.
    Returns the resources of the page.
    """
    source = load_json(service, name)
    page = list_clazz.from_json(source)
    resources: List[AzureModel] = list(page)
    assert len(resources) > 0
    if all_props:
        all_props_set(resources[0], ignore_props)
    # the fixture only contains known properties: the encoded page matches the source document
    if check_source:
        page_js = page.to_json()
        assert page_js == source, f"Left: {page_js}\nRight: {source}"
    for resource in resources:
        # create json representation
        js_repr = resource.to_json()
        # make sure that the resource can be json serialized and read back
        again = type(resource).from_json(js_repr)
        # since we can not compare objects, we use the json representation to see that no information is lost
        again_js = again.to_json()
        assert js_repr == again_js, f"Left: {js_repr}\nRight: {again_js}"
    return resources
