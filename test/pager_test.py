from typing import Dict, List

from conftest import load_json
from arm_models.pager import iterate_items, iterate_pages
from arm_models.resource.base import AzurePagedList
from arm_models.resource.networkcloud import AzureNetworkCloudAgentPool, AzureNetworkCloudAgentPoolList, service_name
from armlib.types import Json


def test_iterate_pages() -> None:
    pages: Dict[str, Json] = {
        "p2": {"value": [3, 4], "nextLink": "p3"},
        "p3": {"value": [5]},
    }
    requested: List[str] = []

    def next_page(token: str) -> Json:
        requested.append(token)
        return pages[token]

    result = list(iterate_pages(AzurePagedList, lambda: {"value": [1, 2], "nextLink": "p2"}, next_page))
    assert [p.value for p in result] == [[1, 2], [3, 4], [5]]
    assert requested == ["p2", "p3"]


def test_iterate_items_stops_on_empty_link() -> None:
    def next_page(token: str) -> Json:
        raise AssertionError("No next page expected")

    def first_page() -> Json:
        return load_json(service_name, "agentPools")

    pools = list(iterate_items(AzureNetworkCloudAgentPoolList, first_page, next_page))
    assert len(pools) == 2
    assert all(isinstance(p, AzureNetworkCloudAgentPool) for p in pools)


def test_repeated_continuation_token() -> None:
    requested: List[str] = []

    def next_page(token: str) -> Json:
        requested.append(token)
        return {"value": [len(requested)], "nextLink": "again"}

    items = list(iterate_items(AzurePagedList, lambda: {"value": [0], "nextLink": "again"}, next_page))
    assert items == [0, 1]
    assert requested == ["again"]
