import logging
from typing import Any, Callable, Iterator, Optional, Set, Type, TypeVar

from arm_models.resource.base import AzurePagedList
from armlib.types import Json

log = logging.getLogger("arm.models.pager")

P = TypeVar("P", bound=AzurePagedList)


def iterate_pages(clazz: Type[P], first_page: Callable[[], Json], next_page: Callable[[str], Json]) -> Iterator[P]:
    """
    Walk a server driven listing page by page.

    The first page is fetched via `first_page()`, every following page via `next_page(token)`
    with the continuation token of the previous page. The iteration stops, when a page has no continuation.
    A token that was already followed ends the iteration as well, since the server would send the same pages again.

    :param clazz: the paged list class used to decode every page.
    :param first_page: fetch the json of the first page.
    :param next_page: fetch the json of the page behind the given continuation token.
    """
    seen: Set[str] = set()
    page = clazz.from_json(first_page())
    while True:
        yield page
        token: Optional[str] = page.continuation()
        if token is None:
            return
        if token in seen:
            log.warning(f"Continuation token {token} of {clazz.__name__} was already followed. Stop iteration.")
            return
        seen.add(token)
        log.debug(f"Fetch next page of {clazz.__name__}")
        page = clazz.from_json(next_page(token))


def iterate_items(clazz: Type[P], first_page: Callable[[], Json], next_page: Callable[[str], Json]) -> Iterator[Any]:
    """
    Same as iterate_pages, but yields the items of all pages in order.
    """
    for page in iterate_pages(clazz, first_page, next_page):
        yield from page
