"""Shared helper functions for step definitions."""

from typing import Dict, List, Sequence, Type, TypeVar

from webnav import World
from webnav.pages import HomePage

PageT = TypeVar("PageT", bound=HomePage)


def table_rows(datatable: Sequence[Sequence[str]], *columns: str) -> List[Dict[str, str]]:
    """Turn a pytest-bdd data table into one dict per row, keyed by header.

    :param datatable: Rows as lists of cells, header row first
    :param columns: Column names the step needs
    :raises ValueError: if the table is empty or lacks a required column
    """
    if not datatable:
        raise ValueError("Step expects a data table but none was given")

    header = [cell.strip() for cell in datatable[0]]
    missing = [column for column in columns if column not in header]
    if missing:
        raise ValueError(
            f"Data table is missing column(s): {', '.join(missing)} "
            f"(found: {', '.join(header)})"
        )

    return [
        {name: cell.strip() for name, cell in zip(header, row)}
        for row in datatable[1:]
    ]


def column_values(datatable: Sequence[Sequence[str]], column: str) -> List[str]:
    """Values of a single column, in table order."""
    return [row[column] for row in table_rows(datatable, column)]


def home_page(world: World) -> HomePage:
    """The scenario's homepage object; fails if the browser never started."""
    assert world.home_page is not None, "Browser is not initialized for this scenario"
    return world.home_page


def site_page(world: World, page_class: Type[PageT]) -> PageT:
    """The homepage object, checked to be a specific site variant."""
    page = home_page(world)
    assert isinstance(page, page_class), (
        f"Step needs a {page_class.__name__} but site '{world.site.name}' "
        f"uses {type(page).__name__}"
    )
    return page
