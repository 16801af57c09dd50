from dataclasses import dataclass, field
from typing import Any, Sequence, Tuple


@dataclass
class TableModel:
    title: str
    columns: list[str]
    rows: list[list[str]]


@dataclass(frozen=True)
class PickItem:
    id: str
    title: str
    tags: Tuple[str, ...] = ()
    description: str = ""
    search_blob: str = ""
    preview: object | None = None  # Rich renderable
    payload: Any = None  # domain object
    selected: bool = False
    disabled: bool = False


@dataclass(frozen=True)
class PickView:
    """Replacement list (and retained selection) for a live multi-select."""

    items: Sequence[PickItem]
    selected_ids: frozenset[str] = field(default_factory=frozenset)
