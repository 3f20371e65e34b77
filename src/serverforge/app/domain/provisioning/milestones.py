from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, Mapping

from serverforge.app.domain.provisioning.errors import UnknownMilestone


class MilestoneRegistry:
    """
    Ordered ``key -> label`` declaration of a package's milestones.
    ``count()`` is the denominator every progress event reports.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Mapping[str, str]) -> None:
        self._items = MappingProxyType(dict(items))

    def count(self) -> int:
        return len(self._items)

    def label(self, key: str) -> str:
        try:
            return self._items[key]
        except KeyError:
            raise UnknownMilestone(key) from None

    def keys(self) -> tuple[str, ...]:
        return tuple(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"MilestoneRegistry({dict(self._items)!r})"
