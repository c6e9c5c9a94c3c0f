"""Facet filter state and the visibility computation behind the gallery."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Sequence

from .schema import FACET_FIELDS


@dataclass
class ActiveFilterState:
    """Selected values per facet.

    An empty selection for a facet means the facet does not restrict the
    view. The state is owned by the UI layer; :func:`compute_visible` only
    reads it.
    """

    selections: dict[str, set[str]] = field(default_factory=dict)

    @classmethod
    def for_facets(cls, facets: Sequence[str] = FACET_FIELDS) -> "ActiveFilterState":
        return cls({facet: set() for facet in facets})

    def activate(self, facet: str, value: str) -> None:
        self.selections.setdefault(facet, set()).add(value)

    def deactivate(self, facet: str, value: str) -> None:
        self.selections.get(facet, set()).discard(value)

    def clear(self, facet: str) -> None:
        self.selections[facet] = set()

    def clear_all(self) -> None:
        for facet in list(self.selections):
            self.clear(facet)

    def active_values(self, facet: str) -> frozenset[str]:
        return frozenset(self.selections.get(facet, ()))

    def is_active(self) -> bool:
        """Return ``True`` when at least one facet restricts the view."""

        return any(self.selections.values())


def is_visible(record: Mapping[str, str], state: ActiveFilterState) -> bool:
    """Return whether ``record`` passes every constrained facet in ``state``."""

    for facet, selected in state.selections.items():
        if selected and record.get(facet, "") not in selected:
            return False
    return True


def compute_visible(
    records: Sequence[Mapping[str, str]], state: ActiveFilterState
) -> tuple[Mapping[str, str], ...]:
    """Return the records visible under ``state`` in their original order.

    Values within one facet are OR-ed, facets are AND-ed. An empty result is
    a valid outcome and not an error.

    Raises:
        TypeError: If ``records`` or ``state`` is ``None``.
    """

    if records is None:
        raise TypeError("compute_visible requires a record sequence, got None")
    if state is None:
        raise TypeError("compute_visible requires an ActiveFilterState, got None")

    if not state.is_active():
        return tuple(records)
    return tuple(record for record in records if is_visible(record, state))


__all__ = [
    "ActiveFilterState",
    "is_visible",
    "compute_visible",
]
