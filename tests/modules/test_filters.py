"""Tests for the facet filter engine."""

from __future__ import annotations

import pytest

from catalog_app.modules.filters import ActiveFilterState, compute_visible, is_visible


def _ids(records) -> list[str]:
    return [record["ID"] for record in records]


def test_no_active_filters_is_identity(sample_records) -> None:
    state = ActiveFilterState.for_facets()

    assert compute_visible(sample_records, state) == tuple(sample_records)
    assert compute_visible(sample_records, ActiveFilterState()) == tuple(sample_records)


def test_values_within_a_facet_are_or_ed(sample_records) -> None:
    state = ActiveFilterState.for_facets()
    state.activate("Type", "T1")
    state.activate("Type", "T2")

    assert _ids(compute_visible(sample_records, state)) == ["1", "2", "3"]


def test_facets_are_and_ed(sample_records) -> None:
    state = ActiveFilterState.for_facets()
    state.activate("Type", "T1")
    state.activate("Affiliation", "Y")

    assert _ids(compute_visible(sample_records, state)) == ["3"]


def test_blank_facet_value_is_visible_only_without_that_filter(sample_records) -> None:
    state = ActiveFilterState.for_facets()
    state.activate("Affiliation", "Y")

    assert _ids(compute_visible(sample_records, state)) == ["3", "4"]

    state.activate("Type", "T1")
    assert "4" not in _ids(compute_visible(sample_records, state))


def test_result_keeps_original_order(sample_records) -> None:
    state = ActiveFilterState.for_facets()
    state.activate("Affiliation", "Y")
    state.activate("Affiliation", "X")

    assert _ids(compute_visible(sample_records, state)) == ["1", "2", "3", "4"]


def test_no_match_returns_empty_tuple(sample_records) -> None:
    state = ActiveFilterState.for_facets()
    state.activate("Type", "T2")
    state.activate("Affiliation", "Y")

    assert compute_visible(sample_records, state) == ()


def test_activate_then_deactivate_round_trips(sample_records) -> None:
    state = ActiveFilterState.for_facets()
    state.activate("Type", "T1")
    before = compute_visible(sample_records, state)

    state.activate("Affiliation", "X")
    state.deactivate("Affiliation", "X")

    assert compute_visible(sample_records, state) == before


def test_clear_restores_unfiltered_facet(sample_records) -> None:
    state = ActiveFilterState.for_facets()
    state.activate("Type", "T2")

    state.clear("Type")

    assert state.active_values("Type") == frozenset()
    assert not state.is_active()
    assert compute_visible(sample_records, state) == tuple(sample_records)


def test_clear_all_resets_every_facet() -> None:
    state = ActiveFilterState.for_facets()
    state.activate("Type", "T1")
    state.activate("Affiliation", "X")

    state.clear_all()

    assert state.selections == {"Type": set(), "Affiliation": set()}


def test_deactivate_unknown_facet_is_a_no_op() -> None:
    state = ActiveFilterState()

    state.deactivate("Type", "T1")

    assert state.selections == {}


def test_compute_visible_does_not_mutate_state(sample_records) -> None:
    state = ActiveFilterState.for_facets()
    state.activate("Type", "T1")

    compute_visible(sample_records, state)
    compute_visible(sample_records, state)

    assert state.selections == {"Type": {"T1"}, "Affiliation": set()}


def test_is_visible_treats_missing_field_as_blank() -> None:
    state = ActiveFilterState({"Type": {"T1"}})

    assert not is_visible({"ID": "9"}, state)


def test_invalid_arguments_raise() -> None:
    with pytest.raises(TypeError):
        compute_visible(None, ActiveFilterState())  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        compute_visible([], None)  # type: ignore[arg-type]
