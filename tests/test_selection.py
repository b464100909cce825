"""
Tests for the selection store

Run: pytest tests/test_selection.py -v
"""

import pytest

from intake_wizard.intake.schema import Medication, Severity, Symptom
from intake_wizard.intake.stages import Category, TEXT_CATEGORIES
from intake_wizard.intake.view import ViewEventKind


@pytest.mark.parametrize("category", TEXT_CATEGORIES)
def test_duplicate_text_item_keeps_size(store, category):
    assert store.add(category, "Hypertension")
    assert not store.add(category, "Hypertension")
    assert store.size(category) == 1


def test_text_items_keep_insertion_order(store):
    for value in ["Asthma", "Diabetes", "Gout"]:
        store.add(Category.MEDICAL_HISTORY, value)
    assert store.list(Category.MEDICAL_HISTORY) == ("Asthma", "Diabetes", "Gout")


def test_text_items_are_trimmed_and_blank_ignored(store):
    assert not store.add(Category.ALLERGIES, "   ")
    assert store.add(Category.ALLERGIES, "  Penicillin ")
    assert not store.add(Category.ALLERGIES, "Penicillin")
    assert store.list(Category.ALLERGIES) == ("Penicillin",)


def test_text_dedup_is_case_sensitive(store):
    store.add(Category.IMAGING, "CXR")
    store.add(Category.IMAGING, "cxr")
    assert store.size(Category.IMAGING) == 2


def test_add_text_to_structured_category_rejected(store):
    with pytest.raises(ValueError):
        store.add(Category.SYMPTOMS, "Cough")


def test_symptom_unique_by_name(store):
    assert store.add_symptom("Cough", Severity.SEVERE, "3 days")
    assert not store.add_symptom("Cough", Severity.MILD, "1 day")
    assert store.symptoms == (Symptom(name="Cough", severity=Severity.SEVERE, duration="3 days"),)


def test_symptom_blank_duration_defaults_to_unknown(store):
    store.add_symptom("Fever", Severity.MILD, "  ")
    assert store.symptoms[0].duration == "unknown"


def test_symptom_blank_name_ignored(store):
    assert not store.add_symptom("", Severity.MILD, "2 days")
    assert store.size(Category.SYMPTOMS) == 0


def test_symptom_tag_defaults(store):
    assert store.add_symptom_tag("Nausea")
    symptom = store.symptoms[0]
    assert symptom.severity == Severity.MODERATE
    assert symptom.duration == "unknown"

    # Already selected tag is a no-op
    assert not store.add_symptom_tag("Nausea")


def test_medications_not_deduplicated(store):
    assert store.add_medication("Aspirin", "81mg", "daily")
    assert store.add_medication("Aspirin", "81mg", "daily")
    assert store.size(Category.MEDICATIONS) == 2


def test_medication_defaults_and_blank_name(store):
    assert not store.add_medication("  ", "10mg", "bid")
    assert store.add_medication("Metformin")
    assert store.medications == (Medication(name="Metformin", dose="unknown", frequency="unknown"),)


def test_remove_out_of_bounds_is_noop(store):
    store.add(Category.FAMILY_HISTORY, "CAD")
    assert not store.remove(Category.FAMILY_HISTORY, 1)
    assert not store.remove(Category.FAMILY_HISTORY, -1)
    assert store.list(Category.FAMILY_HISTORY) == ("CAD",)


def test_remove_preserves_order(store):
    for value in ["a", "b", "c"]:
        store.add(Category.DIAGNOSTICS, value)
    assert store.remove(Category.DIAGNOSTICS, 1)
    assert store.list(Category.DIAGNOSTICS) == ("a", "c")


def test_clear_twice_leaves_everything_empty(store):
    store.add_symptom("Cough")
    store.add(Category.ALLERGIES, "Latex")
    store.add_medication("Warfarin")

    store.clear()
    assert all(store.size(c) == 0 for c in Category)
    store.clear()
    assert all(store.size(c) == 0 for c in Category)


def test_list_is_a_copy(store):
    store.add(Category.SURGICAL_HISTORY, "Appendectomy")
    items = store.list(Category.SURGICAL_HISTORY)
    assert isinstance(items, tuple)
    store.add(Category.SURGICAL_HISTORY, "Cholecystectomy")
    assert items == ("Appendectomy",)


def test_mutations_emit_render_events(store, view):
    store.add(Category.ALLERGIES, "Latex")
    store.add(Category.ALLERGIES, "Latex")  # no change, no render
    store.remove(Category.ALLERGIES, 5)  # no change, no render
    store.add_symptom("Cough", Severity.SEVERE, "3 days")

    renders = view.of_kind(ViewEventKind.RENDER_LIST)
    assert [e.payload["category"] for e in renders] == ["allergies", "symptoms"]
    assert renders[1].payload["items"] == [
        {"name": "Cough", "severity": "severe", "duration": "3 days"}
    ]


def test_clear_renders_every_category(store, view):
    store.clear()
    renders = view.of_kind(ViewEventKind.RENDER_LIST)
    assert {e.payload["category"] for e in renders} == {c.value for c in Category}
    assert all(e.payload["items"] == [] for e in renders)
