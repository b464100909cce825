"""
Tests for diagnosis matching

Run: pytest tests/test_matcher.py -v
"""

import pytest

from intake_wizard.diagnosis import DEFAULT_DIAGNOSIS, match_symptoms


def _is_sorted(diagnoses):
    probabilities = [d.probability for d in diagnoses]
    return probabilities == sorted(probabilities, reverse=True)


@pytest.mark.parametrize("symptom", ["cough", "dyspnea", "chest pain", "nausea"])
def test_single_trigger_sorted(symptom):
    diagnoses = match_symptoms([symptom])
    assert diagnoses
    assert _is_sorted(diagnoses)


def test_empty_symptoms_gives_default():
    assert match_symptoms([]) == [DEFAULT_DIAGNOSIS]
    assert DEFAULT_DIAGNOSIS.icd10 == "J06.9"


def test_unknown_symptom_gives_default():
    assert match_symptoms(["Headache"]) == [DEFAULT_DIAGNOSIS]


def test_match_is_case_insensitive():
    diagnoses = match_symptoms(["Chest Pain"])
    assert [d.icd10 for d in diagnoses] == ["I20.9"]


def test_trigger_pulls_whole_category():
    diagnoses = match_symptoms(["Cough"])
    assert [d.condition for d in diagnoses] == [
        "Community-Acquired Pneumonia",
        "Upper Respiratory Tract Infection",
    ]


def test_several_triggers_in_one_category_add_it_once():
    diagnoses = match_symptoms(["cough", "dyspnea", "shortness of breath"])
    assert len(diagnoses) == 2


def test_categories_combine_and_sort():
    diagnoses = match_symptoms(["cough", "palpitations", "diarrhea"])
    assert [(d.icd10, d.probability) for d in diagnoses] == [
        ("J44.1", 85),
        ("I20.9", 75),
        ("K59.1", 70),
        ("J06.9", 65),
    ]
