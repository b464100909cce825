# intake_wizard/diagnosis/matcher.py
from __future__ import annotations

from typing import Iterable, List

from intake_wizard.diagnosis.knowledge_base import (
    DEFAULT_DIAGNOSIS,
    KNOWLEDGE_BASE,
    TRIGGERS,
    DiagnosisRecord,
)
from intake_wizard.intake.schema import PatientData
from intake_wizard.logger import logger


def match_symptoms(symptom_names: Iterable[str]) -> List[DiagnosisRecord]:
    """
    Candidate diagnoses for the given symptom names, most probable first.

    A category is included as a whole as soon as one of its trigger
    keywords is among the symptoms. With no trigger at all the URTI
    record is returned on its own, so the result is never empty.
    """
    names = {name.strip().lower() for name in symptom_names}

    diagnoses: List[DiagnosisRecord] = []
    for category, records in KNOWLEDGE_BASE.items():
        if names.intersection(TRIGGERS[category]):
            logger.debug("Category %s triggered", category.value)
            diagnoses.extend(records)

    if not diagnoses:
        diagnoses.append(DEFAULT_DIAGNOSIS)

    # sorted() is stable, ties keep table order
    return sorted(diagnoses, key=lambda d: d.probability, reverse=True)


def match_patient(patient: PatientData) -> List[DiagnosisRecord]:
    return match_symptoms(s.name for s in patient.presentation.symptoms)
