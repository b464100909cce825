# intake_wizard/intake/checks.py
from __future__ import annotations

import re
from typing import List, Optional

from intake_wizard.intake.schema import PatientData


ELDERLY_AGE = 65

ELDERLY_CHEST_PAIN = "Consider ACS workup in elderly patient with chest pain"
WARFARIN_ASPIRIN = "Warning: Increased bleeding risk with warfarin + aspirin combination"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_age(raw: str) -> Optional[int]:
    """
    Leading integer of the age field, e.g. "70" or "70 years".
    """
    match = _LEADING_INT.match(raw)
    return int(match.group(1)) if match else None


def clinical_warnings(patient: PatientData) -> List[str]:
    """
    Rule-of-thumb warnings shown alongside the results.
    """
    warnings: List[str] = []

    age = _parse_age(patient.demographics.age)
    symptom_names = [s.name.lower() for s in patient.presentation.symptoms]
    if age is not None and age > ELDERLY_AGE and any("chest pain" in n for n in symptom_names):
        warnings.append(ELDERLY_CHEST_PAIN)

    medications = {m.name.lower() for m in patient.medications}
    if "warfarin" in medications and "aspirin" in medications:
        warnings.append(WARFARIN_ASPIRIN)

    return warnings
