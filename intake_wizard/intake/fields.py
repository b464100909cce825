# intake_wizard/intake/fields.py
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Optional


@dataclass
class FormFields:
    """
    Raw values of every scalar input on the form.

    The UI writes these as the user types; the aggregator reads them
    once at submit time. Everything is kept as the string the user
    entered, blank meaning "not filled in".
    """

    # Demographics
    age: str = ""
    gender: str = ""
    ethnicity: str = ""
    weight: str = ""
    height: str = ""
    bmi: str = ""

    # Presentation
    chief_complaint: str = ""

    # Social history
    smoking: str = ""
    alcohol: str = ""
    drugs: str = ""

    # Vitals
    systolic_bp: str = ""
    diastolic_bp: str = ""
    heart_rate: str = ""
    temperature: str = ""
    respiratory_rate: str = ""
    oxygen_sat: str = ""

    # Physical examination
    general_exam: str = ""
    heent_exam: str = ""
    cv_exam: str = ""
    resp_exam: str = ""
    abd_exam: str = ""
    neuro_exam: str = ""

    # Labs
    hemoglobin: str = ""
    wbc: str = ""
    platelets: str = ""
    glucose: str = ""
    creatinine: str = ""
    sodium: str = ""

    notes: str = ""

    def update(self, **values: Optional[str]) -> None:
        """
        Set one or more fields. ``None`` values are skipped.

        Changing weight or height recomputes the BMI.
        """
        known = {f.name for f in fields(self)}
        for name in values:
            if name not in known:
                raise ValueError(f"Unknown form field: {name}")

        for name, value in values.items():
            if value is not None:
                setattr(self, name, value)

        if "weight" in values or "height" in values:
            bmi = calculate_bmi(self.weight, self.height)
            if bmi is not None:
                self.bmi = bmi

    def clear(self) -> None:
        for f in fields(self):
            setattr(self, f.name, "")

    def demographics_complete(self) -> bool:
        return bool(self.age.strip()) and bool(self.gender.strip())


def calculate_bmi(weight_kg: str, height_cm: str) -> Optional[str]:
    """
    BMI from weight in kg and height in cm, formatted to one decimal.

    Returns None unless both values parse to positive numbers.
    """
    try:
        weight = float(weight_kg)
        height = float(height_cm)
    except (TypeError, ValueError):
        return None

    if weight <= 0 or height <= 0:
        return None

    return f"{weight / (height / 100) ** 2:.1f}"
