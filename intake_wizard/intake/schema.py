# intake_wizard/intake/schema.py
from __future__ import annotations

from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


UNKNOWN = "unknown"


class Severity(str, Enum):
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"


class Symptom(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Symptom name, e.g. 'Cough'")
    severity: Severity = Severity.MODERATE
    duration: str = Field(UNKNOWN, description="Free-text duration, e.g. '3 days'")


class Medication(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    dose: str = UNKNOWN
    frequency: str = UNKNOWN


# ----------------------------------------------------------------------
# Submission snapshot
# ----------------------------------------------------------------------


class _Snapshot(BaseModel):
    model_config = ConfigDict(frozen=True)


class Demographics(_Snapshot):
    age: str = ""
    gender: str = ""
    ethnicity: str = ""
    weight: str = ""
    height: str = ""
    bmi: str = ""


class Presentation(_Snapshot):
    chief_complaint: str = ""
    symptoms: Tuple[Symptom, ...] = ()


class History(_Snapshot):
    medical: Tuple[str, ...] = ()
    surgical: Tuple[str, ...] = ()
    family: Tuple[str, ...] = ()
    smoking: str = ""
    alcohol: str = ""
    drugs: str = ""
    allergies: Tuple[str, ...] = ()


class Vitals(_Snapshot):
    bp: str = ""
    hr: str = ""
    temp: str = ""
    rr: str = ""
    spo2: str = ""


class PhysicalExam(_Snapshot):
    general: str = ""
    heent: str = ""
    cv: str = ""
    resp: str = ""
    abd: str = ""
    neuro: str = ""


class Examination(_Snapshot):
    vitals: Vitals = Field(default_factory=Vitals)
    physical: PhysicalExam = Field(default_factory=PhysicalExam)


class Labs(_Snapshot):
    hemoglobin: str = ""
    wbc: str = ""
    platelets: str = ""
    glucose: str = ""
    creatinine: str = ""
    sodium: str = ""


class Investigations(_Snapshot):
    labs: Labs = Field(default_factory=Labs)
    imaging: Tuple[str, ...] = ()
    diagnostics: Tuple[str, ...] = ()


class PatientData(_Snapshot):
    """
    One-shot snapshot of the whole intake form, built at submit time.

    Nothing mutates it after construction; the matcher and the note
    generator both read from the same instance.
    """

    demographics: Demographics = Field(default_factory=Demographics)
    presentation: Presentation = Field(default_factory=Presentation)
    history: History = Field(default_factory=History)
    examination: Examination = Field(default_factory=Examination)
    investigations: Investigations = Field(default_factory=Investigations)
    medications: Tuple[Medication, ...] = ()
    notes: str = ""
