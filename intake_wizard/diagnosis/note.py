# intake_wizard/diagnosis/note.py
from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Sequence

from intake_wizard.diagnosis.knowledge_base import DiagnosisRecord
from intake_wizard.intake.schema import PatientData


NOT_DOCUMENTED = "Not documented"
NONE_DOCUMENTED = "None documented"
NO_KNOWN_ALLERGIES = "NKDA"
NOT_TAKEN = "Not taken"

DISCLAIMER = (
    "DISCLAIMER: This assessment was generated with AI assistance "
    "and requires physician review and approval."
)

LAB_LABELS = (
    ("hemoglobin", "Hemoglobin"),
    ("wbc", "WBC"),
    ("platelets", "Platelets"),
    ("glucose", "Glucose"),
    ("creatinine", "Creatinine"),
    ("sodium", "Sodium"),
)


def _or(value: str, fallback: str) -> str:
    return value.strip() or fallback


def _joined(items: Sequence[str], fallback: str) -> str:
    return ", ".join(items) or fallback


def _header(now: datetime) -> List[str]:
    return [
        "CLINICAL ASSESSMENT REPORT",
        f"Generated: {now:%Y-%m-%d %H:%M:%S}",
        "Provider: Dr. [Provider Name]",
        "Patient ID: [Patient ID]",
    ]


def _demographics(patient: PatientData) -> List[str]:
    demo = patient.demographics
    lines = [
        "DEMOGRAPHICS:",
        f"Age: {demo.age} years",
        f"Gender: {demo.gender}",
    ]
    if demo.ethnicity:
        lines.append(f"Ethnicity: {demo.ethnicity}")
    if demo.bmi:
        lines.append(f"BMI: {demo.bmi}")
    return lines


def _subjective(patient: PatientData) -> List[str]:
    history = patient.history
    lines = [
        "SUBJECTIVE:",
        f"Chief Complaint: {_or(patient.presentation.chief_complaint, NOT_DOCUMENTED)}",
        "",
        "History of Present Illness:",
    ]
    lines.extend(
        f"- {s.name} ({s.severity.value}, duration: {s.duration})"
        for s in patient.presentation.symptoms
    )
    lines.extend(
        [
            "",
            f"Past Medical History: {_joined(history.medical, NONE_DOCUMENTED)}",
            f"Surgical History: {_joined(history.surgical, NONE_DOCUMENTED)}",
            f"Family History: {_joined(history.family, NONE_DOCUMENTED)}",
            "Social History:",
            f"  Smoking: {_or(history.smoking, NOT_DOCUMENTED)}",
            f"  Alcohol: {_or(history.alcohol, NOT_DOCUMENTED)}",
            f"  Drugs: {_or(history.drugs, NOT_DOCUMENTED)}",
            f"Allergies: {_joined(history.allergies, NO_KNOWN_ALLERGIES)}",
            "",
            "Current Medications:",
        ]
    )
    if patient.medications:
        lines.extend(f"- {m.name} {m.dose} {m.frequency}" for m in patient.medications)
    else:
        lines.append(NONE_DOCUMENTED)
    return lines


def _objective(patient: PatientData) -> List[str]:
    vitals = patient.examination.vitals
    physical = patient.examination.physical
    investigations = patient.investigations

    lines = [
        "OBJECTIVE:",
        "Vital Signs:",
        f"  Blood Pressure: {_or(vitals.bp, NOT_TAKEN)} mmHg",
        f"  Heart Rate: {_or(vitals.hr, NOT_TAKEN)} bpm",
        f"  Temperature: {_or(vitals.temp, NOT_TAKEN)} °C",
        f"  Respiratory Rate: {_or(vitals.rr, NOT_TAKEN)} /min",
        f"  O2 Saturation: {_or(vitals.spo2, NOT_TAKEN)}%",
        "",
        "Physical Examination:",
        f"  General: {_or(physical.general, NOT_DOCUMENTED)}",
        f"  HEENT: {_or(physical.heent, NOT_DOCUMENTED)}",
        f"  Cardiovascular: {_or(physical.cv, NOT_DOCUMENTED)}",
        f"  Respiratory: {_or(physical.resp, NOT_DOCUMENTED)}",
        f"  Abdominal: {_or(physical.abd, NOT_DOCUMENTED)}",
        f"  Neurological: {_or(physical.neuro, NOT_DOCUMENTED)}",
        "",
        "Laboratory/Diagnostic Results:",
    ]

    results: List[str] = []
    for attr, label in LAB_LABELS:
        value = getattr(investigations.labs, attr).strip()
        if value:
            results.append(f"  {label}: {value}")
    results.extend(f"  {item}" for item in investigations.imaging)
    results.extend(f"  {item}" for item in investigations.diagnostics)

    lines.extend(results or [NONE_DOCUMENTED])
    return lines


def _assessment(diagnoses: Sequence[DiagnosisRecord]) -> List[str]:
    lines = ["ASSESSMENT:", "Differential Diagnosis:"]
    lines.extend(
        f"{rank}. {d.condition} ({d.icd10}) - {d.probability}% probability"
        for rank, d in enumerate(diagnoses, start=1)
    )
    return lines


def _plan(diagnoses: Sequence[DiagnosisRecord]) -> List[str]:
    lines = ["PLAN:"]
    if not diagnoses:
        lines.append("Plan to be determined")
        return lines

    lines.extend(
        f"{i}. {rec}" for i, rec in enumerate(diagnoses[0].recommendations, start=1)
    )
    return lines


def generate_note(
    patient: PatientData,
    diagnoses: Sequence[DiagnosisRecord],
    now: Optional[datetime] = None,
) -> str:
    """
    Render the SOAP-style clinical note for one submission.

    Only the "Generated" and signature dates depend on the clock; pass
    ``now`` to pin them.
    """
    now = now or datetime.now()

    sections = [
        _header(now),
        _demographics(patient),
        _subjective(patient),
        _objective(patient),
        _assessment(diagnoses),
        _plan(diagnoses),
        [f"Additional Notes: {_or(patient.notes, 'None')}"],
        [
            "Provider Signature: _______________________",
            f"Date: {now:%Y-%m-%d}",
        ],
        [DISCLAIMER],
    ]
    return "\n\n".join("\n".join(lines) for lines in sections)
