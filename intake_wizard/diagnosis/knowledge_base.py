# intake_wizard/diagnosis/knowledge_base.py
from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Urgency(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class DiagnosisCategory(str, Enum):
    RESPIRATORY = "respiratory"
    CARDIOVASCULAR = "cardiovascular"
    GASTROINTESTINAL = "gastrointestinal"


class DiagnosisRecord(BaseModel):
    """
    One candidate condition of the static lookup table.
    """

    model_config = ConfigDict(frozen=True)

    condition: str
    icd10: str
    probability: int = Field(..., ge=0, le=100)
    confidence: int = Field(..., ge=0, le=100)
    evidence_level: str
    symptoms: Tuple[str, ...] = ()
    risk_factors: Tuple[str, ...] = ()
    recommendations: Tuple[str, ...] = ()
    guidelines: str = ""
    urgency: Urgency = Urgency.LOW


KNOWLEDGE_BASE: Dict[DiagnosisCategory, Tuple[DiagnosisRecord, ...]] = {
    DiagnosisCategory.RESPIRATORY: (
        DiagnosisRecord(
            condition="Community-Acquired Pneumonia",
            icd10="J44.1",
            probability=85,
            confidence=92,
            evidence_level="A",
            symptoms=("Fever", "Cough", "Dyspnea", "Chest pain"),
            risk_factors=("Age >65", "Smoking history", "COPD"),
            recommendations=(
                "Chest X-ray to confirm diagnosis",
                "Blood cultures and sputum culture",
                "Antibiotic therapy per guidelines",
                "Consider hospitalization if PSI >70",
            ),
            guidelines="ATS/IDSA 2019 CAP Guidelines",
            urgency=Urgency.HIGH,
        ),
        DiagnosisRecord(
            condition="Upper Respiratory Tract Infection",
            icd10="J06.9",
            probability=65,
            confidence=78,
            evidence_level="B",
            symptoms=("Cough", "Fever", "Fatigue"),
            risk_factors=("Recent viral exposure", "Seasonal variation"),
            recommendations=(
                "Supportive care with rest and hydration",
                "Symptomatic treatment",
                "Return if symptoms worsen or persist >10 days",
                "No antibiotics indicated for viral URTI",
            ),
            guidelines="CDC URTI Management Guidelines",
            urgency=Urgency.LOW,
        ),
    ),
    DiagnosisCategory.CARDIOVASCULAR: (
        DiagnosisRecord(
            condition="Acute Coronary Syndrome",
            icd10="I20.9",
            probability=75,
            confidence=88,
            evidence_level="A",
            symptoms=("Chest pain", "Dyspnea", "Diaphoresis"),
            risk_factors=("Age >50", "Hypertension", "Diabetes", "Smoking"),
            recommendations=(
                "Immediate 12-lead ECG",
                "Cardiac biomarkers (troponin)",
                "Aspirin 325mg unless contraindicated",
                "Cardiology consultation",
            ),
            guidelines="AHA/ACC 2020 ACS Guidelines",
            urgency=Urgency.HIGH,
        ),
    ),
    DiagnosisCategory.GASTROINTESTINAL: (
        DiagnosisRecord(
            condition="Acute Gastroenteritis",
            icd10="K59.1",
            probability=70,
            confidence=82,
            evidence_level="B",
            symptoms=("Nausea", "Vomiting", "Diarrhea", "Abdominal pain"),
            risk_factors=("Recent food intake", "Travel history"),
            recommendations=(
                "Oral rehydration therapy",
                "BRAT diet when tolerated",
                "Monitor for dehydration",
                "Consider stool culture if severe or prolonged",
            ),
            guidelines="ACG Acute Diarrhea Guidelines",
            urgency=Urgency.MEDIUM,
        ),
    ),
}

# Lower-cased symptom names that pull a whole category into the results.
TRIGGERS: Dict[DiagnosisCategory, Tuple[str, ...]] = {
    DiagnosisCategory.RESPIRATORY: ("cough", "dyspnea", "shortness of breath"),
    DiagnosisCategory.CARDIOVASCULAR: ("chest pain", "palpitations"),
    DiagnosisCategory.GASTROINTESTINAL: ("nausea", "vomiting", "diarrhea"),
}

# URTI, used when no category triggers.
DEFAULT_DIAGNOSIS = KNOWLEDGE_BASE[DiagnosisCategory.RESPIRATORY][1]
