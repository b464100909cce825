# intake_wizard/diagnosis/__init__.py
from .knowledge_base import DiagnosisRecord, KNOWLEDGE_BASE, DEFAULT_DIAGNOSIS
from .matcher import match_symptoms, match_patient
from .note import generate_note

__all__ = [
    "DiagnosisRecord",
    "KNOWLEDGE_BASE",
    "DEFAULT_DIAGNOSIS",
    "match_symptoms",
    "match_patient",
    "generate_note",
]
