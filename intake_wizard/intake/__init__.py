# intake_wizard/intake/__init__.py
from .schema import PatientData, Symptom, Medication, Severity
from .selection import SelectionStore
from .wizard import WizardController

__all__ = [
    "PatientData",
    "Symptom",
    "Medication",
    "Severity",
    "SelectionStore",
    "WizardController",
]
