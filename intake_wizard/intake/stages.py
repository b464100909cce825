# intake_wizard/intake/stages.py
from enum import Enum


class WizardStep(str, Enum):
    DEMOGRAPHICS = "demographics"
    PRESENTATION = "presentation"
    HISTORY = "history"
    EXAMINATION = "examination"
    INVESTIGATIONS = "investigations"
    MEDICATIONS = "medications"


# Display order of the wizard tabs.
STEP_ORDER = list(WizardStep)
TOTAL_STEPS = len(STEP_ORDER)


class Category(str, Enum):
    SYMPTOMS = "symptoms"
    MEDICAL_HISTORY = "medical_history"
    SURGICAL_HISTORY = "surgical_history"
    FAMILY_HISTORY = "family_history"
    ALLERGIES = "allergies"
    IMAGING = "imaging"
    DIAGNOSTICS = "diagnostics"
    MEDICATIONS = "medications"


# Categories whose items are plain strings.
TEXT_CATEGORIES = (
    Category.MEDICAL_HISTORY,
    Category.SURGICAL_HISTORY,
    Category.FAMILY_HISTORY,
    Category.ALLERGIES,
    Category.IMAGING,
    Category.DIAGNOSTICS,
)


class NoticeSeverity(str, Enum):
    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
