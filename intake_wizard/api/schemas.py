# intake_wizard/api/schemas.py
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from intake_wizard.diagnosis.knowledge_base import DiagnosisRecord
from intake_wizard.intake.schema import PatientData, Severity
from intake_wizard.intake.view import Progress, ViewEvent
from intake_wizard.services import NavDirection


class ActionResponse(BaseModel):
    session_id: str
    accepted: bool
    events: List[ViewEvent]


class StartIntakeResponse(ActionResponse):
    progress: Progress


class SessionStateResponse(BaseModel):
    session_id: str
    progress: Progress
    submitting: bool
    fields: Dict[str, str]
    selections: Dict[str, List[Any]]


class UpdateFieldsRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    age: Optional[str] = None
    gender: Optional[str] = None
    ethnicity: Optional[str] = None
    weight: Optional[str] = None
    height: Optional[str] = None
    bmi: Optional[str] = None
    chief_complaint: Optional[str] = None
    smoking: Optional[str] = None
    alcohol: Optional[str] = None
    drugs: Optional[str] = None
    systolic_bp: Optional[str] = None
    diastolic_bp: Optional[str] = None
    heart_rate: Optional[str] = None
    temperature: Optional[str] = None
    respiratory_rate: Optional[str] = None
    oxygen_sat: Optional[str] = None
    general_exam: Optional[str] = None
    heent_exam: Optional[str] = None
    cv_exam: Optional[str] = None
    resp_exam: Optional[str] = None
    abd_exam: Optional[str] = None
    neuro_exam: Optional[str] = None
    hemoglobin: Optional[str] = None
    wbc: Optional[str] = None
    platelets: Optional[str] = None
    glucose: Optional[str] = None
    creatinine: Optional[str] = None
    sodium: Optional[str] = None
    notes: Optional[str] = None


class AddSymptomRequest(BaseModel):
    name: str
    severity: Severity = Severity.MODERATE
    duration: str = ""


class SymptomTagRequest(BaseModel):
    name: str


class AddItemRequest(BaseModel):
    value: str


class AddMedicationRequest(BaseModel):
    name: str
    dose: str = ""
    frequency: str = ""


class NavigateRequest(BaseModel):
    direction: Optional[NavDirection] = None
    target_step: Optional[int] = None


class KeyPressRequest(BaseModel):
    key: str
    ctrl: bool = False
    shift: bool = False


class SubmitResponse(ActionResponse):
    patient: Optional[PatientData] = None
    diagnoses: List[DiagnosisRecord] = []
    warnings: List[str] = []
    note: Optional[str] = None


class KnowledgeBaseResponse(BaseModel):
    categories: Dict[str, List[DiagnosisRecord]]
    triggers: Dict[str, List[str]]
