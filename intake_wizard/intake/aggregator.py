# intake_wizard/intake/aggregator.py
from __future__ import annotations

from intake_wizard.intake.fields import FormFields
from intake_wizard.intake.schema import (
    Demographics,
    Examination,
    History,
    Investigations,
    Labs,
    PatientData,
    PhysicalExam,
    Presentation,
    Vitals,
)
from intake_wizard.intake.selection import SelectionStore
from intake_wizard.intake.stages import Category


def _blood_pressure(fields: FormFields) -> str:
    systolic = fields.systolic_bp.strip()
    diastolic = fields.diastolic_bp.strip()
    if not systolic and not diastolic:
        return ""
    return f"{systolic}/{diastolic}"


def collect(fields: FormFields, store: SelectionStore) -> PatientData:
    """
    Read every input and list into one PatientData snapshot.

    Does not check anything; callers make sure demographics are complete
    and at least one symptom exists before submitting.
    """
    return PatientData(
        demographics=Demographics(
            age=fields.age,
            gender=fields.gender,
            ethnicity=fields.ethnicity,
            weight=fields.weight,
            height=fields.height,
            bmi=fields.bmi,
        ),
        presentation=Presentation(
            chief_complaint=fields.chief_complaint,
            symptoms=store.list(Category.SYMPTOMS),
        ),
        history=History(
            medical=store.list(Category.MEDICAL_HISTORY),
            surgical=store.list(Category.SURGICAL_HISTORY),
            family=store.list(Category.FAMILY_HISTORY),
            smoking=fields.smoking,
            alcohol=fields.alcohol,
            drugs=fields.drugs,
            allergies=store.list(Category.ALLERGIES),
        ),
        examination=Examination(
            vitals=Vitals(
                bp=_blood_pressure(fields),
                hr=fields.heart_rate,
                temp=fields.temperature,
                rr=fields.respiratory_rate,
                spo2=fields.oxygen_sat,
            ),
            physical=PhysicalExam(
                general=fields.general_exam,
                heent=fields.heent_exam,
                cv=fields.cv_exam,
                resp=fields.resp_exam,
                abd=fields.abd_exam,
                neuro=fields.neuro_exam,
            ),
        ),
        investigations=Investigations(
            labs=Labs(
                hemoglobin=fields.hemoglobin,
                wbc=fields.wbc,
                platelets=fields.platelets,
                glucose=fields.glucose,
                creatinine=fields.creatinine,
                sodium=fields.sodium,
            ),
            imaging=store.list(Category.IMAGING),
            diagnostics=store.list(Category.DIAGNOSTICS),
        ),
        medications=store.list(Category.MEDICATIONS),
        notes=fields.notes,
    )
