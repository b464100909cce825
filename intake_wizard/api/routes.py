# intake_wizard/api/routes.py
from __future__ import annotations

from dataclasses import asdict
from typing import Callable

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from intake_wizard.diagnosis.knowledge_base import KNOWLEDGE_BASE, TRIGGERS
from intake_wizard.intake.stages import Category
from intake_wizard.intake.view import RecordingView
from intake_wizard.services import IntakeSession, IntakeSessionService
from .schemas import (
    ActionResponse,
    AddItemRequest,
    AddMedicationRequest,
    AddSymptomRequest,
    KeyPressRequest,
    KnowledgeBaseResponse,
    NavigateRequest,
    SessionStateResponse,
    StartIntakeResponse,
    SubmitResponse,
    SymptomTagRequest,
    UpdateFieldsRequest,
)

router = APIRouter()

_service = IntakeSessionService()


def _get_session(session_id: str) -> IntakeSession:
    session = _service.get_session(session_id)
    if session is None:
        raise HTTPException(
            status_code=404,
            detail="Intake session not found. Start a new intake session.",
        )
    return session


def _drain(session: IntakeSession):
    view = session.view
    return view.drain() if isinstance(view, RecordingView) else []


def _act(session_id: str, action: Callable[[IntakeSession], bool]) -> ActionResponse:
    session = _get_session(session_id)
    try:
        accepted = action(session)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return ActionResponse(
        session_id=session.session_id,
        accepted=accepted,
        events=_drain(session),
    )


def _dump(item):
    return item.model_dump(mode="json") if isinstance(item, BaseModel) else item


@router.post("/intake/start", response_model=StartIntakeResponse)
async def start_intake() -> StartIntakeResponse:
    """
    Open a new, empty form positioned on the first step.
    """
    session = _service.start_session(view=RecordingView())
    return StartIntakeResponse(
        session_id=session.session_id,
        accepted=True,
        events=_drain(session),
        progress=session.wizard.progress(),
    )


@router.get("/intake/{session_id}", response_model=SessionStateResponse)
async def get_intake_state(session_id: str) -> SessionStateResponse:
    session = _get_session(session_id)
    return SessionStateResponse(
        session_id=session.session_id,
        progress=session.wizard.progress(),
        submitting=session.is_submitting,
        fields=asdict(session.fields),
        selections={
            category.value: [_dump(item) for item in session.store.list(category)]
            for category in Category
        },
    )


@router.delete("/intake/{session_id}", response_model=ActionResponse)
async def end_intake(session_id: str) -> ActionResponse:
    _get_session(session_id)
    _service.end_session(session_id)
    return ActionResponse(session_id=session_id, accepted=True, events=[])


@router.patch("/intake/{session_id}/fields", response_model=ActionResponse)
async def update_fields(session_id: str, payload: UpdateFieldsRequest) -> ActionResponse:
    values = payload.model_dump(exclude_none=True)

    def action(session: IntakeSession) -> bool:
        session.update_fields(**values)
        return True

    return _act(session_id, action)


@router.post("/intake/{session_id}/symptoms", response_model=ActionResponse)
async def add_symptom(session_id: str, payload: AddSymptomRequest) -> ActionResponse:
    return _act(
        session_id,
        lambda s: s.add_symptom(payload.name, payload.severity, payload.duration),
    )


@router.post("/intake/{session_id}/symptoms/tag", response_model=ActionResponse)
async def add_symptom_tag(session_id: str, payload: SymptomTagRequest) -> ActionResponse:
    return _act(session_id, lambda s: s.add_symptom_tag(payload.name))


@router.post("/intake/{session_id}/medications", response_model=ActionResponse)
async def add_medication(session_id: str, payload: AddMedicationRequest) -> ActionResponse:
    return _act(
        session_id,
        lambda s: s.add_medication(payload.name, payload.dose, payload.frequency),
    )


@router.post("/intake/{session_id}/items/{category}", response_model=ActionResponse)
async def add_item(session_id: str, category: Category, payload: AddItemRequest) -> ActionResponse:
    return _act(session_id, lambda s: s.add_item(category, payload.value))


@router.delete("/intake/{session_id}/items/{category}/{index}", response_model=ActionResponse)
async def remove_item(session_id: str, category: Category, index: int) -> ActionResponse:
    return _act(session_id, lambda s: s.remove_item(category, index))


@router.post("/intake/{session_id}/navigate", response_model=ActionResponse)
async def navigate(session_id: str, payload: NavigateRequest) -> ActionResponse:
    return _act(session_id, lambda s: s.navigate(payload.direction, payload.target_step))


@router.post("/intake/{session_id}/tabs/{index}", response_model=ActionResponse)
async def click_tab(session_id: str, index: int) -> ActionResponse:
    return _act(session_id, lambda s: s.click_tab(index))


@router.post("/intake/{session_id}/keys", response_model=ActionResponse)
async def key_press(session_id: str, payload: KeyPressRequest) -> ActionResponse:
    session = _get_session(session_id)
    accepted = await session.handle_key(payload.key, ctrl=payload.ctrl, shift=payload.shift)
    return ActionResponse(session_id=session_id, accepted=accepted, events=_drain(session))


@router.post("/intake/{session_id}/submit", response_model=SubmitResponse)
async def submit_intake(session_id: str) -> SubmitResponse:
    """
    Run the analysis. The request stays open for the configured delay;
    a reset on the same session meanwhile cancels it.
    """
    session = _get_session(session_id)
    result = await session.submit()

    if result is None:
        return SubmitResponse(session_id=session_id, accepted=False, events=_drain(session))

    return SubmitResponse(
        session_id=session_id,
        accepted=True,
        events=_drain(session),
        patient=result.patient,
        diagnoses=result.diagnoses,
        warnings=result.warnings,
        note=result.note,
    )


@router.post("/intake/{session_id}/reset", response_model=ActionResponse)
async def reset_intake(session_id: str) -> ActionResponse:
    def action(session: IntakeSession) -> bool:
        session.reset()
        return True

    return _act(session_id, action)


@router.get("/diagnoses/knowledge-base", response_model=KnowledgeBaseResponse)
async def knowledge_base() -> KnowledgeBaseResponse:
    return KnowledgeBaseResponse(
        categories={c.value: list(records) for c, records in KNOWLEDGE_BASE.items()},
        triggers={c.value: list(words) for c, words in TRIGGERS.items()},
    )
