# intake_wizard/services/intake_session.py
from __future__ import annotations

import asyncio
import time
import uuid
from enum import Enum
from typing import Callable, Dict, List, Optional

from pydantic import BaseModel

from intake_wizard.config import get_settings
from intake_wizard.diagnosis import DiagnosisRecord, generate_note, match_patient
from intake_wizard.intake.aggregator import collect
from intake_wizard.intake.checks import clinical_warnings
from intake_wizard.intake.fields import FormFields
from intake_wizard.intake.schema import PatientData, Severity
from intake_wizard.intake.selection import SelectionStore
from intake_wizard.intake.stages import Category, NoticeSeverity, WizardStep, STEP_ORDER
from intake_wizard.intake.view import IntakeView, RecordingView
from intake_wizard.intake.wizard import WizardController
from intake_wizard.logger import logger


class NavDirection(str, Enum):
    NEXT = "next"
    PREV = "prev"


class SubmissionResult(BaseModel):
    patient: PatientData
    diagnoses: List[DiagnosisRecord]
    warnings: List[str]
    note: str


class CancellationToken:
    """
    Handle on a pending timed wait.

    ``cancel()`` stops the wait right away; the waiter then sees
    ``sleep()`` return False instead of an exception.
    """

    def __init__(self):
        self._cancelled = False
        self._task: Optional[asyncio.Future] = None

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True
        if self._task is not None and not self._task.done():
            self._task.cancel()

    async def sleep(self, delay: float) -> bool:
        if self._cancelled:
            return False

        self._task = asyncio.ensure_future(asyncio.sleep(delay))
        try:
            await self._task
        except asyncio.CancelledError:
            if self._cancelled:
                return False
            # Our own caller was cancelled, not us
            raise
        finally:
            self._task = None
        return not self._cancelled


class IntakeSession:
    """
    One user's form: fields, selection lists, wizard position.

    UI actions come in through the public methods; everything the UI
    has to redraw goes out through ``view``.
    """

    def __init__(self, view: Optional[IntakeView] = None, submit_delay: Optional[float] = None):
        self.session_id = str(uuid.uuid4())
        self.view = view or RecordingView()
        self.fields = FormFields()
        self.store = SelectionStore(on_change=self.view.render_list)
        self.wizard = WizardController(self.fields, self.view)

        if submit_delay is None:
            submit_delay = get_settings().submit_delay
        self.submit_delay = submit_delay

        self._pending: Optional[CancellationToken] = None

    @property
    def is_submitting(self) -> bool:
        return self._pending is not None

    # ------------------------------------------------------------------
    # Input actions
    # ------------------------------------------------------------------

    def update_fields(self, **values: Optional[str]) -> None:
        self.fields.update(**values)

    def add_symptom(self, name: str, severity: Severity = Severity.MODERATE, duration: str = "") -> bool:
        return self.store.add_symptom(name, severity, duration)

    def add_symptom_tag(self, name: str) -> bool:
        return self.store.add_symptom_tag(name)

    def add_item(self, category: Category, value: str) -> bool:
        return self.store.add(category, value)

    def add_medication(self, name: str, dose: str = "", frequency: str = "") -> bool:
        return self.store.add_medication(name, dose, frequency)

    def remove_item(self, category: Category, index: int) -> bool:
        removed = self.store.remove(category, index)
        if removed and category == Category.SYMPTOMS:
            self.view.notify("Symptom removed", NoticeSeverity.INFO)
        return removed

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def navigate(
        self,
        direction: Optional[NavDirection] = None,
        target_step: Optional[int] = None,
    ) -> bool:
        """
        UI navigation. A target step is treated as a tab click, so it
        obeys the same reach and validation rules as the tabs.
        """
        if direction == NavDirection.NEXT:
            return self.wizard.next()
        if direction == NavDirection.PREV:
            return self.wizard.prev()
        if target_step is not None:
            return self.wizard.click_tab(target_step)
        return False

    def click_tab(self, index: int) -> bool:
        return self.wizard.click_tab(index)

    async def handle_key(self, key: str, ctrl: bool = False, shift: bool = False) -> bool:
        """
        Keyboard shortcuts: Ctrl+Right / Ctrl+Left step through the form,
        Ctrl+Shift+Enter submits from the last step.
        """
        if not ctrl:
            return False
        if key == "ArrowRight":
            return self.wizard.next()
        if key == "ArrowLeft":
            return self.wizard.prev()
        if key == "Enter" and shift and self.wizard.is_last_step:
            return await self.submit() is not None
        return False

    # ------------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------------

    async def submit(self) -> Optional[SubmissionResult]:
        """
        Run the analysis and show the note.

        Returns None when the submission is refused or cancelled by a
        reset during the analysis delay.
        """
        if self._pending is not None:
            self.view.notify("Analysis already in progress", NoticeSeverity.WARNING)
            return None

        if not self.fields.demographics_complete():
            logger.info("Session %s: submit refused, demographics incomplete", self.session_id)
            self.view.notify(
                "Please fill in all required demographic information",
                NoticeSeverity.WARNING,
            )
            self.wizard.go_to_step(STEP_ORDER.index(WizardStep.DEMOGRAPHICS))
            return None

        if self.store.size(Category.SYMPTOMS) == 0:
            logger.info("Session %s: submit refused, no symptoms", self.session_id)
            self.view.notify(
                "Please add at least one symptom in the Chief Complaint section",
                NoticeSeverity.WARNING,
            )
            self.wizard.go_to_step(STEP_ORDER.index(WizardStep.PRESENTATION))
            return None

        patient = collect(self.fields, self.store)

        token = CancellationToken()
        self._pending = token
        self.view.set_submitting(True)
        try:
            completed = await token.sleep(self.submit_delay)
        finally:
            # A reset may already have let a newer submission start
            if self._pending is token:
                self._pending = None
                self.view.set_submitting(False)

        if not completed:
            logger.info("Session %s: analysis cancelled", self.session_id)
            return None

        diagnoses = match_patient(patient)
        warnings = clinical_warnings(patient)
        note = generate_note(patient, diagnoses)

        logger.info(
            "Session %s: analysis done, %d candidate diagnoses, top=%s",
            self.session_id,
            len(diagnoses),
            diagnoses[0].icd10,
        )

        self.view.show_note(note)
        for warning in warnings:
            self.view.notify(warning, NoticeSeverity.WARNING)
        self.view.notify("Form submitted successfully!", NoticeSeverity.SUCCESS)

        self._reset_form()
        return SubmissionResult(patient=patient, diagnoses=diagnoses, warnings=warnings, note=note)

    def reset(self) -> None:
        """
        Clear the whole form. A pending analysis is cancelled.
        """
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
            self.view.set_submitting(False)
        self._reset_form()

    def _reset_form(self) -> None:
        self.fields.clear()
        self.store.clear()
        self.wizard.reset()


class IntakeSessionService:
    """
    Keeps the in-memory sessions, one per open form.

    Sessions untouched for longer than ``session_timeout`` seconds are
    dropped on the next lookup, unless an analysis is still running.
    """

    def __init__(
        self,
        submit_delay: Optional[float] = None,
        session_timeout: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        if session_timeout is None:
            session_timeout = get_settings().session_timeout_minutes * 60
        self.submit_delay = submit_delay
        self.session_timeout = session_timeout
        self._clock = clock
        self._sessions: Dict[str, IntakeSession] = {}
        self._last_seen: Dict[str, float] = {}

    def start_session(self, view: Optional[IntakeView] = None) -> IntakeSession:
        self.evict_expired()

        session = IntakeSession(view=view, submit_delay=self.submit_delay)
        self._sessions[session.session_id] = session
        self._last_seen[session.session_id] = self._clock()

        # Initial progress bar and button state
        session.wizard.go_to_step(0)

        logger.info("Started intake session %s", session.session_id)
        return session

    def get_session(self, session_id: str) -> Optional[IntakeSession]:
        self.evict_expired()

        session = self._sessions.get(session_id)
        if session is not None:
            self._last_seen[session_id] = self._clock()
        return session

    def end_session(self, session_id: str) -> bool:
        session = self._sessions.pop(session_id, None)
        self._last_seen.pop(session_id, None)
        if session is None:
            return False
        session.reset()
        logger.info("Ended intake session %s", session_id)
        return True

    def evict_expired(self) -> int:
        now = self._clock()
        expired = [
            session_id
            for session_id, seen in self._last_seen.items()
            if now - seen > self.session_timeout
            and not self._sessions[session_id].is_submitting
        ]
        for session_id in expired:
            logger.info("Session %s idle for over %.0fs", session_id, self.session_timeout)
            self.end_session(session_id)
        return len(expired)
