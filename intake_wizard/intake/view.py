# intake_wizard/intake/view.py
from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, List, Sequence

from pydantic import BaseModel

from intake_wizard.intake.stages import Category, NoticeSeverity


class Progress(BaseModel):
    step: int
    step_name: str
    fraction: float
    label: str

    # Indicator dots up to and including the current step are lit.
    active_steps: List[int]

    show_prev: bool
    show_next: bool
    show_submit: bool


class IntakeView(ABC):
    """
    Output port towards whatever renders the form.

    The core never touches rendering primitives; it only calls these
    methods after its own state has changed.
    """

    @abstractmethod
    def render_list(self, category: Category, items: Sequence[Any]) -> None:
        """Redraw the selected-items list of one category."""
        ...

    @abstractmethod
    def update_progress(self, progress: Progress) -> None:
        ...

    @abstractmethod
    def notify(self, message: str, severity: NoticeSeverity = NoticeSeverity.INFO) -> None:
        ...

    @abstractmethod
    def set_submitting(self, submitting: bool) -> None:
        """Disable (True) or re-enable (False) the submit action."""
        ...

    @abstractmethod
    def show_note(self, note: str) -> None:
        ...


class ViewEventKind(str, Enum):
    RENDER_LIST = "render_list"
    PROGRESS = "progress"
    NOTIFY = "notify"
    SUBMITTING = "submitting"
    NOTE = "note"


class ViewEvent(BaseModel):
    kind: ViewEventKind
    payload: dict


class RecordingView(IntakeView):
    """
    Buffers every call as a ViewEvent so a remote UI can replay them.
    """

    def __init__(self):
        self.events: List[ViewEvent] = []

    def render_list(self, category: Category, items: Sequence[Any]) -> None:
        rendered = [
            item.model_dump(mode="json") if isinstance(item, BaseModel) else item
            for item in items
        ]
        self._record(ViewEventKind.RENDER_LIST, {"category": category.value, "items": rendered})

    def update_progress(self, progress: Progress) -> None:
        self._record(ViewEventKind.PROGRESS, progress.model_dump())

    def notify(self, message: str, severity: NoticeSeverity = NoticeSeverity.INFO) -> None:
        self._record(ViewEventKind.NOTIFY, {"message": message, "severity": severity.value})

    def set_submitting(self, submitting: bool) -> None:
        self._record(ViewEventKind.SUBMITTING, {"submitting": submitting})

    def show_note(self, note: str) -> None:
        self._record(ViewEventKind.NOTE, {"note": note})

    def drain(self) -> List[ViewEvent]:
        """Return buffered events and start a fresh buffer."""
        events, self.events = self.events, []
        return events

    def of_kind(self, kind: ViewEventKind) -> List[ViewEvent]:
        return [e for e in self.events if e.kind == kind]

    def _record(self, kind: ViewEventKind, payload: dict) -> None:
        self.events.append(ViewEvent(kind=kind, payload=payload))
