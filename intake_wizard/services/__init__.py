# intake_wizard/services/__init__.py
from .intake_session import (
    CancellationToken,
    IntakeSession,
    IntakeSessionService,
    NavDirection,
    SubmissionResult,
)

__all__ = [
    "CancellationToken",
    "IntakeSession",
    "IntakeSessionService",
    "NavDirection",
    "SubmissionResult",
]
