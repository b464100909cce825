# intake_wizard/intake/wizard.py
from __future__ import annotations

from typing import Callable, Dict

from intake_wizard.intake.fields import FormFields
from intake_wizard.intake.stages import STEP_ORDER, TOTAL_STEPS, NoticeSeverity, WizardStep
from intake_wizard.intake.view import IntakeView, Progress
from intake_wizard.logger import logger


class WizardController:
    """
    Tracks which of the fixed form steps is showing.

    Steps:
      - demographics
      - presentation
      - history
      - examination
      - investigations
      - medications

    Moving forward requires the current step to validate; moving back
    is always allowed. The last step has no "next", the UI offers
    submit instead.
    """

    def __init__(self, fields: FormFields, view: IntakeView):
        self.fields = fields
        self.view = view
        self.current_step = 0

        self._validators: Dict[WizardStep, Callable[[], bool]] = {
            WizardStep.DEMOGRAPHICS: self._validate_demographics,
        }

    @property
    def total_steps(self) -> int:
        return TOTAL_STEPS

    @property
    def step(self) -> WizardStep:
        return STEP_ORDER[self.current_step]

    @property
    def is_last_step(self) -> bool:
        return self.current_step == TOTAL_STEPS - 1

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def go_to_step(self, target: int) -> bool:
        if target < 0 or target >= TOTAL_STEPS:
            return False

        self.current_step = target
        self.view.update_progress(self.progress())
        return True

    def next(self) -> bool:
        if not self.validate(self.current_step):
            return False
        if self.is_last_step:
            return False
        return self.go_to_step(self.current_step + 1)

    def prev(self) -> bool:
        return self.go_to_step(self.current_step - 1)

    def click_tab(self, index: int) -> bool:
        """
        Tab navigation: completed steps and the one right after the
        current step are reachable, anything further is ignored.
        """
        if index > self.current_step + 1:
            return False
        if index == self.current_step + 1:
            return self.next()
        return self.go_to_step(index)

    def validate(self, step: int) -> bool:
        if step < 0 or step >= TOTAL_STEPS:
            return False

        validator = self._validators.get(STEP_ORDER[step])
        if validator is None:
            return True
        return validator()

    def reset(self) -> None:
        self.go_to_step(0)

    def progress(self) -> Progress:
        step = self.current_step
        return Progress(
            step=step,
            step_name=STEP_ORDER[step].value,
            fraction=(step + 1) / TOTAL_STEPS,
            label=f"Step {step + 1} of {TOTAL_STEPS}",
            active_steps=list(range(step + 1)),
            show_prev=step > 0,
            show_next=step < TOTAL_STEPS - 1,
            show_submit=step == TOTAL_STEPS - 1,
        )

    # ------------------------------------------------------------------
    # Validators
    # ------------------------------------------------------------------

    def _validate_demographics(self) -> bool:
        if self.fields.demographics_complete():
            return True

        logger.info("Step %s blocked: age or gender missing", WizardStep.DEMOGRAPHICS.value)
        self.view.notify("Please complete required fields", NoticeSeverity.WARNING)
        return False
