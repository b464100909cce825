import pytest

from intake_wizard.intake.fields import FormFields
from intake_wizard.intake.selection import SelectionStore
from intake_wizard.intake.view import RecordingView
from intake_wizard.intake.wizard import WizardController
from intake_wizard.services import IntakeSession


@pytest.fixture
def view():
    return RecordingView()


@pytest.fixture
def store(view):
    return SelectionStore(on_change=view.render_list)


@pytest.fixture
def fields():
    return FormFields()


@pytest.fixture
def wizard(fields, view):
    return WizardController(fields, view)


@pytest.fixture
def session(view):
    return IntakeSession(view=view, submit_delay=0)
