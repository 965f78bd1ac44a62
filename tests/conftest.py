"""Test fixtures for fieldkit."""

import sys
import pytest
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent.resolve()
sys.path.insert(0, str(PROJECT_ROOT))

from fieldkit.form.registration import build_registration_form
from fieldkit.form.session import FormSession


@pytest.fixture
def submitted():
    """Collects every values mapping handed to the submit handler."""
    return []


@pytest.fixture
def registration_form():
    return build_registration_form()


@pytest.fixture
def session(registration_form, submitted):
    """A registration form session whose submissions land in `submitted`."""
    return FormSession(registration_form, submit_handler=submitted.append)
