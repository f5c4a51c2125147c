"""pytest configuration and fixtures for pyqt-formdelegate tests."""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture
def form_config():
    """Install a fresh FormDelegateConfig for one test and restore defaults after."""
    from pyqt_formdelegate.protocols import FormDelegateConfig, set_form_config

    config = FormDelegateConfig()
    set_form_config(config)
    yield config
    set_form_config(None)
