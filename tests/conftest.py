"""Pytest fixtures shared by the rulebook tests."""

import pytest

from rulebook.config import Settings

from .fakes import RecordingAnalytics, RecordingMailer


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def mailer() -> RecordingMailer:
    return RecordingMailer()


@pytest.fixture
def analytics() -> RecordingAnalytics:
    return RecordingAnalytics()
