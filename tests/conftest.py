from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from pilotage.models import MovementRecord

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def sample_html():
    return (FIXTURES_DIR / "schedule_sample.html").read_text(encoding="utf-8")


@pytest.fixture
def sample_document(sample_html):
    return BeautifulSoup(sample_html, "html.parser")


@pytest.fixture
def movement():
    return MovementRecord(
        date="23/02/2026",
        time="08:00",
        maneuver="Atracação",
        berth="201",
        vessel="MSC MARINA",
        status="Confirmado",
    )


@pytest.fixture
def sleeps():
    """Recorder used in place of time.sleep by the fetcher and retry tests."""
    calls = []

    def _sleep(seconds):
        calls.append(seconds)

    _sleep.calls = calls
    return _sleep
