# tests/conftest.py
import json
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def english_messages():
    """Reset the global message catalog to English for every test."""
    from scream_id.utils.i18n import init_i18n

    init_i18n("en")
    yield


@pytest.fixture
def clean_env(monkeypatch) -> pytest.MonkeyPatch:
    """Remove SCREAM_ID_* variables so the host environment cannot leak in."""
    for name in ("SCREAM_ID_LANGUAGE", "SCREAM_ID_LOG_LEVEL", "SCREAM_ID_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def settings_file(tmp_path) -> Path:
    """A settings.json with every supported key set."""
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps(
            {
                "ui_language": "de",
                "log_level": "WARNING",
                "log_file": str(tmp_path / "logs" / "scream_id.log"),
            }
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def catalog_dir(tmp_path) -> Path:
    """A small standalone i18n catalog tree (shared + en + fr)."""
    root = tmp_path / "i18n"
    (root / "en").mkdir(parents=True)
    (root / "fr").mkdir()

    (root / "logs.json").write_text(json.dumps({"logs": {"test": {"hello": "Hello {name}"}}}), encoding="utf-8")
    (root / "en" / "cli.json").write_text(
        json.dumps({"cli": {"yes": "Yes", "no": "No", "nested": {"deep": "Deep"}}}), encoding="utf-8"
    )
    (root / "fr" / "cli.json").write_text(json.dumps({"cli": {"yes": "Oui"}}), encoding="utf-8")
    return root
