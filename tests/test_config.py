"""Tests for settings loading."""

import json
import logging

from inkmark.config import AppSettings, load_settings
from inkmark.core.document import validate_document
from inkmark.core.session import AnnotationSession


def test_missing_file_gives_defaults(tmp_path) -> None:
    settings = load_settings(tmp_path / "missing.json")
    assert settings == AppSettings()
    assert settings.max_upload_mb == 10
    assert settings.highlight_height == 20


def test_overrides_are_applied(tmp_path) -> None:
    """Known keys override defaults."""

    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"highlight_color": "#ff00ff", "max_upload_mb": 25}))

    settings = load_settings(path)
    assert settings.highlight_color == "#ff00ff"
    assert settings.max_upload_mb == 25
    assert settings.underline_color == "#0000ff"


def test_unknown_keys_are_ignored_with_warning(tmp_path, caplog) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"dark_mode": False, "shiny": True}))

    with caplog.at_level(logging.WARNING, logger="inkmark.config"):
        settings = load_settings(path)

    assert settings.dark_mode is False
    assert "shiny" in caplog.text


def test_malformed_file_falls_back_to_defaults(tmp_path, caplog) -> None:
    """Broken JSON and non-object documents are logged and ignored."""

    broken = tmp_path / "broken.json"
    broken.write_text("{not json")
    listing = tmp_path / "list.json"
    listing.write_text("[1, 2]")

    with caplog.at_level(logging.WARNING, logger="inkmark.config"):
        assert load_settings(broken) == AppSettings()
        assert load_settings(listing) == AppSettings()
    assert len(caplog.records) == 2


def test_session_takes_tool_defaults_from_settings() -> None:
    """Configured colors seed the tool parameters."""

    session = AnnotationSession(AppSettings(highlight_color="#123456", underline_color="#654321"))
    assert session.tool_state.highlight_color == "#123456"
    assert session.tool_state.underline_color == "#654321"


def test_settings_round_trip_through_dict() -> None:
    settings = AppSettings(toast_duration_ms=500)
    assert AppSettings.from_dict(settings.to_dict()) == settings


def test_wrongly_typed_values_keep_defaults(tmp_path, caplog) -> None:
    """Values of the wrong type are logged and replaced by defaults."""

    path = tmp_path / "settings.json"
    path.write_text(json.dumps({
        "max_upload_mb": "10",
        "log_level": 10,
        "toast_duration_ms": True,
        "highlight_height": 12,
        "signature_stroke_width": 1.5,
    }))

    with caplog.at_level(logging.WARNING, logger="inkmark.config"):
        settings = load_settings(path)

    assert settings.max_upload_mb == 10
    assert settings.log_level.upper() == "INFO"
    assert settings.toast_duration_ms == 3000
    assert settings.highlight_height == 12
    assert settings.signature_stroke_width == 1.5
    assert len(caplog.records) == 3
    assert "max_upload_mb" in caplog.text


def test_settings_with_bad_limit_still_validate_files(tmp_path, make_pdf) -> None:
    """A string size limit does not break document validation."""

    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"max_upload_mb": "10"}))

    settings = load_settings(path)
    handle = validate_document(make_pdf(pages=1), settings.max_upload_mb)
    assert handle.mime_type == "application/pdf"
