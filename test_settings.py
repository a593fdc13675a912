"""
Test the process-wide envkit.settings instance.

Each test reloads the module from a temporary working directory, the same
way a fresh process would import it.
"""

import importlib
import logging
import os

import pytest


@pytest.fixture
def clean_environ(monkeypatch, tmp_path):
    saved = dict(os.environ)
    monkeypatch.delenv("APP_ENV", raising=False)
    monkeypatch.delenv("ENVKIT_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    yield tmp_path
    os.environ.clear()
    os.environ.update(saved)


def reload_settings():
    import envkit.settings
    return importlib.reload(envkit.settings)


def test_loads_development_file_by_default(clean_environ):
    (clean_environ / ".env.development").write_text(
        "DEVELOPMENT_PORT=3000\nDEVELOPMENT_DEBUG=true\n", encoding="utf-8"
    )
    settings = reload_settings()

    assert settings.load_result.loaded
    assert settings.env.env == "development"
    assert settings.env.get_number("PORT") == 3000
    assert settings.env.get_boolean("debug") is True
    assert os.environ["DEVELOPMENT_PORT"] == "3000"


def test_process_variables_win_over_file(clean_environ):
    (clean_environ / ".env.production").write_text("PRODUCTION_PORT=80\n", encoding="utf-8")
    os.environ["APP_ENV"] = "production"
    os.environ["PRODUCTION_PORT"] = "8443"

    settings = reload_settings()

    assert settings.env.env == "production"
    assert settings.env.get_number("PORT") == 8443


def test_missing_file_does_not_crash(clean_environ, caplog):
    with caplog.at_level(logging.INFO, logger="envkit"):
        settings = reload_settings()

    assert settings.load_result.failed
    assert "Loading environment file" in caplog.text
    assert settings.env.get("UNSET_FOR_TEST") is None
    assert settings.env.get("UNSET_FOR_TEST", "fallback") == "fallback"


def test_options_file_changes_selector(clean_environ):
    (clean_environ / "envkit.yaml").write_text("selector_variable: STAGE\n", encoding="utf-8")
    (clean_environ / ".env.qa").write_text("QA_NAME=envkit\n", encoding="utf-8")
    os.environ["STAGE"] = "qa"

    settings = reload_settings()

    assert settings.env.env == "qa"
    assert settings.env.get_string("name") == "envkit"


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_announcement_printed_when_logging_configured(clean_environ, restore_root_logger, capsys):
    (clean_environ / "envkit.yaml").write_text(
        "logging:\n  configure: true\n  level: INFO\n", encoding="utf-8"
    )
    reload_settings()

    out = capsys.readouterr().out
    assert "envkit.config.store - INFO - Loading environment file" in out
    assert str(clean_environ / ".env.development") in out
