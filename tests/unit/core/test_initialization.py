"""Tests for process-level setup."""

import pytest

from eventdesk.core.initialization import initialize_application


@pytest.fixture
def setup_calls(mocker):
    return {
        "load_dotenv": mocker.patch("eventdesk.core.initialization.load_dotenv"),
        "configure_logging": mocker.patch("eventdesk.core.initialization.configure_logging"),
        "setup_i18n": mocker.patch("eventdesk.core.initialization.setup_i18n"),
        "logger": mocker.patch("eventdesk.core.initialization.logger"),
    }


def _warnings(logger):
    return [call.args[0] for call in logger.warning.call_args_list]


def test_runs_setup_steps_without_overriding_environment(setup_calls):
    initialize_application()

    setup_calls["load_dotenv"].assert_called_once_with(override=False)
    setup_calls["configure_logging"].assert_called_once()
    setup_calls["setup_i18n"].assert_called_once()
    assert _warnings(setup_calls["logger"]) == []


def test_warns_about_memory_backend_in_production(setup_calls, settings_override):
    settings_override(REPOSITORY_BACKEND="memory", APP_ENV="production")

    initialize_application()

    assert "memory_backend_outside_development" in _warnings(setup_calls["logger"])


def test_warns_when_no_admin_is_configured(setup_calls, settings_override):
    settings_override(ADMIN_EMAIL=None)

    initialize_application()

    assert "admin_bootstrap_not_configured" in _warnings(setup_calls["logger"])
