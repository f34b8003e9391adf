import importlib
from datetime import time

import pytest
from pydantic import ValidationError

from dental_scheduler.core import config
from dental_scheduler.models.policy import SchedulingPolicy


def test_get_bool_accepts_common_truthy_values() -> None:
    assert config._get_bool('Yes') is True
    assert config._get_bool('off') is False
    assert config._get_bool(None, default=True) is True


def test_get_list_splits_comma_separated_values() -> None:
    assert config._get_list('http://a, ,http://b', []) == ['http://a', 'http://b']
    assert config._get_list(None, ['x']) == ['x']


def test_malformed_env_value_does_not_break_import(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv('WORK_START', '8am')
    try:
        reloaded = importlib.reload(config)

        assert reloaded.WORK_START == '8am'
        with pytest.raises(ValidationError):
            reloaded.validate_runtime_config()
    finally:
        monkeypatch.delenv('WORK_START')
        importlib.reload(config)


def test_from_config_parses_environment_strings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, 'WORK_START', '9')
    monkeypatch.setattr(config, 'WORK_END', '18:30')
    monkeypatch.setattr(config, 'APPOINTMENT_DURATION_MINUTES', '45')
    monkeypatch.setattr(config, 'PRACTITIONER_NAME', 'Dr. Molar')

    policy = SchedulingPolicy.from_config()

    assert policy.work_start == time(9, 0)
    assert policy.work_end == time(18, 30)
    assert policy.appointment_duration_minutes == 45
    assert policy.practitioner_name == 'Dr. Molar'


@pytest.mark.parametrize(
    ('name', 'value'),
    [('WORK_START', '8am'), ('LUNCH_END', '25:00'), ('APPOINTMENT_DURATION_MINUTES', 'an hour')],
)
def test_from_config_rejects_malformed_values(monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
    monkeypatch.setattr(config, name, value)

    with pytest.raises(ValidationError):
        SchedulingPolicy.from_config()


def test_validate_runtime_config_rejects_debug_in_production(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, 'APP_ENV', 'production')
    monkeypatch.setattr(config, 'DEBUG', True)

    with pytest.raises(RuntimeError):
        config.validate_runtime_config()


def test_validate_runtime_config_accepts_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, 'APP_ENV', 'development')

    config.validate_runtime_config()
