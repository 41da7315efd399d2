import pytest

from backend.core import config


def test_get_list_splits_and_strips_items() -> None:
    assert config._get_list(' a, b ,,c ', ['x']) == ['a', 'b', 'c']
    assert config._get_list(None, ['x']) == ['x']


def test_get_statuses_lowercases_each_status() -> None:
    assert config._get_statuses('Pending, PAID', ['pending']) == ('pending', 'paid')
    assert config._get_statuses(None, ['pending', 'paid']) == ('pending', 'paid')


@pytest.mark.parametrize(('value', 'expected'), [('1', True), ('Yes', True), ('off', False), (None, False)])
def test_get_bool(value, expected: bool) -> None:
    assert config._get_bool(value) is expected


def test_validate_runtime_config_accepts_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, 'DEFAULT_SERVICE_DURATION_MINUTES', 30)
    monkeypatch.setattr(config, 'ACTIVE_BOOKING_STATUSES', ('pending', 'paid'))

    config.validate_runtime_config()


@pytest.mark.parametrize('duration', [0, -15])
def test_validate_runtime_config_rejects_non_positive_duration(monkeypatch: pytest.MonkeyPatch, duration: int) -> None:
    monkeypatch.setattr(config, 'DEFAULT_SERVICE_DURATION_MINUTES', duration)

    with pytest.raises(RuntimeError, match='DEFAULT_SERVICE_DURATION_MINUTES'):
        config.validate_runtime_config()


def test_validate_runtime_config_rejects_empty_statuses(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, 'DEFAULT_SERVICE_DURATION_MINUTES', 30)
    monkeypatch.setattr(config, 'ACTIVE_BOOKING_STATUSES', ())

    with pytest.raises(RuntimeError, match='ACTIVE_BOOKING_STATUSES'):
        config.validate_runtime_config()
