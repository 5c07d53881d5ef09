from config import Settings
from contracts import OperatorSet


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("RPNCALC_OPERATOR_SET", raising=False)

    settings = Settings(_env_file=None)

    assert settings.operator_set == OperatorSet.FULL
    assert settings.log_level == "INFO"


def test_settings_read_prefixed_env(monkeypatch):
    monkeypatch.setenv("RPNCALC_OPERATOR_SET", "narrow")
    monkeypatch.setenv("RPNCALC_LOG_LEVEL", "debug")

    settings = Settings(_env_file=None)

    assert settings.operator_set == OperatorSet.NARROW
    assert settings.log_level == "debug"
