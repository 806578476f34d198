from pathlib import Path

import pytest

from linefit import Settings, Strategy


def test_defaults():
    settings = Settings.from_env({})
    assert settings.data_path == Path("data.txt")
    assert settings.output_path == Path("out.png")
    assert settings.iterations == 1000
    assert settings.alpha == 0.01
    assert settings.strategy is Strategy.GRADIENT_DESCENT
    assert settings.trace_path is None


def test_reads_environment():
    env = {
        "LINEFIT_OUTPUT": "plots/fit.png",
        "LINEFIT_ALPHA": "0.005",
        "LINEFIT_STRATEGY": " Grid ",
        "LINEFIT_TRACE": "trace.csv",
        "LINEFIT_LOG_LEVEL": "debug",
    }
    settings = Settings.from_env(env)
    assert settings.output_path == Path("plots/fit.png")
    assert settings.alpha == 0.005
    assert settings.strategy is Strategy.GRID_SEARCH
    assert settings.trace_path == Path("trace.csv")
    assert settings.log_level == "DEBUG"


def test_overrides_win_and_none_is_ignored():
    settings = Settings.from_env({}, iterations=7, data_path="points.txt", alpha=None)
    assert settings.iterations == 7
    assert settings.data_path == Path("points.txt")
    assert settings.alpha == 0.01


def test_reads_os_environ_by_default(monkeypatch):
    monkeypatch.setenv("LINEFIT_ALPHA", "0.5")
    assert Settings.from_env().alpha == 0.5


@pytest.mark.parametrize(
    "env, message",
    [
        ({"LINEFIT_ALPHA": "fast"}, "LINEFIT_ALPHA"),
        ({"LINEFIT_STRATEGY": "newton"}, "LINEFIT_STRATEGY"),
        ({"LINEFIT_LOG_LEVEL": "chatty"}, "log level"),
    ],
)
def test_rejects_bad_environment(env, message):
    with pytest.raises(ValueError, match=message):
        Settings.from_env(env)


def test_rejects_negative_iterations():
    with pytest.raises(ValueError, match="non-negative"):
        Settings.from_env({}, iterations=-1)
