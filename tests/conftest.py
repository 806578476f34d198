import pytest

from linefit import Point


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("OUTPUT", "ALPHA", "STRATEGY", "TRACE", "LOG_LEVEL"):
        monkeypatch.delenv(f"LINEFIT_{name}", raising=False)


@pytest.fixture
def diagonal():
    return [Point(1.0, 1.0), Point(2.0, 2.0), Point(3.0, 3.0)]


@pytest.fixture
def line_2x_plus_1():
    return [Point(float(x), 2.0 * x + 1.0) for x in range(5)]
