import pytest


@pytest.fixture(autouse=True)
def no_color(monkeypatch):
    # keep diagnostics free of ANSI escapes regardless of the terminal
    monkeypatch.setenv('NO_COLOR', '1')
