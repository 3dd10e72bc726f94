import pytest

from shuntcalc import Calculator


@pytest.fixture
def calc():
    return Calculator()


@pytest.fixture
def strict_calc():
    return Calculator(strict=True)


@pytest.fixture
def feed(monkeypatch):
    '''
    Replaces input() with the given lines, followed by EOF
    '''
    def setup(*lines):
        remaining = iter(lines)

        def fake_input(prompt=''):
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError
        monkeypatch.setattr('builtins.input', fake_input)
    return setup
