from decimal import Decimal
import dataclasses
import pytest
from linqquiz.config import INT32_MAX, Settings
from linqquiz.models import Family, Person, average_age


def test_average_age():
    assert average_age([10, 20, 30]) == 20
    assert average_age([1, 2]) == Decimal("1.5")
    # empty input returns 0 instead of dividing by zero
    assert average_age([]) == Decimal(0)

def test_models_are_frozen():
    family = Family(id=1, persons=(Person(3),))
    with pytest.raises(dataclasses.FrozenInstanceError):
        family.id = 2

def test_settings_default(monkeypatch):
    monkeypatch.delenv("LINQQUIZ_MAX_INT", raising=False)
    assert Settings.from_env().max_int == INT32_MAX

def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("LINQQUIZ_MAX_INT", "32767")
    assert Settings.from_env().max_int == 32767

@pytest.mark.parametrize("raw", ["abc", "0", "-5"])
def test_settings_invalid(monkeypatch, raw):
    monkeypatch.setenv("LINQQUIZ_MAX_INT", raw)
    with pytest.raises(ValueError):
        Settings.from_env()
