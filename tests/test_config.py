import random

import pytest

from limbint import InvalidConfiguration, config
from limbint.config import _env_int, _in_range

def test_defaults():
    assert config.DEFAULT_TRIALS >= 1
    assert config.MAX_DIGITS > 0

def test_env_int(monkeypatch):
    monkeypatch.setenv("LIMBINT_TEST_X", " 42 ")
    assert _env_int("LIMBINT_TEST_X", 1) == 42
    monkeypatch.setenv("LIMBINT_TEST_X", "")
    assert _env_int("LIMBINT_TEST_X", 1) == 1
    monkeypatch.delenv("LIMBINT_TEST_X")
    assert _env_int("LIMBINT_TEST_X", None) is None

def test_env_int_malformed(monkeypatch):
    monkeypatch.setenv("LIMBINT_TEST_X", "ten")
    with pytest.raises(InvalidConfiguration):
        _env_int("LIMBINT_TEST_X", 1)

def test_default_rng_is_per_process():
    a = config.default_rng()
    assert isinstance(a, random.Random)
    assert config.default_rng() is a

def test_new_rng_is_unshared():
    a, b = config.new_rng(), config.new_rng()
    assert a is not b
    assert a is not config.default_rng()

@pytest.mark.parametrize("value,hi", [(0, None), (-5, None), (0, 65535), (70000, 65535)])
def test_in_range_rejects(value, hi):
    with pytest.raises(InvalidConfiguration):
        _in_range("LIMBINT_X", value, 1, hi)

def test_in_range_accepts():
    assert _in_range("LIMBINT_X", 1) == 1
    assert _in_range("LIMBINT_PORT", 65535, 1, 65535) == 65535

def test_settings_are_positive():
    assert config.MAX_WORK_DIGITS >= 1
    assert 1 <= config.PORT <= 65535
