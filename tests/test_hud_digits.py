import pytest

from mazescore.ui.hud import counter_digits, status_text

def test_zero_padded_digits():
    assert counter_digits(7) == (0, 0, 7)
    assert counter_digits(42, 2) == (4, 2)
    assert counter_digits(0, 1) == (0,)

def test_wide_values_keep_low_digits():
    assert counter_digits(1234, 3) == (2, 3, 4)

def test_bad_arguments():
    with pytest.raises(ValueError):
        counter_digits(-1)
    with pytest.raises(ValueError):
        counter_digits(5, 0)

def test_status_text():
    assert status_text(1, 4, 12) == "TURN 01/04  SCORE 012"
    assert status_text(4, 4, 30) == "TURN 04/04  SCORE 030  DONE"
