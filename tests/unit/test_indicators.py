import pytest

from nifty_scanner.core.indicators import macd_histogram, rate_of_change


def test_rate_of_change_single_value():
    roc = rate_of_change([100, 101, 102, 101, 103, 106], period=5)
    assert roc == [pytest.approx(6.0)]


def test_rate_of_change_length_is_input_minus_period():
    closes = [100 + i for i in range(30)]
    roc = rate_of_change(closes)
    assert len(roc) == 25
    assert roc[-1] == pytest.approx((129 - 124) / 124 * 100)


def test_rate_of_change_too_short():
    assert rate_of_change([100, 101, 102, 101, 103]) == []
    assert rate_of_change([]) == []


def test_macd_histogram_empty_for_thirty_closes():
    assert macd_histogram([100 + i * 0.5 for i in range(30)]) == []


def test_macd_histogram_defined_after_warmup():
    hist = macd_histogram([100.0] * 40)
    assert len(hist) == 40 - 33
    assert all(v == pytest.approx(0.0) for v in hist)


def test_rate_of_change_drops_infinite_values():
    roc = rate_of_change([0, 100, 101, 102, 101, 103, 105], period=5)
    # the first window divides by zero and is dropped
    assert roc == [pytest.approx((105 - 100) / 100 * 100)]
