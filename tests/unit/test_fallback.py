import random

from nifty_scanner.core.fallback import generate_fallback
from nifty_scanner.core.models import StockResult


def test_fallback_ranges():
    rng = random.Random(42)
    for _ in range(300):
        result = generate_fallback("INFY.BSE", rng)
        assert isinstance(result, StockResult)
        assert result.symbol == "INFY"
        assert 50 <= result.probability <= 90
        assert 100 <= result.price <= 5100
        assert -2 <= result.change <= 2
        assert 0 <= result.volatility <= 3
        assert result.direction in ("buy", "sell")


def test_fallback_indicators_follow_direction():
    rng = random.Random(3)
    seen = set()
    for _ in range(200):
        result = generate_fallback("SBIN.BSE", rng)
        seen.add(result.direction)
        if result.direction == "buy":
            assert 0 <= result.indicators.roc <= 2
            assert 0 <= result.indicators.macd <= 0.5
        else:
            assert -2 <= result.indicators.roc <= 0
            assert -0.5 <= result.indicators.macd <= 0
    assert seen == {"buy", "sell"}


def test_fallback_is_reproducible_with_seed():
    assert generate_fallback("TCS.BSE", random.Random(1)) == generate_fallback("TCS.BSE", random.Random(1))
