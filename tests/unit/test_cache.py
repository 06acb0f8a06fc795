from nifty_scanner.scanner.cache import ResultCache


def test_empty_cache_is_never_fresh():
    cache = ResultCache(ttl_seconds=300)
    assert cache.get_fresh(0) is None
    assert cache.last_updated is None


def test_fresh_within_ttl(make_result):
    cache = ResultCache(ttl_seconds=300)
    results = [make_result("TCS", 80), make_result("INFY", 60)]
    cache.replace(results, now=1000)

    assert cache.get_fresh(1000) == results
    assert cache.get_fresh(1299.9) == results


def test_stale_at_ttl(make_result):
    cache = ResultCache(ttl_seconds=300)
    cache.replace([make_result()], now=1000)
    assert cache.get_fresh(1300) is None


def test_replaced_results_are_empty_not_fresh():
    cache = ResultCache(ttl_seconds=300)
    cache.replace([], now=1000)
    assert cache.get_fresh(1001) is None


def test_replace_swaps_whole_set(make_result):
    cache = ResultCache(ttl_seconds=300)
    first = [make_result("TCS", 80)]
    cache.replace(first, now=1000)
    first.append(make_result("SBIN", 10))
    assert len(cache.get_fresh(1000)) == 1

    cache.replace([make_result("INFY", 70)], now=2000)
    assert [r.symbol for r in cache.get_fresh(2000)] == ["INFY"]
    assert cache.last_updated == 2000
