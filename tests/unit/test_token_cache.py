"""
Unit Tests for the access token cache
"""

from app.providers.token_cache import TokenCache, SAFETY_MARGIN_MS


class FakeClock:
    def __init__(self, now_ms=1_700_000_000_000):
        self.now_ms = now_ms

    def __call__(self):
        return self.now_ms

    def advance(self, seconds):
        self.now_ms += int(seconds * 1000)


class TestTokenCache:

    def test_empty_cache_has_no_token(self):
        cache = TokenCache(clock=FakeClock())
        assert cache.get_valid_token() is None
        assert cache.expires_at is None

    def test_store_computes_expiry_with_safety_margin(self):
        clock = FakeClock()
        cache = TokenCache(clock=clock)

        cache.store("tok", 3600)

        assert cache.expires_at == clock.now_ms + 3600 * 1000 - 60000
        assert SAFETY_MARGIN_MS == 60000

    def test_token_valid_until_margin(self):
        clock = FakeClock()
        cache = TokenCache(clock=clock)
        cache.store("tok", 3600)

        clock.advance(3600 - 61)
        assert cache.get_valid_token() == "tok"

        clock.advance(1)
        # now == expires_at: no longer usable
        assert cache.get_valid_token() is None

    def test_ttl_shorter_than_margin_is_never_valid(self):
        cache = TokenCache(clock=FakeClock())
        cache.store("tok", 30)
        assert cache.get_valid_token() is None

    def test_store_overwrites_previous_token(self):
        clock = FakeClock()
        cache = TokenCache(clock=clock)
        cache.store("first", 3600)
        clock.advance(10)
        cache.store("second", 120)

        assert cache.get_valid_token() == "second"
        assert cache.expires_at == clock.now_ms + 120 * 1000 - 60000

    def test_string_ttl_is_accepted(self):
        clock = FakeClock()
        cache = TokenCache(clock=clock)
        cache.store("tok", "3599")
        assert cache.expires_at == clock.now_ms + 3599 * 1000 - 60000

    def test_clear(self):
        cache = TokenCache(clock=FakeClock())
        cache.store("tok", 3600)
        cache.clear()
        assert cache.get_valid_token() is None

    def test_default_clock_uses_wall_time(self):
        cache = TokenCache()
        cache.store("tok", 3600)
        assert cache.get_valid_token() == "tok"
