import threading

import pytest

from app.core.cache import TTLCache


def test_get_set_roundtrip(clock):
    c = TTLCache(ttl_seconds=10, clock=clock)
    c.set(("a", 1), b"x")
    assert c.get(("a", 1)) == b"x"
    assert c.get(("a", 2)) is None


def test_entries_expire_lazily_after_ttl(clock):
    c = TTLCache(ttl_seconds=10, clock=clock)
    c.set("k", "v")
    clock.advance(9)
    assert c.get("k") == "v"
    clock.advance(1)
    assert c.get("k") is None
    assert len(c) == 0


def test_set_overwrites_and_refreshes_timestamp(clock):
    c = TTLCache(ttl_seconds=10, clock=clock)
    c.set("k", 1)
    clock.advance(8)
    c.set("k", 2)
    clock.advance(8)
    assert c.get("k") == 2
    assert len(c) == 1


def test_full_cache_drops_oldest(clock):
    c = TTLCache(ttl_seconds=100, max_items=2, clock=clock)
    c.set("a", 1)
    clock.advance(1)
    c.set("b", 2)
    clock.advance(1)
    c.set("a", 10)  # overwrite, no eviction
    assert len(c) == 2
    c.set("c", 3)
    assert "b" not in c
    assert c.get("a") == 10
    assert c.get("c") == 3


def test_clear(clock):
    c = TTLCache(clock=clock)
    c.set("k", 1)
    c.clear()
    assert len(c) == 0


def test_rejects_zero_capacity():
    with pytest.raises(ValueError):
        TTLCache(max_items=0)


def test_concurrent_writers_keep_map_consistent():
    c = TTLCache(ttl_seconds=60, max_items=50)

    def writer(n):
        for i in range(200):
            c.set((n, i % 60), i)
            c.get((n, (i * 7) % 60))

    threads = [threading.Thread(target=writer, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(c) <= 50
