from dicewars.rendering.frame_cache import FrameCache


def test_cache_builds_once_until_invalidated():
    cache = FrameCache()
    calls = []

    def build():
        calls.append(1)
        return [len(calls)]

    assert cache.dirty
    first = cache.get(build)
    second = cache.get(build)
    assert first is second
    assert cache.builds == 1
    assert not cache.dirty

    cache.invalidate()
    third = cache.get(build)
    assert third == [2]
    assert cache.builds == 2


def test_clear_drops_value():
    cache = FrameCache()
    cache.get(lambda: "a")
    cache.clear()
    assert cache.dirty
    assert cache.get(lambda: "b") == "b"
