import pytest

from memtune.curve import GraphCurve, GraphEntry


def linear(time):
    return GraphEntry(usage=time, num_live_blocks=time // 10)


def flat(time):
    return GraphEntry(usage=500, num_live_blocks=5)


def test_update_caches_until_view_changes():
    curve = GraphCurve()
    assert curve.update(linear, 0, 100, 0, 10, True, 0, 0) is True
    assert curve.update(linear, 0, 100, 0, 10, True, 0, 0) is False
    assert curve.update(linear, 0, 100, 0, 10, False, 0, 0) is True
    assert curve.update(linear, 0, 200, 0, 10, False, 0, 0) is True


def test_samples_start_at_min_time_and_stay_in_range():
    seen = []

    def recording(time):
        seen.append(time)
        return linear(time)

    curve = GraphCurve()
    curve.update(recording, 0, 100, 0, 10, True, 0, 0)
    samples = seen[1:]
    assert len(curve.values) == 10
    assert samples[0] == 0
    assert samples == sorted(samples)
    assert all(0 <= t <= 100 for t in samples)


def test_auto_zoom_range_follows_samples():
    curve = GraphCurve()
    curve.update(linear, 0, 100, 0, 10, True, 10_000, 10_000)
    usages = [entry.usage for entry in curve.values]
    assert curve.min_usage == min(usages)
    assert curve.max_usage == max(usages)


def test_fixed_range_uses_global_peaks():
    curve = GraphCurve()
    curve.update(linear, 0, 100, 0, 10, False, 10_000, 777)
    assert curve.max_usage == 10_000
    assert curve.min_usage == 0
    assert curve.max_live == 777
    assert curve.min_live == 0


def test_paths_span_top_to_bottom():
    curve = GraphCurve()
    curve.update(linear, 0, 100, 0, 10, True, 0, 0)
    usage, live = curve.paths(0, 90, linear(0))
    assert len(usage) == len(live) == 11
    assert usage[0][0] == 0
    ys = [y for _, y in usage]
    assert min(ys) == 0
    assert max(ys) == 90
    assert [x for x, _ in usage[1:]] == list(range(0, 10))


def test_right_before_left_is_rejected():
    with pytest.raises(ValueError):
        GraphCurve().update(linear, 0, 100, 10, 0, True, 0, 0)


def test_max_time_before_min_time_is_rejected():
    with pytest.raises(ValueError):
        GraphCurve().update(linear, 100, 0, 0, 10, True, 0, 0)