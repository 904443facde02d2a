import pytest

from winsplit.segmentation.ranges import WindowRange, resolve_hop, sliding_windows, window_ranges


def spans(length, window_size, step=0, keep_tail=False):
    return [(r.start, r.end) for r in sliding_windows(length, window_size, step, keep_tail)]


def test_non_overlapping_drops_leftover():
    assert spans(10, 3) == [(0, 3), (3, 6), (6, 9)]


def test_overlapping_with_tail():
    assert spans(8, 5, step=2, keep_tail=True) == [(0, 5), (2, 7), (4, 8)]


def test_tail_after_full_windows():
    assert spans(10, 4, keep_tail=True) == [(0, 4), (4, 8), (8, 10)]


def test_window_larger_than_input():
    assert spans(5, 10, keep_tail=True) == [(0, 5)]
    assert spans(5, 10, keep_tail=False) == []


@pytest.mark.parametrize("window_size,step,keep_tail", [(3, 0, False), (3, 1, True), (0, 1, True), (0, 0, True)])
def test_empty_input_yields_nothing(window_size, step, keep_tail):
    assert spans(0, window_size, step, keep_tail) == []


def test_zero_width_windows_reach_the_end():
    assert spans(3, 0, step=1) == [(0, 0), (1, 1), (2, 2), (3, 3)]


def test_zero_width_windows_with_larger_step():
    assert spans(5, 0, step=2, keep_tail=True) == [(0, 0), (2, 2), (4, 4)]


def test_zero_hop_emits_once_and_stops():
    assert spans(4, 0, step=0) == [(0, 0)]
    assert spans(4, 0, step=0, keep_tail=True) == [(0, 0)]


def test_no_tail_when_input_consumed_exactly():
    assert spans(9, 3, keep_tail=True) == [(0, 3), (3, 6), (6, 9)]


def test_step_larger_than_window_skips_items():
    assert spans(10, 2, step=4, keep_tail=True) == [(0, 2), (4, 6), (8, 10)]
    assert spans(11, 2, step=4, keep_tail=True) == [(0, 2), (4, 6), (8, 10)]


def test_starts_follow_hop_progression():
    length, size, step = 50, 7, 3
    ranges = window_ranges(length, size, step)
    assert [r.start for r in ranges] == list(range(0, length - size + 1, step))
    assert all(len(r) == size for r in ranges)


def test_at_most_one_tail():
    ranges = window_ranges(20, 6, step=5, keep_tail=True)
    undersized = [r for r in ranges if len(r) < 6]
    assert len(undersized) == 1
    assert ranges[-1] == undersized[0] == WindowRange(15, 20)


def test_ranges_stay_in_bounds():
    for length in range(0, 12):
        for size in range(0, 6):
            for step in range(0, 4):
                for r in sliding_windows(length, size, step, True):
                    assert 0 <= r.start <= r.end <= length


def test_generation_is_repeatable():
    assert window_ranges(17, 4, 3, True) == window_ranges(17, 4, 3, True)


def test_generator_is_lazy():
    gen = sliding_windows(10**12, 1)
    assert next(gen) == WindowRange(0, 1)
    assert next(gen) == WindowRange(1, 2)


def test_resolve_hop():
    assert resolve_hop(5, 0) == 5
    assert resolve_hop(5, 2) == 2


def test_window_range_slice():
    r = WindowRange(2, 5)
    assert list(range(10))[r.as_slice()] == [2, 3, 4]
    assert len(r) == 3


@pytest.mark.parametrize("args", [(-1, 3, 0), (5, -3, 0), (5, 3, -1)])
def test_negative_arguments_rejected(args):
    with pytest.raises(ValueError):
        window_ranges(*args)


def test_non_integer_arguments_rejected():
    with pytest.raises(TypeError):
        window_ranges(5.0, 3)


@pytest.mark.parametrize("args", [(3, True, 0), (3, 1, True), (True, 1, 0)])
def test_bool_counts_rejected(args):
    with pytest.raises(TypeError):
        window_ranges(*args)
