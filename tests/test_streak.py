from datetime import datetime, timedelta

from core.models import LogEntry
from core.streak import compute_streaks


T = datetime(2025, 9, 10, 12, 0, 0)


def entry(when, success=True):
    return LogEntry(message="m", file_size_bytes=10, success=success, timestamp=when)


def days_ago(n, hour=12):
    return (T - timedelta(days=n)).replace(hour=hour)


def test_empty():
    assert compute_streaks([]) == (0, 0)


def test_single_success():
    assert compute_streaks([entry(T)]) == (1, 1)


def test_single_failure():
    assert compute_streaks([entry(T, success=False)]) == (0, 0)


def test_three_consecutive_days():
    entries = [entry(T), entry(days_ago(1)), entry(days_ago(2))]
    res = compute_streaks(entries)
    assert res.current_streak == 3
    assert res.longest_streak == 3


def test_same_day_counts_every_success():
    entries = [entry(T.replace(hour=h)) for h in (8, 10, 12, 14)]
    entries.append(entry(T.replace(hour=16), success=False))
    assert compute_streaks(entries) == (4, 4)


def test_input_order_does_not_matter():
    entries = [entry(days_ago(2)), entry(T), entry(days_ago(1))]
    assert compute_streaks(entries) == (3, 3)


def test_failure_between_consecutive_days_does_not_break():
    entries = [
        entry(T),
        entry(T.replace(hour=6), success=False),
        entry(days_ago(1)),
    ]
    assert compute_streaks(entries) == (2, 2)


def test_failure_day_gap_compares_successes_only():
    # T 和 T-2 天之间只有失败记录，成功记录间隔 2 天，连续中断
    entries = [entry(T), entry(days_ago(1), success=False), entry(days_ago(2))]
    assert compute_streaks(entries) == (1, 1)


def test_calendar_day_not_24_hours():
    # 相差超过 24 小时，但只隔一个日历日
    late = T.replace(hour=23, minute=59)
    early = days_ago(1, hour=0).replace(minute=1)
    assert compute_streaks([entry(late), entry(early)]) == (2, 2)


def test_gap_resets_and_longest_keeps_older_run():
    entries = [
        entry(T),
        entry(days_ago(5)),
        entry(days_ago(6)),
        entry(days_ago(7)),
    ]
    res = compute_streaks(entries)
    assert res.current_streak == 3
    assert res.longest_streak == 3


def test_recent_gap_lowers_current_streak():
    entries = [entry(T), entry(days_ago(1)), entry(days_ago(3))]
    assert compute_streaks(entries) == (1, 2)


def test_current_streak_frozen_after_seven_entries():
    entries = [entry(days_ago(i)) for i in range(10)]
    res = compute_streaks(entries)
    assert res.current_streak == 7
    assert res.longest_streak == 10


def test_failures_inside_window_shrink_current_updates():
    # 前 7 个位置中只有 2 个成功记录，其余成功记录都在窗口之外
    entries = [entry(T.replace(hour=20 - i), success=False) for i in range(5)]
    entries += [entry(T.replace(hour=10)), entry(T.replace(hour=9))]
    entries += [entry(days_ago(1)), entry(days_ago(2))]
    res = compute_streaks(entries)
    assert res.current_streak == 2
    assert res.longest_streak == 4


def test_only_failures_in_window_gives_zero_current():
    entries = [entry(T.replace(hour=20 - i), success=False) for i in range(7)]
    entries.append(entry(days_ago(1)))
    assert compute_streaks(entries) == (0, 1)
