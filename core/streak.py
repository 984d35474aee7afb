# -*- coding: utf-8 -*-
"""
连续提交天数（streak）计算

只有成功的记录参与计算；失败记录直接跳过，不参与日期间隔比较。
"""
from typing import Iterable, NamedTuple

from .models import LogEntry

# current_streak 只在最近 N 条记录内更新
CURRENT_STREAK_WINDOW = 7

# 相邻两条成功记录允许的最大日历天数间隔
MAX_DAY_GAP = 1


class StreakResult(NamedTuple):
    current_streak: int
    longest_streak: int


def compute_streaks(entries: Iterable[LogEntry]) -> StreakResult:
    """
    计算当前连续天数和最长连续天数

    Args:
        entries: 提交记录（任意顺序，内部按时间倒序排序）

    Returns:
        StreakResult(current_streak, longest_streak)
    """
    ordered = sorted(entries, key=lambda e: e.timestamp, reverse=True)

    current_streak = 0
    longest_streak = 0
    temp_streak = 0
    last_date = None

    for index, entry in enumerate(ordered):
        if not entry.success:
            continue

        day = entry.timestamp.date()
        if last_date is None:
            temp_streak = 1
        elif (last_date - day).days <= MAX_DAY_GAP:
            temp_streak += 1
        else:
            longest_streak = max(longest_streak, temp_streak)
            temp_streak = 1

        if index < CURRENT_STREAK_WINDOW:
            current_streak = temp_streak

        last_date = day

    longest_streak = max(longest_streak, temp_streak)
    return StreakResult(current_streak, longest_streak)
