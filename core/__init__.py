# -*- coding: utf-8 -*-
"""核心模块：数据模型、记录存储、连续天数统计和 GitHub 推送"""

from .models import LogEntry, Statistics, UpsertResult, format_size
from .streak import compute_streaks, StreakResult
from .activity_store import ActivityStore, calculate_stats
from .app_config import GitHubConfig, load_config, save_config
from .upsert_client import RemoteUpsertClient
from .service_base import TaskStatus, TaskEvent
from .commit_service import CommitService, CommitTask, CommitInProgressError

__all__ = [
    "LogEntry", "Statistics", "UpsertResult", "format_size",
    "compute_streaks", "StreakResult",
    "ActivityStore", "calculate_stats",
    "GitHubConfig", "load_config", "save_config",
    "RemoteUpsertClient",
    "TaskStatus", "TaskEvent",
    "CommitService", "CommitTask", "CommitInProgressError",
]
