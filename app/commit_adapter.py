# -*- coding: utf-8 -*-
"""
UI Commit Adapter - 连接 UI 层和 CommitService

服务事件在后台线程发出，这里统一转换为 Qt 信号，
由 Qt 排队投递到主线程。

注意：Qt 信号需要在 QObject 派生类中定义。
"""

from typing import Optional

from PySide6 import QtCore

from core import (
    ActivityStore, CommitService, CommitInProgressError, GitHubConfig,
    RemoteUpsertClient, TaskEvent,
)


class SignalEmitter(QtCore.QObject):
    """Qt 信号发射器"""

    commit_started = QtCore.Signal(str, str)    # task_id, message
    commit_completed = QtCore.Signal(str, str)  # task_id, message
    commit_failed = QtCore.Signal(str, str)     # task_id, error
    stats_changed = QtCore.Signal(object)       # Statistics


class UICommitAdapter:
    """UI 和 CommitService 的适配器

    使用方式：

    ```python
    adapter = UICommitAdapter(store)
    adapter.signals.commit_completed.connect(on_completed)
    adapter.signals.commit_failed.connect(on_failed)
    adapter.signals.stats_changed.connect(refresh_stats)

    adapter.submit_commit("daily update", config)
    ```
    """

    def __init__(self, store: ActivityStore, client: Optional[RemoteUpsertClient] = None):
        self.signals = SignalEmitter()
        self.service = CommitService(store, client)

        self.service.subscribe("started", self._on_service_started)
        self.service.subscribe("completed", self._on_service_completed)
        self.service.subscribe("failed", self._on_service_failed)
        self.service.subscribe("history_changed", self._on_history_changed)

    @property
    def store(self) -> ActivityStore:
        return self.service.store

    def is_busy(self) -> bool:
        return self.service.is_busy()

    def submit_commit(self, message: str, config: GitHubConfig) -> Optional[str]:
        """提交推送任务

        Returns:
            任务 ID；已有任务进行中时返回 None
        """
        try:
            task = self.service.submit(message, config)
        except CommitInProgressError:
            return None
        return task.id

    def clear_history(self) -> bool:
        """清空历史；推送进行中时忽略"""
        if self.service.is_busy():
            return False
        self.service.clear_history()
        return True

    def shutdown(self):
        """关闭适配器和服务"""
        self.service.shutdown()

    # ============ 私有方法 ============

    def _on_service_started(self, event: TaskEvent):
        self.signals.commit_started.emit(event.task_id, event.message)

    def _on_service_completed(self, event: TaskEvent):
        self.signals.commit_completed.emit(event.task_id, event.message)

    def _on_service_failed(self, event: TaskEvent):
        self.signals.commit_failed.emit(event.task_id, event.error or "Unknown error")

    def _on_history_changed(self, event: TaskEvent):
        self.signals.stats_changed.emit(event.result)
