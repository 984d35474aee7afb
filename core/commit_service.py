# -*- coding: utf-8 -*-
"""
Commit Service - 提交流程

职责：
1. 生成摘要内容并写入本地文本日志
2. 在后台线程推送到 GitHub
3. 无论成功失败都记录一条 LogEntry
4. 发射事件通知 UI 层

同一时间只允许一个提交在进行。
"""

from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
import threading
import uuid
import logging

from .activity_store import ActivityStore
from .app_config import GitHubConfig
from .models import LogEntry, UpsertResult
from .service_base import BaseService, TaskStatus, TaskEvent
from .upsert_client import RemoteUpsertClient

logger = logging.getLogger(__name__)


class CommitInProgressError(RuntimeError):
    """已有提交在进行中"""


@dataclass
class CommitTask:
    """提交任务

    Attributes:
        message: 提交信息
        path: 远程文件路径
        size_bytes: 推送内容字节数
        id: 任务 ID（UUID）
        status: 任务状态
        created_at: 创建时间
        completed_at: 完成时间
        result: 远程写入结果
        entry: 记录下来的 LogEntry
        future: 完成后返回 LogEntry
    """
    message: str
    path: str
    size_bytes: int = 0
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    status: TaskStatus = TaskStatus.PENDING
    created_at: datetime = field(default_factory=datetime.now)
    completed_at: Optional[datetime] = None
    result: Optional[UpsertResult] = None
    entry: Optional[LogEntry] = None
    future: Optional["Future[LogEntry]"] = field(default=None, repr=False)


class CommitService(BaseService):
    """提交服务

    使用示例：

    ```python
    service = CommitService(store)
    service.subscribe("completed", lambda evt: print(evt.message))
    service.subscribe("failed", lambda evt: print(evt.error))

    task = service.submit("daily update", config)
    entry = task.future.result()
    service.shutdown()
    ```
    """

    def __init__(self, store: ActivityStore, client: Optional[RemoteUpsertClient] = None):
        super().__init__()
        self.store = store
        self.client = client or RemoteUpsertClient()
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="commit")
        self._lock = threading.Lock()
        self._current: Optional[CommitTask] = None

    def is_busy(self) -> bool:
        with self._lock:
            return self._current is not None

    def submit(self, message: str, config: GitHubConfig) -> CommitTask:
        """提交一次推送（异步）

        Args:
            message: 提交信息，为空时使用配置中的默认信息
            config: GitHub 配置

        Returns:
            CommitTask，task.future 完成后得到 LogEntry

        Raises:
            CommitInProgressError: 已有提交在进行中
        """
        message = (message or "").strip() or config.default_commit_message
        task = CommitTask(message=message, path=config.file_path)

        with self._lock:
            if self._current is not None:
                raise CommitInProgressError(f"Commit {self._current.id} is still running")
            self._current = task

        try:
            now = datetime.now()
            self.store.append_local_log(message, now)
            content = self.store.generate_summary(now).encode("utf-8")
            task.size_bytes = len(content)
            task.status = TaskStatus.RUNNING

            self.emit(TaskEvent(
                task_id=task.id,
                event_type="started",
                status=TaskStatus.RUNNING,
                message=f"正在推送: {config.owner}/{config.repo}:{task.path}"
            ))
            logger.info(f"Commit task {task.id} submitted: {message}")

            task.future = self._executor.submit(self._commit_worker, task, content, config)
        except Exception:
            self._finish()
            raise
        return task

    def commit(self, message: str, config: GitHubConfig) -> LogEntry:
        """同步提交，等待完成"""
        return self.submit(message, config).future.result()

    def clear_history(self):
        """清空提交记录"""
        self.store.clear_history()
        self.emit(TaskEvent(
            task_id="",
            event_type="history_changed",
            status=TaskStatus.COMPLETED,
            message="历史记录已清空",
            result=self.store.stats
        ))

    def shutdown(self):
        """等待进行中的提交完成并释放资源"""
        self._executor.shutdown(wait=True)
        self.client.close()
        logger.info("CommitService stopped")

    # ============ 私有方法 ============

    def _commit_worker(self, task: CommitTask, content: bytes, config: GitHubConfig) -> LogEntry:
        """后台工作线程函数"""
        try:
            try:
                result = self.client.upsert(task.path, content, task.message, config)
            except Exception as e:
                logger.exception(f"Commit task {task.id} exception: {e}")
                result = UpsertResult(success=False, path=task.path, error=str(e))

            entry = LogEntry(
                message=task.message,
                file_size_bytes=task.size_bytes,
                success=result.success,
                error=result.error,
                commit_sha=result.content_sha,
            )
            task.result = result
            self.store.add_entry(entry)
        except Exception as e:
            logger.exception(f"Commit task {task.id} could not be recorded: {e}")
            task.completed_at = datetime.now()
            task.status = TaskStatus.FAILED
            self._finish()
            self.emit(TaskEvent(
                task_id=task.id,
                event_type="failed",
                status=task.status,
                message=f"❌ 记录保存失败: {e}",
                error=str(e)
            ))
            raise

        task.entry = entry
        task.completed_at = datetime.now()
        task.status = TaskStatus.COMPLETED if result.success else TaskStatus.FAILED
        self._finish()

        if result.success:
            self.emit(TaskEvent(
                task_id=task.id,
                event_type="completed",
                status=task.status,
                message=result.describe(),
                result=entry
            ))
            logger.info(f"Commit task {task.id} completed")
        else:
            self.emit(TaskEvent(
                task_id=task.id,
                event_type="failed",
                status=task.status,
                message=result.describe(),
                error=result.error,
                result=entry
            ))
            logger.error(f"Commit task {task.id} failed: {result.error}")

        self.emit(TaskEvent(
            task_id=task.id,
            event_type="history_changed",
            status=task.status,
            message="",
            result=self.store.stats
        ))
        return entry

    def _finish(self) -> None:
        with self._lock:
            self._current = None
