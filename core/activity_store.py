# -*- coding: utf-8 -*-
"""
提交记录存储与统计

职责：
1. 维护提交记录列表（最新在前）
2. 每次变更后整体写回 JSON 文件
3. 重新计算统计信息（总数、成功/失败、文件大小、连续天数）
4. 生成推送到远程的摘要文本

本地持久化是尽力而为的缓存：读写失败只记录日志，内存状态始终为准。
"""
import json
import logging
import os
import threading
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Tuple

from .error_handling import PersistenceError, log_error
from .models import LogEntry, Statistics, format_size
from .paths import activity_file, local_log_file
from .streak import compute_streaks

logger = logging.getLogger(__name__)

SUMMARY_RECENT_COUNT = 10


def calculate_stats(entries: List[LogEntry]) -> Statistics:
    """根据记录列表计算统计信息"""
    successful = sum(1 for e in entries if e.success)
    streaks = compute_streaks(entries)
    return Statistics(
        total_commits=len(entries),
        successful_commits=successful,
        failed_commits=len(entries) - successful,
        total_file_size_bytes=sum(e.file_size_bytes for e in entries),
        current_streak=streaks.current_streak,
        longest_streak=streaks.longest_streak,
    )


class ActivityStore:
    """提交记录存储

    使用示例：

    ```python
    store = ActivityStore()
    store.load()
    store.add_entry(LogEntry(message="daily", file_size_bytes=120, success=True))
    print(store.stats.current_streak)
    content = store.generate_summary()
    ```
    """

    def __init__(self, path: Optional[Path] = None, log_path: Optional[Path] = None):
        """
        Args:
            path: 记录文件路径（默认数据目录下 activity_log.json）
            log_path: 本地文本日志路径（默认数据目录下 log.txt）
        """
        self.path = Path(path) if path else activity_file()
        self.log_path = Path(log_path) if log_path else local_log_file()
        self._entries: List[LogEntry] = []
        self._stats = Statistics()
        # 后台提交线程与 UI 线程都会修改记录
        self._lock = threading.RLock()

    @property
    def entries(self) -> Tuple[LogEntry, ...]:
        """全部记录（最新在前）"""
        with self._lock:
            return tuple(self._entries)

    @property
    def stats(self) -> Statistics:
        with self._lock:
            return self._stats

    def recent(self, limit: int = SUMMARY_RECENT_COUNT) -> List[LogEntry]:
        with self._lock:
            return self._entries[:limit]

    def load(self) -> None:
        """从文件加载记录；文件缺失或损坏时视为没有历史"""
        with self._lock:
            try:
                self._entries = self._read_entries()
            except PersistenceError as e:
                logger.warning(log_error(e, "load"))
                self._entries = []
            self._recalculate()
            count = len(self._entries)
        logger.info(f"Loaded {count} entries from {self.path}")

    def add_entry(self, entry: LogEntry) -> None:
        """插入到最前面，保存并重新计算统计"""
        with self._lock:
            self._entries.insert(0, entry)
            self._persist()
            self._recalculate()

    def clear_history(self) -> None:
        """清空全部记录"""
        with self._lock:
            self._entries = []
            self._persist()
            self._recalculate()
        logger.info("History cleared")

    def generate_summary(self, now: Optional[datetime] = None) -> str:
        """
        生成可读的摘要文本（推送到远程的文件内容）

        Args:
            now: 生成时间（默认当前时间）

        Returns:
            摘要文本
        """
        now = now or datetime.now()
        with self._lock:
            stats = self._stats
            recent = self._entries[:SUMMARY_RECENT_COUNT]
        lines = [
            "# Daily Git Log",
            "",
            f"Generated: {now.strftime('%Y-%m-%d %H:%M:%S')}",
            "",
            "## Statistics",
            "",
            f"- Total commits: {stats.total_commits}",
            f"- Successful: {stats.successful_commits}",
            f"- Failed: {stats.failed_commits}",
            f"- Success rate: {stats.success_rate:.1f}%",
            f"- Current streak: {stats.current_streak} day(s)",
            f"- Longest streak: {stats.longest_streak} day(s)",
            f"- Total pushed: {format_size(stats.total_file_size_bytes)}",
            "",
            "## Recent activity",
            "",
        ]
        if not recent:
            lines.append("No commits yet.")
        for entry in recent:
            mark = "✅" if entry.success else "❌"
            lines.append(f"- {mark} {entry.display_time()} - {entry.message}")
        return "\n".join(lines) + "\n"

    def append_local_log(self, message: str, when: Optional[datetime] = None) -> bool:
        """追加一行到本地文本日志"""
        when = when or datetime.now()
        line = f"{when.isoformat(sep=' ', timespec='seconds')}: {message}\n"
        try:
            self.log_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.log_path, "a", encoding="utf-8") as f:
                f.write(line)
            return True
        except OSError as e:
            logger.warning(log_error(PersistenceError("append_log", str(e), details={"path": self.log_path}), "append_log"))
            return False

    # ============ 私有方法 ============

    def _recalculate(self) -> None:
        self._stats = calculate_stats(self._entries)

    def _read_entries(self) -> List[LogEntry]:
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise PersistenceError("load", f"读取记录失败: {e}", details={"path": self.path})

        if not isinstance(data, list):
            raise PersistenceError("load", "记录文件格式错误", details={"path": self.path})

        entries = []
        for item in data:
            try:
                entries.append(LogEntry.from_dict(item))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(f"Skipping malformed entry: {e}")
        return entries

    def _persist(self) -> None:
        try:
            self._write_entries()
        except PersistenceError as e:
            logger.warning(log_error(e, "save"))

    def _write_entries(self) -> None:
        payload = json.dumps([e.to_dict() for e in self._entries], indent=2, ensure_ascii=False)
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload, encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as e:
            raise PersistenceError("save", f"保存记录失败: {e}", details={"path": self.path})
