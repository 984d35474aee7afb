# -*- coding: utf-8 -*-
"""
数据模型：提交记录、统计信息、上传结果
"""
from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Any, Dict, Optional
import uuid


def format_size(num_bytes: int) -> str:
    """字节数转为可读字符串"""
    num_bytes = int(num_bytes or 0)
    if num_bytes < 1024:
        return f"{num_bytes} B"
    if num_bytes < 1024 * 1024:
        return f"{num_bytes / 1024:.1f} KB"
    return f"{num_bytes / (1024 * 1024):.1f} MB"


@dataclass(frozen=True)
class LogEntry:
    """一次提交尝试的记录（创建后不可变）

    Attributes:
        message: 提交信息
        file_size_bytes: 推送内容的字节数
        success: 远程写入是否成功
        timestamp: 提交时间（本地时间）
        id: 唯一标识（UUID）
        error: 失败原因（成功时为 None）
        commit_sha: 远程返回的新内容 sha（可选）
    """
    message: str
    file_size_bytes: int
    success: bool
    timestamp: datetime = field(default_factory=datetime.now)
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    error: Optional[str] = None
    commit_sha: Optional[str] = None

    def __post_init__(self):
        if self.file_size_bytes < 0:
            raise ValueError(f"file_size_bytes must be >= 0, got {self.file_size_bytes}")
        # 统一为本地无时区时间，避免与无时区记录比较时出错
        if self.timestamp.tzinfo is not None:
            object.__setattr__(self, "timestamp", self.timestamp.astimezone().replace(tzinfo=None))

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["timestamp"] = self.timestamp.isoformat()
        # 可选字段为空时不写入，保持旧文件格式
        for key in ("error", "commit_sha"):
            if data[key] is None:
                del data[key]
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LogEntry":
        """从持久化字典还原；字段缺失或类型错误时抛出 KeyError/ValueError/TypeError"""
        success = data["success"]
        if not isinstance(success, bool):
            raise TypeError(f"success must be a bool, got {success!r}")
        return cls(
            id=str(data["id"]),
            timestamp=datetime.fromisoformat(data["timestamp"]),
            message=str(data["message"]),
            file_size_bytes=int(data["file_size_bytes"]),
            success=success,
            error=data.get("error"),
            commit_sha=data.get("commit_sha"),
        )

    def display_time(self) -> str:
        return self.timestamp.strftime("%Y-%m-%d %H:%M:%S")


@dataclass(frozen=True)
class Statistics:
    """派生统计信息（每次记录变化后重新计算，不单独持久化）"""
    total_commits: int = 0
    successful_commits: int = 0
    failed_commits: int = 0
    total_file_size_bytes: int = 0
    current_streak: int = 0
    longest_streak: int = 0

    @property
    def success_rate(self) -> float:
        """成功率（百分比）"""
        if not self.total_commits:
            return 0.0
        return self.successful_commits * 100.0 / self.total_commits


@dataclass(frozen=True)
class UpsertResult:
    """远程写入结果

    Attributes:
        success: 是否成功（HTTP 200/201）
        path: 远程文件路径
        status_code: HTTP 状态码（传输层失败时为 None）
        error: 失败原因
        created: True 表示新建文件，False 表示更新已有文件
        content_sha: 远程返回的新内容 sha
    """
    success: bool
    path: str
    status_code: Optional[int] = None
    error: Optional[str] = None
    created: bool = False
    content_sha: Optional[str] = None

    def describe(self) -> str:
        if self.success:
            action = "创建" if self.created else "更新"
            return f"✅ {action}成功: {self.path} (HTTP {self.status_code})"
        return f"❌ 推送失败: {self.path} - {self.error}"
