# -*- coding: utf-8 -*-
"""
Service Layer - 业务服务基类

服务层位于 UI 和存储/网络之间，负责：
1. 任务状态管理
2. 事件分发（started, completed, failed, history_changed）
"""

from typing import Callable, Dict, List, Optional, Any
from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime
import logging

logger = logging.getLogger(__name__)


class TaskStatus(Enum):
    """任务状态枚举"""
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class TaskEvent:
    """任务事件（供监听者订阅）

    Attributes:
        task_id: 任务 ID
        event_type: 事件类型（started, completed, failed, history_changed）
        status: 任务当前状态
        message: 事件消息
        error: 错误信息（失败时）
        result: 结果数据
    """
    task_id: str
    event_type: str
    status: TaskStatus
    message: str
    error: Optional[str] = None
    result: Optional[Any] = None
    timestamp: datetime = field(default_factory=datetime.now)


class BaseService:
    """基础服务类，提供通用的事件管理"""

    def __init__(self):
        self._listeners: Dict[str, List[Callable[[TaskEvent], None]]] = {}

    def subscribe(self, event_type: str, callback: Callable[[TaskEvent], None]):
        """订阅事件"""
        listeners = self._listeners.setdefault(event_type, [])
        if callback not in listeners:
            listeners.append(callback)

    def emit(self, event: TaskEvent):
        """发射事件给所有订阅者"""
        for callback in list(self._listeners.get(event.event_type, [])):
            try:
                callback(event)
            except Exception:
                # 一个监听者出错不影响其他监听者
                logger.exception(f"Event callback error for {event.event_type}")
