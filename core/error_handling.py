# -*- coding: utf-8 -*-
"""
统一的错误处理和日志记录

提供标准化的错误类型和日志格式，便于调试。
"""
from typing import Optional
from enum import Enum


class ErrorSeverity(str, Enum):
    """错误严重程度"""
    WARNING = "WARNING"  # 可恢复
    ERROR = "ERROR"      # 不可恢复


class DailyGitLogError(Exception):
    """错误基类"""

    def __init__(
        self,
        operation: str,
        reason: str,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        details: Optional[dict] = None
    ):
        """
        Args:
            operation: 操作类型（load, save, fetch_sha, upsert 等）
            reason: 错误原因描述
            severity: 错误严重程度
            details: 额外的错误详情（如 HTTP 状态码、路径等）
        """
        self.operation = operation
        self.reason = reason
        self.severity = severity
        self.details = details or {}
        super().__init__(self.format_message())

    def format_message(self) -> str:
        """格式化错误消息"""
        msg = f"[{self.operation}] {self.reason}"
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            msg += f" - {details_str}"
        return msg

    def __str__(self):
        return self.format_message()


class PersistenceError(DailyGitLogError):
    """本地读写错误（在存储层内部消化，只记录日志）"""

    def __init__(self, operation: str, reason: str, **kwargs):
        kwargs.setdefault("severity", ErrorSeverity.WARNING)
        super().__init__(operation, reason, **kwargs)


class UpsertError(DailyGitLogError):
    """远程写入错误基类"""

    def __init__(self, operation: str, reason: str, status_code: Optional[int] = None, **kwargs):
        self.status_code = status_code
        if status_code is not None:
            kwargs.setdefault("details", {})["status_code"] = status_code
        super().__init__(operation, reason, **kwargs)


class AuthMissingError(UpsertError):
    """未配置访问令牌"""

    def __init__(self, operation: str = "upsert", reason: str = "未配置 GitHub 访问令牌", **kwargs):
        super().__init__(operation, reason, **kwargs)


class ConfigurationError(UpsertError):
    """仓库配置不完整（owner / repo 缺失）"""
    pass


class TransportError(UpsertError):
    """网络错误（连接失败、DNS、TLS、超时）"""

    def __init__(self, operation: str, reason: str, **kwargs):
        kwargs.setdefault("severity", ErrorSeverity.WARNING)
        super().__init__(operation, reason, **kwargs)


class RemoteRejectedError(UpsertError):
    """远程返回非 200/201 状态码"""

    def __init__(self, operation: str, status_code: int, message: str = "", **kwargs):
        reason = f"HTTP 错误: {status_code}"
        if message:
            reason += f" ({message})"
        super().__init__(operation, reason, status_code=status_code, **kwargs)


def format_log(
    level: str,
    operation: str,
    message: str,
    **kwargs
) -> str:
    """
    格式化日志消息

    Args:
        level: 日志级别（INFO, WARN, ERROR）
        operation: 操作类型（upsert, save, etc.）
        message: 日志消息
        **kwargs: 额外的上下文信息

    Returns:
        格式化的日志字符串
    """
    log_parts = [f"[{level}]", f"[{operation}]", message]

    if kwargs:
        context_str = ", ".join(f"{k}={v}" for k, v in kwargs.items())
        log_parts.append(f"({context_str})")

    return " ".join(log_parts)


def log_error(error: Exception, operation: str) -> str:
    """格式化错误日志"""
    if isinstance(error, DailyGitLogError):
        return format_log(
            error.severity.value,
            error.operation,
            error.reason,
            **error.details
        )
    return format_log(
        "ERROR",
        operation,
        f"{type(error).__name__}: {str(error)}"
    )


def log_success(operation: str, message: str, **kwargs) -> str:
    return format_log("INFO", operation, message, **kwargs)


def from_requests_error(error: Exception, operation: str) -> UpsertError:
    """
    从 requests 异常创建 UpsertError

    Args:
        error: requests 异常
        operation: 操作类型

    Returns:
        UpsertError 实例
    """
    import requests

    if isinstance(error, requests.exceptions.Timeout):
        return TransportError(operation, "请求超时", details={"error": str(error)})

    elif isinstance(error, requests.exceptions.SSLError):
        return TransportError(operation, "SSL 握手失败", details={"error": str(error)})

    elif isinstance(error, requests.exceptions.ConnectionError):
        return TransportError(operation, "连接失败", details={"error": str(error)})

    elif isinstance(error, requests.exceptions.HTTPError):
        response = error.response
        status_code = response.status_code if response is not None else 0
        return RemoteRejectedError(operation, status_code)

    else:
        return TransportError(
            operation,
            f"未知错误: {type(error).__name__}",
            details={"error": str(error)}
        )
