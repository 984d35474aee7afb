# -*- coding: utf-8 -*-
"""
GitHub Contents API 客户端

写入分两步，第二步依赖第一步的结果：
1. GET 读取目标文件当前的 sha（不存在或读取失败视为新建）
2. PUT 写入 base64 内容，已有 sha 时一并提交

不做重试；调用方保证同一时间只有一个写入请求。
"""
import base64
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Dict, Optional

import requests

from .app_config import GitHubConfig
from .error_handling import (
    AuthMissingError, ConfigurationError, RemoteRejectedError, UpsertError,
    from_requests_error, log_error, log_success,
)
from .models import UpsertResult

logger = logging.getLogger(__name__)

SUCCESS_STATUS = (200, 201)


class RemoteUpsertClient:
    """远程文件写入客户端

    使用示例：

    ```python
    client = RemoteUpsertClient()
    result = client.upsert("log.txt", b"hello", "Update log", config)
    future = client.submit_upsert("log.txt", b"hello", "Update log", config)
    print(future.result().success)
    ```
    """

    def __init__(self, session: Optional[requests.Session] = None):
        """
        Args:
            session: requests 会话（测试时可替换）
        """
        self.session = session or requests.Session()
        self._executor: Optional[ThreadPoolExecutor] = None

    def fetch_sha(self, path: str, config: GitHubConfig) -> Optional[str]:
        """
        读取远程文件当前 sha

        Returns:
            sha 字符串；文件不存在或请求失败时返回 None
        """
        url = config.contents_url(path)
        try:
            response = self.session.get(
                url,
                headers=self._headers(config),
                params={"ref": config.branch},
                timeout=config.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.info(f"fetch_sha {path}: request failed ({e}), treating as new file")
            return None

        if response.status_code != 200:
            logger.info(f"fetch_sha {path}: HTTP {response.status_code}, treating as new file")
            return None

        try:
            data = response.json()
        except ValueError:
            return None
        sha = data.get("sha") if isinstance(data, dict) else None
        return sha if isinstance(sha, str) and sha else None

    def upsert(self, path: str, content: bytes, message: str, config: GitHubConfig) -> UpsertResult:
        """
        创建或更新远程文件（阻塞）

        Args:
            path: 仓库内文件路径
            content: 文件内容
            message: 提交信息
            config: GitHub 配置

        Returns:
            UpsertResult，失败信息放在 error / status_code 中，不抛出异常
        """
        try:
            result = self._upsert(path, content, message, config)
        except UpsertError as e:
            logger.warning(log_error(e, "upsert"))
            return UpsertResult(
                success=False,
                path=path,
                status_code=e.status_code,
                error=e.reason,
            )
        logger.info(log_success("upsert", f"{path} committed", status_code=result.status_code, created=result.created))
        return result

    def submit_upsert(self, path: str, content: bytes, message: str, config: GitHubConfig) -> "Future[UpsertResult]":
        """在后台线程执行 upsert，返回 Future"""
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="upsert")
        return self._executor.submit(self.upsert, path, content, message, config)

    def close(self):
        """关闭后台线程和 HTTP 会话"""
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
        self.session.close()

    # ============ 私有方法 ============

    def _upsert(self, path: str, content: bytes, message: str, config: GitHubConfig) -> UpsertResult:
        if not config.has_token():
            raise AuthMissingError()
        if not config.owner.strip() or not config.repo.strip():
            raise ConfigurationError("upsert", "未配置仓库 owner / repo")

        sha = self.fetch_sha(path, config)
        body = self._build_body(content, message or config.default_commit_message, config.branch, sha)

        try:
            response = self.session.put(
                config.contents_url(path),
                headers=self._headers(config),
                json=body,
                timeout=config.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise from_requests_error(e, "upsert")

        if response.status_code not in SUCCESS_STATUS:
            raise RemoteRejectedError("upsert", response.status_code, self._error_message(response))

        return UpsertResult(
            success=True,
            path=path,
            status_code=response.status_code,
            created=sha is None,
            content_sha=self._content_sha(response),
        )

    @staticmethod
    def _headers(config: GitHubConfig) -> Dict[str, str]:
        return {
            "Authorization": f"token {config.token.strip()}",
            "Accept": "application/vnd.github+json",
        }

    @staticmethod
    def _build_body(content: bytes, message: str, branch: str, sha: Optional[str]) -> Dict[str, Any]:
        body = {
            "message": message,
            "content": base64.b64encode(content).decode("ascii"),
            "branch": branch,
        }
        if sha:
            body["sha"] = sha
        return body

    @staticmethod
    def _error_message(response) -> str:
        try:
            data = response.json()
        except ValueError:
            return ""
        if isinstance(data, dict):
            return str(data.get("message", ""))
        return ""

    @staticmethod
    def _content_sha(response) -> Optional[str]:
        try:
            data = response.json()
        except ValueError:
            return None
        if isinstance(data, dict) and isinstance(data.get("content"), dict):
            return data["content"].get("sha")
        return None
