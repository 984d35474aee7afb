# -*- coding: utf-8 -*-
"""
GitHub 配置管理模块

配置对象显式传给上传客户端，不使用全局单例。
"""
import json
import logging
from dataclasses import dataclass, asdict, fields, replace
from pathlib import Path
from urllib.parse import quote
from typing import Optional, Dict, Any

from .paths import config_file

logger = logging.getLogger(__name__)

DEFAULT_API_BASE_URL = "https://api.github.com"
DEFAULT_COMMIT_MESSAGE = "Update log from DailyGitLog"


@dataclass
class GitHubConfig:
    """GitHub 仓库配置 - 支持 JSON 持久化"""
    token: str = ""
    owner: str = ""
    repo: str = ""
    branch: str = "main"
    file_path: str = "log.txt"
    default_commit_message: str = DEFAULT_COMMIT_MESSAGE
    api_base_url: str = DEFAULT_API_BASE_URL
    timeout: int = 30  # 秒

    def has_token(self) -> bool:
        return bool(self.token and self.token.strip())

    def is_complete(self) -> bool:
        """令牌、owner、repo 都已配置"""
        return self.has_token() and bool(self.owner.strip()) and bool(self.repo.strip())

    def contents_url(self, path: Optional[str] = None) -> str:
        """Contents API 地址"""
        target = quote((path or self.file_path).lstrip("/"), safe="/")
        base = self.api_base_url.rstrip("/")
        return f"{base}/repos/{self.owner}/{self.repo}/contents/{target}"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GitHubConfig":
        """从字典创建配置；未知字段忽略，类型错误的字段使用默认值"""
        config = cls()
        if not isinstance(data, dict):
            return config
        return config.update(**data)

    def update(self, **kwargs) -> "GitHubConfig":
        """返回更新后的新配置"""
        defaults = {f.name: f.default for f in fields(self)}
        changes = {}
        for key, value in kwargs.items():
            if key not in defaults:
                continue
            if value is None:
                changes[key] = defaults[key]
                continue
            try:
                if key == "timeout":
                    value = int(value)
                    if value <= 0:
                        raise ValueError(value)
                else:
                    value = str(value).strip()
            except (TypeError, ValueError):
                logger.warning(f"配置项 {key}={value!r} 无效，使用默认值")
                value = defaults[key]
            changes[key] = value
        return replace(self, **changes)

    def __repr__(self) -> str:
        token_str = "已设置" if self.has_token() else "未设置"
        return f"GitHubConfig({self.owner}/{self.repo}@{self.branch}:{self.file_path}, token={token_str})"


def load_config(path: Optional[Path] = None) -> GitHubConfig:
    """从文件加载配置，失败时返回默认配置"""
    path = Path(path) if path else config_file()
    try:
        if path.exists():
            data = json.loads(path.read_text(encoding="utf-8"))
            return GitHubConfig.from_dict(data)
    except (OSError, ValueError) as e:
        logger.warning(f"⚠️ 加载配置失败: {e}，使用默认配置")
    return GitHubConfig()


def save_config(config: GitHubConfig, path: Optional[Path] = None) -> bool:
    """保存配置到文件"""
    path = Path(path) if path else config_file()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(config.to_dict(), indent=2, ensure_ascii=False),
            encoding="utf-8"
        )
        return True
    except OSError as e:
        logger.error(f"❌ 保存配置失败: {e}")
        return False
