# -*- coding: utf-8 -*-
"""应用数据目录"""
import os
from pathlib import Path

APP_DIR_NAME = ".dailygitlog"
ENV_HOME = "DAILYGITLOG_HOME"

ACTIVITY_FILE_NAME = "activity_log.json"
LOCAL_LOG_FILE_NAME = "log.txt"
CONFIG_FILE_NAME = "config.json"


def get_data_dir() -> Path:
    """数据目录：优先环境变量 DAILYGITLOG_HOME，否则 ~/.dailygitlog"""
    env = os.environ.get(ENV_HOME)
    if env:
        return Path(env).expanduser().resolve()
    return Path.home() / APP_DIR_NAME


def activity_file() -> Path:
    return get_data_dir() / ACTIVITY_FILE_NAME


def local_log_file() -> Path:
    return get_data_dir() / LOCAL_LOG_FILE_NAME


def config_file() -> Path:
    return get_data_dir() / CONFIG_FILE_NAME
