# -*- coding: utf-8 -*-
"""
path_utils.py
-------------
失败截图、trace 等产物的输出路径。
"""

import os
import re
from datetime import datetime

from framework.core.config_loader import get_config


def ensure_dir(path: str) -> None:
    os.makedirs(path, exist_ok=True)


def safe_name(test_name: str) -> str:
    """
    把用例名转换成可以做文件名的字符串。

    参数化用例名里的 [] / : 等字符统一替换为下划线。
    """
    return re.sub(r"[^\w.-]+", "_", test_name).strip("_") or "test"


def _artifact_path(dir_key: str, default_dir: str, test_name: str, suffix: str) -> str:
    report_cfg = get_config().get("report", {})
    target_dir = report_cfg.get(dir_key, default_dir)
    ensure_dir(target_dir)

    # 时间戳避免重名
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
    return os.path.join(target_dir, f"{safe_name(test_name)}_{timestamp}{suffix}")


def get_screenshot_path(test_name: str) -> str:
    """
    生成失败截图路径（.png）。

    :param test_name: 用例名称（item.name）
    """
    return _artifact_path("screenshot_dir", "reports/screenshots", test_name, ".png")


def get_trace_path(test_name: str) -> str:
    """
    生成 trace 文件路径（.zip）。

    :param test_name: 用例名称（item.name）
    """
    return _artifact_path("trace_dir", "reports/traces", test_name, ".zip")
