# -*- coding: utf-8 -*-
"""
logger.py
---------
统一日志封装（loguru）。

控制台 + 按天切割的日志文件，日志目录取 report.log_dir。
"""

import os
import sys
from functools import lru_cache

from loguru import logger

from framework.core.config_loader import get_config

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <7} | {message}"


@lru_cache(maxsize=1)
def get_logger():
    """
    获取全局 loguru.logger。

    使用 lru_cache 保证 handler 只添加一次。
    """
    report_config = get_config().get("report", {})
    log_dir = report_config.get("log_dir", "reports/logs")
    os.makedirs(log_dir, exist_ok=True)

    logger.remove()

    logger.add(sys.stderr, level="INFO", format=LOG_FORMAT, enqueue=True)

    logger.add(
        os.path.join(log_dir, "smoke_{time:YYYYMMDD}.log"),
        rotation="00:00",
        retention="10 days",
        encoding="utf-8",
        level="INFO",
        format=LOG_FORMAT,
        enqueue=True,
    )

    return logger
