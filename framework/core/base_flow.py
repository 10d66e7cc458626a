# framework/core/base_flow.py
# -*- coding: utf-8 -*-
"""
base_flow.py
------------
业务流程（Flow）基类：持有 page，并提供按顺序记录步骤的 step()。
"""

from playwright.sync_api import Page

from framework.core.logger import get_logger

logger = get_logger()


class BaseFlow:
    """
    Flow 层基类。

    属性：
        page: Playwright Page 实例；
        steps: 已执行步骤的描述，按执行顺序追加。
    """

    def __init__(self, page: Page):
        self.page = page
        self.steps: list[str] = []

    def step(self, description: str) -> None:
        """
        记录一个业务步骤，同时写日志。

        用法：
            self.step("打开首页")
        """
        self.steps.append(description)
        logger.info(f"[Flow Step {len(self.steps)}] {description}")
