# framework/core/base_page.py
# -*- coding: utf-8 -*-
"""
base_page.py
------------
Page Object 基类，对 Playwright Page 的常用动作做一层带日志的封装。

要点：
1. 默认超时（timeout.medium）和步骤停顿（pause.*）统一从配置读取；
2. 元素参数既可以是定位字符串，也可以是已经构造好的 Locator；
3. 断言基于 Playwright 的 expect（自带重试等待），失败时记录日志后原样抛出。
"""

from typing import Union

from playwright.sync_api import Locator, Page, expect
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from framework.core.config_loader import get_value
from framework.core.logger import get_logger

logger = get_logger()

Target = Union[str, Locator]


class BasePage:
    """
    所有页面类的基类。

    属性：
        page: 当前用例的 Playwright Page；
        _medium_timeout: 默认超时时间（毫秒）；
        _pause_cfg: 各步骤之后的固定停顿配置（毫秒）。
    """

    def __init__(self, page: Page):
        """
        :param page: Playwright Page 实例，由 pytest fixture 传入
        """
        self.page = page

        self._medium_timeout: int = get_value("timeout.medium", 5000)
        self._pause_cfg: dict = get_value("pause") or {}

    def _resolve(self, target: Target) -> Locator:
        if isinstance(target, str):
            return self.page.locator(target)
        return target

    # ========== 导航 ==========

    def open(self, url: str, wait_until: str = "load") -> None:
        """
        打开指定 URL。

        :param url: 完整 URL 或相对路径（依赖 context 的 base_url）
        :param wait_until: load / domcontentloaded / networkidle
        """
        logger.info(f"[导航] 打开页面: {url}")
        self.page.goto(url, wait_until=wait_until)

    # ========== 元素操作 ==========

    def click(self, target: Target, timeout: int | None = None) -> None:
        """点击元素（Playwright 自动等待可点击）。"""
        effective_timeout = self._medium_timeout if timeout is None else timeout
        logger.info(f"[操作] 点击元素: {target}, timeout={effective_timeout}ms")
        try:
            self._resolve(target).click(timeout=effective_timeout)
        except PlaywrightTimeoutError:
            logger.error(f"[超时] 点击元素超时: {target}")
            raise

    def fill(
        self,
        target: Target,
        value: str,
        timeout: int | None = None,
        secret: bool = False,
    ) -> None:
        """
        在输入框中输入文本（会先清空原有内容）。

        :param target: 定位字符串或 Locator
        :param value: 要输入的文本
        :param timeout: 超时时间（毫秒），默认 medium
        :param secret: True 时日志里不打印明文
        """
        effective_timeout = self._medium_timeout if timeout is None else timeout
        shown = "******" if secret else value
        logger.info(
            f"[操作] 输入文本: locator={target}, value={shown}, timeout={effective_timeout}ms"
        )
        try:
            self._resolve(target).fill(value, timeout=effective_timeout)
        except PlaywrightTimeoutError:
            logger.error(f"[超时] 输入文本超时: {target}")
            raise

    def pause(self, key: str, default: int) -> None:
        """
        按配置 pause.<key> 做一次固定停顿，值为 0 时跳过。

        这是无条件的等待，不依赖页面状态。
        """
        ms = self._pause_cfg.get(key, default)
        if ms:
            logger.info(f"[等待] {key}: {ms}ms")
            self.page.wait_for_timeout(ms)

    # ========== 断言 ==========

    def assert_title(self, expected_title: str, timeout: int | None = None) -> None:
        """
        断言页面标题等于预期值。

        :param expected_title: 期望的 document.title
        :param timeout: 超时时间（毫秒），默认 medium
        """
        effective_timeout = self._medium_timeout if timeout is None else timeout
        logger.info(f"[断言] 页面标题: expected={expected_title}")
        try:
            expect(self.page).to_have_title(expected_title, timeout=effective_timeout)
        except AssertionError:
            logger.error(f"[断言失败] 页面标题不是: {expected_title}")
            raise

    def assert_visible(self, target: Target, timeout: int | None = None) -> None:
        """断言元素在超时时间内变为可见。"""
        effective_timeout = self._medium_timeout if timeout is None else timeout
        logger.info(f"[断言] 元素可见: {target}, timeout={effective_timeout}ms")
        try:
            expect(self._resolve(target)).to_be_visible(timeout=effective_timeout)
        except AssertionError:
            logger.error(f"[断言失败] 元素不可见: {target}")
            raise
