# flows/login_flow.py
# -*- coding: utf-8 -*-
"""
login_flow.py
-------------
登录并进入商品列表页的业务流程（Flow 层）。
"""

import os

from playwright.sync_api import Page

from framework.core.base_flow import BaseFlow
from framework.core.config_loader import get_config
from framework.core.logger import get_logger
from pages.home_page import HomePage

logger = get_logger()


class LoginFlow(BaseFlow):
    """
    登录流程。

    固定四步：打开首页 -> 校验标题 -> 登录 -> 校验商品列表，不重排、不重试。
    """

    def __init__(self, page: Page):
        """
        :param page: pytest fixture 提供的 Page 实例
        """
        super().__init__(page)
        self.home_page = HomePage(page)

    def _get_default_account(self) -> tuple[str, str]:
        """
        获取默认登录账号（用户名、密码）。

        优先级：
        1. 环境变量 UI_ACCOUNT_USERNAME / UI_ACCOUNT_PASSWORD；
        2. 配置文件中 account 节点。
        """
        account_cfg = get_config().get("account", {})

        username = os.getenv("UI_ACCOUNT_USERNAME") or account_cfg.get("username")
        password = os.getenv("UI_ACCOUNT_PASSWORD") or account_cfg.get("password")

        if not username or not password:
            raise ValueError(
                "默认登录账号未配置，请设置环境变量 "
                "UI_ACCOUNT_USERNAME / UI_ACCOUNT_PASSWORD 或在配置文件 account 下配置用户名和密码。"
            )

        return username, password

    def login_and_verify_inventory(
        self,
        username: str | None = None,
        password: str | None = None,
    ) -> None:
        """
        执行完整流程，任何一步的断言失败或超时都会直接抛出。

        - 传了 username/password：用传入的值；
        - 没传的字段：逐项用默认账号（环境变量 / 配置文件）补齐。
        """
        if username is None or password is None:
            default_username, default_password = self._get_default_account()
            username = default_username if username is None else username
            password = default_password if password is None else password
        logger.info(f"[流程] 登录并校验商品列表: username={username}")

        self.step("打开首页")
        self.home_page.open()

        self.step("校验页面标题")
        self.home_page.validate_title()

        self.step(f"登录：{username}")
        self.home_page.login(username, password)

        self.step("校验商品列表页可见")
        self.home_page.page_inventory()

        logger.info("[流程] 登录并校验商品列表完成")
