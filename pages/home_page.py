# pages/home_page.py
# -*- coding: utf-8 -*-
"""
home_page.py
------------
Swag Labs 首页（登录页）的 Page Object。

页面上只关心四个元素：用户名、密码、登录按钮，以及登录后的商品列表。
Locator 在构造时声明，Playwright 每次操作时才去 DOM 中解析。
"""

from playwright.sync_api import Page

from framework.core.base_page import BasePage
from framework.core.config_loader import get_config
from framework.core.logger import get_logger

logger = get_logger()


class HomePage(BasePage):
    """
    Swag Labs 首页 Page 对象。

    四个动作按固定顺序调用：open -> validate_title -> login -> page_inventory。
    """

    DEFAULT_URL = "https://www.saucedemo.com/"
    DEFAULT_TITLE = "Swag Labs"

    USERNAME_INPUT = "#user-name"
    PASSWORD_INPUT = '[data-test="password"]'
    LOGIN_BUTTON = "#login-button"
    INVENTORY_LIST = ".inventory_list"

    def __init__(self, page: Page):
        super().__init__(page)

        self.username_input = page.locator(self.USERNAME_INPUT)
        self.password_input = page.locator(self.PASSWORD_INPUT)
        self.login_button = page.locator(self.LOGIN_BUTTON)
        self.inventory_list = page.locator(self.INVENTORY_LIST)

    @staticmethod
    def home_url() -> str:
        """
        计算首页完整 URL。

        app.login_path 为空时直接用 base_url；
        是 http 开头的绝对地址时直接用它；
        否则拼接到 base_url 后面。
        """
        app_cfg = get_config().get("app", {})
        base_url = (app_cfg.get("base_url") or HomePage.DEFAULT_URL).rstrip("/")
        login_path = (app_cfg.get("login_path") or "").strip()

        if not login_path:
            return f"{base_url}/"
        if login_path.startswith("http"):
            return login_path
        return f"{base_url}/{login_path.lstrip('/')}"

    def open(self) -> None:
        """打开 Swag Labs 首页。"""
        super().open(self.home_url())

    def validate_title(self) -> None:
        """校验页面标题是 "Swag Labs"，随后停顿一下。"""
        expected = get_config().get("app", {}).get("title", self.DEFAULT_TITLE)
        self.assert_title(expected)
        logger.info(f"[校验] 页面标题正确: {expected}")
        self.pause("after_title", 1000)

    def login(self, username: str, password: str) -> None:
        """
        填写登录表单并提交。

        每一步之后都有固定停顿，不判断登录是否成功。

        :param username: 用户名
        :param password: 密码
        """
        self.fill(self.username_input, username)
        self.pause("after_input", 2000)

        self.fill(self.password_input, password, secret=True)
        self.pause("after_input", 2000)

        self.click(self.login_button)
        self.pause("after_click", 2000)

    def page_inventory(self) -> None:
        """校验商品列表页已加载且可见。"""
        self.assert_visible(self.inventory_list)
        logger.info("[校验] 商品列表页可见")
