"""
单元测试公共 fixture：不启动浏览器，用 MagicMock 代替 Playwright Page。
"""

from unittest.mock import MagicMock

import pytest

from framework.core.config_loader import get_config

ENV_VARS = (
    "UI_AUTOMATION_ENV",
    "UI_AUTOMATION_CONFIG_DIR",
    "UI_ACCOUNT_USERNAME",
    "UI_ACCOUNT_PASSWORD",
)


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """每个用例都从干净的环境变量重新加载配置。"""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def fake_page() -> MagicMock:
    """同一个 selector 总是返回同一个 Locator mock。"""
    page = MagicMock(name="page")
    locators: dict = {}

    def _locator(selector):
        return locators.setdefault(selector, MagicMock(name=f"locator({selector})"))

    page.locator.side_effect = _locator
    return page


@pytest.fixture
def fake_expect(monkeypatch) -> MagicMock:
    """替换 BasePage 中的 playwright expect。"""
    mocked = MagicMock(name="expect")
    monkeypatch.setattr("framework.core.base_page.expect", mocked)
    return mocked
