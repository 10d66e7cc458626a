"""
browser_fixtures.py
-------------------
Playwright 浏览器相关的 pytest fixture。

- playwright_instance：session 级别，整个测试进程只启动一次；
- browser / page：function 级别，每个用例独立的浏览器、上下文和标签页；
- 浏览器类型、headless、slow_mo、默认超时都从配置读取。
"""
import os
import time
from contextlib import contextmanager
from typing import Generator, Iterator

import pytest
from playwright.sync_api import Browser, BrowserContext, Page, Playwright, sync_playwright

from framework.core.config_loader import get_config
from framework.core.logger import get_logger

logger = get_logger()

SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")


@pytest.fixture(scope="session")
def config() -> dict:
    """session 级别的配置 fixture。"""
    cfg = get_config()
    logger.info(f"[配置] 当前环境: {cfg.get('env')}")
    return cfg


@pytest.fixture(scope="session")
def playwright_instance() -> Generator[Playwright, None, None]:
    """session 级别的 Playwright 实例。"""
    logger.info("[Playwright] 启动 Playwright 服务")
    with sync_playwright() as playwright:
        yield playwright
    logger.info("[Playwright] 关闭 Playwright 服务")


def launch_browser(playwright: Playwright, browser_config: dict) -> Browser:
    """
    按配置启动浏览器。

    :param playwright: Playwright 实例
    :param browser_config: 配置中的 browser 节点
    :return: Browser 实例
    """
    browser_type = browser_config.get("type", "chromium")
    headless = browser_config.get("headless", True)
    slow_mo = browser_config.get("slow_mo", 0)

    if browser_type not in SUPPORTED_BROWSERS:
        raise ValueError(f"不支持的浏览器类型: {browser_type}")

    logger.info(
        f"[Browser] 启动浏览器: type={browser_type}, headless={headless}, slow_mo={slow_mo}"
    )
    return getattr(playwright, browser_type).launch(headless=headless, slow_mo=slow_mo)


@pytest.fixture(scope="function")
def browser(playwright_instance, config) -> Generator[Browser, None, None]:
    """function 级别的 Browser，用例之间互不影响。"""
    browser = launch_browser(playwright_instance, config.get("browser", {}))

    yield browser

    logger.info("[Browser] 关闭浏览器实例")
    browser.close()


def build_context_args() -> dict:
    """
    根据环境变量组装 browser.new_context 的参数。

    - UI_RECORD_VIDEO=true  视频录制，输出到 reports/videos
    - UI_RECORD_HAR=true    HAR 记录，输出到 reports/har
    """
    record_video = os.getenv("UI_RECORD_VIDEO", "false").lower() == "true"
    record_har = os.getenv("UI_RECORD_HAR", "false").lower() == "true"

    context_args: dict = {}

    if record_video:
        video_dir = "reports/videos"
        os.makedirs(video_dir, exist_ok=True)
        context_args["record_video_dir"] = video_dir
        logger.info(f"[Context] 启用视频录制, 目录: {video_dir}")

    if record_har:
        har_dir = "reports/har"
        os.makedirs(har_dir, exist_ok=True)
        har_path = os.path.join(har_dir, f"har_{int(time.time() * 1000)}.har")
        context_args["record_har_path"] = har_path
        context_args["record_har_mode"] = "minimal"
        logger.info(f"[Context] 启用 HAR 记录, 文件: {har_path}")

    return context_args


@contextmanager
def open_page(browser: Browser, config: dict) -> Iterator[Page]:
    """
    新建独立的 BrowserContext 和 Page，开启 tracing，退出时关闭上下文。

    失败用例的 tracing 已由 report_hooks 导出并停止，这里只兜底停止。
    """
    logger.info("[Context] 创建浏览器上下文")
    context: BrowserContext = browser.new_context(**build_context_args())
    context.tracing.start(screenshots=True, snapshots=True, sources=True)

    page: Page = context.new_page()

    default_timeout = config.get("timeout", {}).get("medium", 5000)
    context.set_default_timeout(default_timeout)
    page.set_default_timeout(default_timeout)

    try:
        yield page
    finally:
        logger.info("[Context] 关闭浏览器上下文")
        try:
            context.tracing.stop()
        except Exception as e:  # noqa: BLE001
            logger.warning(f"[Tracing] 停止 tracing 时发生异常（可能已提前停止）: {e}")

        context.close()


@pytest.fixture(scope="function")
def page(browser: Browser, config: dict) -> Generator[Page, None, None]:
    """function 级别的 Page，每个用例独立的上下文和标签页。"""
    with open_page(browser, config) as page:
        yield page
