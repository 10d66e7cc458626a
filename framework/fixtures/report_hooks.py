"""
report_hooks.py
---------------
失败用例的报告钩子：
1. 用例执行阶段（call）失败时自动整页截图 + 导出 Playwright trace；
2. 截图 / trace 挂到 pytest-html 报告的 extras 中。
"""

from pathlib import Path
from typing import Any

import pytest
import pytest_html

from framework.core.logger import get_logger
from utils.path_utils import get_screenshot_path, get_trace_path

logger = get_logger()

REPORT_ROOT = Path("reports")


def _relative_to_reports(path: str) -> str:
    """把产物路径转换成相对 reports 目录的路径，供 HTML 报告引用。"""
    p = Path(path)
    try:
        p = p.relative_to(REPORT_ROOT)
    except ValueError:
        pass
    return p.as_posix()


def attach_failure_artifacts(page, test_name: str, extras: list) -> None:
    """
    截图并导出 trace，成功的产物依次追加到 extras。

    截图失败不影响 trace 的导出，两者的异常都只记录日志。
    """
    screenshot_path = get_screenshot_path(test_name)
    try:
        page.screenshot(path=screenshot_path, full_page=True)
        logger.error(f"[截图] 已保存失败截图: {screenshot_path}")
        extras.append(
            pytest_html.extras.image(_relative_to_reports(screenshot_path), mime_type="image/png")
        )
    except Exception as e:  # noqa: BLE001
        logger.error(f"[截图失败] 保存截图时发生异常: {e}")

    trace_path = get_trace_path(test_name)
    try:
        page.context.tracing.stop(path=trace_path)
        logger.error(f"[Tracing] 已保存失败 trace 文件: {trace_path}")
        extras.append(
            pytest_html.extras.html(
                f'<a href="{_relative_to_reports(trace_path)}" target="_blank">'
                f"下载 Playwright trace</a>"
            )
        )
    except Exception as e:  # noqa: BLE001
        logger.error(f"[Tracing] 保存 trace 时发生异常: {e}")


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item: pytest.Item, call: pytest.CallInfo[Any]) -> None:
    """
    只处理 call 阶段的失败用例。

    没有注入 page fixture 的用例（例如单元测试）直接跳过。
    """
    outcome = yield
    report = outcome.get_result()

    if report.when != "call" or not report.failed:
        return

    page = getattr(item, "funcargs", {}).get("page")
    if page is None:
        return

    logger.error(f"[失败] 用例失败，准备自动截图和保存 trace: {report.nodeid}")
    extras = getattr(report, "extras", [])
    attach_failure_artifacts(page, item.name, extras)
    report.extras = extras
