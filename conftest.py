"""
全局 Pytest 配置：以插件方式注册浏览器 fixtures 和失败报告钩子。
"""

pytest_plugins = [
    "framework.fixtures.browser_fixtures",  # config / playwright_instance / browser / page
    "framework.fixtures.report_hooks",  # 失败截图 + trace -> pytest-html
]
