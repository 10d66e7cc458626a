from unittest.mock import MagicMock

import pytest

from flows.login_flow import LoginFlow

pytestmark = pytest.mark.unit

STEP_NAMES = ("open", "validate_title", "login", "page_inventory")


@pytest.fixture
def flow(fake_page):
    """LoginFlow，HomePage 的四个动作被替换为记录调用顺序的 mock。"""
    flow = LoginFlow(fake_page)
    flow.calls = []
    for name in STEP_NAMES:
        mocked = MagicMock(name=name)
        mocked.side_effect = lambda *args, _name=name: flow.calls.append((_name, args))
        setattr(flow.home_page, name, mocked)
    return flow


def test_steps_run_in_fixed_order(flow):
    flow.login_and_verify_inventory()

    assert [name for name, _ in flow.calls] == list(STEP_NAMES)
    assert flow.calls[2] == ("login", ("standard_user", "secret_sauce"))
    assert len(flow.steps) == 4
    assert flow.steps[0] == "打开首页"


def test_explicit_account_is_used(flow):
    flow.login_and_verify_inventory(username="problem_user", password="pwd")

    assert flow.calls[2] == ("login", ("problem_user", "pwd"))


def test_env_account_overrides_config(monkeypatch, flow):
    monkeypatch.setenv("UI_ACCOUNT_USERNAME", "visual_user")
    monkeypatch.setenv("UI_ACCOUNT_PASSWORD", "env_secret")

    flow.login_and_verify_inventory()

    assert flow.calls[2] == ("login", ("visual_user", "env_secret"))


def test_missing_account_raises_before_any_step(monkeypatch, flow):
    monkeypatch.setattr("flows.login_flow.get_config", lambda: {})

    with pytest.raises(ValueError):
        flow.login_and_verify_inventory()

    assert flow.calls == []
    assert flow.steps == []


def test_failed_step_stops_the_flow(flow):
    flow.home_page.validate_title.side_effect = AssertionError("title mismatch")

    with pytest.raises(AssertionError):
        flow.login_and_verify_inventory()

    flow.home_page.open.assert_called_once_with()
    flow.home_page.login.assert_not_called()
    flow.home_page.page_inventory.assert_not_called()


def test_only_username_given_keeps_default_password(flow):
    flow.login_and_verify_inventory(username="problem_user")

    assert flow.calls[2] == ("login", ("problem_user", "secret_sauce"))


def test_only_password_given_keeps_default_username(flow):
    flow.login_and_verify_inventory(password="other_secret")

    assert flow.calls[2] == ("login", ("standard_user", "other_secret"))
