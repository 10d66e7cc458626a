# -*- coding: utf-8 -*-
"""
config_loader.py
----------------
统一加载 configs 目录下的 YAML 配置。

加载顺序：
1. configs/config.yaml 默认配置；
2. 环境变量 UI_AUTOMATION_ENV（或配置里的 env 字段）指定的 config_<env>.yaml；
3. 两者递归合并，env 配置覆盖默认配置。

配置目录默认是项目根目录下的 configs，找不到时退回当前工作目录下的 configs，
也可通过 UI_AUTOMATION_CONFIG_DIR 指定其他目录。
"""

import os
from functools import lru_cache
from typing import Any, Dict

import yaml


def _project_root() -> str:
    # 当前文件 -> framework/core -> 项目根
    current_dir = os.path.dirname(os.path.abspath(__file__))
    return os.path.dirname(os.path.dirname(current_dir))


def get_config_dir() -> str:
    """
    返回配置文件所在目录。

    优先级：
    1. 环境变量 UI_AUTOMATION_CONFIG_DIR；
    2. 项目根目录下的 configs（源码目录 / editable 安装）；
    3. 当前工作目录下的 configs（非 editable 安装时，代码在 site-packages 里）。
    """
    env_dir = os.getenv("UI_AUTOMATION_CONFIG_DIR")
    if env_dir:
        return env_dir

    project_dir = os.path.join(_project_root(), "configs")
    if os.path.isdir(project_dir):
        return project_dir
    return os.path.join(os.getcwd(), "configs")


def _load_yaml_file(file_path: str) -> Dict[str, Any]:
    """
    读取 YAML 文件并返回字典。

    :param file_path: YAML 配置文件路径
    :return: 解析后的字典，空文件返回 {}
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"配置文件不存在: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return data


@lru_cache(maxsize=1)
def get_config() -> Dict[str, Any]:
    """
    获取合并后的全局配置（只加载一次）。

    单元测试里修改了环境变量之后，需要调用 get_config.cache_clear() 重新加载。

    :return: 合并后的配置字典
    """
    config_dir = get_config_dir()
    config = _load_yaml_file(os.path.join(config_dir, "config.yaml"))

    env_from_env = os.getenv("UI_AUTOMATION_ENV")
    if env_from_env:
        config["env"] = env_from_env

    env_name = config.get("env")
    if env_name and env_name != "default":
        env_config_path = os.path.join(config_dir, f"config_{env_name}.yaml")
        if os.path.exists(env_config_path):
            config = _merge_dicts(config, _load_yaml_file(env_config_path))

    return config


def get_value(path: str, default: Any = None) -> Any:
    """
    按点号路径读取配置项，例如 get_value("pause.after_click", 2000)。

    :param path: 点号分隔的 key 路径
    :param default: 任意一级缺失时返回的默认值
    """
    node: Any = get_config()
    for key in path.split("."):
        if not isinstance(node, dict) or key not in node:
            return default
        node = node[key]
    return node


def _merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    递归合并两个字典，override 中的值覆盖 base 中的同名键。

    :param base: 基础配置字典
    :param override: 覆盖配置字典
    :return: 合并后的新字典（不修改入参）
    """
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _merge_dicts(result[key], value)
        else:
            result[key] = value
    return result
