"""Correlating App 生命週期管理

Apps 層的 DI 配置，組合 libs 的能力
"""

import logging

from injector import Injector

from libs.correlating.src.config.correlating_config import CorrelatingConfig
from libs.correlating.src.lifespan import (
    startup as startup_lib,
    shutdown as shutdown_lib,
)


_injector: Injector | None = None


def startup(config: CorrelatingConfig | None = None) -> Injector:
    """啟動 DI 容器"""
    global _injector
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    # lib 的 injector 已綁定所有依賴
    _injector = startup_lib(config)
    return _injector


def shutdown() -> None:
    """關閉 DI 容器"""
    global _injector
    shutdown_lib()
    _injector = None


def get_injector() -> Injector:
    """取得 DI 容器，若未初始化則自動啟動"""
    global _injector
    if _injector is None:
        startup()
    return _injector
