"""structlog ベースのロガー設定"""

from __future__ import annotations

import logging
import sys

import structlog

from .config import LogSection


def new_logger(
    config: LogSection | None = None, name: str = "k1s0_envflag"
) -> structlog.stdlib.BoundLogger:
    """フラグ評価ログ用に structlog を設定し、ロガーを返す。

    Args:
        config: ログ設定。省略時は INFO / json
        name: ログに付与するロガー名

    Returns:
        logger=<name> をバインドした structlog.stdlib.BoundLogger
    """
    config = config or LogSection()
    log_level = getattr(logging, config.level.upper(), logging.INFO)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )
    # ルートロガーが設定済みでもレベルを反映させる
    logging.getLogger(name).setLevel(log_level)

    renderer: structlog.types.Processor
    if config.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    return structlog.stdlib.get_logger(name).bind(logger=name)
