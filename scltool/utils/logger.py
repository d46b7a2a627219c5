"""scl 日志配置

日志统一输出到 stderr。面向用户的结果行由 OutcomeReporter 输出，
日志只承载诊断信息：默认 WARNING 级别、简短格式，DEBUG 时附带时间和模块名。
"""

from __future__ import annotations

import logging
import sys

SHORT_FORMAT = "scl: %(levelname)s: %(message)s"
DEBUG_FORMAT = "%(asctime)s [%(levelname)-7s] %(name)s: %(message)s"


def setup_logging(level: str = "WARNING") -> None:
    """配置根日志器

    参数:
        level: 日志级别字符串（DEBUG, INFO, WARNING, ERROR, CRITICAL），
            无法识别时回退到 WARNING

    说明:
        - 输出到 stderr
        - 自动清理已有 handlers，避免重复输出
        - 只有 scltool 自身的日志按该级别输出，第三方库保持 WARNING
    """
    reset_logging()

    resolved = getattr(logging, str(level).upper(), None)
    if not isinstance(resolved, int):
        resolved = logging.WARNING

    handler = logging.StreamHandler(sys.stderr)
    fmt = DEBUG_FORMAT if resolved <= logging.DEBUG else SHORT_FORMAT
    handler.setFormatter(logging.Formatter(fmt))

    root = logging.getLogger()
    root.setLevel(logging.WARNING)
    root.addHandler(handler)
    logging.getLogger("scltool").setLevel(resolved)


def reset_logging() -> None:
    """清理根日志器上已注册的 handlers，并恢复 scltool 日志级别"""
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    logging.getLogger("scltool").setLevel(logging.NOTSET)
