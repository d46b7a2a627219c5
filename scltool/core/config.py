"""集中配置管理

提供统一的配置入口：从 YAML 文件加载 + 命令行覆盖。
环境变量只在 CLI 边界读取，核心模块只接收组装好的 SyncOptions。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from scltool.core.exceptions import ConfigError
from scltool.utils.yaml_io import load_yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "scl.yml"
DEFAULT_VENDOR_DIR = "vendor"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VCS_NAMES = ("git", "hg", "svn", "bzr")


@dataclass
class Config:
    """工具全局配置"""

    # 目录
    vendor_dir: str = DEFAULT_VENDOR_DIR

    # 执行
    strict: bool = False
    command_timeout: int | None = None  # 秒，None 表示一直阻塞到 VCS 命令结束
    default_vcs: str = "git"  # 无法识别的 http(s) 远程按此类型处理，"" 表示不回退

    # 日志
    log_level: str = "WARNING"

    # 自定义扩展 (放不到字段里的配置项)
    extra: dict = field(default_factory=dict)

    @classmethod
    def from_file(cls, path: str = DEFAULT_CONFIG_FILE) -> Config:
        """从 YAML 文件加载配置，不存在则返回默认"""
        data = load_yaml(path)
        if not data:
            return cls()
        known = {f.name for f in cls.__dataclass_fields__.values()} - {"extra"}
        matched = {k: v for k, v in data.items() if k in known}
        extra = {k: v for k, v in data.items() if k not in known}
        cfg = cls(**matched)
        cfg.extra = extra
        cfg.validate()
        return cfg

    def validate(self) -> None:
        """校验字段类型，YAML 中的 "no" / 10 之类的值不做隐式转换"""
        if not isinstance(self.vendor_dir, str) or not self.vendor_dir:
            raise ConfigError(f"vendor_dir 必须为非空字符串: {self.vendor_dir!r}")
        if not isinstance(self.strict, bool):
            raise ConfigError(f"strict 必须为 true/false: {self.strict!r}")
        if self.command_timeout is not None and (
            isinstance(self.command_timeout, bool)
            or not isinstance(self.command_timeout, int)
            or self.command_timeout <= 0
        ):
            raise ConfigError(f"command_timeout 必须为正整数: {self.command_timeout!r}")
        if self.default_vcs not in ("", *VCS_NAMES):
            raise ConfigError(
                f"default_vcs 必须是 {', '.join(VCS_NAMES)} 之一或空字符串: {self.default_vcs!r}"
            )
        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            raise ConfigError(
                f"log_level 必须是 {', '.join(LOG_LEVELS)} 之一: {self.log_level!r}"
            )


@dataclass(frozen=True)
class SyncOptions:
    """单次 get 调用的参数，在 CLI 边界一次性组装后按值传入核心"""

    vendor_root: str
    update: bool = False
    verbose: bool = False
    strict: bool = False


# 全局单例，首次 import 时不加载文件；由 CLI 命令按需初始化
_current: Config | None = None


def get_config() -> Config:
    """获取当前配置（未初始化则返回默认值）"""
    global _current  # noqa: PLW0603
    if _current is None:
        _current = Config()
    return _current


def init_config(path: str = DEFAULT_CONFIG_FILE) -> Config:
    """从文件初始化全局配置"""
    global _current  # noqa: PLW0603
    _current = Config.from_file(path)
    logger.info("配置已加载: %s", path)
    return _current


def reset_config() -> None:
    """恢复到未初始化状态（测试用）"""
    global _current  # noqa: PLW0603
    _current = None
