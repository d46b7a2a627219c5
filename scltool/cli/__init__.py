"""scl 命令行接口

CLI 按领域拆分为子模块，每个模块注册自己的命令到 main group。
环境变量和配置文件只在这里读取，核心模块接收组装好的参数。
配置文件在子命令校验完参数后才加载，参数错误时不做任何 I/O。
"""

import os

import click

from scltool import __version__
from scltool.core.config import DEFAULT_CONFIG_FILE, Config, init_config
from scltool.core.exceptions import ConfigError
from scltool.utils.logger import setup_logging

LOG_LEVEL_ENV = "SCL_LOG_LEVEL"


def load_config(ctx: click.Context) -> Config:
    """加载 --config 指定的配置文件，失败时输出错误并以 1 退出

    SCL_LOG_LEVEL 优先于配置文件中的 log_level。
    """
    path = ctx.find_root().params.get("config_path", DEFAULT_CONFIG_FILE)
    try:
        cfg = init_config(path)
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
    if LOG_LEVEL_ENV not in os.environ:
        setup_logging(cfg.log_level)
    return cfg


@click.group()
@click.version_option(version=__version__, prog_name="scl")
@click.option("--config", "-c", "config_path", default=DEFAULT_CONFIG_FILE,
              show_default=True, help="配置文件路径（不存在则使用默认配置）")
def main(config_path: str) -> None:
    """Scl is a tool for managing SCL source code."""
    setup_logging(os.getenv(LOG_LEVEL_ENV, "WARNING"))


# 注册各领域子命令
from scltool.cli.cmd_get import register as _reg_get  # noqa: E402
from scltool.cli.cmd_misc import register as _reg_misc  # noqa: E402

_reg_get(main)
_reg_misc(main)
