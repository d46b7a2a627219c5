"""CLI：依赖获取命令"""

from __future__ import annotations

import os

import click
from click.core import ParameterSource

from scltool.cli import load_config
from scltool.core.config import SyncOptions
from scltool.core.dep import SyncEngine, SyncResult, resolve_all
from scltool.core.exceptions import DirectoryPreconditionError
from scltool.core.reporter import OutcomeReporter


def register(group: click.Group) -> None:
    group.add_command(get)


def exit_code(result: SyncResult, strict: bool) -> int:
    """单项失败默认不影响退出码，strict 模式下任一失败即返回 1"""
    return 1 if strict and result.failed else 0


def run_get(
    tokens: tuple[str, ...] | list[str],
    options: SyncOptions,
    *,
    engine: SyncEngine,
    reporter: OutcomeReporter,
) -> int:
    """解析 → 同步 → 输出，返回进程退出码"""
    descriptors = resolve_all(tokens, options.vendor_root)
    try:
        result = engine.sync(
            descriptors, vendor_root=options.vendor_root, update=options.update,
        )
    except DirectoryPreconditionError as e:
        for outcome in e.completed:
            reporter.report_outcome(outcome)
        reporter.report_fatal(str(e))
        return 1
    reporter.report(result)
    return exit_code(result, options.strict)


@click.command(name="get")
@click.argument("tokens", nargs=-1, metavar="<url...>")
@click.option("--output-path", "-o", default=None,
              help='依赖存放的根目录，默认取配置 vendor_dir（"vendor"）')
@click.option("--update", "-u", is_flag=True, help="把已存在的仓库更新到最新版本")
@click.option("--verbose", "-v", is_flag=True, help="输出每个仓库的获取/更新情况")
@click.option("--strict/--no-strict", default=False,
              help="任一依赖失败时以退出码 1 结束（默认取配置 strict）")
@click.pass_context
def get(
    ctx: click.Context, tokens: tuple[str, ...], output_path: str | None,
    update: bool, verbose: bool, strict: bool,
) -> None:
    """从版本控制系统下载依赖（不存在则 clone，已存在可 -u 更新）"""
    if not tokens:
        OutcomeReporter().report_fatal(
            "At least one dependency is required. See `scl help get` for syntax",
        )
        ctx.exit(1)

    cfg = load_config(ctx)

    try:
        vendor_root = os.path.abspath(output_path or cfg.vendor_dir)
    except OSError as e:
        OutcomeReporter().report_fatal(f"Can't get path: {e}")
        ctx.exit(1)

    if ctx.get_parameter_source("strict") is ParameterSource.DEFAULT:
        strict = cfg.strict

    options = SyncOptions(
        vendor_root=vendor_root,
        update=update,
        verbose=verbose,
        strict=strict,
    )
    reporter = OutcomeReporter(verbose=options.verbose)

    from scltool.services.vcs import AdapterFactory, VcsKind
    factory = AdapterFactory(
        timeout=cfg.command_timeout,
        default_kind=VcsKind(cfg.default_vcs) if cfg.default_vcs else None,
    )
    engine = SyncEngine(factory)
    ctx.exit(run_get(tokens, options, engine=engine, reporter=reporter))
