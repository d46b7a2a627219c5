"""同步结果输出

verbose 时逐项输出成功/跳过信息，并在末尾输出一行汇总；
失败信息始终写到错误流。退出码由 CLI 层决定。
"""

from __future__ import annotations

from typing import IO

import click

from scltool.core.dep.models import SyncOutcome, SyncResult, SyncStatus

_SUCCESS_MESSAGES: dict[SyncStatus, str] = {
    SyncStatus.CREATED: "{token} fetched successfully.",
    SyncStatus.UPDATED: "{token} updated successfully",
    SyncStatus.SKIPPED: "{token} already present, run with -u to update",
}


def format_outcome(outcome: SyncOutcome) -> str:
    """单个结果对应的输出行"""
    if outcome.status is SyncStatus.FAILED:
        return f"[{outcome.token}] {outcome.detail}"
    return _SUCCESS_MESSAGES[outcome.status].format(token=outcome.token)


def format_summary(result: SyncResult) -> str:
    return (
        f"Done. {result.created} dependencie(s) created, "
        f"{result.updated} dependencie(s) updated."
    )


class OutcomeReporter:
    """把 SyncResult 渲染到信息流和错误流"""

    def __init__(
        self,
        verbose: bool = False,
        out: IO[str] | None = None,
        err: IO[str] | None = None,
    ) -> None:
        self.verbose = verbose
        self._out = out
        self._err = err

    def report_outcome(self, outcome: SyncOutcome) -> None:
        if outcome.status is SyncStatus.FAILED:
            self._echo_err(format_outcome(outcome))
        elif self.verbose:
            click.echo(format_outcome(outcome), file=self._out)

    def report(self, result: SyncResult) -> None:
        """逐项输出并附带汇总行"""
        for outcome in result.outcomes:
            self.report_outcome(outcome)
        if self.verbose:
            click.echo(file=self._out)
            click.echo(format_summary(result), file=self._out)

    def report_fatal(self, message: str) -> None:
        """参数或前置条件错误"""
        self._echo_err(message)

    def _echo_err(self, message: str) -> None:
        if self._err is None:
            click.echo(message, err=True)
        else:
            click.echo(message, file=self._err)
