"""Shell 命令执行工具：统一子进程调用

通过 CommandExecutor 协议抽象子进程执行，VCS 适配器只依赖该协议，
测试时注入假执行器即可，无需 patch subprocess。
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from dataclasses import dataclass
from typing import Protocol

from scltool.core.exceptions import ExecutionError

logger = logging.getLogger(__name__)


# =========================================================================
# 命令执行结果
# =========================================================================

@dataclass
class CommandResult:
    """命令执行结果（与 subprocess 解耦）"""

    returncode: int
    stdout: str
    stderr: str

    @property
    def success(self) -> bool:
        return self.returncode == 0


# =========================================================================
# 命令执行器协议
# =========================================================================

class CommandExecutor(Protocol):
    """命令执行器协议：抽象子进程调用

    找不到可执行文件时抛 OSError，超时抛 subprocess.TimeoutExpired。
    """

    def execute(
        self,
        cmd: str | list[str],
        *,
        cwd: str = ".",
        env: dict[str, str] | None = None,
        timeout: int | None = None,
    ) -> CommandResult:
        """执行命令并返回结果"""
        ...


# =========================================================================
# 默认实现: 本地执行器
# =========================================================================

class LocalExecutor:
    """本地命令执行器（默认实现）"""

    def execute(
        self,
        cmd: str | list[str],
        *,
        cwd: str = ".",
        env: dict[str, str] | None = None,
        timeout: int | None = None,
    ) -> CommandResult:
        args = shlex.split(cmd) if isinstance(cmd, str) else cmd
        logger.debug("exec: %s (cwd=%s)", " ".join(args), cwd)
        r = subprocess.run(
            args, capture_output=True, text=True,
            cwd=cwd, env=env, check=False, timeout=timeout,
        )
        return CommandResult(
            returncode=r.returncode,
            stdout=r.stdout,
            stderr=r.stderr,
        )


# =========================================================================
# 全局默认执行器（可替换）
# =========================================================================

_default_executor: CommandExecutor = LocalExecutor()


def get_executor() -> CommandExecutor:
    """获取全局默认命令执行器"""
    return _default_executor


def set_executor(executor: CommandExecutor) -> None:
    """替换全局默认命令执行器（用于测试）"""
    global _default_executor  # noqa: PLW0603
    _default_executor = executor


def run_cmd(
    cmd: list[str], *, cwd: str = ".",
    executor: CommandExecutor | None = None,
    timeout: int | None = None,
    label: str = "cmd",
) -> CommandResult:
    """执行命令，失败抛 ExecutionError

    Args:
        cmd: 命令参数列表
        cwd: 工作目录
        executor: 命令执行器（不传则用全局默认）
        timeout: 超时秒数，None 表示不限
        label: 日志与错误信息中的标签
    """
    executor = executor or get_executor()
    logger.info("  %s: %s (cwd=%s)", label, " ".join(cmd), cwd)
    try:
        r = executor.execute(cmd, cwd=cwd, timeout=timeout)
    except subprocess.TimeoutExpired as e:
        raise ExecutionError(f"{label}超时 ({e.timeout}s)") from e
    except OSError as e:
        raise ExecutionError(f"{label}无法启动: {e}") from e
    if not r.success:
        detail = (r.stderr or r.stdout).strip()[:500]
        raise ExecutionError(f"{label}失败 (rc={r.returncode}): {detail}")
    return r
