"""统一异常体系

所有业务异常继承 SclToolError，替代散落的 ValueError / RuntimeError。
CLI 层据此区分致命错误（前置条件）与单项失败（VCS 后端）。
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from scltool.core.dep.models import SyncOutcome


class SclToolError(Exception):
    """工具基础异常"""

    code: str = "UNKNOWN"

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ConfigError(SclToolError):
    """配置文件缺失或内容无效"""

    code = "CONFIG_ERROR"


class ValidationError(SclToolError):
    """输入数据校验失败"""

    code = "VALIDATION_ERROR"


class ExecutionError(SclToolError):
    """外部命令执行失败"""

    code = "EXECUTION_ERROR"


# =========================================================================
# 前置条件错误：对整批依赖致命
# =========================================================================


class PreconditionError(SclToolError):
    """整批共享的前置条件不满足，立即中止"""

    code = "PRECONDITION_ERROR"


class DirectoryPreconditionError(PreconditionError):
    """vendor 根目录或依赖子目录无法创建

    completed 保存中止前已经完成的依赖结果，供 CLI 先行输出。
    """

    code = "DIRECTORY_ERROR"

    def __init__(
        self,
        path: str,
        reason: str,
        completed: tuple[SyncOutcome, ...] = (),
    ) -> None:
        super().__init__(f"Can't create path {path}: {reason}")
        self.path = path
        self.reason = reason
        self.completed = completed


# =========================================================================
# VCS 错误：单个依赖失败，不影响后续依赖
# =========================================================================


class VcsError(SclToolError):
    """VCS 后端操作失败"""

    code = "VCS_ERROR"


class UnrecognizedRemoteError(VcsError):
    """没有任何后端能识别该远程地址"""

    code = "UNRECOGNIZED_REMOTE"


class FetchError(VcsError):
    """初次 clone/checkout 失败（网络、认证或工具错误）"""

    code = "FETCH_ERROR"


class UpdateError(VcsError):
    """对已有检出执行 pull/update 失败"""

    code = "UPDATE_ERROR"
