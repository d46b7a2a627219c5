"""VCS 适配器基础定义

职责：
- VcsKind 枚举
- 按远程地址 / 本地元数据目录识别 VCS 类型（纯函数，识别不了返回 UNKNOWN）
- VcsAdapter 公共接口：is_present_locally / fetch / update
"""

from __future__ import annotations

import logging
import re
import subprocess
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from urllib.parse import urlsplit

from scltool.core.exceptions import ExecutionError, VcsError
from scltool.utils.shell import CommandExecutor, CommandResult, get_executor, run_cmd

logger = logging.getLogger(__name__)


class VcsKind(str, Enum):
    """VCS 类型"""
    GIT = "git"
    HG = "hg"
    SVN = "svn"
    BZR = "bzr"
    UNKNOWN = "unknown"


# 检出目录中的元数据目录 → 类型
METADATA_DIRS: dict[VcsKind, str] = {
    VcsKind.GIT: ".git",
    VcsKind.HG: ".hg",
    VcsKind.SVN: ".svn",
    VcsKind.BZR: ".bzr",
}

# 知名托管站点（匹配 host + path 前缀）
_HOST_RULES: tuple[tuple[re.Pattern[str], VcsKind], ...] = (
    (re.compile(r"^git\.launchpad\.net(/|$)"), VcsKind.GIT),
    (re.compile(r"^launchpad\.net(/|$)"), VcsKind.BZR),
    (re.compile(r"^hub\.jazz\.net/git/"), VcsKind.GIT),
    (re.compile(
        r"^(github\.com|gitlab\.com|bitbucket\.org"
        r"|go\.googlesource\.com|git\.openstack\.org)(/|$)"
    ), VcsKind.GIT),
    (re.compile(r"^hg\."), VcsKind.HG),
    (re.compile(r"^svn\."), VcsKind.SVN),
)

_SCHEME_RULES: dict[str, VcsKind] = {
    "git": VcsKind.GIT,
    "git+ssh": VcsKind.GIT,
    "svn": VcsKind.SVN,
    "svn+ssh": VcsKind.SVN,
    "bzr": VcsKind.BZR,
    "bzr+ssh": VcsKind.BZR,
}

# 路径中带 .git / .hg / .svn / .bzr 后缀的元素
_SUFFIX_RE = re.compile(r"\.(git|hg|svn|bzr)(/|$)")

# scp 风格: git@host:org/repo
_SCP_RE = re.compile(r"^(?P<user>[\w.\-]+)@(?P<host>[\w.\-]+):(?P<path>.*)$")


def _split_remote(remote_url: str) -> tuple[str, str, str, str]:
    """拆出 (scheme, user, host, path)，非法地址抛 ValueError"""
    if "://" not in remote_url:
        scp = _SCP_RE.match(remote_url)
        if scp:
            return "ssh", scp.group("user"), scp.group("host").lower(), "/" + scp.group("path")
    parts = urlsplit(remote_url)
    return parts.scheme.lower(), parts.username or "", (parts.hostname or "").lower(), parts.path


def detect_kind(remote_url: str) -> VcsKind:
    """按远程地址识别 VCS 类型，识别不了返回 VcsKind.UNKNOWN"""
    try:
        scheme, user, host, path = _split_remote(remote_url)
    except ValueError:
        return VcsKind.UNKNOWN

    if scheme in _SCHEME_RULES:
        return _SCHEME_RULES[scheme]
    if scheme == "ssh" and user == "git":
        return VcsKind.GIT

    location = host + path
    for pattern, kind in _HOST_RULES:
        if pattern.search(location):
            return kind

    m = _SUFFIX_RE.search(path)
    if m:
        return VcsKind(m.group(1))
    return VcsKind.UNKNOWN


def detect_local_kind(local_path: str | Path) -> VcsKind:
    """按已有检出目录中的元数据目录识别 VCS 类型"""
    base = Path(local_path)
    for kind, meta in METADATA_DIRS.items():
        if (base / meta).exists():
            return kind
    return VcsKind.UNKNOWN


# =========================================================================
# 适配器接口
# =========================================================================


class VcsAdapter(ABC):
    """VCS 后端适配器公共接口

    同步引擎只依赖 is_present_locally / fetch / update 三个操作，
    具体命令由子类决定。
    """

    kind: VcsKind = VcsKind.UNKNOWN
    binary: str = ""

    def __init__(
        self,
        executor: CommandExecutor | None = None,
        timeout: int | None = None,
    ) -> None:
        self.executor = executor or get_executor()
        self.timeout = timeout

    def is_present_locally(self, local_path: str | Path) -> bool:
        """local_path 下已有该类型的检出"""
        return (Path(local_path) / METADATA_DIRS[self.kind]).exists()

    @abstractmethod
    def fetch(self, remote_url: str, local_path: str | Path) -> None:
        """首次 clone/checkout，失败抛 FetchError"""

    @abstractmethod
    def update(self, local_path: str | Path) -> None:
        """对已有检出执行 pull/update，失败抛 UpdateError"""

    def _run(
        self,
        args: list[str],
        *,
        cwd: str | Path,
        error_cls: type[VcsError],
    ) -> CommandResult:
        """执行后端命令，把执行失败转换为对应的 VcsError"""
        cmd = [self.binary, *args]
        try:
            return run_cmd(
                cmd, cwd=str(cwd), executor=self.executor,
                timeout=self.timeout, label=f"{self.binary} {args[0]}",
            )
        except ExecutionError as e:
            raise error_cls(str(e)) from e
        except subprocess.SubprocessError as e:
            raise error_cls(f"{self.binary} {args[0]}: {e}") from e

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value})"
