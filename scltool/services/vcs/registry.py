"""VCS 适配器工厂 - 按类型注册，按地址/本地目录选择

选择顺序：本地已有检出的元数据目录 → 远程地址识别 → http(s) 远程的默认类型。
"""

from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import urlsplit

from scltool.core.exceptions import UnrecognizedRemoteError
from scltool.services.vcs.base import VcsAdapter, VcsKind, detect_kind, detect_local_kind
from scltool.services.vcs.sources import BzrAdapter, GitAdapter, HgAdapter, SvnAdapter
from scltool.utils.shell import CommandExecutor

logger = logging.getLogger(__name__)

_DEFAULT_ADAPTERS: dict[VcsKind, type[VcsAdapter]] = {
    VcsKind.GIT: GitAdapter,
    VcsKind.HG: HgAdapter,
    VcsKind.SVN: SvnAdapter,
    VcsKind.BZR: BzrAdapter,
}

_FALLBACK_SCHEMES = frozenset(("http", "https"))


class AdapterFactory:
    """VCS 适配器工厂

    default_kind 为 None 时，识别不了的远程直接报错；
    否则 http(s) 远程按 default_kind 处理（其他协议仍然报错）。
    """

    def __init__(
        self,
        executor: CommandExecutor | None = None,
        timeout: int | None = None,
        default_kind: VcsKind | None = None,
    ) -> None:
        if default_kind is VcsKind.UNKNOWN:
            raise ValueError("default_kind 不能为 UNKNOWN")
        self.executor = executor
        self.timeout = timeout
        self.default_kind = default_kind
        self._adapters: dict[VcsKind, type[VcsAdapter]] = dict(_DEFAULT_ADAPTERS)

    def register(self, kind: VcsKind, adapter_cls: type[VcsAdapter]) -> None:
        """注册或替换某种 VCS 类型的适配器"""
        if kind is VcsKind.UNKNOWN:
            raise ValueError("不能为 UNKNOWN 注册适配器")
        self._adapters[kind] = adapter_cls

    def create(self, remote_url: str, local_path: str | Path) -> VcsAdapter:
        """为 (remote_url, local_path) 选择适配器

        Raises:
            UnrecognizedRemoteError: 无法确定 VCS 类型且没有可用的默认类型
        """
        kind = detect_local_kind(local_path)
        if kind is not VcsKind.UNKNOWN:
            logger.debug("按本地检出识别: %s -> %s", local_path, kind.value)
        else:
            kind = detect_kind(remote_url)
        if kind is VcsKind.UNKNOWN:
            kind = self._fallback(remote_url)

        adapter_cls = self._adapters.get(kind)
        if adapter_cls is None:
            raise UnrecognizedRemoteError(f"Can't detect VCS type for {remote_url}")
        return adapter_cls(executor=self.executor, timeout=self.timeout)

    def _fallback(self, remote_url: str) -> VcsKind:
        if self.default_kind is None:
            return VcsKind.UNKNOWN
        try:
            scheme = urlsplit(remote_url).scheme.lower()
        except ValueError:
            return VcsKind.UNKNOWN
        if scheme not in _FALLBACK_SCHEMES:
            return VcsKind.UNKNOWN
        logger.debug("无法识别远程类型，按默认 %s 处理: %s", self.default_kind.value, remote_url)
        return self.default_kind
