"""依赖同步引擎

职责:
- 按输入顺序逐个处理依赖（严格串行）
- 本地不存在 → fetch；已存在 → 跳过，或在 update 模式下 pull
- 单个依赖失败只记录为 failed，不中断后续依赖
- 目录前置条件失败对整批致命
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from scltool.core.dep.models import Descriptor, SyncOutcome, SyncResult, SyncStatus
from scltool.core.exceptions import (
    DirectoryPreconditionError,
    UnrecognizedRemoteError,
    VcsError,
)

if TYPE_CHECKING:
    from scltool.services.vcs.base import VcsAdapter
    from scltool.services.vcs.registry import AdapterFactory

logger = logging.getLogger(__name__)


class SyncEngine:
    """依赖同步引擎 - 创建或更新 vendor 目录下的检出"""

    def __init__(self, factory: AdapterFactory | None = None) -> None:
        if factory is None:
            from scltool.services.vcs.registry import AdapterFactory
            factory = AdapterFactory()
        self.factory = factory

    def sync(
        self,
        descriptors: list[Descriptor] | tuple[Descriptor, ...],
        *,
        vendor_root: str | Path | None = None,
        update: bool = False,
    ) -> SyncResult:
        """同步全部依赖，返回按输入顺序排列的结果汇总。

        Raises:
            DirectoryPreconditionError: vendor 根目录或某个依赖目录无法创建，
                异常中携带此前已完成的结果
        """
        if vendor_root is not None:
            _ensure_dir(Path(vendor_root), completed=())

        outcomes: list[SyncOutcome] = []
        seen: dict[Path, str] = {}
        for d in descriptors:
            owner = seen.get(d.local_path)
            if owner is not None:
                logger.info("本地路径重复，跳过: %s (已由 %s 使用)", d.local_path, owner)
                outcomes.append(SyncOutcome(
                    d, SyncStatus.FAILED,
                    f"Duplicate dependency: {d.local_path} already used by {owner}",
                ))
                continue
            seen[d.local_path] = d.token

            _ensure_dir(d.local_path, completed=tuple(outcomes))
            outcomes.append(self.sync_one(d, update=update))

        result = SyncResult.from_outcomes(outcomes)
        logger.info(
            "同步汇总: %d 新建, %d 更新, %d 跳过, %d 失败",
            result.created, result.updated, result.skipped, result.failed,
        )
        return result

    def sync_one(self, descriptor: Descriptor, *, update: bool = False) -> SyncOutcome:
        """处理单个依赖，VCS 错误在此转换为 failed 结果"""
        d = descriptor
        try:
            adapter = self.factory.create(d.remote_url, d.local_path)
        except UnrecognizedRemoteError as e:
            logger.info("[%s] 无法识别 VCS 类型: %s", d.token, e)
            return SyncOutcome(d, SyncStatus.FAILED, f"Can't create repo: {e}")

        if adapter.is_present_locally(d.local_path):
            if not update:
                logger.info("[%s] 本地已存在，跳过: %s", d.token, d.local_path)
                return SyncOutcome(d, SyncStatus.SKIPPED, "already present")
            return self._update(adapter, d)
        return self._fetch(adapter, d)

    @staticmethod
    def _fetch(adapter: VcsAdapter, d: Descriptor) -> SyncOutcome:
        logger.info("[%s] 本地不存在，拉取: %s (%s)", d.token, d.remote_url, adapter.kind.value)
        try:
            adapter.fetch(d.remote_url, d.local_path)
        except VcsError as e:
            logger.info("[%s] 拉取失败: %s", d.token, e)
            return SyncOutcome(d, SyncStatus.FAILED, f"Can't fetch repo: {e}")
        return SyncOutcome(d, SyncStatus.CREATED, f"fetched from {d.remote_url}")

    @staticmethod
    def _update(adapter: VcsAdapter, d: Descriptor) -> SyncOutcome:
        logger.info("[%s] 本地已存在，更新: %s", d.token, d.local_path)
        try:
            adapter.update(d.local_path)
        except VcsError as e:
            logger.info("[%s] 更新失败: %s", d.token, e)
            return SyncOutcome(d, SyncStatus.FAILED, f"Can't update repo: {e}")
        return SyncOutcome(d, SyncStatus.UPDATED, f"updated {d.local_path}")


def _ensure_dir(path: Path, *, completed: tuple[SyncOutcome, ...]) -> None:
    """创建目录（已存在则无操作），失败抛 DirectoryPreconditionError"""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.info("目录创建失败: %s: %s", path, e)
        raise DirectoryPreconditionError(str(path), str(e), completed=completed) from e
