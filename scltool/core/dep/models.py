"""依赖同步数据模型

数据类:
- Descriptor: 依赖描述（token → 远程地址 + 本地路径）
- SyncStatus: 单个依赖的终态
- SyncOutcome: 单个依赖的同步结果
- SyncResult: 整批结果汇总
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


@dataclass(frozen=True)
class Descriptor:
    """单个依赖的解析结果，创建后不再修改"""

    token: str
    remote_url: str
    local_path: Path


class SyncStatus(str, Enum):
    """依赖同步终态"""
    CREATED = "created"
    UPDATED = "updated"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class SyncOutcome:
    """单个依赖的同步结果"""

    descriptor: Descriptor
    status: SyncStatus
    detail: str = ""

    @property
    def token(self) -> str:
        return self.descriptor.token


@dataclass(frozen=True)
class SyncResult:
    """整批依赖同步结果汇总（按输入顺序保存每个结果）"""

    outcomes: tuple[SyncOutcome, ...] = ()
    created: int = 0
    updated: int = 0
    skipped: int = 0
    failed: int = 0

    @classmethod
    def from_outcomes(cls, outcomes: list[SyncOutcome] | tuple[SyncOutcome, ...]) -> SyncResult:
        """从 SyncOutcome 列表构建 SyncResult，自动统计状态"""
        outcomes = tuple(outcomes)
        return cls(
            outcomes=outcomes,
            created=sum(1 for o in outcomes if o.status is SyncStatus.CREATED),
            updated=sum(1 for o in outcomes if o.status is SyncStatus.UPDATED),
            skipped=sum(1 for o in outcomes if o.status is SyncStatus.SKIPPED),
            failed=sum(1 for o in outcomes if o.status is SyncStatus.FAILED),
        )

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def success(self) -> bool:
        return self.failed == 0
