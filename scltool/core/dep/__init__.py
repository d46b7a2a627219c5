"""依赖同步模块

拆分说明:
- models.py: 数据模型（Descriptor / SyncOutcome / SyncResult）
- resolver.py: token → 远程地址 + 本地路径
- syncer.py: 逐个创建或更新依赖的同步引擎
"""

from scltool.core.dep.models import Descriptor, SyncOutcome, SyncResult, SyncStatus
from scltool.core.dep.resolver import resolve, resolve_all
from scltool.core.dep.syncer import SyncEngine

__all__ = [
    "Descriptor",
    "SyncOutcome",
    "SyncResult",
    "SyncStatus",
    "SyncEngine",
    "resolve",
    "resolve_all",
]
