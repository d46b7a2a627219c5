"""VCS 适配器模块

拆分说明：
- base.py: VcsKind、类型识别、VcsAdapter 接口
- sources.py: Git / Hg / Svn / Bzr 具体适配器
- registry.py: 适配器工厂
"""

from scltool.services.vcs.base import VcsAdapter, VcsKind, detect_kind, detect_local_kind
from scltool.services.vcs.registry import AdapterFactory
from scltool.services.vcs.sources import BzrAdapter, GitAdapter, HgAdapter, SvnAdapter

__all__ = [
    "VcsAdapter",
    "VcsKind",
    "detect_kind",
    "detect_local_kind",
    "AdapterFactory",
    "GitAdapter",
    "HgAdapter",
    "SvnAdapter",
    "BzrAdapter",
]
