"""VCS 后端适配器 - 支持 Git / Mercurial / Subversion / Bazaar

职责：
- 首次获取（clone / checkout / branch）
- 已有检出的更新（pull / update）
"""

from __future__ import annotations

import logging
from pathlib import Path

from scltool.core.exceptions import FetchError, UpdateError
from scltool.services.vcs.base import VcsAdapter, VcsKind

logger = logging.getLogger(__name__)


class GitAdapter(VcsAdapter):
    """Git 仓库"""

    kind = VcsKind.GIT
    binary = "git"

    def fetch(self, remote_url: str, local_path: str | Path) -> None:
        path = Path(local_path)
        self._run(
            ["clone", "--recursive", remote_url, str(path)],
            cwd=path.parent, error_cls=FetchError,
        )
        logger.info("Git clone 完成: %s -> %s", remote_url, path)

    def update(self, local_path: str | Path) -> None:
        self._run(["pull"], cwd=local_path, error_cls=UpdateError)
        self._run(
            ["submodule", "update", "--init", "--recursive"],
            cwd=local_path, error_cls=UpdateError,
        )
        logger.info("Git pull 完成: %s", local_path)


class HgAdapter(VcsAdapter):
    """Mercurial 仓库"""

    kind = VcsKind.HG
    binary = "hg"

    def fetch(self, remote_url: str, local_path: str | Path) -> None:
        path = Path(local_path)
        self._run(
            ["clone", remote_url, str(path)],
            cwd=path.parent, error_cls=FetchError,
        )
        logger.info("Hg clone 完成: %s -> %s", remote_url, path)

    def update(self, local_path: str | Path) -> None:
        self._run(["pull"], cwd=local_path, error_cls=UpdateError)
        self._run(["update"], cwd=local_path, error_cls=UpdateError)
        logger.info("Hg update 完成: %s", local_path)


class SvnAdapter(VcsAdapter):
    """Subversion 仓库"""

    kind = VcsKind.SVN
    binary = "svn"

    def fetch(self, remote_url: str, local_path: str | Path) -> None:
        path = Path(local_path)
        self._run(
            ["checkout", remote_url, str(path)],
            cwd=path.parent, error_cls=FetchError,
        )
        logger.info("Svn checkout 完成: %s -> %s", remote_url, path)

    def update(self, local_path: str | Path) -> None:
        self._run(["update"], cwd=local_path, error_cls=UpdateError)
        logger.info("Svn update 完成: %s", local_path)


class BzrAdapter(VcsAdapter):
    """Bazaar 分支"""

    kind = VcsKind.BZR
    binary = "bzr"

    def fetch(self, remote_url: str, local_path: str | Path) -> None:
        path = Path(local_path)
        # 引擎已预先创建目标目录，bzr 默认拒绝已存在的目录
        self._run(
            ["branch", "--use-existing-dir", remote_url, str(path)],
            cwd=path.parent, error_cls=FetchError,
        )
        logger.info("Bzr branch 完成: %s -> %s", remote_url, path)

    def update(self, local_path: str | Path) -> None:
        self._run(["pull"], cwd=local_path, error_cls=UpdateError)
        logger.info("Bzr pull 完成: %s", local_path)
