"""依赖描述解析器

职责:
- 把调用方给出的 token 解析为远程地址和本地路径
- 纯函数，不访问文件系统
"""

from __future__ import annotations

import os
from pathlib import Path

from scltool.core.dep.models import Descriptor
from scltool.core.exceptions import ValidationError

REMOTE_SCHEME = "https://"


def remote_url(token: str) -> str:
    """为 token 加上 https:// 前缀；已带前缀时不重复添加"""
    return REMOTE_SCHEME + token.removeprefix(REMOTE_SCHEME)


def resolve(token: str, vendor_root: str | Path) -> Descriptor:
    """解析单个依赖。

    vendor_root 必须已是绝对路径，相对路径的展开由 CLI 层负责。
    token 不做路径穿越或协议校验：以 "/" 拼接到 vendor_root 后再规范化，
    因此以 "/" 开头的 token 仍落在 vendor_root 下。
    """
    if not os.path.isabs(vendor_root):
        raise ValidationError(f"vendor 根目录必须是绝对路径: {vendor_root}")
    return Descriptor(
        token=token,
        remote_url=remote_url(token),
        local_path=Path(os.path.normpath(f"{vendor_root}/{token}")),
    )


def resolve_all(tokens: list[str] | tuple[str, ...], vendor_root: str | Path) -> list[Descriptor]:
    """按输入顺序解析全部依赖"""
    return [resolve(t, vendor_root) for t in tokens]
