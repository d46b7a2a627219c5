"""scltool - SCL 源码管理工具（依赖同步）"""

__version__ = "1.3.1"
