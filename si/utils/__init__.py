"""工具函数模块。"""

from si.utils.helpers import configure_logging, read_piped_stdin

__all__ = ["configure_logging", "read_piped_stdin"]
