"""si 通用辅助函数。"""

import sys

from loguru import logger


def configure_logging(debug: bool = False) -> None:
    """配置 loguru 日志输出。

    移除默认处理器，日志统一写到 stderr，避免混入回答内容（stdout）。

    Args:
        debug: 为 True 时输出 DEBUG 级别，否则只输出 WARNING 及以上
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if debug else "WARNING",
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name} - {message}",
    )


def read_piped_stdin() -> str:
    """读取管道输入。

    stdin 是终端时不读取（否则会阻塞等待用户输入）。

    Returns:
        管道中的全部文本，无管道输入时返回空字符串
    """
    if sys.stdin is None or sys.stdin.isatty():
        return ""
    return sys.stdin.read()
