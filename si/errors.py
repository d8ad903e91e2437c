"""si 的根异常。"""


class SiError(Exception):
    """所有 si 异常的基类，CLI 据此决定报告方式和退出码。"""
