"""si: 在终端里向 LLM 提问。"""

__version__ = "0.1.0"
