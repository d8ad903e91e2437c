"""配置加载模块。

从 YAML 文件读取配置，再交给 Config（BaseSettings）合并环境变量。
"""

from pathlib import Path

import yaml
from loguru import logger
from pydantic import ValidationError

from si.config.schema import Config, ConfigError, ConfigNotFoundError


def get_config_path() -> Path:
    """默认配置文件路径：~/.config/si.yaml。"""
    return Path.home() / ".config" / "si.yaml"


def load_config(path: Path | str | None = None) -> Config:
    """加载配置。

    流程：
    1. 未指定路径时使用 ~/.config/si.yaml
    2. 读取并解析 YAML（空文件视为空配置）
    3. 构建 Config，环境变量补充文件中缺失的字段

    不在这里校验 API 密钥，调用方需自行调用 Config.ensure_valid()。

    Args:
        path: 配置文件路径（可选）

    Returns:
        Config 对象

    Raises:
        ConfigNotFoundError: 文件不存在
        ConfigError: 文件无法读取、YAML 非法或字段类型不符
    """
    path = Path(path).expanduser() if path else get_config_path()
    if not path.exists():
        raise ConfigNotFoundError(path)

    logger.debug(f"Loading config from {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except OSError as e:
        raise ConfigError(f"failed to read config file: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"failed to parse config file: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"failed to parse config file: expected a mapping, got {type(data).__name__}")

    try:
        return Config(**data)
    except ValidationError as e:
        raise ConfigError(f"failed to parse config file: {e}") from e


EXAMPLE_CONFIG = """\
llm:
  openai:
    # Base URL for the OpenAI API. You can specify:
    # - Full endpoint URL: https://api.openai.com/v1/chat/completions
    # - Base API URL: https://api.openai.com/v1
    # - For Azure, use your Azure OpenAI resource endpoint
    base_url: https://api.openai.com/v1
    # Your OpenAI API key or Azure API key
    api_key: your-api-key
    # Model name to use (default: gpt-4)
    model_name: gpt-4
    # For Azure OpenAI, specify your deployment name
    azure_deployment_name: optional-azure-deployment-name
"""
