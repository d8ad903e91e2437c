"""配置模块。"""

from si.config.loader import EXAMPLE_CONFIG, get_config_path, load_config
from si.config.schema import Config, ConfigError, ConfigNotFoundError, LLMConfig, ProviderConfig

__all__ = [
    "Config",
    "LLMConfig",
    "ProviderConfig",
    "ConfigError",
    "ConfigNotFoundError",
    "EXAMPLE_CONFIG",
    "get_config_path",
    "load_config",
]
