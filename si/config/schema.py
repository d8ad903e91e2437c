"""配置模式模块。

使用 Pydantic 定义 si 的配置结构，支持：
- 类型验证
- 环境变量加载
- 默认值
- 嵌套配置

配置文件（YAML，默认 ~/.config/si.yaml）：
    llm:
      openai:
        base_url: https://api.openai.com/v1
        api_key: sk-xxx
        model_name: gpt-4
        azure_deployment_name: my-deployment

环境变量格式：
- 顶层: SI_KEY=value
- 嵌套: SI_SECTION__KEY=value

示例：
    SI_LLM__OPENAI__API_KEY=sk-xxx
    SI_LLM__OPENAI__MODEL_NAME=gpt-4o
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from si.errors import SiError


class ConfigError(SiError):
    """配置缺失、无法解析或不合法。"""


class ConfigNotFoundError(ConfigError):
    """配置文件不存在。

    Attributes:
        path: 查找的配置文件路径
    """

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"configuration file not found: {path}")


class ProviderConfig(BaseModel):
    """OpenAI 兼容提供商配置。

    构造后不可修改，由单个提供商实例持有。

    Attributes:
        base_url: API 基础 URL（为空时使用 https://api.openai.com/v1；
            可直接填写以 /chat/completions 结尾的完整地址）
        api_key: API 密钥（OpenAI 或 Azure）
        model_name: 模型名称
        azure_deployment_name: Azure 部署名（非空即走 Azure 端点和 api-key 认证）
        timeout: 连接和每次读取的超时时间（秒）
    """
    model_config = ConfigDict(frozen=True, protected_namespaces=())

    base_url: str = ""
    api_key: str = ""
    model_name: str = "gpt-4"
    azure_deployment_name: str = ""
    timeout: float | None = 120.0


class LLMConfig(BaseModel):
    """LLM 提供商配置集合。目前只有 openai。"""
    openai: ProviderConfig = Field(default_factory=ProviderConfig)


class Config(BaseSettings):
    """si 根配置。

    支持从环境变量加载配置，前缀为 SI_。
    嵌套配置使用 __ 分隔，如 SI_LLM__OPENAI__API_KEY。
    配置文件中的值优先，环境变量补充文件中缺失的字段。

    Attributes:
        llm: LLM 提供商配置
    """
    model_config = SettingsConfigDict(
        env_prefix="SI_",  # 环境变量前缀
        env_nested_delimiter="__",  # 嵌套分隔符
    )

    llm: LLMConfig = Field(default_factory=LLMConfig)

    def ensure_valid(self) -> None:
        """校验配置。

        Raises:
            ConfigError: 未提供 API 密钥
        """
        if not self.llm.openai.api_key:
            raise ConfigError("OpenAI API key is required")
