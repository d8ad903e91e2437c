"""端点解析模块。

根据 base_url 和可选的 Azure 部署名推导请求 URL 与认证头：
- 标准 OpenAI 兼容接口：{base_url}/chat/completions + Authorization: Bearer
- Azure OpenAI：{base_url}openai/deployments/{name}/chat/completions?api-version=...
  + api-key 头

纯字符串逻辑，不访问网络。
"""

from dataclasses import dataclass

DEFAULT_BASE_URL = "https://api.openai.com/v1"
AZURE_API_VERSION = "2024-12-01-preview"
CHAT_COMPLETIONS_PATH = "/chat/completions"


@dataclass(frozen=True)
class Endpoint:
    """一次调用的目标端点。

    Attributes:
        url: 完整请求 URL
        auth_header_name: 认证头名称（Authorization 或 api-key）
        auth_header_value: 认证头取值
    """

    url: str
    auth_header_name: str
    auth_header_value: str

    @property
    def headers(self) -> dict[str, str]:
        """请求头：Content-Type + 认证头。"""
        return {
            "Content-Type": "application/json",
            self.auth_header_name: self.auth_header_value,
        }

    def __repr__(self) -> str:
        # 不在日志里暴露密钥
        return f"Endpoint(url={self.url!r}, auth_header_name={self.auth_header_name!r})"


def resolve_endpoint(base_url: str, api_key: str, azure_deployment_name: str = "") -> Endpoint:
    """解析端点 URL 和认证头。

    规则：
    1. base_url 为空时使用 https://api.openai.com/v1
    2. 有 Azure 部署名：保证 base_url 以单个 / 结尾，拼接部署路径，
       使用 api-key 头（原始密钥，无 Bearer 前缀）
    3. 否则：base_url 已包含 /chat/completions 则原样使用；
       否则去掉一个结尾 / 再追加 /chat/completions，使用 Bearer 认证

    Args:
        base_url: 配置中的基础 URL（可为空）
        api_key: API 密钥
        azure_deployment_name: Azure 部署名（为空表示标准 OpenAI）

    Returns:
        Endpoint 对象
    """
    base_url = base_url or DEFAULT_BASE_URL

    if azure_deployment_name:
        base_url = base_url.rstrip("/") + "/"
        url = (
            f"{base_url}openai/deployments/{azure_deployment_name}"
            f"{CHAT_COMPLETIONS_PATH}?api-version={AZURE_API_VERSION}"
        )
        return Endpoint(url=url, auth_header_name="api-key", auth_header_value=api_key)

    if CHAT_COMPLETIONS_PATH in base_url:
        # 调用方给出了完整路径
        url = base_url
    else:
        url = base_url.removesuffix("/") + CHAT_COMPLETIONS_PATH
    return Endpoint(url=url, auth_header_name="Authorization", auth_header_value=f"Bearer {api_key}")
