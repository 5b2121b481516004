"""客户端运行配置。"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """后台管理接口客户端共享配置。"""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="GLK_", extra="ignore")

    base_url: str = Field(default="http://localhost:8080", description="旧后台服务根地址，不含 /glk 等路由前缀。")
    access_token: str | None = Field(default=None, description="访问令牌，为空时不携带认证头。")
    auth_header_name: str = Field(default="Authorization", description="携带访问令牌的请求头名称。")
    auth_scheme: str = Field(default="Bearer", description="令牌前缀，置空则直接发送原始令牌。")
    request_timeout_seconds: float = Field(default=15.0, description="单次请求超时（秒）。")
    success_codes: str = Field(default="0,200", description="旧接口业务成功码列表，逗号分隔。")
    log_level: str = Field(default="INFO", description="日志级别。")

    @field_validator("success_codes")
    @classmethod
    def normalize_success_codes(cls, value: str) -> str:
        """规范化业务成功码并确保至少配置一项。"""
        items = [item.strip() for item in value.split(",") if item.strip()]
        if not items:
            raise ValueError("success_codes must include at least one code")
        return ",".join(items)

    @property
    def business_success_codes(self) -> set[str]:
        """返回字符串形式的成功码集合，兼容后端返回数字或字符串 code。"""
        return {item.strip() for item in self.success_codes.split(",") if item.strip()}

    @property
    def auth_header_value(self) -> str | None:
        """返回完整的认证头取值。"""
        if not self.access_token:
            return None
        scheme = self.auth_scheme.strip()
        return f"{scheme} {self.access_token}" if scheme else self.access_token


@lru_cache
def get_settings() -> Settings:
    """返回缓存后的配置单例。"""
    return Settings()
