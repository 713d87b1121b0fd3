from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    GITHUB_TOKEN: SecretStr | None = Field(
        None,
        description="Token with read/write access to repository contents and metadata"
    )
    STAMP_PAGE_SIZE: int = Field(100, ge=1, le=100, description="Repositories per listing page")
    STAMP_ROLL_FORWARD: bool = Field(
        True,
        description="Label the upcoming Sunday (True) or the one that has passed (False)"
    )
    STAMP_LOG_LEVEL: str = Field("INFO", description="Logging level")

    def token(self) -> str | None:
        return self.GITHUB_TOKEN.get_secret_value() if self.GITHUB_TOKEN else None

# Singleton instance
settings = Settings()
