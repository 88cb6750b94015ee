from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Pydantic Settings v2 reads these from environment variables (case-insensitive)
    # JINA_API_KEY, CRUSTDATA_API_KEY and OPENAI_API_KEY are the three credentials
    jina_api_key: str = ""
    crustdata_api_key: str = ""
    openai_api_key: str = ""

    openai_model: str = "gpt-4o"
    openai_max_tokens: int = 300
    openai_temperature: float = 0.7

    jina_base_url: str = "https://r.jina.ai"
    crustdata_base_url: str = "https://api.crustdata.com"
    request_timeout_seconds: float = 30.0

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def configured_credentials(self) -> dict[str, bool]:
        """Which collaborator credentials are present, without exposing values."""
        return {
            "JINA_API_KEY": bool(self.jina_api_key),
            "CRUSTDATA_API_KEY": bool(self.crustdata_api_key),
            "OPENAI_API_KEY": bool(self.openai_api_key),
        }


def get_settings() -> Settings:
    # Built per call so credentials are read when a request needs them
    return Settings()
