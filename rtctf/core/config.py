from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # OpenAI
    openai_api_key: str = ""

    # Gemini
    gemini_api_key: str = ""

    # Enhancement
    enhancement_model: str = "gpt-4o-mini"
    enhancement_temperature: float = 0.7
    enhancement_max_tokens: int = 800
    enhancement_timeout_seconds: float = 8.0

    # Rate limit
    rate_limit_window_seconds: int = 900  # 15 minutes
    rate_limit_max_requests: int = 100
    rate_limit_sweep_interval_seconds: int = 3600  # 0 disables the sweep

    # Request gate
    allowed_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Environment
    environment: str = "dev"
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def uses_gemini(self) -> bool:
        return self.enhancement_model.startswith("gemini-")

    @property
    def enhancement_configured(self) -> bool:
        """True when the credential for the selected provider is present."""
        if self.uses_gemini:
            return bool(self.gemini_api_key)
        return bool(self.openai_api_key)


settings = Settings()
