from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # API Keys
    anthropic_api_key: str = ""

    # Comparable properties summary
    comparables_model: str = "claude-haiku-4-5-20251001"
    comparables_max_tokens: int = 1000

    # Dashboard -> API
    api_base_url: str = "http://localhost:8000"

    # App
    debug: bool = False
    log_level: str = "INFO"


settings = Settings()
