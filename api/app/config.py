from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    # API
    api_host: str = "0.0.0.0"
    api_port: int = 5000
    log_level: str = "info"

    # Claude API
    anthropic_api_key: str = ""
    claude_model: str = "claude-3-5-haiku-20241022"
    claude_timeout_s: float = 30.0

    # Roasts
    roast_max_tokens: int = 500
    about_max_chars: int = 300

    # Monitoring
    prometheus_enabled: bool = True

    # CORS
    cors_origins: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    model_config = {
        "env_file": ["../.env", ".env"],
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
