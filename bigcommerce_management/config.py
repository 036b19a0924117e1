from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    store_hash: str = ""
    access_token: str = ""
    api_version: int = 3
    timeout: float | None = None
    debug: bool = False
    log_format: str = "text"
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "BC_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

