"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    svgtree_env: str = "development"
    svgtree_log_level: str = "debug"

    # Serialization
    svgtree_namespace: str = "http://www.w3.org/2000/svg"
    svgtree_indent: str = "\t"

    # HTTP server
    svgtree_host: str = "127.0.0.1"
    svgtree_port: int = 8000

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
