# Author: Bradley R. Kinnard - env vars or bust

"""
Settings via pydantic-settings. Defaults are the production contract: 0.0.0.0:8080, 5s drain.
CODE_FEEDBACK_* env vars override them for local runs and tests. No config file.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    host: str = "0.0.0.0"
    port: int = 8080
    shutdown_timeout: float = 5.0  # seconds, from the moment shutdown starts
    log_level: str = "INFO"

    class Config:
        env_prefix = "CODE_FEEDBACK_"
        extra = "ignore"  # ignore unknown env vars


settings = Settings()
