"""
config.py - application settings read from environment variables.
Every variable uses the RPNCALC_ prefix (e.g. RPNCALC_OPERATOR_SET=narrow).
"""
from pydantic_settings import BaseSettings, SettingsConfigDict

from contracts import OperatorSet


class Settings(BaseSettings):
    # Evaluator
    operator_set: OperatorSet = OperatorSet.FULL

    # Logging
    log_level: str = "INFO"

    # App
    app_title: str = "rpncalc"
    app_version: str = "0.1.0"

    model_config = SettingsConfigDict(env_prefix="RPNCALC_", env_file=".env", extra="ignore")
