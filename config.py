"""
config.py: Konfiguracja przez zmienne środowiskowe.
Wszystkie zmienne mają prefiks ALGEBRA_ENGINE_.
"""
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Equivalence checker
    equivalence_trials: int = 10
    sample_low: int = -50    # przedział półotwarty [low, high)
    sample_high: int = 50
    tolerance: float = 1e-4
    random_seed: Optional[int] = None

    # Logging
    log_level: str = "INFO"

    # App
    app_title: str = "AlgebraEngine"
    app_version: str = "0.1.0"

    model_config = SettingsConfigDict(env_prefix="ALGEBRA_ENGINE_", env_file=".env", extra="ignore")
