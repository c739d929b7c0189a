from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Dict

class Settings(BaseSettings):
    """Application settings."""

    # NDBC settings
    ndbc_base_url: str = "https://www.ndbc.noaa.gov/data/realtime2/"
    ndbc_latest_obs_url: str = "https://www.ndbc.noaa.gov/data/latest_obs/"
    ndbc_spectra_plot_url: str = "https://www.ndbc.noaa.gov/spec_plot.php?station="
    ndbc_data_types: Dict[str, str] = {
        "std": "txt",           # Standard meteorological data
        "spec": "spec",         # Spectral wave summary
        "latest": "txt"         # Latest observation snapshot
    }
    # Negative means every row in the report
    ndbc_data_count_limit: int = -1

    request: Dict = {
        "timeout": 30
    }

    # Forecast settings
    default_units: str = "metric"
    breaker_index: float = 0.78  # Depth-limited breaking ratio (H/h)

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="surf_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
