"""Application configuration using pydantic-settings."""

from datetime import datetime, time, timedelta, timezone
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CIPSCOUT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Source site
    root_url: str = "https://www.cip-paris.fr"
    cinemas_path: str = "/json/cinemas"
    films_path: str = "/json/movies"

    # Database
    db_path: Path = Path("data/cipscout.db")

    # Listings are published in Paris local time; the source never carries
    # an offset so a fixed one is applied.
    utc_offset_hours: int = 2

    # Hour at which a "day" of listings starts, so that screenings after
    # midnight are grouped with the previous evening.
    day_start_hour: int = 4

    # Scraping settings
    scrape_timeout: int = 30

    log_level: str = "INFO"

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    @property
    def tz(self) -> timezone:
        return timezone(timedelta(hours=self.utc_offset_hours))

    @property
    def day_start(self) -> time:
        return time(self.day_start_hour, 0)

    def now(self) -> datetime:
        """Current time in the listings' fixed offset."""
        return datetime.now(self.tz)


# Global settings instance
settings = Settings()
