import logging
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DATA_DIR = Path(__file__).resolve().parent.parent / "data"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Filter settings loaded from environment variables.

    All settings are optional and prefixed with RMC_:
    - RMC_EXCLUDED_NAMES_FILE: substrings that veto a company name
    - RMC_INCLUDED_NAMES_FILE: substrings that mark a name as RMC-like
    - RMC_PROGRESS_INTERVAL: records between progress reports and flushes
    - RMC_SKIP_MALFORMED_ROWS: log and skip malformed rows instead of aborting
    - RMC_PSC_EMIT_CONTROLLER: add the controller type as a second PSC column
    - RMC_LOG_LEVEL: logging level name

    The wordlist files are headerless, one substring per line.
    """

    model_config = SettingsConfigDict(
        env_prefix="RMC_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Wordlists - default to the lists shipped with the package
    excluded_names_file: Path = DATA_DIR / "exclude_names.txt"
    included_names_file: Path = DATA_DIR / "include_names.txt"

    # Processing
    progress_interval: int = 100_000
    skip_malformed_rows: bool = False
    psc_emit_controller: bool = False  # Output stays one column unless set

    log_level: str = "INFO"

    @field_validator("progress_interval")
    @classmethod
    def validate_progress_interval(cls, v: int) -> int:
        """Validate that the progress interval is positive."""
        if v <= 0:
            raise ValueError("PROGRESS_INTERVAL must be a positive integer")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalise the log level name."""
        v = v.strip().upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")
        return v

    def configure_logging(self) -> None:
        """Send diagnostics to stderr, keeping stdout for data."""
        logging.basicConfig(
            level=self.log_level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )


settings = Settings()
