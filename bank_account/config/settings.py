"""Configuration management for the bank account package."""
import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


@dataclass
class Settings:
    """Configuration settings for the bank account package.

    The account model itself takes no configuration; these values only
    control how its log output is emitted.
    """

    # Logging Configuration
    log_level: str = 'INFO'
    log_file: Optional[str] = None
    log_name: str = 'bank_account'

    @classmethod
    def load(cls) -> 'Settings':
        """Load settings from environment variables.

        Values from a local ``.env`` file are picked up first, without
        overriding variables already set in the environment.

        Returns:
            Settings: A Settings instance with values from environment variables.

        Raises:
            ValueError: If BANK_LOG_LEVEL is not a known logging level.
        """
        load_dotenv()

        log_level = os.getenv('BANK_LOG_LEVEL', cls.log_level).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"BANK_LOG_LEVEL must be a logging level name, got {log_level!r}")

        return cls(
            log_level=log_level,
            log_file=os.getenv('BANK_LOG_FILE') or None,
        )
