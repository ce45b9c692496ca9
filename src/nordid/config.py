"""
nordid configuration management using pydantic-settings.

Settings are read from NORDID_* environment variables or a .env file.
They provide the default option toggles used by the command line tool.
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="NORDID_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Logging level")

    # Default scheme toggles
    allow_personal_identity_number: bool = Field(
        default=True, description="Accept Swedish personal identity numbers"
    )
    allow_coordination_number: bool = Field(
        default=True, description="Accept Swedish coordination numbers"
    )
    allow_interim_number: bool = Field(
        default=False, description="Accept Swedish interim numbers"
    )
    allow_t_number: bool = Field(default=True, description="Accept T-numbers")
    allow_vgr_reserve_number: bool = Field(
        default=True, description="Accept VGR reserve numbers"
    )
    allow_sll_reserve_number: bool = Field(
        default=True, description="Accept SLL reserve numbers"
    )
    allow_rvb_reserve_number: bool = Field(
        default=True, description="Accept RVB reserve numbers"
    )
    allow_norwegian_birth_number: bool = Field(
        default=True, description="Accept Norwegian birth numbers"
    )
    allow_danish_cpr_number: bool = Field(
        default=True, description="Accept Danish CPR numbers"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalise and check the logging level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def scheme_toggles(self) -> dict[str, bool]:
        """The allow_* toggles as a plain mapping."""
        return {
            name: value
            for name, value in self.model_dump().items()
            if name.startswith("allow_")
        }


# Global settings instance
settings = Settings()
