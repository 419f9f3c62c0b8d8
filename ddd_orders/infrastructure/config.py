"""
Configuration Management
========================

Type-safe configuration using Pydantic Settings with environment variable support.
"""

from decimal import Decimal
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DiscountConfig(BaseSettings):
    """Discount rates per category"""
    model_config = SettingsConfigDict(
        env_prefix="DISCOUNT_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )
    
    small_rate: Decimal = Field(Decimal("0.10"), description="Rate of the small discount")
    medium_rate: Decimal = Field(Decimal("0.25"), description="Rate of the medium discount")
    large_rate: Decimal = Field(Decimal("0.50"), description="Rate of the large discount")
    
    @field_validator('small_rate', 'medium_rate', 'large_rate')
    @classmethod
    def validate_rate(cls, v: Decimal) -> Decimal:
        """Rates are fractions of the order amount"""
        if not Decimal("0") <= v <= Decimal("1"):
            raise ValueError(f"Discount rate must be between 0 and 1, got {v}")
        return v

class LoggingConfig(BaseSettings):
    """Logging configuration"""
    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )
    
    level: str = Field("INFO", description="Logging level")
    format: str = Field(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string"
    )
    
    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

class Settings(BaseSettings):
    """Main application settings"""
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True
    )
    
    # Environment
    environment: str = Field("development", description="Environment name")
    debug: bool = Field(False, description="Enable debug mode")
    
    # Component configurations
    discount: DiscountConfig = Field(default_factory=DiscountConfig, description="Discount configuration")
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="Logging configuration")

def get_config() -> Settings:
    """Get application configuration"""
    return Settings()
