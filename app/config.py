"""
Application configuration with Pydantic Settings for validation and type safety.
Supports environment-specific configurations and .env file loading.
"""

from enum import Enum
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator, model_validator


# Placeholder signing key; refused in production
DEFAULT_JWT_SECRET = "change-me"


class Environment(str, Enum):
    """Application environment types"""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Application settings with validation.
    Settings are loaded from environment variables or .env file.
    """

    # Application settings
    app_name: str = Field(default="FoodOrder", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT, description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode")

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=3000, ge=1, le=65535, description="Server port")
    public_base_url: str = Field(
        default="http://localhost:3000",
        description="Externally visible base URL used in links (uploads, password reset)",
    )

    # MongoDB settings
    mongo_uri: str = Field(
        default="mongodb://localhost:27017", description="MongoDB connection URI"
    )
    mongo_db_name: str = Field(default="foodorder", description="MongoDB database name")
    db_init_attempts: int = Field(
        default=5, ge=1, description="Database connection retry attempts"
    )
    db_init_delay_sec: float = Field(
        default=2.0, ge=0, description="Delay between DB connection attempts"
    )

    # Authentication
    jwt_secret_key: str = Field(
        default=DEFAULT_JWT_SECRET, min_length=1, description="Secret used to sign bearer tokens"
    )
    jwt_algorithm: str = Field(default="HS256", description="JWT signing algorithm")
    jwt_expire_hours: int = Field(
        default=8784, ge=1, description="Lifetime of tokens issued at login"
    )
    bcrypt_rounds: int = Field(
        default=12, ge=4, le=31, description="bcrypt cost factor for password hashes"
    )
    password_reset_expire_minutes: int = Field(
        default=60, ge=1, description="Lifetime of password reset tokens"
    )

    # Mail (SMTP)
    smtp_host: str = Field(default="localhost", description="SMTP relay host")
    smtp_port: int = Field(default=587, ge=1, le=65535, description="SMTP relay port")
    smtp_username: Optional[str] = Field(default=None, description="SMTP username")
    smtp_password: Optional[str] = Field(default=None, description="SMTP password")
    smtp_sender: str = Field(
        default="no-reply@foodorder.local", description="From address for outgoing mail"
    )
    smtp_use_tls: bool = Field(default=True, description="Issue STARTTLS before login")

    # Uploads
    upload_dir: str = Field(default="uploads", description="Directory for uploaded images")
    upload_max_bytes: int = Field(
        default=5 * 1024 * 1024, ge=1, description="Maximum accepted upload size"
    )
    upload_allowed_extensions: list[str] = Field(
        default=["jpeg", "jpg", "png", "gif"],
        description="Accepted image extensions / MIME subtypes",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log format string",
    )

    # CORS settings
    cors_origins: list[str] = Field(
        default=["http://localhost:3000"],
        description="Allowed CORS origins",
    )
    cors_allow_credentials: bool = Field(
        default=True, description="Allow CORS credentials"
    )
    cors_allow_methods: list[str] = Field(
        default=["*"], description="Allowed HTTP methods"
    )
    cors_allow_headers: list[str] = Field(
        default=["*"], description="Allowed HTTP headers"
    )

    # API settings
    api_prefix: str = Field(default="/api", description="API route prefix")
    api_title: str = Field(
        default="FoodOrder API", description="API documentation title"
    )
    api_description: str = Field(
        default="Food ordering, subscriptions, addresses and XMood content API",
        description="API documentation description",
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment value"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    @model_validator(mode="after")
    def require_jwt_secret_in_production(self):
        """Refuse to start a production process with the placeholder signing key"""
        if self.is_production() and self.jwt_secret_key == DEFAULT_JWT_SECRET:
            raise ValueError("JWT_SECRET_KEY must be set in production")
        return self

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment == Environment.DEVELOPMENT

    def is_testing(self) -> bool:
        """Check if running in testing environment"""
        return self.environment == Environment.TESTING


# Global settings instance
settings = Settings()
