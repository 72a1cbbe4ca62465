"""
Configuration management for the SocialNet API
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # MongoDB
    mongo_url: str = "mongodb://localhost:27017"
    database_name: str = "Red_Social"
    users_collection: str = "Usuarios"
    posts_collection: str = "Publicaciones"
    comments_collection: str = "Comentarios"

    # Password hashing (bcrypt cost factor)
    password_salt_rounds: int = 8

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]
    graphiql: bool = True

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = False
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SOCIALNET_",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings = Settings()
