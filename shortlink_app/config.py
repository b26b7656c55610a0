from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    
    Loading priority (highest to lowest):
    1. Values passed to the constructor
    2. Environment variables
    3. .env file
    4. Default values below
    """
    
    # Environment
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"
    
    # Application
    app_name: str = "Short Link Leaderboard"
    app_version: str = "1.0.0"
    
    # Server
    host: str = "127.0.0.1"
    port: int = 3000
    
    # Link registry database
    database_url: str = "sqlite:///./shortlinks.db"
    
    # Click counter settings
    counter_backend: str = "redis"  # Options: "redis", "memory"
    redis_url: str = "redis://localhost:6379/0"
    counter_key: str = "metrics"  # Sorted set holding link id -> clicks
    redis_timeout: float = 2.0
    
    # Leaderboard
    leaderboard_limit: int = 50
    leaderboard_max_limit: int = 1000
    
    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Default settings instance (the app factory accepts its own)
settings = Settings()
