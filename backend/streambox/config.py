from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Environment
    environment: str = "local"  # local, production

    # Application
    app_name: str = "StreamBox API"
    debug: bool = False
    api_prefix: str = "/api"

    # CORS - Support multiple origins
    cors_origins: list[str] = ["http://localhost:5173"]

    # Catalog storage
    catalog_backend: str = "memory"  # memory, sql
    database_url: str = "sqlite://"
    seed_catalog: bool = True

    # Seeded administrator
    admin_username: str = "jscreator"
    admin_password: str = "admin123"

    # Videos created without an explicit type
    default_video_type: str = "movie"

    # Recommendations
    recommendation_limit: int = 8
    recommendation_category_weight: int = 10
    recommendation_tag_weight: int = 5
    max_recommendation_limit: int = 50

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_local(self) -> bool:
        """Check if running in local environment."""
        return self.environment == "local"


settings = Settings()
