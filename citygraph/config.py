"""Configuration management for the CityGraph API."""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Configuration
    app_name: str = Field(default="CityGraph API", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    debug: bool = Field(default=False, description="Debug mode")

    # Server Configuration
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(
        default=3000,
        validation_alias=AliasChoices("EXPRESS_PORT", "PORT", "port"),
        description="Server port (from EXPRESS_PORT or PORT env var)",
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Log format (json or text)")

    # CORS Configuration
    cors_origins: list[str] = Field(
        default=["*"],
        description="Allowed CORS origins (use specific domains in production)",
    )

    # Neo4j Configuration
    neo4j_uri: str = Field(
        default="bolt://localhost:7687",
        validation_alias="NEO4J_URI",
        description="Neo4j connection URI",
    )
    neo4j_user: str = Field(
        default="neo4j",
        validation_alias="NEO4J_USER",
        description="Neo4j username",
    )
    neo4j_password: str = Field(
        default="neo4j123",
        validation_alias="NEO4J_PASSWORD",
        description="Neo4j password",
    )
    neo4j_database: str = Field(
        default="neo4j",
        validation_alias="NEO4J_DATABASE",
        description="Neo4j database name",
    )
    neo4j_max_connection_lifetime: int = Field(
        default=3600,
        description="Max connection lifetime in seconds",
    )
    neo4j_max_connection_pool_size: int = Field(
        default=50,
        description="Max connection pool size",
    )
    neo4j_connection_acquisition_timeout: int = Field(
        default=60,
        description="Connection acquisition timeout in seconds",
    )
    neo4j_ensure_constraints: bool = Field(
        default=True,
        validation_alias="NEO4J_ENSURE_CONSTRAINTS",
        description="Create the City.name uniqueness constraint at startup",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
        "populate_by_name": True,
    }


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get the global settings instance.

    Returns:
        Settings: The global settings instance
    """
    return settings
