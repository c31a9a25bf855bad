"""Application configuration for Doctor Finder.

Configuration is loaded from environment variables (or a local ``.env`` file),
making the service suitable for container-based deployments.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "doctor_finder"
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"

    database_url: str | None = None

    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"

    @property
    def sqlalchemy_database_uri(self) -> str:
        if self.database_url:
            return self.database_url

        return (
            f"postgresql+psycopg2://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


settings = Settings()
