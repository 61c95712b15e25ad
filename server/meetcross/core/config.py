from pydantic_settings import BaseSettings


class ConfigurationError(RuntimeError):
    """Raised when required service settings are missing at startup."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(
            "Missing service configuration: "
            + ", ".join(missing)
            + ". Set them in the environment or in a .env file before starting."
        )


class Settings(BaseSettings):
    DATABASE_URL: str | None = None
    JWT_SECRET: str | None = None
    JWT_ALG: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    ENVIRONMENT: str = "local"
    CORS_ORIGINS: list[str] = ["http://localhost:5173", "http://127.0.0.1:5173"]
    DEFAULT_PROFILE_ROLE: str = "Staff"
    SESSION_SAFETY_TIMEOUT_SECONDS: float = 4.5
    PASSWORD_MIN_LENGTH: int = 1
    AVATAR_SERVICE_URL: str = "https://ui-avatars.com/api/"
    DEFAULT_CHURCH_NAME: str = "My Church"
    DEFAULT_CURRENCY: str = "$"

    class Config:
        env_file = ".env"


settings = Settings()


REQUIRED_SETTINGS = ("DATABASE_URL", "JWT_SECRET")


def require_service_config(config: Settings | None = None) -> Settings:
    config = config or settings
    missing = [name for name in REQUIRED_SETTINGS if not getattr(config, name)]
    if missing:
        raise ConfigurationError(missing)
    return config
