#api_gateway/config.py

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_ENV: str = "development"
    LOG_LEVEL: Optional[str] = None

    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_NAME: str = "CC"
    DB_USER: str = "admin"
    DB_PASS: str = "password"
    DB_POOL_MIN: int = 1
    DB_POOL_MAX: int = 10
    DB_CONNECT_TIMEOUT: int = 10

    JWT_SECRET_KEY: str = "changeme"
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRACION_MINUTOS: int = 60

    CORS_ORIGINS: str = "*"
    HOST: str = "0.0.0.0"
    PORT: int = 3001

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def es_produccion(self) -> bool:
        return self.APP_ENV.lower() == "production"

    @property
    def nivel_log(self) -> str:
        # 🔹 fuera de producción se loguea todo a nivel DEBUG
        if self.LOG_LEVEL:
            return self.LOG_LEVEL.upper()
        return "INFO" if self.es_produccion else "DEBUG"

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()
