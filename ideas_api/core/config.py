from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

SYMMETRIC_ALGORITHMS = ("HS256", "HS384", "HS512")
TOKEN_SOURCES = ("cookie", "header")


class Settings(BaseSettings):
    jwt_secret: str
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = Field(15, gt=0)

    database_url: str = "sqlite+aiosqlite:///./ideas.db"

    host: str = "0.0.0.0"
    port: int = 8000
    frontend_url: str = "http://localhost:3000"

    # Preferred token source; the other one is used as a fallback
    auth_token_source: str = "cookie"
    auth_cookie_name: str = "token"

    environment: str = "development"
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}

    @field_validator("jwt_secret")
    @classmethod
    def validate_jwt_secret(cls, v):
        if not v.strip():
            raise ValueError("JWT_SECRET must not be empty")
        return v

    @field_validator("jwt_algorithm")
    @classmethod
    def validate_jwt_algorithm(cls, v):
        v = v.upper()
        if v not in SYMMETRIC_ALGORITHMS:
            raise ValueError(f"JWT_ALGORITHM must be one of {', '.join(SYMMETRIC_ALGORITHMS)}")
        return v

    @field_validator("auth_token_source")
    @classmethod
    def validate_auth_token_source(cls, v):
        v = v.lower()
        if v not in TOKEN_SOURCES:
            raise ValueError("AUTH_TOKEN_SOURCE must be 'cookie' or 'header'")
        return v

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"


settings = Settings()
