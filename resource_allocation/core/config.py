from typing import Annotated, Any, Literal

from pydantic import AnyUrl, BeforeValidator, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


def parse_cors(v: Any) -> list[str] | str:
    if isinstance(v, str) and not v.startswith("["):
        return [i.strip() for i in v.split(",") if i.strip()]
    elif isinstance(v, list | str):
        return v
    raise ValueError(v)


def parse_extensions(v: Any) -> list[str] | str:
    if isinstance(v, str) and not v.startswith("["):
        return [i.strip().lower() for i in v.split(",") if i.strip()]
    return v


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    PROJECT_NAME: str = "Resource Allocation Tool"
    API_V1_STR: str = "/api/v1"
    ENVIRONMENT: Literal["local", "staging", "production"] = "local"
    FRONTEND_HOST: str = "http://localhost:3000"

    BACKEND_CORS_ORIGINS: Annotated[
        list[AnyUrl] | str, BeforeValidator(parse_cors)
    ] = []

    @computed_field  # type: ignore[prop-decorator]
    @property
    def all_cors_origins(self) -> list[str]:
        return [str(origin).rstrip("/") for origin in self.BACKEND_CORS_ORIGINS] + [
            self.FRONTEND_HOST
        ]

    # Observability Configuration
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"
    ENABLE_METRICS: bool = True

    # Upload Configuration
    MAX_UPLOAD_FILES: int = 3
    ACCEPTED_UPLOAD_EXTENSIONS: Annotated[
        list[str] | str, BeforeValidator(parse_extensions)
    ] = [".csv", ".xlsx"]
    # Columns mapped below this confidence keep their uploaded name
    COLUMN_MAPPING_MIN_CONFIDENCE: float = 0.8

    # Export Configuration
    EXPORT_JSON_FILENAME: str = "resource-allocation-data.json"

    # Priority weights start evenly split across the four criteria
    DEFAULT_PRIORITY_WEIGHT: int = 25


settings = Settings()
