from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="NEXTBUS_",
        extra="ignore",
    )

    api_url: str = "http://webservices.nextbus.com/service/publicJSONFeed"
    request_timeout_seconds: float = 10.0
    log_level: str = "WARNING"
    # CLI defaults: Toronto Transit Commission, 510 Spadina streetcar
    default_agency: str = "ttc"
    default_route: str = "510"
    default_stop: str = "14339"


def get_settings() -> Settings:
    return Settings()
