from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./shop_member.db"
    SQL_ECHO: bool = False
    PORT: int = 8002
    LOG_LEVEL: str = "INFO"

    API_TITLE: str = "Shop Member API"
    API_DESCRIPTION: str = "Member API of the shopping site backend."
    API_VERSION: str = "1.0.0"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

settings = Settings()
