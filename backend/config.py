from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./workroom.db"
    APP_NAME: str = "Drapery Workroom Calculator"
    LOG_LEVEL: str = "INFO"

    # Shop defaults when a request doesn't carry its own unit system
    DEFAULT_LENGTH_UNIT: str = "cm"
    DEFAULT_CURRENCY: str = "GBP"

    class Config:
        env_file = ".env"


settings = Settings()
