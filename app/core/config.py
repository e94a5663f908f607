from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PROJECT_NAME: str = "Push Relay"
    LOG_LEVEL: str = "INFO"
    FIREBASE_ENABLED: bool = True
    FIREBASE_CREDENTIALS_PATH: str | None = None
    FIREBASE_PROJECT_ID: str | None = None
    FCM_DRY_RUN: bool = False
    SCHEDULER_TIMEZONE: str = "UTC"
    SCHEDULER_MAX_ARMED: int | None = None
    SCHEDULE_OUTCOME_HISTORY: int = 1000

    class Config:
        env_file = ".env"


settings = Settings()
