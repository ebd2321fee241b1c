from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    app_title: str = "Health Metrics API"
    log_level: str = "INFO"
    climate_aware_water: bool = False

    model_config = SettingsConfigDict(env_prefix="HEALTH_")

settings = Settings()
