from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Managed database, both required by the persistence layer at boot
    MONGO_URI: Optional[str] = None
    MONGO_DATABASE: Optional[str] = None

    CLIENT_ORIGIN: str = "http://localhost:3000"
    ENVIRONMENT: str = "development"

    # Form client side
    SUBSCRIBE_API_URL: Optional[str] = None
    FALLBACK_STORE_PATH: str = "early_access_submissions.json"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @property
    def allowed_origins(self) -> List[str]:
        return [origin.strip() for origin in self.CLIENT_ORIGIN.split(",") if origin.strip()]


# create a singleton instance
settings = Settings()
