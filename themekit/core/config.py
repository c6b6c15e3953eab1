from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    APP_ENV: str = "local"
    APP_NAME: str = "themekit"

    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:8080"

    DATABASE_URL: str
    TABLE_PREFIX: str = "wp_"

    # Third-party sharing links hook in at this priority on the_content / the_excerpt.
    SHARING_CALLBACK_ID: str = "sharing_display"
    SHARING_CALLBACK_PRIORITY: int = 19

    @property
    def cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

    @property
    def users_table(self) -> str:
        return f"{self.TABLE_PREFIX}users"

    @property
    def usermeta_table(self) -> str:
        return f"{self.TABLE_PREFIX}usermeta"

settings = Settings()
