from pydantic_settings import BaseSettings, SettingsConfigDict

from paginator.core.constants import PAGE_QUERY_KEY
from paginator.core.url_utils import build_base_url


class Settings(BaseSettings):
    PROJECT_NAME: str = "Paginator"
    API_V1_STR: str = "/api/v1"

    # Server address used to build absolute page links
    HOST: str = "localhost"
    PORT: int = 3333

    # Pagination defaults
    PAGE_QUERY_PARAM: str = PAGE_QUERY_KEY
    DEFAULT_PER_PAGE: int = 20
    MAX_PER_PAGE: int = 100

    @property
    def BASE_URL(self) -> str:
        return build_base_url(self.HOST, self.PORT)

    model_config = SettingsConfigDict(case_sensitive=True, env_file=".env", extra="ignore")


settings = Settings()
