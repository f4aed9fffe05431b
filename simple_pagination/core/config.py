"""Package configuration loaded from environment variables.

Uses pydantic-settings for validation and .env file support. Variables are
prefixed with PAGINATION_ (e.g., PAGINATION_MAX_PAGE_SIZE=100).

Only the FastAPI query-parameter dependency reads these settings; paginate()
and paginate_async() take no configuration.
"""

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Pagination settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PAGINATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Page size used when a client omits page_size (None = return everything)
    default_page_size: int | None = None

    # Upper bound on client-requested page sizes (None = unbounded)
    max_page_size: int | None = None

    @model_validator(mode="after")
    def check_page_size_bounds(self) -> "Settings":
        """Validate page size settings.

        Checks:
        - default_page_size must be positive when set
        - max_page_size must be positive when set
        - default_page_size must not exceed max_page_size
        """
        if self.default_page_size is not None and self.default_page_size < 1:
            msg = (
                "PAGINATION_DEFAULT_PAGE_SIZE must be positive. "
                f"Got: {self.default_page_size}"
            )
            raise ValueError(msg)
        if self.max_page_size is not None and self.max_page_size < 1:
            msg = f"PAGINATION_MAX_PAGE_SIZE must be positive. Got: {self.max_page_size}"
            raise ValueError(msg)
        if (
            self.default_page_size is not None
            and self.max_page_size is not None
            and self.default_page_size > self.max_page_size
        ):
            msg = (
                "PAGINATION_DEFAULT_PAGE_SIZE cannot exceed PAGINATION_MAX_PAGE_SIZE. "
                f"Got: {self.default_page_size} > {self.max_page_size}"
            )
            raise ValueError(msg)
        return self


settings = Settings()
