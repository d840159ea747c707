"""Application configuration using pydantic-settings."""

from typing import Self

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PROPSPOTTER_",
        extra="ignore",
    )

    # Sample dataset
    sample_size: int = Field(
        default=100,
        ge=1,
        description="Number of sample listings generated per session",
    )
    sample_seed: int | None = Field(
        default=None,
        description="Seed for reproducible sample listings",
    )

    # Pagination
    items_per_page: int = Field(default=8, ge=1)
    page_size_options: str = Field(
        default="4,8,12,16",
        description="Comma-separated page sizes offered by the grid",
    )

    # Search form defaults
    default_min_price: int = Field(default=0, ge=0)
    default_max_price: int = Field(default=10_000_000, ge=0)

    # Logging
    log_json: bool = Field(
        default=False,
        description="Render log events as JSON lines",
    )

    @model_validator(mode="after")
    def check_price_defaults(self) -> Self:
        """Ensure the default price range is ordered."""
        if self.default_min_price > self.default_max_price:
            raise ValueError("default_min_price must be <= default_max_price")
        return self

    def get_page_size_options(self) -> list[int]:
        """Parse page size options into a list of positive ints."""
        sizes = []
        for part in self.page_size_options.split(","):
            part = part.strip()
            if part.isdigit() and int(part) > 0:
                sizes.append(int(part))
        return sizes

    def default_price_range(self) -> tuple[int, int]:
        """Initial price range shown on the search form."""
        return (self.default_min_price, self.default_max_price)
