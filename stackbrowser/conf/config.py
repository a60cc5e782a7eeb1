import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    # Stack Overflow / Stack Exchange
    STACK_API_BASE_URL: str = os.getenv(
        "STACK_API_BASE_URL", "https://api.stackexchange.com"
    )
    STACK_API_KEY: Optional[str] = os.getenv("STACK_API_KEY")
    STACK_SITE: str = os.getenv("STACK_SITE", "stackoverflow")
    STACK_PAGE_SIZE: int = int(os.getenv("STACK_PAGE_SIZE", "20"))
    STACK_TIMEOUT: float = float(os.getenv("STACK_TIMEOUT", "15"))

    # Connectivity probe
    CONNECTIVITY_HOST: str = os.getenv("CONNECTIVITY_HOST", "1.1.1.1")
    CONNECTIVITY_PORT: int = int(os.getenv("CONNECTIVITY_PORT", "53"))
    CONNECTIVITY_TIMEOUT: float = float(os.getenv("CONNECTIVITY_TIMEOUT", "3"))

    # Defaults
    DEFAULT_ORDER: str = "desc"
    DEFAULT_SORT: str = "activity"
    DEFAULT_FILTER: str = "withbody"
    DEFAULT_WORKERS: int = 4


settings = Settings()
