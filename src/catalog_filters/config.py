"""Environment driven settings for catalog filtering."""

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

from .constants import DEFAULT_NAMESPACE, ENV_DEFAULT_NAMESPACE, ENV_STRICT_USER_LIST, TRUTHY_VALUES


@lru_cache(maxsize=None)
def load_env_file() -> bool:
    """Load environment variables from a .env file, once per process."""
    return load_dotenv()


@dataclass(frozen=True)
class FilterSettings:
    """Settings shared by entity reference parsing and filter construction."""

    default_namespace: str = DEFAULT_NAMESPACE
    strict_user_list: bool = False

    @classmethod
    def from_env(cls) -> "FilterSettings":
        """Create settings from the process environment."""
        load_env_file()
        namespace = os.getenv(ENV_DEFAULT_NAMESPACE, "").strip() or DEFAULT_NAMESPACE
        strict = os.getenv(ENV_STRICT_USER_LIST, "").strip().lower() in TRUTHY_VALUES
        return cls(default_namespace=namespace, strict_user_list=strict)


def get_settings() -> FilterSettings:
    """Return settings for the current environment, read on every call."""
    return FilterSettings.from_env()
