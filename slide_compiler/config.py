"""Runtime settings for the compiler, read from the environment."""
import os
from dataclasses import dataclass, field


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    """
    Knobs that change parser/validator strictness.

    Attributes:
        default_title: Deck title used when the source has no ``\\title``
        strict_params: Reject malformed ``[animate=...]`` instead of ignoring it
        unique_ids: Report repeated slide ids as validation issues
    """
    default_title: str = field(
        default_factory=lambda: os.getenv("SLIDEC_DEFAULT_TITLE", "Untitled Deck")
    )
    strict_params: bool = field(default_factory=lambda: _env_flag("SLIDEC_STRICT_PARAMS"))
    unique_ids: bool = field(default_factory=lambda: _env_flag("SLIDEC_UNIQUE_IDS"))


settings = Settings()
