import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Tuple

from dotenv import load_dotenv

CREDENTIAL_ENV_VARS = {
    "openai": "OPENAI_API_KEY",
    "gemini": "GEMINI_API_KEY",
    "openrouter": "OPENROUTER_API_KEY",
}


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _parse_timeout(value: Optional[str]) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        raise ValueError(
            f"LOGOS_REQUEST_TIMEOUT must be a number of seconds, got {value!r}"
        ) from None


@dataclass(frozen=True)
class Settings:
    """Runtime configuration. One optional credential per provider."""

    openai_api_key: Optional[str] = None
    gemini_api_key: Optional[str] = None
    openrouter_api_key: Optional[str] = None
    request_timeout: Optional[float] = None
    logging_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        if env is None:
            # Local development keeps secrets in .env
            load_dotenv()
            env = os.environ

        timeout = _clean(env.get("LOGOS_REQUEST_TIMEOUT"))
        origins = _clean(env.get("LOGOS_CORS_ORIGINS")) or "*"
        return cls(
            openai_api_key=_clean(env.get("OPENAI_API_KEY")),
            gemini_api_key=_clean(env.get("GEMINI_API_KEY")),
            openrouter_api_key=_clean(env.get("OPENROUTER_API_KEY")),
            request_timeout=_parse_timeout(timeout),
            logging_level=(_clean(env.get("LOGGING_LEVEL")) or "INFO").upper(),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        )

    def credential_for(self, provider: str) -> Tuple[str, Optional[str]]:
        """Return (env var name, value) for a provider's API key."""
        env_var = CREDENTIAL_ENV_VARS[provider]
        return env_var, getattr(self, f"{provider}_api_key")
