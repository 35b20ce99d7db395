"""
Runtime configuration read from environment variables.

The composition root calls load_dotenv() before Settings.from_env(), so a local
.env file can provide any of these values during development.
"""

import os
from dataclasses import dataclass


def _env(key: str, default: str = "") -> str:
    return os.environ.get(key, default)


@dataclass(frozen=True)
class Settings:
    model_id: str = "us.amazon.nova-pro-v1:0"
    region: str = "us-east-1"
    temperature: float = 0.0
    recursion_limit: int = 10
    log_level: str = "INFO"
    tracing_enabled: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            model_id=_env("BEDROCK_MODEL_ID", cls.model_id),
            region=_env("AWS_DEFAULT_REGION", cls.region),
            temperature=float(_env("MODEL_TEMPERATURE", str(cls.temperature))),
            recursion_limit=int(_env("AGENT_RECURSION_LIMIT", str(cls.recursion_limit))),
            log_level=_env("LOG_LEVEL", cls.log_level).upper(),
            tracing_enabled=bool(_env("LANGFUSE_PUBLIC_KEY")),
        )
