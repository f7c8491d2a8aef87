import os
from dataclasses import dataclass, field
from typing import List, Optional

DEFAULT_BUCKET = "alba-admin"
DEFAULT_REGION = "eu-central-1"


def _as_bool(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


def _as_list(value: Optional[str]) -> List[str]:
    return [item.strip() for item in (value or "").split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    bucket_name: str = DEFAULT_BUCKET
    aws_region: str = DEFAULT_REGION
    endpoint_url: Optional[str] = None
    anonymous: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: List[str] = field(default_factory=list)


def load_settings() -> Settings:
    """Read settings from the process environment."""
    return Settings(
        bucket_name=os.getenv("S3_BUCKET_NAME") or DEFAULT_BUCKET,
        aws_region=os.getenv("AWS_REGION") or DEFAULT_REGION,
        endpoint_url=os.getenv("S3_ENDPOINT_URL") or None,
        anonymous=_as_bool(os.getenv("S3_ANONYMOUS")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        cors_origins=_as_list(os.getenv("CORS_ORIGINS")),
    )
