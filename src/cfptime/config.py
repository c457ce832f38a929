from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

DEFAULT_BASE_URL = "https://api.cfptime.org"
DEFAULT_TIMEOUT_S = 10.0

ENV_BASE_URL = "CFPTIME_BASE_URL"
ENV_TIMEOUT = "CFPTIME_TIMEOUT"


def normalize_base_url(value: str) -> str:
    url = value.strip().rstrip("/")
    if not url:
        return DEFAULT_BASE_URL
    if not url.startswith(("http://", "https://")):
        url = f"https://{url}"
    return url


@dataclass(frozen=True)
class ClientConfig:
    base_url: str = DEFAULT_BASE_URL
    timeout_s: float = DEFAULT_TIMEOUT_S

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_url", normalize_base_url(self.base_url))

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ClientConfig":
        """Build a config, letting CFPTIME_BASE_URL / CFPTIME_TIMEOUT override the defaults."""
        env = os.environ if environ is None else environ
        base_url = env.get(ENV_BASE_URL) or DEFAULT_BASE_URL
        timeout_raw = env.get(ENV_TIMEOUT)
        try:
            timeout_s = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT_S
        except ValueError:
            raise ValueError(f"{ENV_TIMEOUT} must be a number, got {timeout_raw!r}") from None
        return cls(base_url=base_url, timeout_s=timeout_s)

    def with_overrides(
        self,
        *,
        base_url: Optional[str] = None,
        timeout_s: Optional[float] = None,
    ) -> "ClientConfig":
        changes: dict = {}
        if base_url:
            changes["base_url"] = base_url
        if timeout_s is not None:
            changes["timeout_s"] = timeout_s
        return replace(self, **changes) if changes else self
