"""
Runtime settings.

Defaults live here; each can be overridden through the environment:

  ABJAD_VALIDATOR_URL      endpoint the http validator POSTs candidates to
  ABJAD_VALIDATOR_TIMEOUT  per-request timeout in seconds
  ABJAD_MAX_LENGTH         default maximum word length for the search

CLI flags take precedence over both (see apps/cli/run.py).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_ENDPOINT = "https://example.com/validateWord"
DEFAULT_TIMEOUT = 10.0
DEFAULT_MAX_LENGTH = 3


@dataclass(frozen=True)
class Settings:
    endpoint: str = DEFAULT_ENDPOINT
    timeout: float = DEFAULT_TIMEOUT
    max_length: int = DEFAULT_MAX_LENGTH

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables, falling back to defaults
        for anything unset or blank. Malformed numbers raise ValueError.
        """
        env = os.environ if environ is None else environ

        endpoint = (env.get("ABJAD_VALIDATOR_URL") or "").strip() or DEFAULT_ENDPOINT

        raw_timeout = (env.get("ABJAD_VALIDATOR_TIMEOUT") or "").strip()
        timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
        if timeout <= 0:
            raise ValueError(f"ABJAD_VALIDATOR_TIMEOUT must be positive; got {raw_timeout}")

        raw_len = (env.get("ABJAD_MAX_LENGTH") or "").strip()
        max_length = int(raw_len) if raw_len else DEFAULT_MAX_LENGTH
        if max_length < 1:
            raise ValueError(f"ABJAD_MAX_LENGTH must be >= 1; got {raw_len}")

        return cls(endpoint=endpoint, timeout=timeout, max_length=max_length)
