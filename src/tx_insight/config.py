"""
Runtime configuration for tx_insight.

Values come from the environment (optionally a `.env` file). Command-line
arguments take priority over the environment when the CLI builds settings.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .constants import (
    DEFAULT_GPT_ENDPOINT,
    DEFAULT_GPT_MODEL,
    DEFAULT_INSIGHT_API_BASE_URL,
    DEFAULT_LENS_API_URL,
)


@dataclass(frozen=True)
class Settings:
    etherscan_api_key: str = ""
    polygonscan_api_key: str = ""
    gpt_api_key: str = ""
    gpt_api_endpoint: str = DEFAULT_GPT_ENDPOINT
    gpt_model: str = DEFAULT_GPT_MODEL
    lens_api_url: str = DEFAULT_LENS_API_URL
    insight_api_base_url: str = DEFAULT_INSIGHT_API_BASE_URL
    http_timeout: Optional[float] = None


def _parse_timeout(value: Optional[str]) -> Optional[float]:
    if not value:
        return None
    return float(value)


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Build Settings from environment variables.

    Args:
        env_file: Optional path to a dotenv file (defaults to `.env` lookup)

    Returns:
        Settings instance
    """
    load_dotenv(env_file, override=True)

    return Settings(
        etherscan_api_key=os.getenv('ETHERSCAN_API_KEY', ''),
        polygonscan_api_key=os.getenv('POLYGONSCAN_API_KEY', ''),
        gpt_api_key=os.getenv('GPT_API_KEY', ''),
        gpt_api_endpoint=os.getenv('GPT_API_ENDPOINT') or DEFAULT_GPT_ENDPOINT,
        gpt_model=os.getenv('GPT_MODEL') or DEFAULT_GPT_MODEL,
        lens_api_url=os.getenv('LENS_API_URL') or DEFAULT_LENS_API_URL,
        insight_api_base_url=os.getenv('INSIGHT_API_BASE_URL') or DEFAULT_INSIGHT_API_BASE_URL,
        http_timeout=_parse_timeout(os.getenv('HTTP_TIMEOUT')),
    )
