from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


APP_NAME = "Reddit Reader"
VERSION = "0.1"


@dataclass(frozen=True)
class AppConfig:
    reddit_client_id: str
    reddit_client_secret: str
    reddit_username: str
    reddit_password: str
    reddit_user_agent: str

    # One page of the "hot" listing
    post_limit: int = 25
    request_timeout: float = 16.0
    ratelimit_seconds: int = 5

    log_level: str = "WARNING"


def build_user_agent(author: str, app_name: str = APP_NAME, version: str = VERSION) -> str:
    """Reddit asks script apps to identify as ``<platform>:<app>:<version> (by /u/<user>)``."""
    return f"script:{app_name}:{version} (by /u/{author})"


def load_config(env_file: Optional[str] = None) -> AppConfig:
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    required = {
        name: os.getenv(name)
        for name in (
            "REDDIT_CLIENT_ID",
            "REDDIT_CLIENT_SECRET",
            "REDDIT_USERNAME",
            "REDDIT_PASSWORD",
        )
    }
    missing = [name for name, value in required.items() if not value]
    if missing:
        raise RuntimeError(
            f"{', '.join(missing)} must be set. Set them in your environment or .env file."
        )

    username = required["REDDIT_USERNAME"]
    author = os.getenv("REDDIT_AUTHOR") or username
    user_agent = os.getenv("REDDIT_USER_AGENT") or build_user_agent(author)

    post_limit_str = os.getenv("REDDIT_POST_LIMIT", "25")
    ratelimit_str = os.getenv("REDDIT_RATELIMIT_SECONDS", "5")
    try:
        post_limit = int(post_limit_str)
        ratelimit_seconds = int(ratelimit_str)
    except ValueError as exc:
        raise RuntimeError(
            "REDDIT_POST_LIMIT and REDDIT_RATELIMIT_SECONDS must be integers"
        ) from exc
    if post_limit < 1:
        raise RuntimeError("REDDIT_POST_LIMIT must be at least 1")

    timeout_str = os.getenv("REDDIT_TIMEOUT", "16")
    try:
        request_timeout = float(timeout_str)
    except ValueError as exc:
        raise RuntimeError("REDDIT_TIMEOUT must be a float") from exc

    log_level = os.getenv("LOG_LEVEL", "WARNING").upper()

    return AppConfig(
        reddit_client_id=required["REDDIT_CLIENT_ID"],
        reddit_client_secret=required["REDDIT_CLIENT_SECRET"],
        reddit_username=username,
        reddit_password=required["REDDIT_PASSWORD"],
        reddit_user_agent=user_agent,
        post_limit=post_limit,
        request_timeout=max(0.0, request_timeout),
        ratelimit_seconds=max(0, ratelimit_seconds),
        log_level=log_level,
    )
