import os
from dataclasses import dataclass
from typing import Optional

from hunkreview.core.exceptions import ConfigurationError

DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_GITHUB_API_URL = "https://api.github.com"


@dataclass(frozen=True, slots=True)
class GitHubSettings:
    token: str
    api_url: str
    repository: Optional[str]
    event_path: Optional[str]


@dataclass(frozen=True, slots=True)
class OpenAISettings:
    api_key: str
    model: str
    organization: Optional[str]
    base_url: Optional[str]
    max_retries: int


@dataclass(frozen=True, slots=True)
class LoggingSettings:
    backend: str
    name: str
    level: str
    logfire_token: Optional[str]


@dataclass(frozen=True, slots=True)
class ReviewSettings:
    body: str
    strict_lines: bool
    http_timeout: float


@dataclass(frozen=True, slots=True)
class Settings:
    github: GitHubSettings
    openai: OpenAISettings
    logging: LoggingSettings
    review: ReviewSettings


def load_settings() -> Settings:
    from dotenv import load_dotenv

    load_dotenv()

    # INPUT_* names are how the Actions runner exposes `with:` inputs.
    github_token = _first_env("INPUT_GITHUB_TOKEN", "GITHUB_TOKEN")
    github_api_url = _ge_env_or_default("GITHUB_API_URL", DEFAULT_GITHUB_API_URL)
    repository = _ge_env_or_default("GITHUB_REPOSITORY")
    event_path = _ge_env_or_default("GITHUB_EVENT_PATH")

    openai_api_key = _first_env("INPUT_OPEN_API_TOKEN", "OPENAI_API_KEY")
    model = _first_env("INPUT_OPEN_API_MODEL", "HUNKREVIEW_MODEL") or DEFAULT_MODEL
    organization = _ge_env_or_default("OPENAI_ORGANIZATION")
    openai_base_url = _ge_env_or_default("OPENAI_BASE_URL")
    max_retries = _env_int("HUNKREVIEW_OPENAI_MAX_RETRIES", 0)

    logging_backend = _ge_env_or_default("HUNKREVIEW_LOGGER_BACKEND", "actions").lower()
    logging_name = _ge_env_or_default("HUNKREVIEW_LOGGER_NAME", "hunkreview")
    logging_level = _ge_env_or_default("HUNKREVIEW_LOG_LEVEL", "INFO")
    logfire_token = _ge_env_or_default("HUNKREVIEW_LOGFIRE_TOKEN")

    review_body = _ge_env_or_default("HUNKREVIEW_REVIEW_BODY", "AI Review")
    strict_lines = _env_bool("HUNKREVIEW_STRICT_LINES", False)
    http_timeout = _env_float("HUNKREVIEW_HTTP_TIMEOUT", 60.0)

    return Settings(
        github=GitHubSettings(
            token=github_token,
            api_url=github_api_url,
            repository=repository,
            event_path=event_path,
        ),
        openai=OpenAISettings(
            api_key=openai_api_key,
            model=model,
            organization=organization,
            base_url=openai_base_url,
            max_retries=max_retries,
        ),
        logging=LoggingSettings(
            backend=logging_backend,
            name=logging_name,
            level=logging_level,
            logfire_token=logfire_token,
        ),
        review=ReviewSettings(
            body=review_body,
            strict_lines=strict_lines,
            http_timeout=http_timeout,
        ),
    )


def _ge_env_or_default(name: str, default=None):  # noqa: ANN001
    value = os.getenv(name)
    if not value:
        return default
    return value


def _first_env(*names: str) -> Optional[str]:
    for name in names:
        value = _ge_env_or_default(name)
        if value:
            return value
    return None


def _env_int(name: str, default: int) -> int:
    value = _ge_env_or_default(name, default) or 0
    try:
        return int(value)
    except ValueError as error:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from error


def _env_float(name: str, default: float) -> float:
    value = _ge_env_or_default(name, default) or 0
    try:
        return float(value)
    except ValueError as error:
        raise ConfigurationError(f"{name} must be a number, got {value!r}") from error


def _env_bool(name: str, default: bool) -> bool:
    return str(_ge_env_or_default(name, default) or "").upper() == "TRUE"
