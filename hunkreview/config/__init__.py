from hunkreview.config.settings import (
    GitHubSettings,
    LoggingSettings,
    OpenAISettings,
    ReviewSettings,
    Settings,
    load_settings,
)

__all__ = [
    "Settings",
    "GitHubSettings",
    "OpenAISettings",
    "LoggingSettings",
    "ReviewSettings",
    "load_settings",
]
