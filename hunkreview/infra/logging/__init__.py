from hunkreview.infra.logging.actions import ActionsLogger
from hunkreview.infra.logging.console import ConsoleLogger
from hunkreview.infra.logging.logfire import LogfireLogger, configure_logfire

__all__ = ["ActionsLogger", "ConsoleLogger", "LogfireLogger", "configure_logfire"]
