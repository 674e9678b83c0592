from typing import Optional, assert_never

from hunkreview.core.acquisition.base import BaseDiffStrategy
from hunkreview.core.acquisition.full import FullDiffStrategy
from hunkreview.core.acquisition.incremental import IncrementalDiffStrategy
from hunkreview.core.exceptions import SourceError
from hunkreview.core.ports.host import PullRequestHost
from hunkreview.core.ports.logger import Logger
from hunkreview.core.schema.revision import (
    Opened,
    OtherEvent,
    RevisionContext,
    Synchronized,
    TriggerEvent,
)


class DiffAcquirer:
    def __init__(self, host: PullRequestHost, logger: Logger) -> None:
        self._host = host
        self._logger = logger

    def acquire(
        self,
        context: RevisionContext,
        event: TriggerEvent,
    ) -> Optional[str]:
        strategy = self._strategy_for(event)
        if strategy is None:
            self._logger.info(
                "Event does not carry a reviewable change-set",
                action=getattr(event, "action", None),
            )
            return None

        try:
            return strategy.fetch(context)
        except SourceError as error:
            self._logger.error(
                "Error getting diff",
                strategy=strategy.__class__.__name__,
                pull_number=context.pull_number,
                error=str(error),
            )
            return None

    def _strategy_for(self, event: TriggerEvent) -> Optional[BaseDiffStrategy]:
        match event:
            case Opened():
                self._logger.info("PR Opened")
                return FullDiffStrategy(self._host)
            case Synchronized(before=before, after=after):
                self._logger.info("PR Synchronized", before=before, after=after)
                return IncrementalDiffStrategy(self._host, before, after)
            case OtherEvent():
                return None
            case _:
                assert_never(event)
