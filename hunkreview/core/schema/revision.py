from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class RevisionContext:
    owner: str
    repo: str
    pull_number: int
    title: str
    description: str = ""


@dataclass(frozen=True, slots=True)
class Opened:
    pass


@dataclass(frozen=True, slots=True)
class Synchronized:
    before: str
    after: str


@dataclass(frozen=True, slots=True)
class OtherEvent:
    action: str | None


TriggerEvent = Union[Opened, Synchronized, OtherEvent]
