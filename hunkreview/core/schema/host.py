from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class ComparedFile:
    filename: str
    status: str
    patch: Optional[str]
    previous_filename: Optional[str] = None
