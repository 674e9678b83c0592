from hunkreview.core.acquisition.acquirer import DiffAcquirer
from hunkreview.core.acquisition.base import BaseDiffStrategy
from hunkreview.core.acquisition.full import FullDiffStrategy
from hunkreview.core.acquisition.incremental import IncrementalDiffStrategy

__all__ = [
    "DiffAcquirer",
    "BaseDiffStrategy",
    "FullDiffStrategy",
    "IncrementalDiffStrategy",
]
