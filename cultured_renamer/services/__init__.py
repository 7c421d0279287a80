"""Service layer - renamer orchestration and batch planning."""
from .renamer import CulturedRenamer, get_new_path
from .batch import BatchPlan, RelocationStats, plan_batch

__all__ = [
    "CulturedRenamer",
    "get_new_path",
    "BatchPlan",
    "RelocationStats",
    "plan_batch",
]
