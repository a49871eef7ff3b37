"""Stage and StageRun state for one analysis invocation.

Each stage moves pending -> processing -> complete exactly once, and its
progress (0-100) never decreases. A StageRun belongs to one invocation
and is discarded when that invocation completes or is superseded.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple

from verinews.config.vocabulary import ANALYSIS_STAGES
from verinews.utils.logging import new_run_id


class StageStatus(str, Enum):
    """Lifecycle status of a stage."""

    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETE = "complete"


@dataclass
class Stage:
    """One named analysis step with its own progress counter."""

    name: str
    label: str
    progress: int = 0
    status: StageStatus = StageStatus.PENDING

    def start(self) -> None:
        if self.status != StageStatus.PENDING:
            raise RuntimeError(f"Stage {self.name} cannot start from {self.status.value}")
        self.status = StageStatus.PROCESSING

    def advance(self, amount: int) -> int:
        """Raise progress by ``amount`` (clamped at 100) and return the new value."""
        if self.status != StageStatus.PROCESSING:
            raise RuntimeError(f"Stage {self.name} is not processing")
        if amount < 0:
            raise ValueError("Progress cannot regress")
        self.progress = min(100, self.progress + amount)
        return self.progress

    def complete(self) -> None:
        if self.status != StageStatus.PROCESSING or self.progress < 100:
            raise RuntimeError(f"Stage {self.name} cannot complete at {self.progress}%")
        self.status = StageStatus.COMPLETE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "label": self.label,
            "progress": self.progress,
            "status": self.status.value,
        }


@dataclass
class StageRun:
    """
    Ordered stages for one analysis invocation.

    Usage:
        run = StageRun.create()
        run.current_stage  # first stage not yet complete
        run.overall_progress  # mean progress across stages
    """

    run_id: str
    stages: List[Stage] = field(default_factory=list)

    @classmethod
    def create(
        cls,
        stage_table: Sequence[Tuple[str, str]] = ANALYSIS_STAGES,
        run_id: Optional[str] = None,
    ) -> "StageRun":
        return cls(
            run_id=run_id or new_run_id(),
            stages=[Stage(name=name, label=label) for name, label in stage_table],
        )

    @property
    def current_stage(self) -> Optional[Stage]:
        for stage in self.stages:
            if stage.status != StageStatus.COMPLETE:
                return stage
        return None

    @property
    def overall_progress(self) -> float:
        if not self.stages:
            return 0.0
        return sum(s.progress for s in self.stages) / len(self.stages)

    @property
    def is_complete(self) -> bool:
        return all(s.status == StageStatus.COMPLETE for s in self.stages)

    def get(self, name: str) -> Stage:
        for stage in self.stages:
            if stage.name == name:
                return stage
        raise KeyError(name)

    def snapshot(self) -> List[Dict[str, Any]]:
        """Plain-dict copy of every stage, safe to keep after the run moves on."""
        return [stage.to_dict() for stage in self.stages]


__all__ = ["Stage", "StageRun", "StageStatus"]
