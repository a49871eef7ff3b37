"""Staged, progress-reporting execution of credibility analyses.

Provides:
- StagePipeline: sequential stages with cooperative cancellation
- PipelineController: one active run, supersede on restart
- Scheduler implementations: AsyncioScheduler (real timers), InstantScheduler (tests)
"""

from verinews.pipeline.scheduler import AsyncioScheduler, InstantScheduler, Scheduler
from verinews.pipeline.stages import Stage, StageRun, StageStatus
from verinews.pipeline.stage_pipeline import ProgressCallback, StagePipeline
from verinews.pipeline.controller import PipelineController

__all__ = [
    "AsyncioScheduler",
    "InstantScheduler",
    "Scheduler",
    "Stage",
    "StageRun",
    "StageStatus",
    "ProgressCallback",
    "StagePipeline",
    "PipelineController",
]
