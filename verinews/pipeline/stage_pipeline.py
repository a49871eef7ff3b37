"""Strictly sequential, progress-reporting analysis pipeline.

Stages run one after another in the fixed order of ANALYSIS_STAGES:
preprocessing -> sentiment -> pattern -> credibility -> cross_reference
-> confidence. Inside a stage, progress climbs in irregular steps until it
reaches 100, with one scheduler suspension per step. The AnalysisResult is
built only after the last stage is complete.

Cancellation is cooperative: after every suspension point the pipeline
asks ``is_current()`` and raises AnalysisSuperseded if the run was replaced.

Usage:
    from verinews.pipeline import StagePipeline, InstantScheduler

    pipeline = StagePipeline(scheduler=InstantScheduler())
    result = await pipeline.run(text, on_progress=lambda run: print(run.overall_progress))
"""

import inspect
from typing import Any, Awaitable, Callable, Optional, Sequence, Tuple, Union

from verinews.analysis.analyzer import CredibilityAnalyzer, validate_text
from verinews.analysis.sampler import BandSampler
from verinews.config.settings import settings
from verinews.config.vocabulary import ANALYSIS_STAGES
from verinews.errors import AnalysisSuperseded
from verinews.pipeline.scheduler import AsyncioScheduler, Scheduler
from verinews.pipeline.stages import Stage, StageRun
from verinews.schemas import AnalysisResult
from verinews.utils.logging import bind_stage_context, get_structured_logger

ProgressCallback = Callable[[StageRun], Union[None, Awaitable[None]]]


class StagePipeline:
    """
    Drives a StageRun through every stage, then runs the analyzer.

    Attributes:
        analyzer: CredibilityAnalyzer producing the final result
        scheduler: Suspension capability (real timers or instant)
        sampler: Random source for stage durations and progress steps,
            separate from the analyzer's so timing never shifts scores
    """

    def __init__(
        self,
        analyzer: Optional[CredibilityAnalyzer] = None,
        scheduler: Optional[Scheduler] = None,
        sampler: Optional[BandSampler] = None,
        stage_min_duration: Optional[float] = None,
        stage_max_duration: Optional[float] = None,
        progress_step_min: Optional[int] = None,
        progress_step_max: Optional[int] = None,
        stage_table: Sequence[Tuple[str, str]] = ANALYSIS_STAGES,
    ) -> None:
        self.analyzer = analyzer or CredibilityAnalyzer()
        self.scheduler = scheduler or AsyncioScheduler()
        self.sampler = sampler or BandSampler()
        self.stage_min_duration = (
            settings.stage_min_duration if stage_min_duration is None else stage_min_duration
        )
        self.stage_max_duration = (
            settings.stage_max_duration if stage_max_duration is None else stage_max_duration
        )
        self.progress_step_min = (
            settings.progress_step_min if progress_step_min is None else progress_step_min
        )
        self.progress_step_max = (
            settings.progress_step_max if progress_step_max is None else progress_step_max
        )
        if self.stage_min_duration < 0 or self.stage_min_duration > self.stage_max_duration:
            raise ValueError("stage durations must satisfy 0 <= min <= max")
        if self.progress_step_min < 1 or self.progress_step_min > self.progress_step_max:
            raise ValueError("progress steps must satisfy 1 <= min <= max")
        self.stage_table = tuple(stage_table)
        self._logger = get_structured_logger(__name__, component="StagePipeline")

    def new_run(self, run_id: Optional[str] = None) -> StageRun:
        return StageRun.create(self.stage_table, run_id=run_id)

    async def run(
        self,
        text: str,
        on_progress: Optional[ProgressCallback] = None,
        is_current: Optional[Callable[[], bool]] = None,
        stage_run: Optional[StageRun] = None,
    ) -> AnalysisResult:
        """
        Run every stage in order, then analyze the text.

        Args:
            text: Input text. Validated before any stage starts.
            on_progress: Called with the live StageRun after every transition
                and progress sample. May be a coroutine function.
            is_current: Returns False once this run has been superseded.
            stage_run: Pre-created StageRun (defaults to a fresh one).

        Returns:
            AnalysisResult built after the final stage completes.

        Raises:
            InvalidInputError: text is empty or blank.
            AnalysisSuperseded: is_current() turned False mid-run.
        """
        validate_text(text)
        stage_run = stage_run or self.new_run()
        log = self._logger.bind(run_id=stage_run.run_id)
        log.info("run_started", text=text, stages=len(stage_run.stages))

        total = len(stage_run.stages)
        for index, stage in enumerate(stage_run.stages):
            stage_log = bind_stage_context(log, stage.name, index, total)
            await self._run_stage(stage, stage_run, on_progress, is_current, stage_log)

        self._ensure_current(is_current, stage_run, log)
        result = self.analyzer.analyze(text)
        log.info("run_completed", verdict=result.verdict.value)
        return result

    async def _run_stage(
        self,
        stage: Stage,
        stage_run: StageRun,
        on_progress: Optional[ProgressCallback],
        is_current: Optional[Callable[[], bool]],
        log: Any,
    ) -> None:
        self._ensure_current(is_current, stage_run, log)
        duration = self.sampler.sample_band((self.stage_min_duration, self.stage_max_duration))

        stage.start()
        log.debug("stage_started", duration=round(duration, 3))
        await self._emit(on_progress, stage_run)

        while stage.progress < 100:
            step = min(
                self.sampler.randint(self.progress_step_min, self.progress_step_max),
                100 - stage.progress,
            )
            await self.scheduler.sleep(duration * step / 100.0)
            self._ensure_current(is_current, stage_run, log)
            stage.advance(step)
            await self._emit(on_progress, stage_run)

        self._ensure_current(is_current, stage_run, log)
        stage.complete()
        log.debug("stage_completed")
        await self._emit(on_progress, stage_run)

    @staticmethod
    async def _emit(on_progress: Optional[ProgressCallback], stage_run: StageRun) -> None:
        if on_progress is None:
            return
        outcome = on_progress(stage_run)
        if inspect.isawaitable(outcome):
            await outcome

    @staticmethod
    def _ensure_current(
        is_current: Optional[Callable[[], bool]],
        stage_run: StageRun,
        log: Any,
    ) -> None:
        if is_current is not None and not is_current():
            log.info("run_superseded")
            raise AnalysisSuperseded(stage_run.run_id)


__all__ = ["StagePipeline", "ProgressCallback"]
