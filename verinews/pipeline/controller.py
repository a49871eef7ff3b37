"""Single-slot analysis controller with supersede-on-restart semantics.

At most one analysis run is logically active per controller. Every
start_analysis() call mints a new run token and makes it current; an
older run notices at its next suspension point that its token is no
longer current and exits silently. Its future is abandoned: it is
never resolved and never rejected.

Usage:
    controller = PipelineController()
    result = await controller.start_analysis(text, on_stage_update=render)

    controller.cancel_analysis()  # abandon the in-flight run
"""

import asyncio
from typing import Optional, Set

from verinews.config.logging import get_logger
from verinews.analysis.analyzer import validate_text
from verinews.errors import AnalysisSuperseded
from verinews.pipeline.stage_pipeline import ProgressCallback, StagePipeline
from verinews.pipeline.stages import StageRun
from verinews.schemas import AnalysisResult


class PipelineController:
    """
    Owns the single "latest run" slot for a StagePipeline.

    Attributes:
        pipeline: StagePipeline executing each run
    """

    def __init__(self, pipeline: Optional[StagePipeline] = None):
        self.pipeline = pipeline or StagePipeline()
        self._current_token: Optional[str] = None
        self._current_run: Optional[StageRun] = None
        self._tasks: Set[asyncio.Task] = set()
        self._logger = get_logger("PipelineController")

    @property
    def current_token(self) -> Optional[str]:
        return self._current_token

    @property
    def current_run(self) -> Optional[StageRun]:
        """StageRun of the active analysis, None when idle."""
        return self._current_run

    @property
    def is_running(self) -> bool:
        return self._current_token is not None

    def start_analysis(
        self,
        text: str,
        on_stage_update: Optional[ProgressCallback] = None,
    ) -> "asyncio.Future[AnalysisResult]":
        """
        Begin a new analysis, superseding any run in flight.

        Must be called from within a running event loop.

        Args:
            text: Text to analyze.
            on_stage_update: Called with the live StageRun on every progress sample.

        Returns:
            Future resolving to the AnalysisResult, unless this run is
            superseded, in which case it stays pending forever.

        Raises:
            InvalidInputError: text is empty or blank (no stage is started).
        """
        validate_text(text)
        loop = asyncio.get_running_loop()

        if self._current_token is not None:
            self._logger.info("Superseding in-flight analysis", run_id=self._current_token)

        stage_run = self.pipeline.new_run()
        token = stage_run.run_id
        self._current_token = token
        self._current_run = stage_run

        future: asyncio.Future = loop.create_future()
        task = loop.create_task(self._drive(token, text, stage_run, on_stage_update, future))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

        self._logger.info("Analysis started", run_id=token, text=text)
        return future

    def cancel_analysis(self) -> bool:
        """
        Mark the current run superseded.

        Returns:
            True if a run was in flight, False if the controller was idle.
        """
        if self._current_token is None:
            return False
        self._logger.info("Analysis cancelled", run_id=self._current_token)
        self._release()
        return True

    def _is_current(self, token: str) -> bool:
        return self._current_token == token

    def _release(self) -> None:
        self._current_token = None
        self._current_run = None

    async def _drive(
        self,
        token: str,
        text: str,
        stage_run: StageRun,
        on_stage_update: Optional[ProgressCallback],
        future: asyncio.Future,
    ) -> None:
        try:
            result = await self.pipeline.run(
                text,
                on_progress=on_stage_update,
                is_current=lambda: self._is_current(token),
                stage_run=stage_run,
            )
        except AnalysisSuperseded:
            self._logger.debug("Superseded run exited", run_id=token)
            return
        except Exception as e:
            if not self._is_current(token):
                return
            self._logger.error("Analysis failed", run_id=token, error=str(e))
            self._release()
            if not future.done():
                future.set_exception(e)
            return

        if not self._is_current(token):
            return
        self._release()
        if not future.done():
            future.set_result(result)


__all__ = ["PipelineController"]
