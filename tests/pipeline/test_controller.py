"""Tests for PipelineController supersede and cancel semantics."""

import asyncio
import random

import pytest

from verinews.analysis import BandSampler, CredibilityAnalyzer
from verinews.errors import InvalidInputError
from verinews.pipeline import InstantScheduler, PipelineController, StagePipeline, StageRun
from verinews.schemas import AnalysisResult


@pytest.fixture
def controller():
    pipeline = StagePipeline(
        analyzer=CredibilityAnalyzer(sampler=BandSampler(random.Random(5))),
        scheduler=InstantScheduler(),
        sampler=BandSampler(random.Random(5)),
        stage_min_duration=0.1,
        stage_max_duration=0.3,
        progress_step_min=5,
        progress_step_max=20,
    )
    return PipelineController(pipeline)


async def spin(iterations: int = 10) -> None:
    """Let the event loop run other tasks for a few iterations."""
    for _ in range(iterations):
        await asyncio.sleep(0)


class TestStartAnalysis:
    """Tests for a single uninterrupted analysis."""

    @pytest.mark.asyncio
    async def test_resolves_with_result(self, controller):
        updates = []

        result = await controller.start_analysis("Some ordinary text", updates.append)

        assert isinstance(result, AnalysisResult)
        assert updates
        assert isinstance(updates[-1], StageRun)
        assert updates[-1].is_complete
        assert controller.is_running is False
        assert controller.current_run is None

    @pytest.mark.asyncio
    async def test_is_running_while_in_flight(self, controller):
        future = controller.start_analysis("Some ordinary text")

        assert controller.is_running is True
        assert controller.current_run is not None
        assert controller.current_token == controller.current_run.run_id

        await future
        assert controller.is_running is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "   ", "\t\n"])
    async def test_blank_input_rejected_synchronously(self, controller, text):
        updates = []

        with pytest.raises(InvalidInputError):
            controller.start_analysis(text, updates.append)

        await spin()
        assert updates == []
        assert controller.is_running is False
        assert controller.current_run is None

    @pytest.mark.asyncio
    async def test_callback_error_rejects_future(self, controller):
        def broken(stage_run):
            raise RuntimeError("render failed")

        future = controller.start_analysis("Some ordinary text", broken)

        with pytest.raises(RuntimeError, match="render failed"):
            await future
        assert controller.is_running is False


class TestSupersede:
    """Tests for restart while a run is in flight."""

    @pytest.mark.asyncio
    async def test_new_start_supersedes_old_run(self, controller):
        first_updates = []
        second_updates = []

        first = controller.start_analysis("First article text", first_updates.append)
        await spin(5)
        assert first_updates

        second = controller.start_analysis("Second article text", second_updates.append)
        count_at_supersede = len(first_updates)

        result = await second
        await spin()

        assert isinstance(result, AnalysisResult)
        assert not first.done()
        assert len(first_updates) == count_at_supersede
        assert second_updates[-1].is_complete

    @pytest.mark.asyncio
    async def test_each_run_has_own_stage_run(self, controller):
        first_runs = []
        second_runs = []

        controller.start_analysis("First article text", first_runs.append)
        await spin(3)
        second = controller.start_analysis("Second article text", second_runs.append)
        await second

        assert first_runs[0] is not second_runs[0]
        assert first_runs[0].run_id != second_runs[0].run_id
        assert second_runs[0].stages[0].status.value in ("processing", "complete")


class TestCancelAnalysis:
    """Tests for cancel_analysis()."""

    @pytest.mark.asyncio
    async def test_cancel_abandons_future(self, controller):
        updates = []
        future = controller.start_analysis("Some ordinary text", updates.append)
        await spin(5)

        assert controller.cancel_analysis() is True
        count_at_cancel = len(updates)
        await spin(200)

        assert not future.done()
        assert len(updates) == count_at_cancel
        assert controller.is_running is False

    @pytest.mark.asyncio
    async def test_cancel_when_idle(self, controller):
        assert controller.cancel_analysis() is False

    @pytest.mark.asyncio
    async def test_cancel_then_restart_runs_all_stages(self, controller):
        first = controller.start_analysis("First article text")
        await spin(5)
        controller.cancel_analysis()

        updates = []
        result = await controller.start_analysis("Second article text", updates.append)

        assert isinstance(result, AnalysisResult)
        assert not first.done()
        final = updates[-1].snapshot()
        assert [s["name"] for s in final] == [
            "preprocessing",
            "sentiment",
            "pattern",
            "credibility",
            "cross_reference",
            "confidence",
        ]
        assert all(s["status"] == "complete" for s in final)
