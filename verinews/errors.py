"""Error kinds raised by the analysis engine and pipeline."""


class InvalidInputError(ValueError):
    """Text is empty or whitespace-only; raised before any stage starts."""


class AnalysisSuperseded(Exception):
    """A newer run replaced this one; the run exits at its next suspension point.

    Never surfaced to the caller of the superseded run.
    """

    def __init__(self, run_id: str):
        super().__init__(f"Analysis run {run_id} was superseded")
        self.run_id = run_id


__all__ = ["InvalidInputError", "AnalysisSuperseded"]
