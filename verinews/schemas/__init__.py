"""Pydantic schemas for analysis output.

Usage:
    from verinews.schemas import AnalysisResult, Verdict
"""

from verinews.schemas.analysis_schema import AnalysisResult, SubScores, Verdict

__all__ = ["AnalysisResult", "SubScores", "Verdict"]
