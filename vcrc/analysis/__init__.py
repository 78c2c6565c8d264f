"""Entropy (exergy) analysis of solved refrigeration cycles."""

from vcrc.analysis.entropy import (
    EntropyAnalysisResult,
    EntropyAnalyzer,
    average,
    entropy_analysis,
)

__all__ = ["EntropyAnalysisResult", "EntropyAnalyzer", "average", "entropy_analysis"]
