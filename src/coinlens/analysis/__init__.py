"""Bridge between the indicator pipeline and the external reasoning layer."""

from coinlens.analysis.models import AnalysisRequest, AnalysisResult
from coinlens.analysis.service import AnalysisService, Analyzer, build_request

__all__ = [
    "AnalysisRequest",
    "AnalysisResult",
    "AnalysisService",
    "Analyzer",
    "build_request",
]
