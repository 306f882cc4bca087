"""Analysis payload schema and executors."""

from .executor import BaseAnalysisExecutor, JsonFileAnalysisExecutor, StaticAnalysisExecutor
from .models import (
    AnalysisData,
    AnalysisResult,
    HolderAnalysis,
    HoneypotAnalysis,
    RugAnalysis,
    TokenAnalysis,
    TopHolder,
    VolumeAnalysis,
)

__all__ = [
    "AnalysisData",
    "AnalysisResult",
    "BaseAnalysisExecutor",
    "HolderAnalysis",
    "HoneypotAnalysis",
    "JsonFileAnalysisExecutor",
    "RugAnalysis",
    "StaticAnalysisExecutor",
    "TokenAnalysis",
    "TopHolder",
    "VolumeAnalysis",
]
