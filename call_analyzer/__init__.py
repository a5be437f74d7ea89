from .analyzer import analyze
from .models import AnalysisResult

__all__ = ["analyze", "AnalysisResult"]
