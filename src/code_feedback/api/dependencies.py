# Author: Bradley R. Kinnard - gatekeepers

"""
FastAPI dependencies. The analyzer lives here so swapping the mock for a real
backend (or a fake in tests, via app.dependency_overrides) never touches the route.
"""

from src.code_feedback.analyzer.base import Analyzer
from src.code_feedback.analyzer.mock import MockAnalyzer

# lazy init so we don't build the backend on import
_analyzer: Analyzer | None = None


def get_analyzer() -> Analyzer:
    global _analyzer
    if _analyzer is None:
        _analyzer = MockAnalyzer()
    return _analyzer
