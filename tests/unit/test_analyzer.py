# Author: Bradley R. Kinnard - the mock has one job

"""
Unit tests for the analyzer contract and the mock backend.
Run with: pytest tests/unit/test_analyzer.py -v
"""

import pytest

from src.code_feedback.analyzer.base import Analyzer, AnalyzerError
from src.code_feedback.analyzer.mock import MockAnalyzer


def test_mock_formats_feedback():
    assert MockAnalyzer().analyze("good") == "AI feedback: Your code is good!"


def test_mock_accepts_empty_code():
    assert MockAnalyzer().analyze("") == "AI feedback: Your code is !"


def test_mock_leaves_braces_alone():
    """code is data, not a format string"""
    code = "def f(): return {x}"
    assert MockAnalyzer().analyze(code) == f"AI feedback: Your code is {code}!"


def test_mock_is_deterministic():
    a = MockAnalyzer()
    assert a.analyze("print(1)") == a.analyze("print(1)")


def test_analyzer_is_abstract():
    with pytest.raises(TypeError):
        Analyzer("nope")


def test_subclass_can_signal_failure():
    class Broken(Analyzer):
        def __init__(self):
            super().__init__("broken")

        def analyze(self, code: str) -> str:
            raise AnalyzerError("backend unreachable")

    with pytest.raises(AnalyzerError, match="unreachable"):
        Broken().analyze("x")
