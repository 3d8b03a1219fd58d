# Author: Bradley R. Kinnard - the AI that always agrees with you

"""Mock analyzer. Deterministic, no network. Swap for a real client in api/dependencies.py."""

from src.code_feedback.analyzer.base import Analyzer

FEEDBACK_TEMPLATE = "AI feedback: Your code is {code}!"


class MockAnalyzer(Analyzer):

    def __init__(self):
        super().__init__("mock")

    def analyze(self, code: str) -> str:
        return FEEDBACK_TEMPLATE.format(code=code)
