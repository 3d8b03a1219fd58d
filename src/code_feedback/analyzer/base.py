# Author: Bradley R. Kinnard - all analyzers inherit from this or they don't exist

"""ABC for the analysis backend. Code in, feedback out, AnalyzerError when it can't."""

from abc import ABC, abstractmethod


class AnalyzerError(Exception):
    """backend couldn't produce feedback. handler turns this into a 500"""


class Analyzer(ABC):

    name: str

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def analyze(self, code: str) -> str:
        """
        override this. blocking is fine, the route runs it off the event loop.
        raise AnalyzerError on failure, never return None.
        """
        ...
