"""
Vitality Use Case Port

Interface defining the contract for node vitality analysis.
"""

from abc import ABC, abstractmethod
from typing import TextIO, Union
from pathlib import Path

from netvitality.domain.models import VitalityResult, WeightedGraph


class IVitalityUseCase(ABC):
    """
    Inbound port for vitality analysis.

    A transport (CLI, socket loop, HTTP handler) hands over one graph
    description and receives either a result or a format diagnostic.
    """

    @abstractmethod
    def analyze(self, state: WeightedGraph) -> VitalityResult:
        """
        Run decomposition, reduction, scoring and selection.

        Args:
            state: Parsed graph; consumed by the run

        Returns:
            Scores and minimum-score selection
        """
        pass

    @abstractmethod
    def analyze_stream(self, stream: TextIO) -> VitalityResult:
        """Parse one graph from *stream* and analyze it."""
        pass

    @abstractmethod
    def analyze_file(self, path: Union[str, Path]) -> VitalityResult:
        """Parse the graph stored in *path* and analyze it."""
        pass

    @abstractmethod
    def process_stream(self, in_stream: TextIO, out_stream: TextIO) -> bool:
        """
        Read one graph and write exactly one line back.

        Returns:
            True when a result line was written, False for a diagnostic line
        """
        pass
