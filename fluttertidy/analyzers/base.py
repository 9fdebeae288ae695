"""Base classes for usage analyzers."""

from abc import ABC, abstractmethod
from typing import ClassVar

from ..context import AnalysisContext
from ..models import DependencyUsageReport, UsageReport


class Analyzer(ABC):
    """Contract for analyzers that classify one resource domain."""

    name: ClassVar[str]
    result_field: ClassVar[str]

    @abstractmethod
    def analyze(self, context: AnalysisContext) -> UsageReport | DependencyUsageReport:
        """Partition the declared universe of this domain into used and unused."""
