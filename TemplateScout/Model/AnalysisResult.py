from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from TemplateScout.Model.TemplateAnalysis import TemplateAnalysis


class AnalysisStatus(Enum):
    QUALIFIED = "qualified"
    DISQUALIFIED = "disqualified"
    FETCH_ERROR = "fetch_error"


"""Outcome of analysing one repository, separating "not a template" from "could not tell"."""
@dataclass(frozen=True)
class AnalysisResult:
    status: AnalysisStatus
    analysis: Optional[TemplateAnalysis] = None
    error: Optional[str] = None

    @property
    def qualified(self) -> bool:
        return self.status is AnalysisStatus.QUALIFIED

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "analysis": self.analysis.to_dict() if self.analysis else None,
            "error": self.error,
        }
