from dataclasses import dataclass, field
from typing import Any, Dict, List

from TemplateScout.Model.TemplateAnalysis import TemplateAnalysis

CATEGORY_KEYS = ("ui-frameworks", "typescript", "tailwind", "graphql")


"""Snapshot of discovered templates grouped into categories."""
@dataclass
class TemplateRegistry:
    last_updated: str
    templates: List[TemplateAnalysis] = field(default_factory=list)
    categories: Dict[str, List[str]] = field(
        default_factory=lambda: {key: [] for key in CATEGORY_KEYS}
    )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lastUpdated": self.last_updated,
            "templates": [t.to_dict() for t in self.templates],
            "categories": {key: list(self.categories.get(key, [])) for key in CATEGORY_KEYS},
        }
