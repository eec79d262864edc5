from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

OMITTED_WHEN_ABSENT = ("hasTailwind", "lastUpdate", "license")

"""Flat analysis record for one Next.js template candidate."""
@dataclass(frozen=True)
class TemplateAnalysis:
    name: str
    owner: str
    stars: int
    description: Optional[str] = None
    dependencies: Dict[str, str] = field(default_factory=dict)
    dev_dependencies: Dict[str, str] = field(default_factory=dict)
    has_typescript: bool = False
    has_tests: bool = False
    # tailwindcss version range as declared, not a strict flag
    has_tailwind: Optional[str] = None
    last_update: Optional[str] = None
    license: Optional[str] = None
    topics: List[str] = field(default_factory=list)

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    def to_dict(self) -> Dict[str, Any]:
        record = {
            "name": self.name,
            "owner": self.owner,
            "stars": self.stars,
            "description": self.description,
            "dependencies": dict(self.dependencies),
            "devDependencies": dict(self.dev_dependencies),
            "hasTypescript": self.has_typescript,
            "hasTests": self.has_tests,
            "hasTailwind": self.has_tailwind,
            "lastUpdate": self.last_update,
            "license": self.license,
            "topics": list(self.topics),
        }
        # absent tailwind/push date/license are left out of the record, not written as null
        for key in OMITTED_WHEN_ABSENT:
            if record[key] is None:
                del record[key]
        return record

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TemplateAnalysis":
        return cls(
            name=data["name"],
            owner=data["owner"],
            stars=data.get("stars", 0),
            description=data.get("description"),
            dependencies=data.get("dependencies") or {},
            dev_dependencies=data.get("devDependencies") or {},
            has_typescript=bool(data.get("hasTypescript", False)),
            has_tests=bool(data.get("hasTests", False)),
            has_tailwind=data.get("hasTailwind"),
            last_update=data.get("lastUpdate"),
            license=data.get("license"),
            topics=data.get("topics") or [],
        )
