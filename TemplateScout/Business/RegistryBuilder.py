"""
Groups discovered templates into the categories shown by the registry view.
"""
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional

from TemplateScout.Model.TemplateAnalysis import TemplateAnalysis
from TemplateScout.Model.TemplateRegistry import CATEGORY_KEYS, TemplateRegistry

UI_FRAMEWORK_PACKAGES = {
    "@mui/material",
    "@chakra-ui/react",
    "antd",
    "@mantine/core",
    "@nextui-org/react",
    "@headlessui/react",
    "react-bootstrap",
    "semantic-ui-react",
}
UI_FRAMEWORK_PREFIXES = ("@radix-ui/",)

GRAPHQL_PACKAGES = {
    "graphql",
    "@apollo/client",
    "urql",
    "@urql/core",
    "graphql-request",
    "relay-runtime",
}


def _packages(template: TemplateAnalysis) -> Iterable[str]:
    yield from template.dependencies
    yield from template.dev_dependencies


def uses_ui_framework(template: TemplateAnalysis) -> bool:
    return any(
        pkg in UI_FRAMEWORK_PACKAGES or pkg.startswith(UI_FRAMEWORK_PREFIXES)
        for pkg in _packages(template)
    )


def uses_graphql(template: TemplateAnalysis) -> bool:
    return any(pkg in GRAPHQL_PACKAGES for pkg in _packages(template))


def categorize(templates: List[TemplateAnalysis]) -> Dict[str, List[str]]:
    categories: Dict[str, List[str]] = {key: [] for key in CATEGORY_KEYS}
    for template in templates:
        if uses_ui_framework(template):
            categories["ui-frameworks"].append(template.full_name)
        if template.has_typescript:
            categories["typescript"].append(template.full_name)
        if template.has_tailwind:
            categories["tailwind"].append(template.full_name)
        if uses_graphql(template):
            categories["graphql"].append(template.full_name)
    return categories


def build_registry(templates: List[TemplateAnalysis], generated_at: Optional[datetime] = None) -> TemplateRegistry:
    generated_at = generated_at or datetime.now(timezone.utc)
    return TemplateRegistry(
        last_updated=generated_at.isoformat(),
        templates=list(templates),
        categories=categorize(templates),
    )
