import json
import logging
from typing import Any, Dict, List, Optional

from TemplateScout.Business.RepoAnalyzer import RepoAnalyzer
from TemplateScout.GitHub.GitHubClient import GitHubClient
from TemplateScout.Model.TemplateAnalysis import TemplateAnalysis
from TemplateScout.Utility.config import DiscoveryConfig

logger = logging.getLogger(__name__)

SEARCH_QUERIES = [
    "nextjs template stars:>100",
    "next.js starter stars:>100",
    "next.js boilerplate stars:>100",
    "nextjs typescript template stars:>100",
]
SEARCH_PAGE_SIZE = 50

TRENDING_QUERY = "nextjs created:>2023-01-01 stars:>500"
TRENDING_PAGE_SIZE = 20


class TemplateAccumulator:
    """Insertion-ordered set of analyses keyed by their serialized JSON text.

    Two records are the same only if they serialize identically, so a repository
    seen twice with a different star count is kept twice.
    """

    def __init__(self):
        self._items: Dict[str, TemplateAnalysis] = {}

    @staticmethod
    def key(analysis: TemplateAnalysis) -> str:
        return json.dumps(analysis.to_dict(), ensure_ascii=False)

    def add(self, analysis: TemplateAnalysis) -> bool:
        key = self.key(analysis)
        if key in self._items:
            return False
        self._items[key] = analysis
        return True

    def to_list(self) -> List[TemplateAnalysis]:
        return list(self._items.values())

    def __len__(self) -> int:
        return len(self._items)


class DiscoveryBusiness:

    """Runs the fixed template searches and collects qualifying analyses."""
    def __init__(self, config: Optional[DiscoveryConfig] = None, client: Optional[GitHubClient] = None):
        self.config = config or DiscoveryConfig.from_env()
        self.client = client or GitHubClient(token=self.config.github_token)

    def DiscoverTemplates(self) -> List[TemplateAnalysis]:
        templates = TemplateAccumulator()

        for query in SEARCH_QUERIES:
            logger.info("Searching: %s", query)
            results = self.client.search_repositories(query, sort="stars", per_page=SEARCH_PAGE_SIZE)
            self._CollectResults(results, templates, min_stars=self.config.min_stars)

        logger.info("Searching trending: %s", TRENDING_QUERY)
        trending = self.client.search_repositories(
            TRENDING_QUERY, sort="stars", order="desc", per_page=TRENDING_PAGE_SIZE
        )
        # trending results skip the star threshold
        self._CollectResults(trending, templates, min_stars=None)

        logger.info("Discovered %d templates", len(templates))
        return templates.to_list()

    def _CollectResults(
        self,
        results: List[Dict[str, Any]],
        templates: TemplateAccumulator,
        min_stars: Optional[int],
    ) -> None:
        for repo in results:
            if len(templates) >= self.config.max_templates:
                break

            analysis = RepoAnalyzer.analyze_repository(repo, self.client)
            if analysis is None:
                continue
            if min_stars is not None and analysis.stars < min_stars:
                logger.debug("Skipping %s: %d stars below %d", analysis.full_name, analysis.stars, min_stars)
                continue
            templates.add(analysis)


def serialize_templates(templates: List[TemplateAnalysis]) -> str:
    return json.dumps([t.to_dict() for t in templates], indent=2, ensure_ascii=False)


def write_snapshot(templates: List[TemplateAnalysis], path: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(serialize_templates(templates))
    logger.info("Wrote %d templates to %s", len(templates), path)


def read_snapshot(path: str) -> List[TemplateAnalysis]:
    with open(path, "r", encoding="utf-8") as f:
        return [TemplateAnalysis.from_dict(item) for item in json.load(f)]
