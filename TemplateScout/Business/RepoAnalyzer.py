"""
Module to transform GitHub API responses into `TemplateAnalysis` records.
"""
import base64
import json
import logging
from typing import Any, Dict, List, Optional

from TemplateScout.GitHub.GitHubClient import GitHubClient
from TemplateScout.Model.AnalysisResult import AnalysisResult, AnalysisStatus
from TemplateScout.Model.TemplateAnalysis import TemplateAnalysis

logger = logging.getLogger(__name__)

NEXT_CONFIG = "next.config.js"
MANIFEST = "package.json"
TSCONFIG = "tsconfig.json"
TEST_MARKERS = ("test", "jest")


class RepoAnalyzer:
    @staticmethod
    def inspect_repository(repo: Dict[str, Any], client: GitHubClient) -> AnalysisResult:
        """Analyse a search result summary. Never raises; failures become FETCH_ERROR."""
        try:
            owner = repo["owner"]["login"]
            name = repo["name"]

            entries = client.list_contents(owner, name)
            names = [entry["name"] for entry in entries]
            if NEXT_CONFIG not in names or MANIFEST not in names:
                logger.debug("Skipping %s/%s: no %s or %s at root", owner, name, NEXT_CONFIG, MANIFEST)
                return AnalysisResult(AnalysisStatus.DISQUALIFIED)

            manifest = RepoAnalyzer.read_manifest(client, owner, name)
            dependencies = manifest.get("dependencies") or {}
            dev_dependencies = manifest.get("devDependencies") or {}

            analysis = TemplateAnalysis(
                name=name,
                owner=owner,
                stars=repo.get("stargazers_count", 0),
                description=repo.get("description"),
                dependencies=dependencies,
                dev_dependencies=dev_dependencies,
                has_typescript=TSCONFIG in names,
                has_tests=RepoAnalyzer.has_test_files(names),
                has_tailwind=dependencies.get("tailwindcss") or dev_dependencies.get("tailwindcss"),
                last_update=repo.get("pushed_at"),
                license=(repo.get("license") or {}).get("spdx_id"),
                topics=repo.get("topics") or [],
            )
            return AnalysisResult(AnalysisStatus.QUALIFIED, analysis=analysis)
        except Exception as e:
            name = repo.get("name") if isinstance(repo, dict) else repo
            logger.error("Failed to analyze repository: %s %s", name, e)
            return AnalysisResult(AnalysisStatus.FETCH_ERROR, error=str(e))

    @staticmethod
    def analyze_repository(repo: Dict[str, Any], client: GitHubClient) -> Optional[TemplateAnalysis]:
        return RepoAnalyzer.inspect_repository(repo, client).analysis

    @staticmethod
    def read_manifest(client: GitHubClient, owner: str, name: str) -> Dict[str, Any]:
        data = client.get_file_content(owner, name, MANIFEST)
        text = base64.b64decode(data["content"]).decode("utf-8")
        manifest = json.loads(text)
        if not isinstance(manifest, dict):
            raise ValueError(f"{MANIFEST} is not a JSON object")
        return manifest

    @staticmethod
    def has_test_files(names: List[str]) -> bool:
        # plain substring match, so "latest-release.txt" counts too
        return any(marker in n for n in names for marker in TEST_MARKERS)
