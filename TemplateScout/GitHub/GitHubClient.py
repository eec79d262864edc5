"""
Lightweight GitHub API client to centralize HTTP interactions and error handling.
"""
from typing import Any, Dict, Optional, List
import os
import requests
from TemplateScout.Exception.GitHubError import (
    GitHubError,
    GitHubNotFoundError,
    GitHubRateLimitError,
    GitHubUnauthorizedError,
)
from TemplateScout.Utility.auth import get_github_token

class GitHubClient:
    def __init__(self, token: Optional[str] = None, session: Optional[requests.Session] = None):
        self.session = session or requests.Session()
        token = token or get_github_token()
        if token:
            self.session.headers.update({"Authorization": f"Bearer {token}"})
        # Accept header to read topics
        self.session.headers.update({"Accept": "application/vnd.github.mercy-preview+json"})
        self.base = os.environ.get("GITHUB_API_ROOT", "https://api.github.com")

    def _handle_response(self, response: requests.Response, target: Optional[str] = None) -> Any:
        if response.status_code == 404:
            raise GitHubNotFoundError(f"Not found: {target}")
        elif response.status_code == 401:
            raise GitHubUnauthorizedError()
        elif response.status_code == 403:
            reset = response.headers.get("X-RateLimit-Reset")
            raise GitHubRateLimitError(int(reset) if reset and reset.isdigit() else None)
        elif response.status_code != 200:
            raise GitHubError(f"GitHub API error: {response.status_code}", response.status_code)
        return response.json()

    def get_repo(self, repo_full_name: str) -> Dict[str, Any]:
        url = f"{self.base}/repos/{repo_full_name}"
        response = self.session.get(url)
        return self._handle_response(response, repo_full_name)

    def search_repositories(
        self,
        query: str,
        sort: str = "stars",
        order: Optional[str] = None,
        per_page: int = 30,
    ) -> List[Dict[str, Any]]:
        """Return the first page of repository summaries matching `query`."""
        url = f"{self.base}/search/repositories"
        params = {"q": query, "sort": sort, "per_page": min(per_page, 100)}
        if order:
            params["order"] = order
        response = self.session.get(url, params=params)
        data = self._handle_response(response, query)
        return data.get("items", [])

    def list_contents(self, owner: str, repo: str, path: str = "") -> List[Dict[str, Any]]:
        url = f"{self.base}/repos/{owner}/{repo}/contents/{path}"
        response = self.session.get(url)
        data = self._handle_response(response, f"{owner}/{repo}/{path}")
        if not isinstance(data, list):
            raise GitHubError(f"Not a directory: {owner}/{repo}/{path}", response.status_code)
        return data

    def get_file_content(self, owner: str, repo: str, path: str) -> Dict[str, Any]:
        """Fetch one file entry; its `content` field is base64 encoded."""
        url = f"{self.base}/repos/{owner}/{repo}/contents/{path}"
        response = self.session.get(url)
        return self._handle_response(response, f"{owner}/{repo}/{path}")
