
"""GitHub API error classes."""
from typing import Optional


class GitHubError(Exception):

    def __init__(self, message: str, status_code: int):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


"""Raised when GitHub API returns 401 Unauthorized (invalid or missing token)."""
class GitHubUnauthorizedError(GitHubError):
    def __init__(self, message: str = "Unauthorized: Invalid GitHub token"):
        super().__init__(message, 401)


"""Raised when GitHub API returns 404 for a repository or path."""
class GitHubNotFoundError(GitHubError):
    def __init__(self, message: str = "Not found"):
        super().__init__(message, 404)


"""Raised when GitHub API returns 403 rate limit exceeded.
        Attributes:
            reset_time: optional epoch seconds when rate limit resets
            message: message from API (if any)
"""
class GitHubRateLimitError(GitHubError):
    def __init__(self, reset_time: Optional[int] = None, message: str = "Rate limited: GitHub API quota exceeded"):
        super().__init__(message, 429)
        self.reset_time = reset_time
