"""
GitHub Integration Layer

This module provides the GitHub API client used to list the files
changed in a pull request.
"""

from .client import GitHubClient, GitHubAPIError, RateLimitExceeded, basic_auth_header

__all__ = ['GitHubClient', 'GitHubAPIError', 'RateLimitExceeded', 'basic_auth_header']
