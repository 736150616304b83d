"""
GitHub API Client

Handles GitHub API Basic authentication and the pull request file listing.
A single request per run: no retries and no pagination.
"""

import base64
import time
import logging
from typing import Dict, List, Optional
from datetime import datetime
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..exceptions import PRChangedFilesError


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.github.com"
USER_AGENT = "PR-Changed-Files/1.0"


class GitHubAPIError(PRChangedFilesError):
    """GitHub API related errors"""
    def __init__(self, message: str, status_code: Optional[int] = None, response_data: Optional[Dict] = None):
        super().__init__(message)
        self.status_code = status_code
        self.response_data = response_data


class RateLimitExceeded(GitHubAPIError):
    """GitHub API rate limit exceeded"""
    def __init__(self, reset_time: datetime, status_code: Optional[int] = None):
        super().__init__(f"Rate limit exceeded. Resets at {reset_time}", status_code=status_code)
        self.reset_time = reset_time


def basic_auth_header(username: str, token: str) -> str:
    """Build the ``Authorization`` value for HTTP Basic authentication."""
    credentials = f"{username}:{token}".encode("utf-8")
    return f"Basic {base64.b64encode(credentials).decode('ascii')}"


class GitHubClient:
    """
    GitHub API client authenticated with a username and token pair.
    
    Every call issues exactly one HTTP request. Failures are raised as
    GitHubAPIError and never retried.
    """
    
    def __init__(
        self,
        username: str,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: Optional[float] = None,
        user_agent: str = USER_AGENT,
    ):
        """
        Initialize GitHub client.
        
        Args:
            username: Account name for Basic authentication
            token: Credential paired with username
            base_url: GitHub API base URL (default: https://api.github.com)
            timeout_seconds: Request timeout; None keeps the requests default
            user_agent: User-Agent header value
        """
        if not username or not token:
            raise ValueError("username and token are required")
        
        self.username = username
        self.token = token
        self.base_url = base_url.rstrip('/')
        self.timeout_seconds = timeout_seconds
        self.user_agent = user_agent
        self.session = self._create_session()
        self.rate_limit_remaining: Optional[int] = None
        
    def _create_session(self) -> requests.Session:
        """Create requests session with retries disabled and authentication."""
        session = requests.Session()
        
        adapter = HTTPAdapter(max_retries=Retry(total=0, read=False))
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        
        session.headers.update({
            'Authorization': basic_auth_header(self.username, self.token),
            'Accept': 'application/vnd.github.v3+json',
            'User-Agent': self.user_agent,
        })
        
        return session
    
    @property
    def headers(self) -> Dict[str, str]:
        return dict(self.session.headers)
    
    def _update_rate_limit(self, response: requests.Response) -> None:
        """Record rate limit information from response headers."""
        remaining = response.headers.get('X-RateLimit-Remaining')
        if remaining is not None:
            self.rate_limit_remaining = int(remaining)
            logger.debug(f"Rate limit remaining: {self.rate_limit_remaining}")
    
    @staticmethod
    def _error_data(response: requests.Response) -> Dict:
        if not response.content:
            return {}
        try:
            data = response.json()
        except ValueError:
            return {'message': response.text}
        return data if isinstance(data, dict) else {'message': str(data)}
    
    def _make_request(self, method: str, endpoint: str, **kwargs) -> requests.Response:
        """
        Make one authenticated request to the GitHub API.
        
        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: API endpoint (without base URL)
            **kwargs: Additional arguments for requests
            
        Returns:
            Response object
            
        Raises:
            GitHubAPIError: For transport failures and non-success statuses
            RateLimitExceeded: When the API reports the rate limit is exhausted
        """
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        if self.timeout_seconds is not None:
            kwargs.setdefault('timeout', self.timeout_seconds)
        
        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            logger.error(f"Request failed: {e}")
            raise GitHubAPIError(f"Request failed: {str(e)}") from e
        
        self._update_rate_limit(response)
        
        exhausted = response.status_code == 403 and response.headers.get('X-RateLimit-Remaining') == '0'
        if response.status_code == 429 or exhausted:
            reset_time = datetime.fromtimestamp(int(response.headers.get('X-RateLimit-Reset', time.time() + 3600)))
            raise RateLimitExceeded(reset_time, status_code=response.status_code)
        
        if not response.ok:
            error_data = self._error_data(response)
            raise GitHubAPIError(
                f"GitHub API error: {response.status_code} - {error_data.get('message', 'Unknown error')}",
                status_code=response.status_code,
                response_data=error_data
            )
        
        return response
    
    def get_pull_request_files(self, repository: str, pull_request_id: str) -> List[Dict]:
        """
        Get files changed in a pull request.
        
        Only the first page of results is returned.
        
        Args:
            repository: Repository in 'owner/repo' form
            pull_request_id: Pull request identifier
            
        Returns:
            List of file change data, in API order
        """
        logger.info(f"Fetching PR files for {repository}#{pull_request_id}")
        
        response = self._make_request('GET', f'/repos/{repository}/pulls/{pull_request_id}/files')
        
        try:
            files = response.json()
        except ValueError as e:
            raise GitHubAPIError(
                f"Response body is not valid JSON: {e}",
                status_code=response.status_code
            ) from e
        
        if not isinstance(files, list):
            raise GitHubAPIError(
                f"Expected a JSON array of files, got {type(files).__name__}",
                status_code=response.status_code
            )
        
        logger.info(f"Found {len(files)} changed files")
        return files
    
    def close(self) -> None:
        self.session.close()
