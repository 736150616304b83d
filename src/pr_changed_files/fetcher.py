"""
Changed Files Fetcher

Lists the files changed in a pull request and writes their paths,
one per line, for the downstream validation step.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional
from pydantic import ValidationError

from .config import AppConfig
from .exceptions import MalformedResponseError
from .github.client import GitHubClient
from .models.changed_file import ChangedFileEntry, FetchResult, InvocationParameters


logger = logging.getLogger(__name__)

SKIP_MESSAGE = "GitHub username or token not provided; skipping changed files lookup"


def parse_changed_files(files_data: List[Dict]) -> List[ChangedFileEntry]:
    """Validate raw API items, keeping response order."""
    entries = []
    for index, item in enumerate(files_data):
        try:
            entries.append(ChangedFileEntry.model_validate(item))
        except ValidationError as e:
            raise MalformedResponseError(f"Invalid file entry at index {index}: {e}") from e
    return entries


class ChangedFilesFetcher:
    """
    Produces a newline-delimited list of the paths changed in a pull request.
    
    When either credential is missing the run is skipped: nothing is written,
    deleted or requested, and the result still counts as a success.
    """
    
    def __init__(self, config: Optional[AppConfig] = None):
        self.config = config or AppConfig()
    
    def _create_client(self, username: str, token: str) -> GitHubClient:
        github = self.config.github
        return GitHubClient(
            username,
            token,
            base_url=github.api_base_url,
            timeout_seconds=github.timeout_seconds,
            user_agent=github.user_agent,
        )
    
    def fetch_changed_files(
        self,
        username: Optional[str],
        token: Optional[str],
        output: str,
        pull_request_id: str,
    ) -> FetchResult:
        """
        Fetch the changed file list and write it to ``output``.
        
        Args:
            username: Account name for Basic authentication
            token: Credential paired with username
            output: Destination file path
            pull_request_id: Pull request identifier
            
        Returns:
            FetchResult describing the run
            
        Raises:
            GitHubAPIError: Transport failure or non-success response
            ConfigurationError: Output path or pull request id is empty
            MalformedResponseError: An item lacks a usable ``filename``
            OSError: The output file cannot be deleted or written
        """
        params = InvocationParameters(
            output=output,
            pull_request_id=pull_request_id,
            username=username,
            token=token,
        )
        return self.run(params)
    
    def run(self, params: InvocationParameters) -> FetchResult:
        if not params.has_credentials:
            logger.info(SKIP_MESSAGE)
            return FetchResult(skipped=True)
        
        params.validate()
        
        output_path = Path(params.output)
        if output_path.exists():
            logger.info(f"Removing existing output file {output_path}")
            output_path.unlink()
        
        client = self._create_client(params.username, params.token)
        try:
            files_data = client.get_pull_request_files(self.config.github.repository, params.pull_request_id)
        finally:
            client.close()
        
        entries = parse_changed_files(files_data)
        filenames = [entry.filename for entry in entries]
        
        with open(output_path, 'w', encoding='utf-8', newline='\n') as f:
            for filename in filenames:
                f.write(filename + "\n")
        
        logger.info(f"Wrote {len(filenames)} changed files to {output_path}")
        return FetchResult(skipped=False, output_path=output_path, filenames=filenames)
