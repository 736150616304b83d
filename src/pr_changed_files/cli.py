"""
Command Line Interface

Usage:
    pr-changed-files --username <user> --token <token> --output changed_files.txt --pull-request-id 123

Credentials fall back to the GITHUB_USERNAME and GITHUB_TOKEN environment
variables. When either is missing the command exits successfully without
writing anything.
"""

import os
import argparse
import logging
from typing import List, Optional

from .config import DEFAULT_LOG_FORMAT, load_config, setup_logging
from .exceptions import PRChangedFilesError
from .fetcher import SKIP_MESSAGE, ChangedFilesFetcher


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pr-changed-files",
        description="Write the paths of the files changed in a pull request, one per line.",
    )
    parser.add_argument('--username', default=None, help="account name for Basic authentication")
    parser.add_argument('--token', default=None, help="credential paired with username (public read-only scope)")
    parser.add_argument('--output', required=True, help="path of the newline-delimited output file")
    parser.add_argument(
        '--pull-request-id', '--pullRequestId',
        dest='pull_request_id',
        required=True,
        help="identifier of the pull request to query",
    )
    parser.add_argument('--repository', default=None, metavar='OWNER/REPO', help="override the upstream repository")
    parser.add_argument('--config', default=None, metavar='PATH', help="YAML configuration file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    
    username = args.username if args.username is not None else os.getenv('GITHUB_USERNAME')
    token = args.token if args.token is not None else os.getenv('GITHUB_TOKEN')
    
    # configuration is not read at all on the skip path
    if not username or not token:
        logging.basicConfig(level=logging.INFO, format=DEFAULT_LOG_FORMAT)
        logger.info(SKIP_MESSAGE)
        return 0
    
    try:
        config = load_config(args.config)
        if args.repository:
            config.github.repository = args.repository
            config.validate()
    except (PRChangedFilesError, OSError) as e:
        logging.basicConfig(format=DEFAULT_LOG_FORMAT)
        logger.critical(f"Invalid configuration: {e}")
        return 1
    
    setup_logging(config)
    
    fetcher = ChangedFilesFetcher(config)
    try:
        result = fetcher.fetch_changed_files(username, token, args.output, args.pull_request_id)
    except (PRChangedFilesError, OSError) as e:
        # CRITICAL so the diagnostic survives any configured LOG_LEVEL
        logger.critical(f"Failed to fetch changed files for PR {args.pull_request_id}: {e}")
        return 1
    
    return result.exit_code
