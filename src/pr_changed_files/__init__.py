"""
PR Changed Files

GitHub Pull Request 변경 파일 목록을 조회하여 검증 파이프라인용 파일로 기록하는 도구
"""

__version__ = "1.0.0"

from .fetcher import ChangedFilesFetcher

__all__ = ["ChangedFilesFetcher"]
