"""
Data Models

PR changed files 도구의 데이터 모델들
"""

from .changed_file import ChangedFileEntry, InvocationParameters, FetchResult

__all__ = [
    "ChangedFileEntry",
    "InvocationParameters",
    "FetchResult",
]
