"""
Changed File Data Models

Pull Request 변경 파일 관련 데이터 모델들
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, field_validator

from ..exceptions import ConfigurationError


class ChangedFileEntry(BaseModel):
    """PR files API 응답의 개별 항목"""
    model_config = ConfigDict(extra='ignore')

    filename: str
    status: Optional[str] = None
    additions: Optional[int] = None
    deletions: Optional[int] = None
    changes: Optional[int] = None
    sha: Optional[str] = None

    @field_validator('filename')
    @classmethod
    def validate_filename(cls, v):
        if not v:
            raise ValueError('filename must not be empty')
        return v


@dataclass
class InvocationParameters:
    """실행 파라미터"""
    output: str
    pull_request_id: str
    username: Optional[str] = None
    token: Optional[str] = None

    def __post_init__(self):
        if self.pull_request_id is not None:
            self.pull_request_id = str(self.pull_request_id).strip()

    def validate(self) -> None:
        """데이터 검증 (자격 증명 확인 이후에만 호출)"""
        errors = []
        if not self.output:
            errors.append("output path is required")
        if not self.pull_request_id:
            errors.append("pull request id is required")
        if errors:
            raise ConfigurationError(f"Invalid invocation: {'; '.join(errors)}")

    @property
    def has_credentials(self) -> bool:
        """username과 token이 모두 설정되었는지 확인"""
        return bool(self.username) and bool(self.token)


@dataclass
class FetchResult:
    """실행 결과"""
    skipped: bool
    output_path: Optional[Path] = None
    filenames: List[str] = field(default_factory=list)

    @property
    def exit_code(self) -> int:
        # failures raise, so any returned result is a success
        return 0
