"""
Configuration Management

시스템 설정 관리
"""

import os
import logging
from dataclasses import dataclass, field
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional
import yaml

from .exceptions import ConfigurationError


DEFAULT_REPOSITORY = "microsoft/MixedRealityToolkit-Unity"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _env_number(name: str, default, cast):
    """숫자 환경 변수 읽기 (형식 오류는 ConfigurationError)"""
    value = os.getenv(name)
    if not value:
        return default
    try:
        return cast(value)
    except ValueError as e:
        raise ConfigurationError(f"Invalid value for {name}: {value!r}") from e


@dataclass
class GitHubConfig:
    """GitHub API 설정"""
    api_base_url: str = "https://api.github.com"
    repository: str = DEFAULT_REPOSITORY
    timeout_seconds: Optional[float] = None
    user_agent: str = "PR-Changed-Files/1.0"


@dataclass
class LoggingConfig:
    """로깅 설정"""
    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT
    file_path: Optional[str] = None
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5


@dataclass
class AppConfig:
    """전체 애플리케이션 설정"""
    github: GitHubConfig = field(default_factory=GitHubConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    debug: bool = False
    
    @classmethod
    def from_env(cls) -> "AppConfig":
        """환경 변수에서 설정 로드"""
        return cls(
            github=GitHubConfig(
                api_base_url=os.getenv("GITHUB_API_URL", "https://api.github.com"),
                repository=os.getenv("PR_CHANGED_FILES_REPOSITORY") or DEFAULT_REPOSITORY,
                timeout_seconds=_env_number("GITHUB_TIMEOUT", None, float),
                user_agent=os.getenv("GITHUB_USER_AGENT", "PR-Changed-Files/1.0"),
            ),
            logging=LoggingConfig(
                level=os.getenv("LOG_LEVEL", "INFO"),
                format=os.getenv("LOG_FORMAT", DEFAULT_LOG_FORMAT),
                file_path=os.getenv("LOG_FILE"),
                max_file_size=_env_number("LOG_MAX_SIZE", 10 * 1024 * 1024, int),
                backup_count=_env_number("LOG_BACKUP_COUNT", 5, int),
            ),
            debug=os.getenv("DEBUG", "false").lower() == "true",
        )
    
    @classmethod
    def from_yaml(cls, config_path: str) -> "AppConfig":
        """YAML 파일에서 설정 로드"""
        config_file = Path(config_path)
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        
        with open(config_file, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f) or {}
        
        return cls(
            github=GitHubConfig(**config_data.get('github', {})),
            logging=LoggingConfig(**config_data.get('logging', {})),
            debug=config_data.get('debug', False),
        )
    
    def validate(self) -> None:
        """설정 유효성 검사"""
        errors = []
        
        # 저장소 형식 확인 (owner/repo)
        owner, _, name = self.github.repository.partition('/')
        if not owner or not name or '/' in name:
            errors.append(f"Repository must be in format 'owner/repo': {self.github.repository}")
        
        if not self.github.api_base_url.startswith(('http://', 'https://')):
            errors.append(f"Invalid API base URL: {self.github.api_base_url}")
        
        if self.github.timeout_seconds is not None and self.github.timeout_seconds <= 0:
            errors.append("Timeout must be positive")
        
        # 로그 레벨 검증
        valid_log_levels = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
        if self.logging.level.upper() not in valid_log_levels:
            errors.append(f"Invalid log level: {self.logging.level}")
        
        if errors:
            raise ConfigurationError(f"Configuration validation failed: {'; '.join(errors)}")
    
    def to_dict(self) -> Dict[str, Any]:
        """설정을 딕셔너리로 변환"""
        return {
            'github': {
                'api_base_url': self.github.api_base_url,
                'repository': self.github.repository,
                'timeout_seconds': self.github.timeout_seconds,
                'user_agent': self.github.user_agent,
            },
            'logging': {
                'level': self.logging.level,
                'format': self.logging.format,
                'file_path': self.logging.file_path,
                'max_file_size': self.logging.max_file_size,
                'backup_count': self.logging.backup_count,
            },
            'debug': self.debug,
        }


def setup_logging(config: AppConfig) -> None:
    """로깅 설정"""
    level = logging.DEBUG if config.debug else getattr(logging, config.logging.level.upper())
    logging.basicConfig(level=level, format=config.logging.format)
    
    # 파일 로깅이 설정된 경우 로테이션 설정
    if config.logging.file_path:
        handler = RotatingFileHandler(
            config.logging.file_path,
            maxBytes=config.logging.max_file_size,
            backupCount=config.logging.backup_count,
        )
        handler.setFormatter(logging.Formatter(config.logging.format))
        logging.getLogger().addHandler(handler)


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """설정 파일이 있으면 YAML에서, 없으면 환경 변수에서 로드 후 검증"""
    config = AppConfig.from_yaml(config_path) if config_path else AppConfig.from_env()
    config.validate()
    return config
