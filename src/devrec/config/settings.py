"""설정 관리 모듈

YAML 설정 파일을 로드하고 검증하는 기능을 제공합니다.
Pydantic을 사용하여 타입 안전성과 검증을 보장합니다.
JSON은 YAML의 부분집합이므로 기존 config.json 도 그대로 읽을 수 있습니다.
"""

import os
import re
from pathlib import Path
from typing import List, Literal, Optional
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel
import logging

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "DEVREC_CONFIG"
CONFIG_DIR = Path("~/.config/devrec")
CONFIG_FILE_NAMES = ("config.yml", "config.yaml", "config.json")

_EMAIL_PATTERN = re.compile(r'^[^@\s]+@[^@\s]+\.[^@\s]+$')
_LOCALE_PATTERN = re.compile(r'^[A-Za-z]{2,3}(-[A-Za-z]{2,4})?$')

BranchStrategy = Literal["all", "remote"]
GroupBy = Literal["repo", "category"]


def expand_tilde(filepath: str) -> str:
    """경로 앞의 ~ 를 홈 디렉토리로 확장"""
    if filepath == "~" or filepath.startswith("~/"):
        return str(Path.home()) + filepath[1:]
    return filepath


class _StrictModel(BaseModel):
    """snake_case / camelCase 키를 모두 허용하고 알 수 없는 키는 거부"""
    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class LoggingConfig(_StrictModel):
    """로깅 설정"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class RepoConfig(_StrictModel):
    """대상 저장소 설정"""
    name: str
    path: str
    main_branch: Optional[str] = None

    @property
    def expanded_path(self) -> str:
        return expand_tilde(self.path)


class DevrecConfig(_StrictModel):
    """전체 설정"""
    author_emails: List[str] = Field(min_length=1)
    repos: List[RepoConfig]
    sprint_length: int = Field(default=2, gt=0)
    group_by: GroupBy = "repo"
    locale: str = "en-US"
    main_branch: str = "main"
    branch_strategy: BranchStrategy = "all"
    logging: Optional[LoggingConfig] = None

    @field_validator('author_emails')
    @classmethod
    def validate_author_emails(cls, v):
        invalid = [email for email in v if not _EMAIL_PATTERN.match(email)]
        if invalid:
            raise ValueError(f"Invalid email address: {', '.join(invalid)}")
        return v

    @field_validator('locale')
    @classmethod
    def validate_locale(cls, v):
        if not _LOCALE_PATTERN.match(v):
            raise ValueError(
                "Invalid locale format. Use formats like 'en-US', 'it-IT', 'fr-FR', etc."
            )
        return v

    def get_repository_by_name(self, name: str) -> Optional[RepoConfig]:
        """이름으로 저장소 설정 조회"""
        for repo in self.repos:
            if repo.name == name:
                return repo
        return None

    def main_branch_for(self, repo: RepoConfig) -> str:
        """저장소별 오버라이드를 반영한 메인 브랜치"""
        return repo.main_branch or self.main_branch


def _format_validation_error(error: ValidationError) -> str:
    lines = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"]) or "(root)"
        lines.append(f"  - {location}: {detail['msg']}")
    return "\n".join(lines)


def load_config(config_path: str) -> DevrecConfig:
    """설정 파일 로드

    Args:
        config_path: 설정 파일 경로

    Returns:
        로드된 설정 객체

    Raises:
        FileNotFoundError: 설정 파일이 존재하지 않는 경우
        ValueError: 설정 파일 형식이 잘못된 경우
    """
    config_path = expand_tilde(config_path)
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML format: {e}")
    except PermissionError:
        raise ValueError(
            f"Permission denied reading config at {config_path}. "
            "Check file permissions and try again."
        )

    if not isinstance(config_data, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    try:
        config = DevrecConfig(**config_data)
    except ValidationError as e:
        raise ValueError(f"Invalid config {config_path}:\n{_format_validation_error(e)}")

    logger.info(f"Loaded configuration from: {config_path}")
    return config


def get_default_config_path() -> str:
    """기본 설정 파일 경로 반환"""
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return expand_tilde(env_path)

    config_dir = expand_tilde(str(CONFIG_DIR))
    for file_name in CONFIG_FILE_NAMES:
        candidate = os.path.join(config_dir, file_name)
        if os.path.exists(candidate):
            return candidate

    return os.path.join(config_dir, CONFIG_FILE_NAMES[0])
