"""Git 명령어 실행기

저장소 경로에서 읽기 전용 git 하위 명령만 실행하고 결과를 GitCommandResult 로 돌려줍니다.
"""

import subprocess
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

DEFAULT_TIMEOUT_SECONDS = 60
ALLOWED_GIT_COMMANDS = {'log', 'branch', 'rev-parse', 'show', 'status'}


@dataclass
class GitCommandResult:
    """git 명령어 실행 결과"""
    success: bool
    stdout: str = ""
    stderr: str = ""
    returncode: Optional[int] = None
    error_message: Optional[str] = None
    execution_time: float = 0.0
    metadata: Dict[str, Any] = field(default_factory=dict)


class GitCommandRunner:
    """제한된 git 명령어 실행기"""

    def __init__(self, timeout: int = DEFAULT_TIMEOUT_SECONDS):
        self.timeout = timeout

    def run(self, args: List[str], cwd: str) -> GitCommandResult:
        """git 명령어를 실행합니다

        Args:
            args: `git` 뒤에 붙는 인자 목록 (예: ["log", "--all"])
            cwd: 명령어 실행 디렉토리

        Returns:
            GitCommandResult: 실행 결과 (예외를 던지지 않음)
        """
        if not args or args[0] not in ALLOWED_GIT_COMMANDS:
            return GitCommandResult(
                success=False,
                error_message=f"Git command blocked by safety filters: {' '.join(args)}"
            )

        start_time = time.time()
        try:
            result = subprocess.run(
                ["git"] + args,
                cwd=cwd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout
            )
        except subprocess.TimeoutExpired:
            return GitCommandResult(
                success=False,
                error_message=f"Command timed out after {self.timeout} seconds",
                execution_time=time.time() - start_time
            )
        except OSError as e:
            return GitCommandResult(
                success=False,
                error_message=f"Failed to execute git: {e}",
                execution_time=time.time() - start_time
            )

        stdout = result.stdout or ""
        stderr = result.stderr or ""
        return GitCommandResult(
            success=result.returncode == 0,
            stdout=stdout,
            stderr=stderr,
            returncode=result.returncode,
            error_message=stderr.strip() if result.returncode != 0 and stderr else None,
            execution_time=time.time() - start_time,
            metadata={"args": list(args), "cwd": cwd}
        )
