import sys
from dataclasses import dataclass
from typing import Literal, Optional, TextIO

OutputFormat = Literal["plain", "markdown"]
ColorMode = Literal["always", "never", "auto"]


@dataclass
class OutputOptions:
    """출력 설정"""
    format: OutputFormat = "plain"
    color: ColorMode = "auto"
    show_summary: bool = False
    group_by: str = "repo"
    locale: str = "en-US"


def should_use_colors(color_mode: str, stream: Optional[TextIO] = None) -> bool:
    """색상 모드와 TTY 여부로 색상 사용 결정"""
    if color_mode == "always":
        return True
    if color_mode == "never":
        return False
    stream = stream or sys.stdout
    return hasattr(stream, "isatty") and stream.isatty()
