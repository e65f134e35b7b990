"""리포트 출력 (일반 텍스트 / 마크다운)"""

from .options import OutputOptions, should_use_colors
from .plain import generate_plain_output, generate_plain_output_with_branches
from .markdown import generate_markdown_output, generate_markdown_output_with_branches

__all__ = [
    'OutputOptions',
    'should_use_colors',
    'generate_plain_output',
    'generate_plain_output_with_branches',
    'generate_markdown_output',
    'generate_markdown_output_with_branches',
]
