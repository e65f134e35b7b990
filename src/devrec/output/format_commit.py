"""커밋 한 줄 포맷팅"""

from datetime import datetime

from colorama import Fore, Style

from devrec.commit_collection.commit_data import CommitEntry
from devrec.constants import GIT_SHORT_HASH_LENGTH


def format_date(date_string: str) -> str:
    """ISO 8601 날짜를 'Jan 15, 2024, 10:30 AM' 형태로 변환 (파싱 실패 시 원본)"""
    try:
        parsed = datetime.fromisoformat(date_string.replace('Z', '+00:00'))
    except ValueError:
        return date_string

    hour = parsed.hour % 12 or 12
    meridiem = "AM" if parsed.hour < 12 else "PM"
    return f"{parsed.strftime('%b')} {parsed.day}, {parsed.year}, {hour}:{parsed.minute:02d} {meridiem}"


def format_commit_line(commit: CommitEntry, output_format: str,
                       show_branches: bool = False,
                       colors_enabled: bool = False) -> str:
    """해시, 메시지, (브랜치), 날짜를 담은 한 줄 (개행 포함)

    markdown: `    - [hash] message `[branch]` _(date)_`
    plain:    `    - [hash] message [branch] (date)`
    """
    short_hash = commit.hash[:GIT_SHORT_HASH_LENGTH]
    formatted_date = format_date(commit.date)
    branch = commit.branch if show_branches else None

    if output_format == "markdown":
        branch_info = f" `[{branch}]`" if branch else ""
        return f"    - [{short_hash}] {commit.message}{branch_info} _({formatted_date})_\n"

    hash_part = f"[{short_hash}]"
    branch_info = f" [{branch}]" if branch else ""
    date_part = f"({formatted_date})"

    if colors_enabled:
        hash_part = f"{Style.DIM}{hash_part}{Style.RESET_ALL}"
        if branch_info:
            branch_info = f"{Fore.CYAN}{branch_info}{Style.RESET_ALL}"
        date_part = f"{Fore.LIGHTBLACK_EX}{date_part}{Style.RESET_ALL}"

    return f"    - {hash_part} {commit.message}{branch_info} {date_part}\n"
