"""CLI 진입점

today / yesterday / week / sprint / all 명령어로 개발 로그를 출력합니다.
"""

import argparse
import logging
import sys
from typing import Callable, Dict, List, Optional, Tuple

from colorama import just_fix_windows_console

from devrec import __version__
from devrec.commit_collection import (
    fetch_and_categorize,
    fetch_and_categorize_with_branches,
    filter_commits,
    filter_tiered_commits,
    calculate_tiered_stats,
)
from devrec.config.settings import DevrecConfig, load_config, get_default_config_path
from devrec.output import (
    OutputOptions,
    generate_markdown_output,
    generate_markdown_output_with_branches,
    generate_plain_output,
    generate_plain_output_with_branches,
)
from devrec.utils.date_range import (
    DateRange,
    get_date_range,
    get_sprint_date_range,
    get_week_date_range,
    get_yesterday_date_range,
)

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FORMAT = "%(levelname)s: %(message)s"

# 명령어 -> (설명, 설정으로 기간을 계산하는 함수)
TIME_RANGE_COMMANDS: Dict[str, Tuple[str, Callable[[DevrecConfig], DateRange]]] = {
    "today": ("Show commits from today", lambda config: get_date_range()),
    "yesterday": ("Show commits from yesterday", lambda config: get_yesterday_date_range()),
    "week": ("Show commits from the current week", lambda config: get_week_date_range()),
    "sprint": (
        "Show commits from the current sprint",
        lambda config: get_sprint_date_range(config.sprint_length),
    ),
}


def setup_logging(level: str = DEFAULT_LOG_LEVEL, fmt: str = DEFAULT_LOG_FORMAT) -> None:
    """로깅 설정

    리포트가 stdout 으로 나가므로 로그는 stderr 로 보냅니다.

    Args:
        level: 로그 레벨
        fmt: 로그 포맷
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=fmt,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


def add_common_options(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    """모든 리포트 명령어에 공통 옵션 추가"""
    parser.add_argument("--format", choices=["plain", "markdown"], default="plain",
                        help="출력 형식 (기본값: plain)")
    parser.add_argument("--color", choices=["always", "never", "auto"], default="auto",
                        help="색상 모드 (기본값: auto)")
    parser.add_argument("--summary", action="store_true", help="요약 통계 표시")
    parser.add_argument("--repo", type=str, help="저장소 이름으로 필터링")
    parser.add_argument("--category", type=str,
                        help="카테고리로 필터링 (대소문자 무시, 접두어 허용: feat, bug, ...)")
    parser.add_argument("--config", "-c", type=str, default=get_default_config_path(),
                        help="설정 파일 경로 (기본값: ~/.config/devrec/config.yml)")
    parser.add_argument("--log-level", "-l", type=str, default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help=f"로그 레벨 (기본값: {DEFAULT_LOG_LEVEL})")
    return parser


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="devrec",
        description="여러 git 저장소의 내 커밋을 카테고리별 개발 로그로 정리합니다.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
사용 예시:
  devrec today                           # 오늘 커밋
  devrec week --format markdown --summary
  devrec sprint --category feat          # Feature 커밋만
  devrec all --repo api                  # 특정 저장소의 전체 기간 커밋
        """
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, (description, _) in TIME_RANGE_COMMANDS.items():
        subparser = add_common_options(
            subparsers.add_parser(name, help=description, description=description)
        )
        # 중요도 분할이 있는 기간 명령어에서만 의미가 있음
        subparser.add_argument("--highlight", type=str,
                               help="메시지/브랜치에 포함되면 핵심 기여로 표시할 문자열")

    add_common_options(subparsers.add_parser(
        "all", help="Show all commits across all time",
        description="Show all commits across all time"
    ))

    return parser


def _output_options(args: argparse.Namespace, config: DevrecConfig) -> OutputOptions:
    return OutputOptions(
        format=args.format,
        color=args.color,
        show_summary=args.summary,
        group_by=config.group_by,
        locale=config.locale,
    )


def run_time_range_command(args: argparse.Namespace, config: DevrecConfig) -> str:
    """브랜치 인식 모드로 기간 내 커밋 리포트 생성"""
    _, get_range = TIME_RANGE_COMMANDS[args.command]
    date_range = get_range(config)
    options = _output_options(args, config)

    result = fetch_and_categorize_with_branches(config, date_range, highlight=args.highlight)
    tiered = filter_tiered_commits(result.tiered, repo=args.repo, category=args.category)
    stats = calculate_tiered_stats(tiered, result.stats.repos)

    if options.format == "markdown":
        return generate_markdown_output_with_branches(tiered, stats, options, date_range)
    return generate_plain_output_with_branches(tiered, stats, options)


def run_all_command(args: argparse.Namespace, config: DevrecConfig) -> str:
    """전체 기간 커밋 리포트 생성"""
    options = _output_options(args, config)

    categorized = fetch_and_categorize(config)
    filtered = filter_commits(categorized, repo=args.repo, category=args.category)

    if options.format == "markdown":
        return generate_markdown_output(filtered, options)
    return generate_plain_output(filtered, options)


def main(argv: Optional[List[str]] = None) -> None:
    """메인 함수"""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level or DEFAULT_LOG_LEVEL)
    just_fix_windows_console()

    try:
        config = load_config(args.config)
        if config.logging and not args.log_level:
            setup_logging(config.logging.level, config.logging.format)

        if args.command == "all":
            output = run_all_command(args, config)
        else:
            output = run_time_range_command(args, config)

        print(output)

    except Exception as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        if args.log_level == "DEBUG":
            import traceback
            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
