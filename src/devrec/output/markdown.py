"""마크다운 리포트 출력"""

from datetime import date
from typing import Optional

from devrec.commit_collection.summary_stats import TieredStats
from devrec.commit_collection.tiered_commits import CategorizedCommits, TieredCommits
from devrec.constants import REPORT_FOOTER
from devrec.utils.date_range import DateRange

from .format_commit import format_commit_line
from .options import OutputOptions
from .sections import SectionFormatter, calculate_stats, generate_sections


def create_markdown_section_formatter(show_branches: bool) -> SectionFormatter:
    return SectionFormatter(
        level1_header=lambda name: f"## {name}\n\n",
        level2_header=lambda name: f"### {name}\n\n",
        commit_line=lambda commit: format_commit_line(
            commit, "markdown", show_branches=show_branches
        ),
        section_separator=lambda: "---\n\n",
    )


def _title(today: Optional[date]) -> str:
    today = today or date.today()
    return f"# Dev Log: {today.strftime('%B')} {today.day}, {today.year}\n\n"


def _summary(lines, date_range: Optional[DateRange]) -> str:
    summary = "## Summary\n\n"
    summary += "".join(f"- **{label}**: {value}\n" for label, value in lines)
    if date_range:
        summary += f"- **Date Range**: {date_range}\n"
    return summary + "\n---\n\n"


def generate_markdown_output(categorized: CategorizedCommits, options: OutputOptions,
                             date_range: Optional[DateRange] = None,
                             today: Optional[date] = None) -> str:
    """카테고리별 커밋을 마크다운 리포트로 출력"""
    output = _title(today)

    if options.show_summary:
        total_commits, repos = calculate_stats(categorized)
        output += _summary([
            ("Total Commits", total_commits),
            ("Repositories", ", ".join(sorted(repos))),
        ], date_range)

    output += generate_sections(
        categorized, create_markdown_section_formatter(show_branches=False), options.group_by
    )
    return output + f"{REPORT_FOOTER}\n"


def generate_markdown_output_with_branches(tiered: TieredCommits, stats: TieredStats,
                                           options: OutputOptions,
                                           date_range: Optional[DateRange] = None,
                                           today: Optional[date] = None) -> str:
    """핵심 기여 / 기타 작업 섹션으로 나눈 마크다운 리포트

    두 tier 모두 커밋이 있을 때만 섹션 제목을 붙이고,
    기타 작업만 있으면 제목 없이 바로 출력합니다.
    """
    output = _title(today)

    if options.show_summary:
        lines = [
            ("Total Commits", stats.total_commits),
            ("Merged to Main", stats.merged_commits),
            ("In Progress", stats.unmerged_commits),
        ]
        if stats.key_contribution_count > 0:
            lines.append(("Key Contributions", stats.key_contribution_count))
        lines.append(("Repositories", ", ".join(sorted(stats.repos))))
        output += _summary(lines, date_range)

    formatter = create_markdown_section_formatter(show_branches=True)
    has_key = tiered.key_contributions.has_commits()
    has_other = tiered.other_work.has_commits()

    if has_key:
        output += "## Key Contributions\n\n"
        output += generate_sections(tiered.key_contributions.combined(), formatter, options.group_by)

    if has_other:
        if has_key:
            output += "## Other Work\n\n"
        output += generate_sections(tiered.other_work.combined(), formatter, options.group_by)

    return output + f"{REPORT_FOOTER}\n"
