"""터미널용 일반 텍스트 출력"""

from typing import List

from colorama import Fore, Style

from devrec.commit_collection.summary_stats import TieredStats
from devrec.commit_collection.tiered_commits import (
    CategorizedCommits,
    MergedUnmergedCommits,
    TieredCommits,
)

from .format_commit import format_commit_line
from .options import OutputOptions, should_use_colors
from .sections import SectionFormatter, calculate_stats, generate_sections


def _style(text: str, style: str, colors_enabled: bool) -> str:
    return f"{style}{text}{Style.RESET_ALL}" if colors_enabled else text


def create_plain_section_formatter(colors_enabled: bool,
                                   show_branches: bool) -> SectionFormatter:
    return SectionFormatter(
        level1_header=lambda name: _style(f"\n{name}:\n", Style.BRIGHT + Fore.BLUE, colors_enabled),
        level2_header=lambda name: _style(f"  {name}:\n", Style.BRIGHT, colors_enabled),
        commit_line=lambda commit: format_commit_line(
            commit, "plain", show_branches=show_branches, colors_enabled=colors_enabled
        ),
        section_separator=lambda: "",
    )


def _summary_block(lines: List[str], colors_enabled: bool) -> str:
    output = _style("Summary:\n", Style.BRIGHT, colors_enabled)
    output += "".join(f"  {line}\n" for line in lines)
    return output + "\n"


def generate_plain_output(categorized: CategorizedCommits, options: OutputOptions) -> str:
    """카테고리별 커밋을 일반 텍스트로 출력"""
    colors_enabled = should_use_colors(options.color)
    output = ""

    if options.show_summary:
        total_commits, repos = calculate_stats(categorized)
        output += _summary_block([
            f"Total Commits: {total_commits}",
            f"Repositories: {', '.join(sorted(repos))}",
        ], colors_enabled)

    formatter = create_plain_section_formatter(colors_enabled, show_branches=False)
    output += generate_sections(categorized, formatter, options.group_by)
    return output


def _merge_state_sections(commits: MergedUnmergedCommits, options: OutputOptions,
                          colors_enabled: bool) -> str:
    output = ""

    if any(commits.merged.values()):
        output += _style("Merged Work:\n", Style.BRIGHT + Fore.GREEN, colors_enabled)
        formatter = create_plain_section_formatter(colors_enabled, show_branches=False)
        output += generate_sections(commits.merged, formatter, options.group_by)
        output += "\n"

    if any(commits.unmerged.values()):
        output += _style("In Progress (Unmerged):\n", Style.BRIGHT + Fore.YELLOW, colors_enabled)
        formatter = create_plain_section_formatter(colors_enabled, show_branches=True)
        output += generate_sections(commits.unmerged, formatter, options.group_by)
        output += "\n"

    return output


def generate_plain_output_with_branches(tiered: TieredCommits, stats: TieredStats,
                                        options: OutputOptions) -> str:
    """중요도/머지 상태로 나뉜 커밋을 일반 텍스트로 출력"""
    colors_enabled = should_use_colors(options.color)
    output = ""

    if options.show_summary:
        lines = [
            f"Total Commits: {stats.total_commits}",
            f"Merged to Main: {stats.merged_commits}",
            f"In Progress: {stats.unmerged_commits}",
        ]
        if stats.key_contribution_count > 0:
            lines.append(f"Key Contributions: {stats.key_contribution_count}")
        lines.append(f"Repositories: {', '.join(sorted(stats.repos))}")
        output += _summary_block(lines, colors_enabled)

    has_key = tiered.key_contributions.has_commits()
    has_other = tiered.other_work.has_commits()

    if has_key:
        if has_other:
            output += _style("== Key Contributions ==\n", Style.BRIGHT + Fore.MAGENTA, colors_enabled)
        output += _merge_state_sections(tiered.key_contributions, options, colors_enabled)

    if has_other:
        if has_key:
            output += _style("== Other Work ==\n", Style.BRIGHT + Fore.MAGENTA, colors_enabled)
        output += _merge_state_sections(tiered.other_work, options, colors_enabled)

    return output
