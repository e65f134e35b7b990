"""마크다운 리포트 테스트"""

from datetime import date

import pytest

from devrec.commit_collection.summary_stats import TieredStats
from devrec.commit_collection.tiered_commits import MergedUnmergedCommits, TieredCommits
from devrec.output.markdown import generate_markdown_output, generate_markdown_output_with_branches
from devrec.output.options import OutputOptions
from devrec.utils.date_range import DateRange

DATE = "_(Jan 15, 2024, 10:30 AM)_"
TODAY = date(2024, 1, 16)


@pytest.mark.unit
class TestGenerateMarkdownOutput:

    def test_title_sections_and_footer(self, sample_categorized):
        options = OutputOptions(format="markdown", group_by="category")

        output = generate_markdown_output(sample_categorized, options, today=TODAY)

        assert output.startswith("# Dev Log: January 16, 2024\n\n## Feature\n\n### api\n\n")
        assert f"    - [aaaaaaa] feat: add login {DATE}\n" in output
        # 브랜치 정보 없는 모드에서는 브랜치를 표시하지 않음
        assert "`[deps]`" not in output
        assert output.count("---\n\n") == 3
        assert output.endswith("_Generated by devrec_\n")

    def test_summary_with_date_range(self, sample_categorized):
        options = OutputOptions(format="markdown", show_summary=True)
        date_range = DateRange(since=date(2024, 1, 15), until=TODAY)

        output = generate_markdown_output(sample_categorized, options, date_range, today=TODAY)

        assert (
            "## Summary\n\n"
            "- **Total Commits**: 4\n"
            "- **Repositories**: api, web\n"
            "- **Date Range**: 2024-01-15 to 2024-01-16\n"
            "\n---\n\n"
        ) in output

    def test_empty(self):
        output = generate_markdown_output({}, OutputOptions(format="markdown"), today=TODAY)
        assert output == "# Dev Log: January 16, 2024\n\n_Generated by devrec_\n"


@pytest.mark.unit
class TestGenerateMarkdownOutputWithBranches:

    def test_both_tiers(self, sample_categorized):
        tiered = TieredCommits(
            key_contributions=MergedUnmergedCommits(merged={"Bug": sample_categorized["Bug"]}),
            other_work=MergedUnmergedCommits(unmerged={"Chore": sample_categorized["Chore"]}),
        )
        stats = TieredStats(total_commits=2, merged_commits=1, unmerged_commits=1,
                            repos={"api", "web"}, key_contribution_count=1)
        date_range = DateRange(since=date(2024, 1, 15), until=TODAY)

        output = generate_markdown_output_with_branches(
            tiered, stats, OutputOptions(format="markdown", show_summary=True),
            date_range, today=TODAY
        )

        assert output == (
            "# Dev Log: January 16, 2024\n\n"
            "## Summary\n\n"
            "- **Total Commits**: 2\n"
            "- **Merged to Main**: 1\n"
            "- **In Progress**: 1\n"
            "- **Key Contributions**: 1\n"
            "- **Repositories**: api, web\n"
            "- **Date Range**: 2024-01-15 to 2024-01-16\n"
            "\n---\n\n"
            "## Key Contributions\n\n"
            "## api\n\n"
            "### Bug\n\n"
            f"    - [ccccccc] fix: null pointer {DATE}\n"
            "---\n\n"
            "## Other Work\n\n"
            "## web\n\n"
            "### Chore\n\n"
            f"    - [ddddddd] chore: bump deps `[deps]` {DATE}\n"
            "---\n\n"
            "_Generated by devrec_\n"
        )

    def test_merged_before_unmerged_within_tier(self, sample_categorized):
        tiered = TieredCommits(
            key_contributions=MergedUnmergedCommits(
                merged={"Feature": sample_categorized["Feature"][:1]},
                unmerged={"Feature": sample_categorized["Feature"][1:]},
            )
        )
        stats = TieredStats(total_commits=2, merged_commits=1, unmerged_commits=1,
                            repos={"api", "web"}, key_contribution_count=2)

        output = generate_markdown_output_with_branches(
            tiered, stats, OutputOptions(format="markdown", group_by="category"), today=TODAY
        )

        assert output.index("feat: add login") < output.index("feat: add dashboard")
        assert "## Other Work" not in output

    def test_only_other_work_has_no_headers(self, sample_categorized):
        tiered = TieredCommits(
            other_work=MergedUnmergedCommits(unmerged={"Chore": sample_categorized["Chore"]})
        )

        output = generate_markdown_output_with_branches(
            tiered, TieredStats(total_commits=1, unmerged_commits=1, repos={"web"}),
            OutputOptions(format="markdown", show_summary=True), today=TODAY
        )

        assert "## Key Contributions" not in output
        assert "## Other Work" not in output
        assert "- **Key Contributions**" not in output
        assert "## web\n\n### Chore\n\n" in output
