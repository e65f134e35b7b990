"""commit_filter 모듈 테스트"""

import pytest

from devrec.commit_collection.category_filter import (
    AmbiguousCategoryFilterError,
    UnknownCategoryFilterError,
)
from devrec.commit_collection.commit_filter import (
    calculate_stats_from_filtered,
    calculate_tiered_stats,
    filter_commits,
    filter_tiered_commits,
)
from devrec.commit_collection.tiered_commits import MergedUnmergedCommits, TieredCommits


@pytest.mark.unit
class TestFilterCommits:
    """filter_commits 테스트"""

    def test_no_filters_returns_same_object(self, sample_categorized):
        result = filter_commits(sample_categorized)
        assert result is sample_categorized
        assert result == sample_categorized

    def test_repo_filter(self, sample_categorized):
        result = filter_commits(sample_categorized, repo="api")

        assert list(result.keys()) == ["Feature", "Bug"]
        assert all(c.repo_name == "api" for commits in result.values() for c in commits)

    def test_repo_filter_drops_empty_categories(self, sample_categorized):
        result = filter_commits(sample_categorized, repo="web")

        assert "Bug" not in result
        assert all(commits for commits in result.values())

    def test_category_filter_resolves_prefix(self, sample_categorized):
        result = filter_commits(sample_categorized, category="feat")
        assert list(result.keys()) == ["Feature"]
        assert len(result["Feature"]) == 2

    def test_filters_are_conjunctive(self, sample_categorized):
        result = filter_commits(sample_categorized, repo="web", category="Feature")
        assert list(result.keys()) == ["Feature"]
        assert [c.message for c in result["Feature"]] == ["feat: add dashboard"]

    def test_no_match_yields_empty(self, sample_categorized):
        assert filter_commits(sample_categorized, repo="web", category="bug") == {}
        assert filter_commits(sample_categorized, repo="unknown") == {}

    def test_unknown_category_propagates(self, sample_categorized):
        with pytest.raises(UnknownCategoryFilterError):
            filter_commits(sample_categorized, category="xyz")

    def test_ambiguous_category_propagates(self, sample_categorized):
        with pytest.raises(AmbiguousCategoryFilterError):
            filter_commits(sample_categorized, category="c")

    def test_input_not_mutated(self, sample_categorized):
        before = {k: list(v) for k, v in sample_categorized.items()}
        filter_commits(sample_categorized, repo="api", category="bug")
        assert sample_categorized == before


@pytest.mark.unit
class TestFilterTieredCommits:
    """filter_tiered_commits 테스트"""

    def test_applies_to_each_bucket(self, sample_categorized):
        # Given
        tiered = TieredCommits(
            key_contributions=MergedUnmergedCommits(
                merged={"Bug": sample_categorized["Bug"]},
                unmerged={"Feature": sample_categorized["Feature"]},
            ),
            other_work=MergedUnmergedCommits(
                merged={},
                unmerged={"Chore": sample_categorized["Chore"]},
            ),
        )

        # When
        result = filter_tiered_commits(tiered, repo="web")

        # Then
        assert result.key_contributions.merged == {}
        assert [c.repo_name for c in result.key_contributions.unmerged["Feature"]] == ["web"]
        assert result.other_work.merged == {}
        assert list(result.other_work.unmerged.keys()) == ["Chore"]

    def test_no_filters_keeps_shape(self):
        tiered = TieredCommits.empty()
        result = filter_tiered_commits(tiered)
        assert result == tiered


@pytest.mark.unit
class TestStats:
    """통계 계산 테스트"""

    def test_stats_from_filtered(self, sample_categorized):
        merged = {"Feature": sample_categorized["Feature"]}
        unmerged = {"Bug": sample_categorized["Bug"], "Chore": sample_categorized["Chore"]}
        repos = {"api", "web", "docs"}

        stats = calculate_stats_from_filtered(merged, unmerged, repos)

        assert stats.total_commits == 4
        assert stats.merged_commits == 2
        assert stats.unmerged_commits == 2
        assert stats.repos is repos

    def test_stats_from_empty(self):
        repos = {"api"}
        stats = calculate_stats_from_filtered({}, {}, repos)

        assert (stats.total_commits, stats.merged_commits, stats.unmerged_commits) == (0, 0, 0)
        assert stats.repos == {"api"}

    def test_repos_not_shrunk_by_filter(self, sample_categorized):
        filtered = filter_commits(sample_categorized, repo="api")
        stats = calculate_stats_from_filtered(filtered, {}, {"api", "web"})
        assert stats.repos == {"api", "web"}

    def test_tiered_stats(self, sample_categorized):
        tiered = TieredCommits(
            key_contributions=MergedUnmergedCommits(
                merged={"Bug": sample_categorized["Bug"]},
                unmerged={"Feature": sample_categorized["Feature"]},
            ),
            other_work=MergedUnmergedCommits(
                merged={"Chore": sample_categorized["Chore"]},
                unmerged={},
            ),
        )

        stats = calculate_tiered_stats(tiered, {"api", "web"})

        assert stats.total_commits == 4
        assert stats.merged_commits == 2
        assert stats.unmerged_commits == 2
        assert stats.key_contribution_count == 3
        assert stats.repos == {"api", "web"}
