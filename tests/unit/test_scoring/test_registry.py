"""Unit tests for the source configuration registry."""

import pytest

from src.config.errors import ConfigurationError
from src.config.schemas.base import ContentCategory, SourceTier
from src.config.schemas.sources import SourceConfig
from src.scoring.registry import SourceConfigRegistry


def _source(
    name: str,
    category: ContentCategory = ContentCategory.TECHNOLOGY,
    baseline_score: float = 1000,
    tier: SourceTier = SourceTier.TIER_1,
) -> SourceConfig:
    return SourceConfig(
        name=name, category=category, baseline_score=baseline_score, tier=tier
    )


class TestLookup:
    """Tests for name lookups."""

    @pytest.mark.unit
    def test_lookup_is_case_insensitive(self) -> None:
        """Any casing of a configured name resolves to the same config."""
        registry = SourceConfigRegistry([_source("Bitcoin", ContentCategory.FINANCE)])
        for name in ("Bitcoin", "bitcoin", "BITCOIN", "bItCoIn"):
            config = registry.lookup(name)
            assert config is not None
            assert config.name == "Bitcoin"

    @pytest.mark.unit
    def test_lookup_unknown_returns_none(self) -> None:
        """Unconfigured names resolve to None."""
        registry = SourceConfigRegistry([_source("science")])
        assert registry.lookup("knitting") is None

    @pytest.mark.unit
    def test_category_for_known_source(self) -> None:
        """category_for returns the configured tag."""
        registry = SourceConfigRegistry([_source("nba", ContentCategory.SPORTS)])
        assert registry.category_for("NBA") == ContentCategory.SPORTS

    @pytest.mark.unit
    def test_category_for_unknown_source_is_other(self) -> None:
        """Unconfigured sources fall back to OTHER."""
        registry = SourceConfigRegistry([_source("nba", ContentCategory.SPORTS)])
        assert registry.category_for("knitting") == ContentCategory.OTHER

    @pytest.mark.unit
    def test_contains_and_len(self) -> None:
        """Membership ignores case and len counts sources."""
        registry = SourceConfigRegistry([_source("apple"), _source("space")])
        assert "APPLE" in registry
        assert "pear" not in registry
        assert 42 not in registry
        assert len(registry) == 2

    @pytest.mark.unit
    def test_iteration_keeps_construction_order(self) -> None:
        """Sources iterate in the order given."""
        names = ["zeta", "alpha", "mu"]
        registry = SourceConfigRegistry([_source(n) for n in names])
        assert [s.name for s in registry] == names
        assert [s.name for s in registry.sources] == names

    @pytest.mark.unit
    def test_by_category(self) -> None:
        """by_category filters in construction order."""
        registry = SourceConfigRegistry(
            [
                _source("movies", ContentCategory.ENTERTAINMENT),
                _source("stocks", ContentCategory.FINANCE),
                _source("memes", ContentCategory.ENTERTAINMENT),
            ]
        )
        found = registry.by_category(ContentCategory.ENTERTAINMENT)
        assert [s.name for s in found] == ["movies", "memes"]


class TestConstruction:
    """Tests for building registries."""

    @pytest.mark.unit
    def test_duplicate_names_rejected(self) -> None:
        """Names that collide ignoring case are a configuration error."""
        with pytest.raises(ConfigurationError) as exc_info:
            SourceConfigRegistry([_source("Games"), _source("games")])
        assert exc_info.value.errors[0]["loc"] == "sources.1.name"

    @pytest.mark.unit
    def test_from_mappings(self) -> None:
        """Plain records are validated and indexed."""
        registry = SourceConfigRegistry.from_mappings(
            [
                {"name": "soccer", "category": "sports", "baseline_score": 3000, "tier": 1},
                {"name": "Astronomy", "category": "science", "baseline_score": 2000, "tier": 3},
            ]
        )
        config = registry.lookup("astronomy")
        assert config is not None
        assert config.tier == SourceTier.TIER_3
        assert config.baseline_score == 2000

    @pytest.mark.unit
    def test_from_mappings_missing_field(self) -> None:
        """A record without a baseline is rejected as a whole."""
        with pytest.raises(ConfigurationError) as exc_info:
            SourceConfigRegistry.from_mappings(
                [{"name": "soccer", "category": "sports", "tier": 1}]
            )
        locs = [e["loc"] for e in exc_info.value.errors]
        assert "sources.0.baseline_score" in locs

    @pytest.mark.unit
    def test_from_mappings_duplicates(self) -> None:
        """Duplicate names in plain records are rejected."""
        with pytest.raises(ConfigurationError):
            SourceConfigRegistry.from_mappings(
                [
                    {"name": "tifu", "category": "drama", "baseline_score": 1, "tier": 1},
                    {"name": "TIFU", "category": "drama", "baseline_score": 2, "tier": 2},
                ]
            )

    @pytest.mark.unit
    def test_from_mappings_bad_category(self) -> None:
        """Unknown categories are rejected."""
        with pytest.raises(ConfigurationError) as exc_info:
            SourceConfigRegistry.from_mappings(
                [{"name": "x", "category": "cooking", "baseline_score": 1, "tier": 1}]
            )
        assert exc_info.value.errors[0]["loc"] == "sources.0.category"

    @pytest.mark.unit
    def test_default_registry_is_shared(self) -> None:
        """default() builds the built-in table once."""
        first = SourceConfigRegistry.default()
        assert SourceConfigRegistry.default() is first
        assert len(first) == 39
        technology = first.lookup("technology")
        assert technology is not None
        assert technology.baseline_score == 5000

    @pytest.mark.unit
    def test_index_is_read_only(self) -> None:
        """The internal index cannot be mutated."""
        registry = SourceConfigRegistry([_source("apple")])
        with pytest.raises(TypeError):
            registry._by_key["pear"] = _source("pear")  # type: ignore[index]
