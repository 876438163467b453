"""
Tests for the catalog filter: genus facets and free-text search.
"""

from app.modules.catalog.domain.models.plant_type import PlantType
from app.modules.catalog.domain.services.catalog_filter import (
    ALL_GENERA,
    filter_plants,
    genus_facets,
)


def plant(genus, cultivar, variegation=None, slug=None) -> PlantType:
    return PlantType(
        id=f"{genus}-{cultivar}",
        genus=genus,
        cultivar=cultivar,
        variegation=variegation,
        slug=slug or f"{genus}-{cultivar}".lower().replace(" ", "-"),
    )


PLANTS = [
    plant("Monstera", "Deliciosa", "Thai Constellation"),
    plant("Alocasia", "Dragon Scale"),
    plant("Philodendron", "Pink Princess"),
    plant("Alocasia", "Frydek", "Variegata"),
]


class TestGenusFacets:
    def test_all_first_then_sorted_distinct(self):
        assert genus_facets(PLANTS) == [ALL_GENERA, "Alocasia", "Monstera", "Philodendron"]

    def test_empty_genus_is_skipped(self):
        assert genus_facets([plant("", "Mystery"), plant("Hoya", "Kerrii")]) == ["all", "Hoya"]

    def test_no_plants(self):
        assert genus_facets([]) == ["all"]

    def test_ordinal_ordering(self):
        facets = genus_facets([plant("alocasia", "x"), plant("Zamioculcas", "y")])
        assert facets == ["all", "Zamioculcas", "alocasia"]


class TestFilterPlants:
    def test_defaults_return_everything_in_order(self):
        assert filter_plants(PLANTS) == PLANTS

    def test_query_is_case_insensitive_and_trimmed(self):
        result = filter_plants(PLANTS, query="  DRAGON ")
        assert [p.cultivar for p in result] == ["Dragon Scale"]

    def test_query_matches_variegation(self):
        result = filter_plants(PLANTS, query="variegata")
        assert [p.cultivar for p in result] == ["Frydek"]

    def test_query_matches_slug(self):
        result = filter_plants(PLANTS, query="philodendron-pink")
        assert [p.genus for p in result] == ["Philodendron"]

    def test_missing_variegation_does_not_match_none(self):
        assert filter_plants([plant("Hoya", "Kerrii")], query="none") == []

    def test_whitespace_query_is_no_filter(self):
        assert filter_plants(PLANTS, query="   ") == PLANTS

    def test_genus_is_exact(self):
        result = filter_plants(PLANTS, genus="Alocasia")
        assert [p.cultivar for p in result] == ["Dragon Scale", "Frydek"]
        assert filter_plants(PLANTS, genus="alocasia") == []

    def test_query_and_genus_combine(self):
        assert [p.cultivar for p in filter_plants(PLANTS, query="a", genus="Monstera")] == [
            "Deliciosa"
        ]
        assert filter_plants(PLANTS, query="princess", genus="Alocasia") == []

    def test_unknown_genus_is_empty(self):
        assert filter_plants(PLANTS, genus="Anthurium") == []

    def test_filter_is_idempotent(self):
        once = filter_plants(PLANTS, query="al", genus="Alocasia")
        assert filter_plants(once, query="al", genus="Alocasia") == once

    def test_result_is_subset_preserving_order(self):
        result = filter_plants(PLANTS, query="o")
        positions = [PLANTS.index(p) for p in result]
        assert positions == sorted(positions)
