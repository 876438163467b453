# 📄 File: app/modules/catalog/domain/services/catalog_filter.py
# 🧭 Purpose (Layman Explanation):
# Powers the search box and the genus drop-down on the plant list, deciding which plants
# are shown for what the visitor typed and picked.
# 🧪 Purpose (Technical Summary):
# Pure catalog filtering: genus facet domain, exact genus match, case-insensitive substring
# query over genus/cultivar/variegation/slug. Order-stable and idempotent.
# 🔗 Dependencies:
# typing, app.modules.catalog.domain.models.plant_type
# 🔄 Connected Modules / Calls From:
# ListPlantTypesQueryHandler, plants API endpoint

from typing import List, Sequence

from ..models.plant_type import PlantType

ALL_GENERA = "all"


def genus_facets(plants: Sequence[PlantType]) -> List[str]:
    """Distinct non-empty genera, ordinally sorted, behind the "all" sentinel."""
    genera = {plant.genus for plant in plants if plant.genus}
    return [ALL_GENERA, *sorted(genera)]


def matches_genus(plant: PlantType, genus: str) -> bool:
    return genus == ALL_GENERA or plant.genus == genus


def matches_query(plant: PlantType, query: str) -> bool:
    needle = query.strip().lower()
    if not needle:
        return True
    return needle in plant.search_text


def filter_plants(
    plants: Sequence[PlantType],
    query: str = "",
    genus: str = ALL_GENERA,
) -> List[PlantType]:
    """
    Visible subset of `plants` for a search query and genus facet.

    Input order is preserved; an empty query with the "all" facet returns
    every plant.
    """
    return [
        plant for plant in plants
        if matches_genus(plant, genus) and matches_query(plant, query)
    ]
