"""
Tests for canonical state -> storage predicate translation.
"""

import re

import pytest

from catalog_facets.core.config import FacetConfig
from catalog_facets.factory import build_filter_system


class TestBaseline:
    def test_default_state_only_lists_available(self, pets, products):
        assert pets.to_backend_query(pets.default_filters()) == {"status": "available"}
        assert products.to_backend_query(products.validate({})) == {"status": "available"}

    def test_unset_availability_adds_no_status(self, pets):
        assert pets.to_backend_query(pets.validate({"available": "all"})) == {}

    def test_unavailable(self, pets):
        query = pets.to_backend_query(pets.validate({"available": False}))
        assert query == {"status": {"$ne": "available"}}

    def test_missing_status_as_available_includes_null(self):
        system = build_filter_system("pets", FacetConfig(missing_status_is_available=True))
        assert system.to_backend_query(system.validate({})) == {"status": {"$in": ["available", None]}}
        query = system.to_backend_query(system.validate({"available": False}))
        assert query == {"status": {"$nin": ["available", None]}}

    def test_custom_status_field(self):
        system = build_filter_system("pets", FacetConfig(status_field="state", available_status="active"))
        assert system.to_backend_query(system.validate({})) == {"state": "active"}


class TestCategoryAndType:
    def test_category_expands_to_types(self, pets):
        query = pets.to_backend_query(pets.validate({"category": "dogs"}))
        assert query["type"] == {"$in": ["dog"]}

    def test_other_category_types_are_sorted(self, pets):
        query = pets.to_backend_query(pets.validate({"category": "other"}))
        types = query["type"]["$in"]
        assert types == sorted(types)
        assert "guinea-pig" in types
        assert "dog" not in types

    def test_product_types_live_in_category_field(self, products):
        query = products.to_backend_query(products.validate({"category": "food"}))
        assert query["category"] == {"$in": ["dry-food", "treats", "wet-food"]}
        assert "type" not in query

    def test_type_narrows_category(self, products):
        query = products.to_backend_query(products.validate({"category": "food", "type": "dry-food"}))
        assert query["category"] == "dry-food"

    def test_type_outside_category_matches_nothing(self, pets):
        query = pets.to_backend_query(pets.validate({"category": "dogs", "type": "cat"}))
        assert query["type"] == {"$in": []}

    def test_type_without_category(self, pets):
        assert pets.to_backend_query(pets.validate({"type": "hamster"}))["type"] == "hamster"


class TestRanges:
    def test_bounded_range(self, products):
        query = products.to_backend_query(products.validate({"price": "15-30"}))
        assert query["price"] == {"$gte": 15, "$lte": 30}

    def test_open_range_has_no_upper_bound(self, products):
        query = products.to_backend_query(products.validate({"price": "100+", "rating": "4+"}))
        assert query["price"] == {"$gte": 100}
        assert query["rating"] == {"$gte": 4}

    def test_catch_all_range_adds_nothing(self, products):
        assert "price" not in products.to_backend_query(products.validate({"price": "all"}))


class TestTextDimensions:
    def test_search_is_or_of_case_insensitive_regexes(self, pets):
        query = pets.to_backend_query(pets.validate({"search": "lab"}))
        assert query["$or"] == [
            {"name": {"$regex": "lab", "$options": "i"}},
            {"breed": {"$regex": "lab", "$options": "i"}},
            {"description": {"$regex": "lab", "$options": "i"}},
            {"type": {"$regex": "lab", "$options": "i"}},
        ]

    def test_search_text_is_escaped(self, products):
        query = products.to_backend_query(products.validate({"search": "c++ (large)"}))
        pattern = query["$or"][0]["name"]["$regex"]
        assert re.search(pattern, "Chew c++ (LARGE) pack", re.IGNORECASE)
        assert pattern == re.escape("c++ (large)")

    def test_empty_search_adds_nothing(self, pets):
        assert "$or" not in pets.to_backend_query(pets.validate({"search": "   "}))

    def test_brand_regex_matches_spaced_and_slug_forms(self, products):
        pattern = products.to_backend_query(products.validate({"brand": "royal-canin"}))["brand"]
        assert pattern["$options"] == "i"
        assert re.search(pattern["$regex"], "Royal Canin", re.IGNORECASE)
        assert re.search(pattern["$regex"], "royal-canin", re.IGNORECASE)
        assert not re.search(pattern["$regex"], "Royalty", re.IGNORECASE)

    def test_catch_all_brand_adds_nothing(self, products):
        assert "brand" not in products.to_backend_query(products.validate({"brand": "All"}))


class TestLiterals:
    def test_featured_is_symmetric(self, pets):
        assert pets.to_backend_query(pets.validate({"featured": True}))["featured"] is True
        assert pets.to_backend_query(pets.validate({"featured": False}))["featured"] == {"$ne": True}
        assert "featured" not in pets.to_backend_query(pets.validate({"featured": "all"}))

    def test_select_dimensions_are_literal(self, pets):
        query = pets.to_backend_query(pets.validate({"size": "large", "gender": "male", "age": "adult"}))
        assert query["size"] == "large"
        assert query["gender"] == "male"
        assert query["age"] == "adult"

    def test_sort_is_not_a_predicate(self, pets):
        assert "sort" not in pets.to_backend_query(pets.validate({"sort": "name"}))


class TestBackendSort:
    def test_default_sort(self, pets):
        assert pets.translator.to_backend_sort(pets.default_filters()) == [("createdAt", -1)]

    def test_price_sorts(self, products):
        state = products.validate({"sort": "price-high"})
        assert products.translator.to_backend_sort(state) == [("price", -1)]

    def test_featured_then_newest(self, pets):
        state = pets.validate({"sort": "featured"})
        assert pets.translator.to_backend_sort(state) == [("featured", -1), ("createdAt", -1)]

    def test_unknown_sort_uses_default(self, pets):
        assert pets.translator.to_backend_sort({"sort": "bogus"}) == [("createdAt", -1)]


def test_scenario_query(pets):
    state = pets.validate({"category": "dogs", "search": "lab"})
    query = pets.to_backend_query(state)
    assert query["status"] == "available"
    assert query["type"] == {"$in": ["dog"]}
    assert len(query["$or"]) == 4


def _storage_matches(record, query):
    """Evaluates a translated predicate the way a Mongo-style store would."""
    for key, condition in query.items():
        if key == "$or":
            if not any(_storage_matches(record, clause) for clause in condition):
                return False
            continue
        value = record.get(key)
        if not isinstance(condition, dict):
            if value != condition:
                return False
            continue
        for op, arg in condition.items():
            if op == "$in" and value not in arg:
                return False
            if op == "$nin" and value in arg:
                return False
            if op == "$ne" and value == arg:
                return False
            if op == "$gte" and not (isinstance(value, (int, float)) and value >= arg):
                return False
            if op == "$lte" and not (isinstance(value, (int, float)) and value <= arg):
                return False
            if op == "$regex" and not (isinstance(value, str) and re.search(arg, value, re.IGNORECASE)):
                return False
    return True


EDGE_PETS = [
    {"name": "Rex", "type": "dog", "status": "available"},
    {"name": "Mia", "type": "cat", "status": "Available", "featured": True},
    {"name": "Bo", "type": "dog"},
    {"name": "Kiwi", "type": "bird", "status": "adopted", "featured": False, "size": "small"},
]

PET_STATES = [
    {},
    {"featured": False},
    {"featured": True},
    {"available": False},
    {"available": "all"},
    {"category": "dogs"},
    {"category": "other", "available": "all"},
    {"category": "dogs", "type": "cat"},
    {"search": "lab"},
    {"size": "small", "available": "all"},
]


class TestPathsAgree:
    def _assert_agree(self, system, records, raw):
        state = system.validate(raw)
        query = system.to_backend_query(state)
        in_memory = [r["name"] for r in records if system.matches(r, state)]
        in_storage = [r["name"] for r in records if _storage_matches(r, query)]
        assert in_memory == in_storage, (raw, query)

    @pytest.mark.parametrize("raw", PET_STATES)
    def test_pets(self, pets, pet_records, raw):
        self._assert_agree(pets, pet_records + EDGE_PETS, raw)

    @pytest.mark.parametrize("raw", PET_STATES)
    def test_pets_with_missing_status_available(self, pet_records, raw):
        system = build_filter_system("pets", FacetConfig(missing_status_is_available=True))
        self._assert_agree(system, pet_records + EDGE_PETS, raw)

    @pytest.mark.parametrize("brand", ["royal-canin", "Royal Canin", "royal"])
    def test_brand(self, products, brand):
        records = [
            {"name": name, "brand": value, "status": "available"}
            for name, value in [("a", "Royal Canin"), ("b", "royal-canin"), ("c", "Royal  Canin"), ("d", "Royalty")]
        ]
        self._assert_agree(products, records, {"brand": brand})
