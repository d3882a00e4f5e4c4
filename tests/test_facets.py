"""
Tests for single-pass facet counting.
"""

PARTITIONING = ("category", "type", "size", "gender", "age", "featured", "available")


def _options_total(tally):
    return sum(count for value, count in tally.items() if value != "all")


class TestPetFacets:
    def test_category_counts(self, pets, pet_records):
        counts = pets.count_facets(pet_records)
        assert counts["category"] == {"all": 5, "dogs": 2, "cats": 1, "aquatic": 1, "other": 1}

    def test_type_counts_include_zero_options(self, pets, pet_records):
        counts = pets.count_facets(pet_records)["type"]
        assert counts["dog"] == 2
        assert counts["guinea-pig"] == 1
        assert counts["hamster"] == 0
        assert counts["all"] == 5

    def test_select_counts(self, pets, pet_records):
        counts = pets.count_facets(pet_records)
        assert counts["size"] == {"all": 5, "small": 3, "medium": 1, "large": 1, "extra-large": 0}
        assert counts["age"]["puppy/kitten"] == 1

    def test_boolean_counts(self, pets, pet_records):
        counts = pets.count_facets(pet_records)
        assert counts["featured"]["true"] == 2
        assert counts["featured"]["false"] == 3
        assert counts["available"]["true"] == 3
        assert counts["available"]["false"] == 2

    def test_counts_ignore_any_active_filter(self, pets, pet_records):
        # Facets describe the base set, so filtering elsewhere must not change them
        pets.filter_collection(pet_records, pets.validate({"category": "cats"}))
        assert pets.count_facets(pet_records)["category"]["dogs"] == 2

    def test_search_and_sort_are_not_faceted(self, pets, pet_records):
        counts = pets.count_facets(pet_records)
        assert "search" not in counts
        assert "sort" not in counts

    def test_conservation(self, pets, pet_records):
        counts = pets.count_facets(pet_records)
        for dimension in PARTITIONING:
            assert _options_total(counts[dimension]) == counts[dimension]["all"] == len(pet_records)


class TestProductFacets:
    def test_price_buckets_partition(self, products, product_records):
        counts = products.count_facets(product_records)["price"]
        assert counts == {"all": 5, "0-15": 1, "15-30": 1, "30-50": 1, "50-100": 1, "100+": 1}
        assert _options_total(counts) == counts["all"]

    def test_rating_thresholds_are_cumulative(self, products, product_records):
        counts = products.count_facets(product_records)["rating"]
        assert counts["4+"] == 2
        assert counts["3+"] == 3
        assert counts["2+"] == 4
        assert counts["all"] == 5

    def test_brand_counts_by_slug(self, products, product_records):
        counts = products.count_facets(product_records)["brand"]
        assert counts["petmate"] == 2
        assert counts["royal-canin"] == 1
        assert counts["kong"] == 1
        assert counts["blue-buffalo"] == 0

    def test_category_from_category_field(self, products, product_records):
        counts = products.count_facets(product_records)["category"]
        assert counts["food"] == 2
        assert counts["toys"] == 1
        assert counts["health"] == 0
        assert counts["all"] == 5


class TestMissingData:
    def test_missing_fields_are_skipped_per_dimension(self, pets):
        counts = pets.count_facets([{"type": "dog", "size": "small"}, {"name": "No type"}])
        assert counts["category"]["all"] == 1
        assert counts["size"]["all"] == 1
        assert counts["gender"]["all"] == 0

    def test_unknown_type_counts_for_type_not_category(self, pets):
        counts = pets.count_facets([{"type": "dragon"}])
        assert counts["type"]["dragon"] == 1
        assert counts["type"]["all"] == 1
        assert counts["category"]["all"] == 0

    def test_type_facet_agrees_with_type_filter(self, products):
        widget = {"type": "widget", "category": "balls", "status": "available"}
        counts = products.count_facets([widget])
        assert counts["type"]["balls"] == 1
        assert "widget" not in counts["type"]
        assert counts["category"]["toys"] == 1
        assert products.matches(widget, products.validate({"type": "balls"}))

    def test_missing_status_counts_as_unavailable(self, pets):
        counts = pets.count_facets([{"type": "dog"}, {"type": "cat", "status": "Available"}])
        assert counts["available"] == {"true": 0, "false": 2, "all": 2}

    def test_non_mapping_entities_are_skipped(self, pets):
        counts = pets.count_facets([None, "dog", {"type": "dog"}])
        assert counts["category"]["all"] == 1

    def test_empty_collection(self, products):
        counts = products.count_facets([])
        assert counts["price"]["all"] == 0
        assert all(value == 0 for value in counts["category"].values())

    def test_single_pass_over_a_generator(self, pets, pet_records):
        counts = pets.count_facets(record for record in pet_records)
        assert counts["category"]["all"] == len(pet_records)


def test_schema_with_counts(pets, pet_records):
    schema = pets.schema.with_counts(pets.count_facets(pet_records))
    options = {o.value: o.count for o in schema.get("category").options}
    assert options["dogs"] == 2
    assert options["all"] == 5
    # The shared schema is untouched
    assert all(o.count == 0 for o in pets.schema.get("category").options)
