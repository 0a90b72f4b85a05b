from app.products.models import ProductCondition, ProductStatus
from app.search.criteria import SearchCriteria
from app.search.services import SearchService

from factories import make_product, days


def ids(products):
    return [p.id for p in products]


class TestFilterProducts:
    def test_empty_query_returns_every_active_product(self, products):
        result = SearchService.filter_products(products, SearchCriteria())

        assert ids(result) == [
            "dell-xps",
            "msi-tower",
            "hp-monitor",
            "logi-mouse",
            "lenovo-dock",
        ]

    def test_inactive_products_never_match(self, products):
        result = SearchService.filter_products(products, SearchCriteria(query="dell"))

        assert all(p.status == ProductStatus.ACTIVE for p in result)
        assert "dell-sold" not in ids(result)

    def test_query_matches_title_description_and_string_specs(self, products):
        result = SearchService.filter_products(products, SearchCriteria(query="Dell"))

        # title, description and a string specification respectively
        assert ids(result) == ["dell-xps", "hp-monitor", "lenovo-dock"]

    def test_query_is_case_insensitive(self, products):
        upper = SearchService.filter_products(products, SearchCriteria(query="DELL"))
        lower = SearchService.filter_products(products, SearchCriteria(query="dell"))

        assert ids(upper) == ids(lower)

    def test_non_string_specifications_are_not_searched(self, products):
        result = SearchService.filter_products(products, SearchCriteria(query="true"))

        assert result == []

    def test_brand_alone_does_not_satisfy_text_filter(self):
        product = make_product(title="Wireless Mouse", brand="Razer")

        result = SearchService.filter_products([product], SearchCriteria(query="razer"))

        assert result == []

    def test_category_and_subcategory_are_exact(self, products):
        result = SearchService.filter_products(
            products, SearchCriteria(category="peripherals", subcategory="Monitors")
        )
        assert ids(result) == ["hp-monitor"]

        result = SearchService.filter_products(
            products, SearchCriteria(category="Peripherals")
        )
        assert result == []

    def test_subcategory_without_category(self, products):
        result = SearchService.filter_products(
            products, SearchCriteria(subcategory="Mice")
        )

        assert ids(result) == ["logi-mouse"]

    def test_price_bounds_are_inclusive(self, products):
        result = SearchService.filter_products(
            products, SearchCriteria(price_min=10000, price_max=85000)
        )

        assert ids(result) == ["dell-xps", "hp-monitor"]

    def test_zero_price_min_is_applied(self):
        product = make_product(price=1.0)

        result = SearchService.filter_products([product], SearchCriteria(price_min=0))

        assert result == [product]

    def test_conditions_use_or_semantics(self, products):
        result = SearchService.filter_products(
            products, SearchCriteria(conditions=["new", "refurbished"])
        )

        assert ids(result) == ["dell-xps", "hp-monitor", "logi-mouse"]

    def test_brands_use_or_semantics(self, products):
        result = SearchService.filter_products(
            products, SearchCriteria(brands=["Dell", "HP"])
        )

        assert ids(result) == ["dell-xps", "hp-monitor"]

    def test_unknown_condition_matches_nothing(self, products):
        result = SearchService.filter_products(
            products, SearchCriteria(conditions=["broken"])
        )

        assert result == []

    def test_location_is_exact_and_case_sensitive(self, products):
        exact = SearchService.filter_products(
            products, SearchCriteria(location="Addis Ababa")
        )
        lowered = SearchService.filter_products(
            products, SearchCriteria(location="addis ababa")
        )

        assert ids(exact) == ["dell-xps", "hp-monitor"]
        assert lowered == []

    def test_filters_combine_with_and(self, products):
        criteria = SearchCriteria(
            query="dell", category="peripherals", conditions=["refurbished"]
        )

        result = SearchService.filter_products(products, criteria)

        assert ids(result) == ["hp-monitor"]

    def test_every_excluded_active_product_violates_a_filter(self, products):
        criteria = SearchCriteria(query="intel", price_max=100000)
        result = SearchService.filter_products(products, criteria)

        assert ids(result) == ["dell-xps"]
        # msi-tower matches the query but is over budget
        assert "msi-tower" not in ids(result)

    def test_input_is_not_mutated(self, products):
        before = list(products)

        SearchService.filter_products(products, SearchCriteria(query="dell"))

        assert products == before


class TestRelevanceScore:
    def score(self, product, query):
        return SearchService.calculate_relevance_score(product, query.lower())

    def test_title_contains(self):
        product = make_product(title="Refurbished Dell Laptop", brand="HP")
        assert self.score(product, "dell") == 100

    def test_title_prefix_bonus(self):
        product = make_product(title="Dell Laptop", brand="HP")
        assert self.score(product, "dell") == 125

    def test_exact_title_collects_both_bonuses(self):
        product = make_product(title="Dell", brand="HP")
        assert self.score(product, "DELL") == 175

    def test_description_match(self):
        product = make_product(description="Works with any Dell dock", brand="HP")
        assert self.score(product, "dell") == 50

    def test_each_matching_string_spec_adds_ten(self):
        product = make_product(
            brand="HP",
            specifications={
                "processor": "Intel Core i5",
                "graphics": "Intel Iris Xe",
                "warranty": "1 year",
                "intel_inside": True,
            },
        )
        assert self.score(product, "intel") == 20

    def test_brand_match(self):
        product = make_product(brand="Dell")
        assert self.score(product, "dell") == 30

    def test_no_match_scores_zero(self):
        product = make_product(brand="HP")
        assert self.score(product, "dell") == 0


class TestSortProducts:
    def test_price_low_is_stable(self):
        a = make_product(id="a", price=300)
        b = make_product(id="b", price=100)
        c = make_product(id="c", price=300)
        d = make_product(id="d", price=100)

        result = SearchService.sort_products([a, b, c, d], "price-low")

        assert ids(result) == ["b", "d", "a", "c"]

    def test_price_high_is_stable(self):
        a = make_product(id="a", price=300)
        b = make_product(id="b", price=100)
        c = make_product(id="c", price=300)
        d = make_product(id="d", price=100)

        result = SearchService.sort_products([a, b, c, d], "price-high")

        assert ids(result) == ["a", "c", "b", "d"]

    def test_newest_and_oldest(self):
        a = make_product(id="a", created_at=days(2))
        b = make_product(id="b", created_at=days(1))
        c = make_product(id="c", created_at=days(2))
        d = make_product(id="d", created_at=days(3))

        newest = SearchService.sort_products([a, b, c, d], "newest")
        oldest = SearchService.sort_products([a, b, c, d], "oldest")

        assert ids(newest) == ["d", "a", "c", "b"]
        assert ids(oldest) == ["b", "a", "c", "d"]

    def test_relevance_without_query_is_newest(self, products):
        relevance = SearchService.sort_products(products, "relevance", "")
        newest = SearchService.sort_products(products, "newest", "")

        assert ids(relevance) == ids(newest)

    def test_relevance_orders_by_descending_score(self, products):
        matches = SearchService.filter_products(products, SearchCriteria(query="Dell"))

        result = SearchService.sort_products(matches, "relevance", "Dell")

        # title prefix (155) > description (50) > specification (10)
        assert ids(result) == ["dell-xps", "hp-monitor", "lenovo-dock"]

    def test_relevance_ties_keep_original_order(self):
        a = make_product(id="a", title="Mouse pad", created_at=days(1))
        b = make_product(id="b", title="Mouse pad", created_at=days(9))
        c = make_product(id="c", title="Mouse pad", created_at=days(5))

        result = SearchService.sort_products([a, b, c], "relevance", "mouse")

        assert ids(result) == ["a", "b", "c"]

    def test_title_match_outranks_specification_match(self):
        spec_only = make_product(
            id="spec",
            title="Docking Station",
            brand="Lenovo",
            specifications={"compatibility": "Dell Latitude"},
        )
        title = make_product(id="title", title="Dell Latitude 7420", brand="Lenovo")

        result = SearchService.sort_products([spec_only, title], "relevance", "Dell")

        assert ids(result) == ["title", "spec"]

    def test_unknown_sort_mode_falls_back_to_relevance(self, products):
        matches = SearchService.filter_products(products, SearchCriteria(query="dell"))

        fallback = SearchService.sort_products(matches, "cheapest", "dell")
        relevance = SearchService.sort_products(matches, "relevance", "dell")

        assert ids(fallback) == ids(relevance)

    def test_sorting_returns_new_list(self, products):
        before = list(products)

        result = SearchService.sort_products(products, "price-low")

        assert result is not products
        assert products == before


class TestFacets:
    def test_counts_over_filtered_set(self, products):
        matches = SearchService.filter_products(products, SearchCriteria())

        facets = SearchService.calculate_facets(matches)

        assert facets["categories"] == [
            {"value": "laptops", "count": 1},
            {"value": "desktop-computers", "count": 1},
            {"value": "peripherals", "count": 2},
            {"value": "computer-accessories", "count": 1},
        ]
        assert sum(f["count"] for f in facets["brands"]) == 5
        assert {f["value"]: f["count"] for f in facets["conditions"]} == {
            "new": 2,
            "used": 2,
            "refurbished": 1,
        }

    def test_price_bands_skip_empty_and_bound_correctly(self, products):
        matches = SearchService.filter_products(products, SearchCriteria())

        facets = SearchService.calculate_facets(matches)

        assert facets["price_ranges"] == [
            {"min": 0, "max": 10000, "count": 2},
            {"min": 10000, "max": 25000, "count": 1},
            {"min": 50000, "max": 100000, "count": 1},
            {"min": 100000, "max": None, "count": 1},
        ]

    def test_band_boundary_belongs_to_upper_band(self):
        product = make_product(price=10000)

        ranges = SearchService.calculate_price_ranges([product])

        assert ranges == [{"min": 10000, "max": 25000, "count": 1}]

    def test_price_band_counts_sum_to_set_size(self):
        prices = [1, 9999, 10000, 24999.99, 25000, 50000, 99999, 100000, 5_000_000]
        matches = [make_product(price=p) for p in prices]

        ranges = SearchService.calculate_price_ranges(matches)

        assert sum(r["count"] for r in ranges) == len(prices)

    def test_empty_set_has_empty_facets(self):
        facets = SearchService.calculate_facets([])

        assert facets == {
            "categories": [],
            "brands": [],
            "conditions": [],
            "price_ranges": [],
        }


class TestSuggestions:
    def test_titles_and_brands_in_discovery_order(self, products):
        suggestions = SearchService.generate_suggestions("dell", products)

        assert suggestions == ["Dell XPS 13 Ultrabook", "Dell", "Dell Inspiron 15"]

    def test_deduplicates_and_truncates_at_five(self):
        catalog = [
            make_product(title=f"Razer Mouse {i}", brand="Razer") for i in range(8)
        ]

        suggestions = SearchService.generate_suggestions("razer", catalog)

        assert suggestions == [
            "Razer Mouse 0",
            "Razer",
            "Razer Mouse 1",
            "Razer Mouse 2",
            "Razer Mouse 3",
        ]

    def test_ignores_descriptions_and_specs(self):
        product = make_product(
            title="USB Hub",
            brand="Lenovo",
            description="Dell compatible",
            specifications={"fits": "Dell"},
        )

        assert SearchService.generate_suggestions("dell", [product]) == []


class TestSearch:
    def test_empty_query_no_filters(self, catalog):
        result = SearchService.search(catalog, SearchCriteria())

        assert result["total_count"] == 5
        assert len(result["products"]) == 5
        assert "suggestions" not in result
        assert sum(f["count"] for f in result["facets"]["categories"]) == 5

    def test_query_adds_suggestions(self, catalog):
        result = SearchService.search(catalog, SearchCriteria(query="dell"))

        assert result["total_count"] == 3
        assert result["suggestions"][0] == "Dell XPS 13 Ultrabook"

    def test_facets_ignore_pagination(self, catalog):
        result = SearchService.search(catalog, SearchCriteria(limit=2))

        assert len(result["products"]) == 2
        assert result["total_count"] == 5
        assert sum(f["count"] for f in result["facets"]["conditions"]) == 5

    def test_pages_reconstruct_sorted_set(self):
        matches = [make_product(id=f"p{i}", price=100 * (i % 3 + 1)) for i in range(7)]
        full = SearchService.search(
            matches, SearchCriteria(sort_by="price-low", limit=100)
        )

        pages = []
        for page in range(1, 4):
            result = SearchService.search(
                matches, SearchCriteria(sort_by="price-low", page=page, limit=3)
            )
            assert result["total_count"] == 7
            pages.extend(result["products"])

        assert ids(pages) == ids(full["products"])
        assert len(set(ids(pages))) == 7

    def test_pagination_edge(self):
        matches = [make_product() for _ in range(7)]

        sizes = [
            len(SearchService.search(matches, SearchCriteria(page=p, limit=5))["products"])
            for p in (1, 2, 3)
        ]
        third = SearchService.search(matches, SearchCriteria(page=3, limit=5))

        assert sizes == [5, 2, 0]
        assert third["total_count"] == 7

    def test_is_idempotent(self, catalog):
        criteria = SearchCriteria(query="intel", sort_by="relevance")

        assert SearchService.search(catalog, criteria) == SearchService.search(
            catalog, criteria
        )

    def test_catalog_is_left_untouched(self, catalog):
        before = catalog.products

        SearchService.search(catalog, SearchCriteria(sort_by="price-high", page=2, limit=2))

        assert catalog.products == before

    def test_condition_enum_values_are_compared(self, catalog):
        result = SearchService.search(
            catalog, SearchCriteria(conditions=[ProductCondition.USED.value])
        )

        assert {p.id for p in result["products"]} == {"msi-tower", "lenovo-dock"}
