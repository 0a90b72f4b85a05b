# Sort modes accepted by the search endpoint
SORT_RELEVANCE = "relevance"
SORT_PRICE_LOW = "price-low"
SORT_PRICE_HIGH = "price-high"
SORT_NEWEST = "newest"
SORT_OLDEST = "oldest"

SORT_OPTIONS = [SORT_RELEVANCE, SORT_PRICE_LOW, SORT_PRICE_HIGH, SORT_NEWEST, SORT_OLDEST]

# Relevance score weights
SCORE_WEIGHTS = {
    "TITLE_CONTAINS": 100,
    "TITLE_EXACT": 50,
    "TITLE_PREFIX": 25,
    "DESCRIPTION_CONTAINS": 50,
    "SPECIFICATION_CONTAINS": 10,
    "BRAND_CONTAINS": 30,
}

# Price facet bands, lower bound inclusive, upper bound exclusive (None = unbounded)
PRICE_RANGES = [
    (0, 10000),
    (10000, 25000),
    (25000, 50000),
    (50000, 100000),
    (100000, None),
]

SUGGESTION_LIMIT = 5
