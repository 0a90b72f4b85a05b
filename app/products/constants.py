# Brands carried by the marketplace
SUPPORTED_BRANDS = [
    # Computer manufacturers
    "Dell",
    "HP",
    "Lenovo",
    "ASUS",
    "Acer",
    "MSI",
    "Apple",
    # Component manufacturers
    "Intel",
    "AMD",
    "NVIDIA",
    # Peripheral and accessory brands
    "Corsair",
    "Kingston",
    "Samsung",
    "Logitech",
    "Razer",
    "SteelSeries",
]

PREMIUM_BRANDS = ["Apple", "ASUS", "MSI", "Razer", "Corsair"]

# Categories each brand sells in
BRAND_CATEGORIES = {
    "Dell": ["laptops", "desktop-computers", "peripherals", "software-licenses"],
    "HP": ["laptops", "desktop-computers", "peripherals", "software-licenses"],
    "Lenovo": ["laptops", "desktop-computers", "peripherals", "software-licenses"],
    "ASUS": [
        "laptops",
        "desktop-computers",
        "computer-components",
        "peripherals",
        "networking-equipment",
        "software-licenses",
    ],
    "Acer": ["laptops", "desktop-computers", "peripherals", "software-licenses"],
    "MSI": [
        "laptops",
        "desktop-computers",
        "computer-components",
        "peripherals",
        "software-licenses",
    ],
    "Apple": ["laptops", "desktop-computers", "software-licenses"],
    "Intel": ["computer-components", "software-licenses"],
    "AMD": ["computer-components", "software-licenses"],
    "NVIDIA": ["computer-components", "software-licenses"],
    "Corsair": [
        "computer-components",
        "peripherals",
        "computer-accessories",
        "software-licenses",
    ],
    "Kingston": ["computer-components", "software-licenses"],
    "Samsung": ["computer-components", "peripherals", "software-licenses"],
    "Logitech": ["peripherals", "computer-accessories", "software-licenses"],
    "Razer": ["peripherals", "computer-accessories", "software-licenses"],
    "SteelSeries": ["peripherals", "computer-accessories", "software-licenses"],
}

# Base price ranges by category (ETB)
CATEGORY_PRICE_RANGES = {
    "laptops": (15000, 150000),
    "desktop-computers": (20000, 200000),
    "computer-components": (2000, 80000),
    "peripherals": (500, 50000),
    "networking-equipment": (1000, 30000),
    "software-licenses": (500, 15000),
    "computer-accessories": (200, 10000),
}

CONDITION_PRICE_FACTORS = {"used": 0.6, "refurbished": 0.75}
PREMIUM_BRAND_FACTOR = 1.2

# Filter keys accepted by the product listing endpoint
PRODUCT_FILTER_KEYS = {
    "CATEGORY": "category",
    "SUBCATEGORY": "subcategory",
    "MIN_PRICE": "min_price",
    "MAX_PRICE": "max_price",
    "CONDITION": "condition",
    "CITY": "city",
    "SEARCH": "search",
    "SORT_BY": "sort_by",
    "SORT_ORDER": "sort_order",
}

# Wire sort field -> Product attribute
PRODUCT_SORT_FIELDS = {
    "createdAt": "created_at",
    "updatedAt": "updated_at",
    "price": "price",
    "title": "title",
    "views": "views",
    "favorites": "favorites",
}
DEFAULT_SORT_FIELD = "createdAt"
SORT_ORDERS = ["asc", "desc"]
DEFAULT_SORT_ORDER = "desc"
