"""
Seeded sample catalog for the marketplace.

Generates realistic computer products across all seven categories and the
supported brands. Every random draw comes from a single ``random.Random``
seeded by the caller, so the same seed and reference time always produce
the same catalog.
"""
# python imports
import logging
import random
import re
from datetime import datetime, timedelta
from typing import Dict, List, Optional

# project imports
from app.categories.management.data import CATEGORIES, LOCATIONS
from app.libs.datetime_utils import ensure_timezone_aware, utcnow_aware
from app.libs.helper import generate_random_string

# app imports
from .constants import (
    SUPPORTED_BRANDS,
    BRAND_CATEGORIES,
    PREMIUM_BRANDS,
    PREMIUM_BRAND_FACTOR,
    CATEGORY_PRICE_RANGES,
    CONDITION_PRICE_FACTORS,
)
from .models import Product, Location, ProductCondition, ProductStatus, SpecValue

logger = logging.getLogger(__name__)

DEFAULT_SEED = 12345
SELLER_COUNT = 30
CREATED_WITHIN_DAYS = 180

LAPTOP_SPECS = {
    "processor": [
        "Intel Core i3-1115G4",
        "Intel Core i5-1135G7",
        "Intel Core i5-12450H",
        "Intel Core i7-1165G7",
        "Intel Core i7-12700H",
        "Intel Core i9-12900H",
        "AMD Ryzen 5 5500U",
        "AMD Ryzen 5 5600H",
        "AMD Ryzen 7 5800H",
        "AMD Ryzen 9 5900HX",
        "Apple M1",
        "Apple M2",
        "Apple M2 Pro",
    ],
    "memory": ["4GB DDR4", "8GB DDR4", "16GB DDR4", "32GB DDR4", "16GB DDR5", "32GB DDR5"],
    "storage": ["256GB SSD", "512GB SSD", "1TB SSD", "2TB SSD", "512GB NVMe", "1TB NVMe"],
    "graphics": [
        "Intel UHD Graphics",
        "Intel Iris Xe Graphics",
        "NVIDIA GeForce GTX 1650",
        "NVIDIA GeForce RTX 3050",
        "NVIDIA GeForce RTX 3060",
        "NVIDIA GeForce RTX 4060",
        "NVIDIA GeForce RTX 4070",
        "AMD Radeon RX 6600M",
    ],
    "screenSize": ['13.3"', '14"', '15.6"', '16"', '17.3"'],
    "operatingSystem": ["Windows 11 Home", "Windows 11 Pro", "macOS Sonoma", "Ubuntu 22.04"],
    "warranty": ["1 year", "2 years", "3 years"],
}

DESKTOP_SPECS = {
    "processor": [
        "Intel Core i3-12100",
        "Intel Core i5-12400",
        "Intel Core i7-13700K",
        "Intel Core i9-13900K",
        "AMD Ryzen 5 5600X",
        "AMD Ryzen 7 5800X3D",
        "AMD Ryzen 9 7950X",
    ],
    "memory": ["8GB DDR4", "16GB DDR4", "32GB DDR4", "64GB DDR4", "32GB DDR5", "64GB DDR5"],
    "storage": ["512GB SSD", "1TB SSD", "2TB SSD", "1TB NVMe + 2TB HDD"],
    "graphics": [
        "Intel UHD Graphics 730",
        "NVIDIA GeForce GTX 1660 Super",
        "NVIDIA GeForce RTX 3070",
        "NVIDIA GeForce RTX 4080",
        "NVIDIA GeForce RTX 4090",
        "AMD Radeon RX 7900 XTX",
    ],
    "operatingSystem": ["Windows 11 Home", "Windows 11 Pro", "Ubuntu 22.04", "No OS"],
    "warranty": ["1 year", "2 years", "3 years"],
}

# Per-subcategory specification choices for the remaining categories
SUBCATEGORY_SPECS = {
    "CPUs": {
        "socket": ["LGA 1700", "LGA 1200", "AM4", "AM5"],
        "cores": ["4 cores / 8 threads", "6 cores / 12 threads", "8 cores / 16 threads"],
        "warranty": ["1 year", "3 years"],
    },
    "GPUs": {
        "memory": ["4GB GDDR6", "8GB GDDR6", "12GB GDDR6", "24GB GDDR6X"],
        "warranty": ["2 years", "3 years"],
    },
    "RAM": {
        "speed": ["2666MHz", "3200MHz", "3600MHz", "4800MHz", "6000MHz"],
        "warranty": ["Lifetime"],
    },
    "Storage": {
        "capacity": ["256GB", "512GB", "1TB", "2TB", "4TB"],
        "interface": ["SATA III", "NVMe PCIe 3.0", "NVMe PCIe 4.0"],
        "warranty": ["3 years", "5 years"],
    },
    "Motherboards": {
        "formFactor": ["ATX", "Micro-ATX", "Mini-ITX"],
        "chipset": ["Intel Z790", "Intel B760", "AMD X670E", "AMD B650"],
        "warranty": ["1 year", "3 years"],
    },
    "Monitors": {
        "size": ['24"', '27"', '32"', '34"'],
        "resolution": ["1920x1080 (Full HD)", "2560x1440 (QHD)", "3840x2160 (4K)"],
        "refreshRate": ["60Hz", "75Hz", "144Hz", "165Hz", "240Hz"],
        "panelType": ["IPS", "VA", "TN", "OLED"],
        "warranty": ["1 year", "3 years"],
    },
    "Keyboards": {
        "type": ["Membrane", "Mechanical (Blue)", "Mechanical (Brown)", "Optical"],
        "warranty": ["1 year", "2 years"],
    },
    "Mice": {
        "type": ["Wired", "Wireless", "Bluetooth"],
        "dpi": ["800-3200 DPI", "1600-6400 DPI", "100-25600 DPI"],
        "warranty": ["1 year", "2 years"],
    },
    "Speakers": {"power": ["10W", "20W", "40W", "100W"], "warranty": ["1 year"]},
    "Webcams": {"resolution": ["720p", "1080p", "4K"], "warranty": ["1 year"]},
    "Routers": {
        "speed": ["AC1200", "AC1750", "AX1800", "AX3000", "AX6000"],
        "bands": ["Dual Band (2.4GHz + 5GHz)", "Tri Band (2.4GHz + 5GHz + 6GHz)"],
        "warranty": ["1 year", "2 years"],
    },
    "Switches": {
        "ports": ["5-port", "8-port", "16-port", "24-port"],
        "speed": ["10/100 Mbps", "Gigabit (10/100/1000)", "10 Gigabit"],
        "warranty": ["1 year", "3 years"],
    },
    "Modems": {"type": ["Cable", "DSL", "Fiber", "LTE"], "warranty": ["1 year"]},
    "Network Cards": {
        "speed": ["Gigabit Ethernet", "2.5 Gigabit Ethernet", "Wi-Fi 6 (AX)"],
        "warranty": ["1 year", "2 years"],
    },
    "Cables": {"length": ["1m", "2m", "3m", "5m", "10m"], "warranty": ["6 months"]},
    "Power Supplies": {
        "wattage": ["450W", "550W", "650W", "750W", "850W", "1000W"],
        "efficiency": ["80+ Bronze", "80+ Gold", "80+ Platinum"],
        "warranty": ["6 months", "1 year", "2 years"],
    },
}

SOFTWARE_SPECS = {
    "licenseType": ["Perpetual", "1 Year Subscription", "3 Year Subscription"],
    "devices": ["1 device", "3 devices", "5 devices"],
    "delivery": ["Digital Download"],
}

ACCESSORY_SPECS = {"warranty": ["6 months", "1 year", "2 years"]}

TITLE_TEMPLATES = {
    "Gaming": [
        "{brand} Gaming Laptop {processor} {graphics} {memory} {storage}",
        "{brand} {screenSize} Gaming Notebook {processor} {graphics}",
        "{brand} High Performance Gaming Laptop {graphics} {memory}",
    ],
    "Business": [
        "{brand} Business Laptop {processor} {memory} {storage}",
        "{brand} Professional {screenSize} Laptop {processor}",
    ],
    "Ultrabooks": [
        "{brand} Ultrabook {processor} {memory} {storage}",
        "{brand} Slim {screenSize} Laptop {processor}",
    ],
    "Budget": [
        "{brand} Budget Laptop {processor} {memory}",
        "{brand} Entry-Level Laptop {processor}",
    ],
    "Gaming PCs": [
        "{brand} Gaming Desktop {processor} {graphics} {memory}",
        "{brand} Gaming Tower {processor} {graphics}",
    ],
    "Workstations": [
        "{brand} Professional Workstation {processor} {memory}",
        "{brand} Content Creation PC {processor} {graphics}",
    ],
    "All-in-One": [
        "{brand} All-in-One Desktop {processor} {memory}",
        "{brand} Space-Saving Desktop {processor}",
    ],
    "CPUs": ["{brand} CPU {cores}", "{brand} Desktop Processor {socket}"],
    "GPUs": ["{brand} Graphics Card {memory}", "{brand} Video Card {memory}"],
    "RAM": ["{brand} Memory Kit {speed}", "{brand} RAM {speed}"],
    "Storage": ["{brand} {capacity} SSD {interface}", "{brand} {capacity} {interface}"],
    "Motherboards": [
        "{brand} {chipset} Motherboard {formFactor}",
        "{brand} {formFactor} Motherboard",
    ],
    "Monitors": [
        "{brand} {size} Monitor {resolution} {refreshRate}",
        "{brand} {panelType} Monitor {size}",
    ],
    "Keyboards": ["{brand} {type} Keyboard", "{brand} Mechanical Keyboard"],
    "Mice": ["{brand} {type} Mouse {dpi}", "{brand} Gaming Mouse {dpi}"],
    "Speakers": ["{brand} {power} Speakers", "{brand} Computer Speakers"],
    "Webcams": ["{brand} {resolution} Webcam", "{brand} Streaming Webcam"],
    "Routers": ["{brand} {speed} Router {bands}", "{brand} Wi-Fi Router {speed}"],
    "Switches": ["{brand} {ports} Network Switch {speed}", "{brand} Ethernet Switch {ports}"],
    "Modems": ["{brand} {type} Modem", "{brand} High-Speed Modem {type}"],
    "Network Cards": ["{brand} Network Card {speed}", "{brand} Ethernet Adapter {speed}"],
    "Cables": ["{brand} Ethernet Cable Cat6", "{brand} HDMI Cable 2.1"],
    "Operating Systems": ["Windows 11 Pro License", "Windows 10 Home License"],
    "Productivity Software": [
        "Microsoft Office 2021 Professional",
        "Adobe Creative Cloud Subscription",
    ],
    "Security Software": ["Norton 360 Antivirus", "Kaspersky Internet Security"],
    "Development Tools": ["Visual Studio Professional", "JetBrains IntelliJ IDEA"],
    "Bags & Cases": ["{brand} Laptop Bag", "{brand} Laptop Sleeve"],
    "Cables & Adapters": ["{brand} USB-C Hub", "{brand} HDMI to DisplayPort Adapter"],
    "Cooling": ["{brand} Laptop Cooling Pad", "{brand} CPU Cooler"],
    "Power Supplies": ["{brand} {wattage} Power Supply", "{brand} Modular PSU {wattage}"],
    "Other Accessories": ["{brand} Laptop Stand", "{brand} Monitor Arm"],
}

# Specification keys worth calling out in descriptions
DESCRIPTION_HIGHLIGHTS = [
    ("processor", "Powered by {}"),
    ("memory", "{} RAM"),
    ("storage", "{} storage"),
    ("graphics", "{} graphics"),
    ("screenSize", "{} display"),
    ("resolution", "{} resolution"),
    ("refreshRate", "{} refresh rate"),
]

PLACEHOLDER = re.compile(r"\{(\w+)\}")


class CatalogGenerator:
    """Builds a reproducible product catalog from a seed"""

    def __init__(self, seed=DEFAULT_SEED, reference_time: Optional[datetime] = None):
        self.rng = random.Random(seed)
        self.reference_time = (
            ensure_timezone_aware(reference_time) if reference_time else utcnow_aware()
        )

    def generate(self, products_per_subcategory: int = 5) -> List[Product]:
        seller_ids = [f"seller_{self._generate_id()}" for _ in range(SELLER_COUNT)]
        products = []

        for category in CATEGORIES:
            slug = category["slug"]
            brands = [b for b in SUPPORTED_BRANDS if slug in BRAND_CATEGORIES[b]]
            per_brand = products_per_subcategory // len(brands) + 1

            for subcategory in category["subcategories"]:
                for brand in brands:
                    for _ in range(per_brand):
                        seller_id = self.rng.choice(seller_ids)
                        products.append(
                            self.generate_product(slug, subcategory, brand, seller_id)
                        )

        logger.info(f"Generated {len(products)} products across {len(CATEGORIES)} categories")
        return products

    def generate_product(self, category, subcategory, brand, seller_id) -> Product:
        condition = self.rng.choice(list(ProductCondition))
        specs = self._specifications(category, subcategory)
        created_at = self.reference_time - timedelta(
            days=self.rng.random() * CREATED_WITHIN_DAYS
        )

        if self.rng.random() > 0.1:
            status = ProductStatus.ACTIVE
        else:
            status = self.rng.choice([ProductStatus.SOLD, ProductStatus.INACTIVE])

        return Product(
            id=self._generate_id(),
            title=self._title(subcategory, brand, specs),
            description=self._description(subcategory, brand, condition, specs),
            price=self._price(category, brand, condition),
            condition=condition,
            status=status,
            category=category,
            subcategory=subcategory,
            brand=brand,
            specifications=specs,
            location=Location(**self.rng.choice(LOCATIONS)),
            seller_id=seller_id,
            created_at=created_at,
            updated_at=created_at,
            views=self.rng.randint(0, 500),
            favorites=self.rng.randint(0, 50),
        )

    def _generate_id(self) -> str:
        return generate_random_string(12, rng=self.rng)

    def _specifications(self, category, subcategory) -> Dict[str, SpecValue]:
        if category == "laptops":
            choices = LAPTOP_SPECS
        elif category == "desktop-computers":
            choices = DESKTOP_SPECS
        elif category == "software-licenses":
            choices = SOFTWARE_SPECS
        else:
            choices = SUBCATEGORY_SPECS.get(subcategory, ACCESSORY_SPECS)
        return {key: self.rng.choice(options) for key, options in choices.items()}

    def _title(self, subcategory, brand, specs) -> str:
        templates = TITLE_TEMPLATES.get(subcategory)
        if not templates:
            return f"{brand} {subcategory} Product"

        values = {k: v for k, v in specs.items() if isinstance(v, str)}
        values["brand"] = brand
        title = PLACEHOLDER.sub(
            lambda m: values.get(m.group(1), ""), self.rng.choice(templates)
        )
        return " ".join(title.split())

    def _description(self, subcategory, brand, condition, specs) -> str:
        condition_text = {
            ProductCondition.NEW: "Brand new",
            ProductCondition.REFURBISHED: "Professionally refurbished",
            ProductCondition.USED: "Used",
        }[condition]

        openings = [
            f"{condition_text} {brand} {subcategory.lower()} in excellent condition.",
            f"High-quality {brand} product perfect for your computing needs.",
            f"Reliable {brand} {subcategory.lower()} with great performance.",
        ]
        parts = [self.rng.choice(openings)]

        highlights = [
            template.format(specs[key])
            for key, template in DESCRIPTION_HIGHLIGHTS
            if specs.get(key)
        ]
        if highlights:
            parts.append(", ".join(highlights) + ".")

        if specs.get("warranty"):
            parts.append(f"Comes with {specs['warranty']} warranty.")

        if condition == ProductCondition.NEW:
            parts.append("Factory sealed with original packaging.")
        elif condition == ProductCondition.REFURBISHED:
            parts.append("Tested and certified to work like new.")
        else:
            parts.append("Well maintained and fully functional.")

        parts.append("Contact seller for more details and to arrange viewing.")
        return " ".join(parts)

    def _price(self, category, brand, condition) -> float:
        low, high = CATEGORY_PRICE_RANGES[category]
        price = float(self.rng.randint(low, high))

        if brand in PREMIUM_BRANDS:
            price *= PREMIUM_BRAND_FACTOR
        price *= CONDITION_PRICE_FACTORS.get(condition.value, 1.0)

        # Round to nearest 100, never below it
        return float(max(100, round(price / 100) * 100))


def generate_product_dataset(
    seed=DEFAULT_SEED, products_per_subcategory=5, reference_time=None
) -> List[Product]:
    """Generate the sample catalog for ``seed``"""
    generator = CatalogGenerator(seed=seed, reference_time=reference_time)
    return generator.generate(products_per_subcategory)
