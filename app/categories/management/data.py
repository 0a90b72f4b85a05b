"""
Category taxonomy for the computer marketplace.

This file contains the fixed category and subcategory structure used by the
catalog generator, the category endpoints and the management commands.
Keeping the data separate makes it easy to reuse across those consumers.
"""

# Main categories with their subcategories, in display order
CATEGORIES = [
    {
        "name": "Laptops",
        "slug": "laptops",
        "description": "Gaming, business and everyday notebooks",
        "subcategories": ["Gaming", "Business", "Ultrabooks", "Budget"],
    },
    {
        "name": "Desktop Computers",
        "slug": "desktop-computers",
        "description": "Towers, workstations and all-in-one PCs",
        "subcategories": ["Gaming PCs", "Workstations", "All-in-One"],
    },
    {
        "name": "Computer Components",
        "slug": "computer-components",
        "description": "Processors, graphics cards, memory and storage",
        "subcategories": ["CPUs", "GPUs", "RAM", "Storage", "Motherboards"],
    },
    {
        "name": "Peripherals",
        "slug": "peripherals",
        "description": "Monitors, keyboards, mice and other input/output devices",
        "subcategories": ["Monitors", "Keyboards", "Mice", "Speakers", "Webcams"],
    },
    {
        "name": "Networking Equipment",
        "slug": "networking-equipment",
        "description": "Routers, switches, modems and cabling",
        "subcategories": ["Routers", "Switches", "Modems", "Network Cards", "Cables"],
    },
    {
        "name": "Software & Licenses",
        "slug": "software-licenses",
        "description": "Operating systems, productivity and security software",
        "subcategories": [
            "Operating Systems",
            "Productivity Software",
            "Security Software",
            "Development Tools",
        ],
    },
    {
        "name": "Computer Accessories",
        "slug": "computer-accessories",
        "description": "Bags, adapters, cooling and power",
        "subcategories": [
            "Bags & Cases",
            "Cables & Adapters",
            "Cooling",
            "Power Supplies",
            "Other Accessories",
        ],
    },
]

CATEGORY_SLUGS = [category["slug"] for category in CATEGORIES]

# Cities products are listed in
LOCATIONS = [
    {"city": "Addis Ababa", "region": "Addis Ababa", "country": "Ethiopia"},
    {"city": "Dire Dawa", "region": "Dire Dawa", "country": "Ethiopia"},
    {"city": "Mekelle", "region": "Tigray", "country": "Ethiopia"},
    {"city": "Gondar", "region": "Amhara", "country": "Ethiopia"},
    {"city": "Bahir Dar", "region": "Amhara", "country": "Ethiopia"},
    {"city": "Hawassa", "region": "Sidama", "country": "Ethiopia"},
    {"city": "Adama", "region": "Oromia", "country": "Ethiopia"},
    {"city": "Jimma", "region": "Oromia", "country": "Ethiopia"},
    {"city": "Dessie", "region": "Amhara", "country": "Ethiopia"},
    {"city": "Harar", "region": "Harari", "country": "Ethiopia"},
]
