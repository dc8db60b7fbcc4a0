"""Demo data definitions for a crop-input dealer network.

This module contains the reference tables and distributions used to
generate synthetic sales data: dealers, the product catalogue, customer
company names, and how transactions spread over the reporting quarters.

All data is fictional and used for demonstration purposes only.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class DealerDef:
    """Definition of a dealer."""

    id: int
    name: str


@dataclass(frozen=True)
class ProductDef:
    """Definition of a product and the category it is sold under."""

    id: int
    name: str
    category: str  # Category literal, bound to an enum by the store


@dataclass(frozen=True)
class QuarterWeight:
    """Share of generated transactions that fall into one quarter."""

    quarter: int
    year: int
    weight: float


# =============================================================================
# Dealers
# =============================================================================

DEMO_DEALERS: list[DealerDef] = [
    DealerDef(id=1, name="Barrett"),
    DealerDef(id=2, name="Landus"),
    DealerDef(id=3, name="Big Yield"),
]

# The earlier dataset had a different third dealer
LEGACY_DEALERS: list[DealerDef] = [
    DealerDef(id=1, name="Barrett"),
    DealerDef(id=2, name="Landus"),
    DealerDef(id=3, name="Holganix"),
]


# =============================================================================
# Product Catalogue (current category set)
# =============================================================================

DEMO_PRODUCTS: list[ProductDef] = [
    # Adjuvants
    ProductDef(id=1, name="Silwet Gold", category="adjuvants"),
    # Biologicals
    ProductDef(id=2, name="Brus", category="biologicals"),
    ProductDef(id=3, name="Extrasol", category="biologicals"),
    ProductDef(id=4, name="Clover Inoculant", category="biologicals"),
    # Fungicide
    ProductDef(id=5, name="Bluestone", category="fungicide"),
    ProductDef(id=6, name="Aroxy 250 SC", category="fungicide"),
    ProductDef(id=7, name="Benomyl", category="fungicide"),
    ProductDef(id=8, name="Brilliant SL", category="fungicide"),
    ProductDef(id=9, name="Evito C", category="fungicide"),
    # Herbicide
    ProductDef(id=10, name="Alachlore", category="herbicide"),
    ProductDef(id=11, name="Apmlify", category="herbicide"),
    ProductDef(id=12, name="Armour", category="herbicide"),
    ProductDef(id=13, name="Baseline 960", category="herbicide"),
    ProductDef(id=14, name="Cheetah 600", category="herbicide"),
    # Insecticide
    ProductDef(id=15, name="Akito", category="insecticide"),
    ProductDef(id=16, name="Swat 150 SC", category="insecticide"),
    ProductDef(id=17, name="Oxadate", category="insecticide"),
    ProductDef(id=18, name="Desta 100 EC", category="insecticide"),
    # Micronutrients
    ProductDef(id=19, name="Biozyme", category="micronutrients"),
    ProductDef(id=20, name="Zincflo Plus", category="micronutrients"),
]


# =============================================================================
# Customers
# =============================================================================

CUSTOMER_NAMES: list[str] = [
    "Prairie Ridge Farms",
    "Golden Furrow Co-op",
    "Hollow Creek Growers",
    "Northfield Agronomy",
    "Cedar Bend Ranch",
    "Bluestem Acres",
    "Riverside Grain LLC",
    "Harvest Moon Holdings",
    "Maple Hill Produce",
    "Sandhill Crane Farms",
    "Twin Silo Partners",
    "Westwind Orchards",
    "Iron Plough Ag",
    "Clearwater Seed Co",
    "Oak Valley Cattle & Crop",
    "Summit Field Services",
    "Red Barn Collective",
    "Meadowlark Growers",
    "Fox Run Family Farm",
    "High Plains Pulse",
    "Stony Brook Vineyards",
    "Heartland Row Crops",
    "Willow Flat Dairy",
    "Copper Kettle Farms",
    "Lone Pine Agriculture",
    "Green Acre Ventures",
    "Timber Ridge Soybeans",
    "Sunflower State Growers",
    "Broad Leaf Organics",
    "East Fork Cattle Co",
]


# =============================================================================
# Transaction Distribution (current category set)
# =============================================================================

# Weighted towards recent quarters; the last quarter lies beyond the rolling
# window
QUARTER_WEIGHTS: list[QuarterWeight] = [
    QuarterWeight(quarter=4, year=2024, weight=0.1),
    QuarterWeight(quarter=1, year=2025, weight=0.2),
    QuarterWeight(quarter=2, year=2025, weight=0.3),
    QuarterWeight(quarter=3, year=2025, weight=0.3),
    QuarterWeight(quarter=4, year=2025, weight=0.1),
]

CATEGORIES_PER_CUSTOMER = (1, 4)
PRODUCTS_PER_CATEGORY = (1, 3)
TRANSACTIONS_PER_PRODUCT = (1, 5)

AMOUNT_MIN = Decimal("100.00")
AMOUNT_MAX = Decimal("50000.00")


# =============================================================================
# Legacy Dataset (nine-category set, no products)
# =============================================================================

LEGACY_CATEGORY_VALUES: list[str] = [
    "biologicals",
    "micronutrients",
    "adjuvants",
    "seed-treatment",
    "herbicide",
    "fungicidee",
    "insecticide",
    "fertilizer",
    "seed",
]

LEGACY_CUSTOMER_COUNT = 20
LEGACY_TRANSACTION_COUNT = 1000
LEGACY_START = date(2024, 1, 1)
LEGACY_END = date(2024, 12, 31)
