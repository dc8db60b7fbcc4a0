"""Demo data generation for AgriSales.

Builds the synthetic dataset the reports run against and logs a summary of
it. Generation is deterministic for a given random seed.

Usage:
    agrisales-seed
    # or
    python -m agrisales_demo.seed

Options:
    --legacy    Generate the nine-category legacy dataset instead
"""

from __future__ import annotations

import calendar
import logging
import random
import sys
from datetime import date, timedelta
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from agrisales.domain.sales.aggregates import TransactionStore
from agrisales.domain.sales.entities import Customer, Dealer, Product, Transaction
from agrisales.domain.sales.services import QUARTER_MONTHS, RankingService
from agrisales.domain.sales.value_objects import CategorySet
from agrisales_config.settings import get_settings
from agrisales_demo.data import (
    AMOUNT_MAX,
    AMOUNT_MIN,
    CATEGORIES_PER_CUSTOMER,
    CUSTOMER_NAMES,
    DEMO_DEALERS,
    DEMO_PRODUCTS,
    LEGACY_CATEGORY_VALUES,
    LEGACY_CUSTOMER_COUNT,
    LEGACY_DEALERS,
    LEGACY_END,
    LEGACY_START,
    LEGACY_TRANSACTION_COUNT,
    PRODUCTS_PER_CATEGORY,
    QUARTER_WEIGHTS,
    TRANSACTIONS_PER_PRODUCT,
    DealerDef,
    QuarterWeight,
)

if TYPE_CHECKING:
    from agrisales_config.settings import Settings

logger = logging.getLogger(__name__)

SAMPLE_CUSTOMER_COUNT = 5


def random_amount(rng: random.Random) -> Decimal:
    """Uniform amount between the bounds, rounded to cents."""
    amount = AMOUNT_MIN + (AMOUNT_MAX - AMOUNT_MIN) * Decimal(str(rng.random()))
    return amount.quantize(Decimal("0.01"))


def random_date(start: date, end: date, rng: random.Random) -> date:
    return start + timedelta(days=rng.randint(0, (end - start).days))


def pick_quarter(rng: random.Random) -> QuarterWeight:
    """Pick a quarter according to the cumulative quarter weights."""
    roll = rng.random()
    cumulative = 0.0
    for entry in QUARTER_WEIGHTS:
        cumulative += entry.weight
        if roll < cumulative:
            return entry
    return QUARTER_WEIGHTS[-1]


def quarter_bounds(quarter: int, year: int) -> tuple[date, date]:
    first_month, last_month = QUARTER_MONTHS[quarter]
    last_day = calendar.monthrange(year, last_month)[1]
    return date(year, first_month, 1), date(year, last_month, last_day)


def build_dealers(dealer_defs: list[DealerDef]) -> list[Dealer]:
    return [Dealer(id=d.id, name=d.name) for d in dealer_defs]


def build_customers(count: int, dealers: list[Dealer]) -> list[Customer]:
    """Create customers assigned to dealers round-robin.

    Names repeat with a numeric suffix once the name list is exhausted.
    """
    customers: list[Customer] = []
    for index in range(count):
        name = CUSTOMER_NAMES[index % len(CUSTOMER_NAMES)]
        cycle = index // len(CUSTOMER_NAMES)
        if cycle:
            name = f"{name} {cycle + 1}"
        customers.append(
            Customer(
                id=index + 1,
                name=name,
                dealer_id=dealers[index % len(dealers)].id,
            ),
        )
    return customers


def generate_current_transactions(
    dealers: list[Dealer],
    customers: list[Customer],
    products: list[Product],
    category_set: CategorySet,
    rng: random.Random,
) -> list[Transaction]:
    """Generate transactions for the six-category dataset.

    Each customer buys from 1-4 categories, 1-3 products per category and
    1-5 transactions per product, always through its own dealer.
    """
    dealer_by_id = {dealer.id: dealer for dealer in dealers}
    categories = category_set.members()
    transactions: list[Transaction] = []

    for customer in customers:
        dealer = dealer_by_id[customer.dealer_id]
        category_count = rng.randint(*CATEGORIES_PER_CUSTOMER)
        for category in rng.sample(categories, min(category_count, len(categories))):
            category_products = [p for p in products if p.category is category]
            if not category_products:
                continue
            product_count = min(
                rng.randint(*PRODUCTS_PER_CATEGORY),
                len(category_products),
            )
            for product in rng.sample(category_products, product_count):
                for _ in range(rng.randint(*TRANSACTIONS_PER_PRODUCT)):
                    quarter = pick_quarter(rng)
                    start, end = quarter_bounds(quarter.quarter, quarter.year)
                    transactions.append(
                        Transaction(
                            amount=random_amount(rng),
                            category=category,
                            product=product,
                            customer=customer,
                            date=random_date(start, end, rng),
                            dealer=dealer,
                        ),
                    )

    logger.debug("Generated %d current-set transactions", len(transactions))
    return transactions


def generate_legacy_transactions(
    dealers: list[Dealer],
    customers: list[Customer],
    category_set: CategorySet,
    rng: random.Random,
) -> list[Transaction]:
    """Generate product-less transactions for the nine-category dataset."""
    dealer_by_id = {dealer.id: dealer for dealer in dealers}
    categories = [category_set.coerce(value) for value in LEGACY_CATEGORY_VALUES]
    transactions: list[Transaction] = []

    for _ in range(LEGACY_TRANSACTION_COUNT):
        customer = rng.choice(customers)
        transactions.append(
            Transaction(
                amount=random_amount(rng),
                category=rng.choice(categories),
                customer=customer,
                date=random_date(LEGACY_START, LEGACY_END, rng),
                dealer=dealer_by_id[customer.dealer_id],
            ),
        )

    logger.debug("Generated %d legacy-set transactions", len(transactions))
    return transactions


def generate_demo_store(
    settings: Optional[Settings] = None,
    rng: Optional[random.Random] = None,
) -> TransactionStore:
    """Build the demo TransactionStore for the configured category set.

    Parameters
    ----------
    settings
        Settings to read the category set, seed and customer count from;
        defaults to the cached application settings
    rng
        Random generator to use; defaults to one seeded with
        ``settings.demo_random_seed``
    """
    settings = settings or get_settings()
    rng = rng or random.Random(settings.demo_random_seed)
    category_set = CategorySet.from_string(settings.category_set)

    if category_set is CategorySet.LEGACY:
        dealers = build_dealers(LEGACY_DEALERS)
        customers = build_customers(LEGACY_CUSTOMER_COUNT, dealers)
        transactions = generate_legacy_transactions(
            dealers,
            customers,
            category_set,
            rng,
        )
        return TransactionStore(dealers, customers, [], transactions, category_set)

    dealers = build_dealers(DEMO_DEALERS)
    customers = build_customers(settings.demo_customer_count, dealers)
    products = [
        Product(id=p.id, name=p.name, category=category_set.coerce(p.category))
        for p in DEMO_PRODUCTS
    ]
    transactions = generate_current_transactions(
        dealers,
        customers,
        products,
        category_set,
        rng,
    )
    return TransactionStore(dealers, customers, products, transactions, category_set)


def log_summary(store: TransactionStore) -> None:
    """Log counts, per-dealer totals and the category distribution."""
    logger.info("=" * 50)
    logger.info("Seed data summary (%s categories)", store.category_set.value)
    logger.info("=" * 50)
    logger.info("  Dealers: %d", len(store.dealers))
    logger.info("  Customers: %d", len(store.customers))
    logger.info("  Products: %d", len(store.products))
    logger.info("  Transactions: %d", len(store))

    logger.info("Dealers:")
    for dealer in store.dealers:
        logger.info("  - %s (ID: %d)", dealer.name, dealer.id)

    logger.info("Sample customers:")
    for customer in store.customers[:SAMPLE_CUSTOMER_COUNT]:
        logger.info("  - %s (ID: %d)", customer.name, customer.id)
    remaining = len(store.customers) - SAMPLE_CUSTOMER_COUNT
    if remaining > 0:
        logger.info("  ... and %d more", remaining)

    logger.info("Transaction stats:")
    for dealer in store.dealers:
        dealer_transactions = [t for t in store if t.dealer.id == dealer.id]
        dealer_total = sum((t.amount for t in dealer_transactions), Decimal("0"))
        logger.info(
            "  %s: %d transactions, $%s",
            dealer.name,
            len(dealer_transactions),
            f"{dealer_total:,.2f}",
        )

    logger.info("Category distribution:")
    for category in store.categories:
        count = sum(1 for t in store if t.category is category)
        logger.info(
            "  %s: %d transactions",
            RankingService.display_name(category),
            count,
        )

    total = sum((t.amount for t in store), Decimal("0"))
    logger.info("Total transaction value: $%s", f"{total:,.2f}")
    logger.info("=" * 50)


def main():
    """CLI entry point."""
    if "--help" in sys.argv or "-h" in sys.argv:
        print(__doc__)
        sys.exit(0)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )

    settings = get_settings()
    if "--legacy" in sys.argv:
        settings = settings.model_copy(update={"category_set": "legacy"})

    logger.info("AgriSales Demo Data Generator")
    logger.info("Seed: %d", settings.demo_random_seed)

    store = generate_demo_store(settings)
    log_summary(store)


if __name__ == "__main__":
    main()
