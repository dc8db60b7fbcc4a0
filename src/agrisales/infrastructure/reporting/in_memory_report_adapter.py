"""In-memory implementation of ReportReadPort.

Every report is one pass over the transaction store: resolve the period,
filter by dealer and date, group by a fixed key, then rank and shape. Nothing
is cached and nothing is mutated, so a report may be called any number of
times (from any thread) with identical results.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from agrisales.application.dtos.reports import (
    BreakdownItem,
    CategoryBreakdownResult,
    CategoryProductBreakdownResult,
    CategoryProductItem,
    CustomerCategoryBreakdownResult,
    DealerShare,
    DealerSummaryResult,
    ProductBreakdownItem,
    SalesOverTimeResult,
    TimeSeriesDataPoint,
    TopCustomerItem,
    TopCustomersResult,
)
from agrisales.application.ports.reports import ReportReadPort
from agrisales.domain.sales.exceptions import CustomerNotFoundError
from agrisales.domain.sales.services import (
    GroupingKey,
    RankingService,
    SalesFilterService,
    SalesGroupingService,
    normalize_dealer_id,
)

if TYPE_CHECKING:
    from agrisales.domain.sales.aggregates import TransactionStore
    from agrisales.domain.sales.entities import Transaction
    from agrisales.domain.sales.services import TimeWindowResolver
    from agrisales.domain.sales.value_objects import ReportingPeriod, SalesCategory

logger = logging.getLogger(__name__)

ALL_TIME_LABEL = "All Time"
ZERO = Decimal("0")


class InMemoryReportAdapter(ReportReadPort):
    """Report adapter over one immutable TransactionStore."""

    def __init__(
        self,
        store: TransactionStore,
        resolver: TimeWindowResolver,
        currency: str = "USD",
    ):
        self._store = store
        self._resolver = resolver
        self._currency = currency

    # =========================================================================
    # Reports
    # =========================================================================

    def category_breakdown(
        self,
        *,
        period: str,
        dealer_id: str | None = None,
    ) -> CategoryBreakdownResult:
        logger.debug("category_breakdown(dealer_id=%r, period=%r)", dealer_id, period)
        reporting_period = self._resolver.resolve(period)
        transactions = self._filter(dealer_id, reporting_period)

        sums = SalesGroupingService.group(
            transactions,
            GroupingKey.CATEGORY,
            universe=self._store.categories,
        )
        ranked = RankingService.rank_descending(sums.items())
        return self._category_result(ranked, dealer_id, reporting_period)

    def category_product_breakdown(
        self,
        *,
        period: str,
        dealer_id: str | None = None,
    ) -> CategoryProductBreakdownResult:
        logger.debug(
            "category_product_breakdown(dealer_id=%r, period=%r)",
            dealer_id,
            period,
        )
        reporting_period = self._resolver.resolve(period)
        transactions = self._filter(dealer_id, reporting_period)

        totals = SalesGroupingService.group_category_products(
            transactions,
            self._store.categories,
            self._store.products,
        )
        ranked = RankingService.rank_descending(
            (category, entry.total) for category, entry in totals.items()
        )
        report_total, shaped = RankingService.with_percentages(ranked)

        items: list[CategoryProductItem] = []
        for category, amount, pct in shaped:
            entry = totals[category]
            ranked_products = RankingService.rank_descending(entry.products.items())
            products = [
                ProductBreakdownItem(
                    product_id=product_id,
                    name=self._product_name(product_id),
                    amount=product_amount,
                    percentage=RankingService.percentage(product_amount, entry.total),
                )
                for product_id, product_amount in ranked_products
            ]
            items.append(
                CategoryProductItem(
                    category=category.value,
                    label=RankingService.display_name(category),
                    amount=amount,
                    percentage=pct,
                    products=products,
                    unassigned=entry.unassigned,
                ),
            )

        return CategoryProductBreakdownResult(
            period_label=reporting_period.label,
            dealer_name=self._store.dealer_name(normalize_dealer_id(dealer_id)),
            items=items,
            total=report_total,
            currency=self._currency,
        )

    def sales_over_time(
        self,
        *,
        period: str,
        dealer_id: str | None = None,
    ) -> SalesOverTimeResult:
        logger.debug("sales_over_time(dealer_id=%r, period=%r)", dealer_id, period)
        reporting_period = self._resolver.resolve(period)
        transactions = self._filter(dealer_id, reporting_period)

        buckets = self._resolver.buckets(reporting_period)
        bucket_count = len(buckets)
        sums = SalesGroupingService.group(
            transactions,
            GroupingKey.BUCKET,
            universe=[bucket.index for bucket in buckets],
            key_func=lambda t: self._resolver.bucket_index(
                reporting_period,
                t.date,
                bucket_count,
            ),
        )

        data_points = [
            TimeSeriesDataPoint(
                period=bucket.key,
                period_label=bucket.label,
                start=bucket.start,
                end=bucket.end,
                value=sums[bucket.index],
            )
            for bucket in buckets
        ]
        values = [point.value for point in data_points]
        total = sum(values, ZERO)
        average = (total / bucket_count).quantize(Decimal("0.01"))

        return SalesOverTimeResult(
            period_label=reporting_period.label,
            dealer_name=self._store.dealer_name(normalize_dealer_id(dealer_id)),
            granularity=reporting_period.granularity.value,
            data_points=data_points,
            currency=self._currency,
            total=total,
            average=average,
            min_value=min(values),
            max_value=max(values),
        )

    def top_customers(
        self,
        *,
        period: str,
        top_n: int,
        dealer_id: str | None = None,
    ) -> TopCustomersResult:
        logger.debug(
            "top_customers(dealer_id=%r, period=%r, top_n=%r)",
            dealer_id,
            period,
            top_n,
        )
        reporting_period = self._resolver.resolve(period)
        RankingService.validate_top_n(top_n)
        dealer_filter = normalize_dealer_id(dealer_id)
        transactions = self._filter(dealer_filter, reporting_period)

        sums = SalesGroupingService.group(transactions, GroupingKey.CUSTOMER)
        total_sales = sum(sums.values(), ZERO)
        ranked = RankingService.rank_descending(sums.items(), top_n=top_n)

        items: list[TopCustomerItem] = []
        for rank, (customer_id, amount) in enumerate(ranked, start=1):
            customer = self._store.customer(customer_id)
            dealer_name: Optional[str] = None
            if dealer_filter is None and customer is not None:
                dealer = self._store.dealer(customer.dealer_id)
                dealer_name = dealer.name if dealer is not None else None
            items.append(
                TopCustomerItem(
                    rank=rank,
                    customer_id=customer_id,
                    name=customer.name if customer else f"Customer {customer_id}",
                    amount=amount,
                    percentage_of_total=RankingService.percentage(amount, total_sales),
                    dealer_name=dealer_name,
                ),
            )

        return TopCustomersResult(
            period_label=reporting_period.label,
            dealer_name=self._store.dealer_name(dealer_filter),
            items=items,
            total_sales=total_sales,
            currency=self._currency,
            top_n=top_n,
        )

    def dealer_summary(
        self,
        *,
        period: str,
        dealer_id: str | None = None,
    ) -> DealerSummaryResult:
        logger.debug("dealer_summary(dealer_id=%r, period=%r)", dealer_id, period)
        reporting_period = self._resolver.resolve(period)
        dealer_filter = normalize_dealer_id(dealer_id)

        # The network total is always computed without the dealer filter
        transactions = self._filter(None, reporting_period)
        total = sum((t.amount for t in transactions), ZERO)

        dealers: list[DealerShare] = []
        if dealer_filter is None:
            dealer_total = total
            sums = SalesGroupingService.group(
                transactions,
                GroupingKey.DEALER,
                universe=list(self._store.dealer_index),
            )
            for dealer_key, amount in sums.items():
                dealer = self._store.dealer(dealer_key)
                dealers.append(
                    DealerShare(
                        dealer_id=dealer_key,
                        name=dealer.name if dealer else str(dealer_key),
                        amount=amount,
                        percentage=RankingService.percentage(amount, total),
                    ),
                )
        else:
            dealer_total = sum(
                (t.amount for t in transactions if t.dealer.matches(dealer_filter)),
                ZERO,
            )

        return DealerSummaryResult(
            period_label=reporting_period.label,
            dealer_name=self._store.dealer_name(dealer_filter),
            total=total,
            dealer_total=dealer_total,
            percentage=RankingService.percentage(dealer_total, total),
            currency=self._currency,
            dealers=dealers,
        )

    def customer_category_breakdown(
        self,
        *,
        customer_id: int,
        dealer_id: str | None = None,
        period: str | None = None,
    ) -> CustomerCategoryBreakdownResult:
        logger.debug(
            "customer_category_breakdown(customer_id=%r, dealer_id=%r, period=%r)",
            customer_id,
            dealer_id,
            period,
        )
        customer = self._store.customer(customer_id)
        if customer is None:
            raise CustomerNotFoundError(customer_id)

        reporting_period = self._resolve_optional(period)
        transactions = SalesFilterService.for_customer(
            self._filter(dealer_id, reporting_period),
            customer_id,
        )

        sums = SalesGroupingService.group(transactions, GroupingKey.CATEGORY)
        ranked = RankingService.rank_descending(
            (category, amount) for category, amount in sums.items() if amount > 0
        )
        total, items = self._breakdown_items(ranked)

        return CustomerCategoryBreakdownResult(
            customer_id=customer.id,
            customer_name=customer.name,
            period_label=self._period_label(reporting_period),
            dealer_name=self._store.dealer_name(normalize_dealer_id(dealer_id)),
            items=items,
            total=total,
            currency=self._currency,
        )

    def category_sales_by_name(
        self,
        *,
        dealer_id: str | None = None,
        period: str | None = None,
    ) -> CategoryBreakdownResult:
        logger.debug(
            "category_sales_by_name(dealer_id=%r, period=%r)",
            dealer_id,
            period,
        )
        reporting_period = self._resolve_optional(period)
        transactions = self._filter(dealer_id, reporting_period)

        sums = SalesGroupingService.group(
            transactions,
            GroupingKey.CATEGORY,
            universe=self._store.categories,
        )
        ordered = RankingService.sort_alphabetically(
            sums.items(),
            RankingService.display_name,
        )
        return self._category_result(ordered, dealer_id, reporting_period)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _resolve_optional(self, period: str | None) -> ReportingPeriod | None:
        if period is None:
            return None
        return self._resolver.resolve(period)

    @staticmethod
    def _period_label(period: ReportingPeriod | None) -> str:
        return period.label if period is not None else ALL_TIME_LABEL

    def _filter(
        self,
        dealer_id: str | None,
        period: ReportingPeriod | None,
    ) -> list[Transaction]:
        return SalesFilterService.apply(self._store, dealer_id=dealer_id, period=period)

    def _product_name(self, product_id: int) -> str:
        product = self._store.product(product_id)
        return product.name if product is not None else f"Product {product_id}"

    @staticmethod
    def _breakdown_items(
        pairs: list[tuple[SalesCategory, Decimal]],
    ) -> tuple[Decimal, list[BreakdownItem]]:
        total, shaped = RankingService.with_percentages(pairs)
        items = [
            BreakdownItem(
                category=category.value,
                label=RankingService.display_name(category),
                amount=amount,
                percentage=pct,
            )
            for category, amount, pct in shaped
        ]
        return total, items

    def _category_result(
        self,
        pairs: list[tuple[SalesCategory, Decimal]],
        dealer_id: str | None,
        period: ReportingPeriod | None,
    ) -> CategoryBreakdownResult:
        total, items = self._breakdown_items(pairs)
        return CategoryBreakdownResult(
            period_label=self._period_label(period),
            dealer_name=self._store.dealer_name(normalize_dealer_id(dealer_id)),
            items=items,
            total=total,
            currency=self._currency,
            category_count=sum(1 for item in items if item.amount > 0),
        )
