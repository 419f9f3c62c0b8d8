"""
Discount Service
================

Strategy-based discount calculation. Each strategy claims exactly one
``DiscountType``; the service keeps a direct type -> strategy mapping.
"""

import logging
from decimal import Decimal
from typing import Any, Dict, Iterable, Optional, Protocol, runtime_checkable

from ..exceptions import InvalidArgument
from ..value_objects import Amount, DiscountType

logger = logging.getLogger(__name__)


@runtime_checkable
class Discount(Protocol):
    """Contract for a discount strategy"""

    discount_type: DiscountType

    def is_applicable(self, discount_type: DiscountType) -> bool:
        ...

    def calculate(self, amount: Amount) -> Amount:
        ...


class RateDiscount:
    """Discount worth a fixed fraction of the amount"""

    discount_type: DiscountType
    rate: Decimal

    def __init__(self, rate: Optional[Decimal] = None):
        if rate is not None:
            rate = Decimal(str(rate))
            if not Decimal("0") <= rate <= Decimal("1"):
                raise InvalidArgument("rate", "must be between 0 and 1", rate)
            self.rate = rate

    def is_applicable(self, discount_type: DiscountType) -> bool:
        return discount_type == self.discount_type

    def calculate(self, amount: Amount) -> Amount:
        return amount * self.rate

    def __repr__(self):
        return f"{type(self).__name__}(rate={self.rate})"


class SmallDiscount(RateDiscount):
    discount_type = DiscountType.SMALL
    rate = Decimal("0.10")


class MediumDiscount(RateDiscount):
    discount_type = DiscountType.MEDIUM
    rate = Decimal("0.25")


class LargeDiscount(RateDiscount):
    discount_type = DiscountType.LARGE
    rate = Decimal("0.50")


DEFAULT_STRATEGIES = (SmallDiscount, MediumDiscount, LargeDiscount)


class DiscountService:
    """Selects the discount strategy for a type and applies it"""

    def __init__(self, strategies: Optional[Iterable[Discount]] = None):
        if strategies is None:
            strategies = [strategy_cls() for strategy_cls in DEFAULT_STRATEGIES]

        self._strategies: Dict[DiscountType, Discount] = {}
        for strategy in strategies:
            if strategy.discount_type in self._strategies:
                raise InvalidArgument(
                    "strategies",
                    f"more than one strategy for {strategy.discount_type.value}",
                    strategy,
                )
            self._strategies[strategy.discount_type] = strategy

    @classmethod
    def from_config(cls, discount_config: Any) -> "DiscountService":
        """Build the default strategies with rates taken from ``DiscountConfig``"""
        return cls([
            SmallDiscount(discount_config.small_rate),
            MediumDiscount(discount_config.medium_rate),
            LargeDiscount(discount_config.large_rate),
        ])

    def strategy_for(self, discount_type: Any) -> Optional[Discount]:
        """Return the strategy registered for ``discount_type``, if any"""
        try:
            key = DiscountType(discount_type)
        except ValueError:
            return None
        return self._strategies.get(key)

    def calculate(self, amount: Amount, discount_type: Any) -> Amount:
        """
        Calculate the discount for ``amount``.
        
        Args:
            amount: Amount the discount is based on
            discount_type: Discount category
            
        Returns:
            The discount amount. When no strategy handles ``discount_type`` the
            input amount is returned unchanged instead of raising.
        """
        strategy = self.strategy_for(discount_type)
        if strategy is None:
            logger.warning("No discount strategy for %r, returning amount unchanged", discount_type)
            return amount

        discount = strategy.calculate(amount)
        logger.debug("Discount %s on %s -> %s", strategy, amount, discount)
        return discount
