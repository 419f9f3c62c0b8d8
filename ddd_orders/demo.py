"""
Order Scenario Demo
===================

Builds a small order end to end:
customer -> product -> order item -> order -> discount -> total.
"""

import logging
from typing import Optional

from .domain.entities import Order
from .domain.factories import create_customer, create_order, create_order_item, create_product
from .domain.services import DiscountService
from .domain.value_objects import DiscountType
from .infrastructure.config import Settings, get_config
from .infrastructure.logging_config import setup_logging

logger = logging.getLogger(__name__)


def run_scenario(discount_service: Optional[DiscountService] = None) -> Order:
    """Luke Skywalker buys the Millennium Falcon with a large discount"""
    discount_service = discount_service or DiscountService()

    customer = create_customer("Luke", "Skywalker", "luke.skywalker@starwars.com")
    product = create_product("Millennium Falcon", 500_000_000)
    item = create_order_item(product, 1)

    order = create_order(customer)
    order.add_item(item)

    discount = discount_service.calculate(order.total, DiscountType.LARGE)
    order.apply_discount(discount)

    logger.info("Order %s for %s: discount %s, total %s", order.id, customer.full_name, discount, order.total)
    return order


def main(settings: Optional[Settings] = None) -> int:
    settings = settings or get_config()
    setup_logging(settings.logging)

    logger.info("🚀 Running order scenario (%s)", settings.environment)
    order = run_scenario(DiscountService.from_config(settings.discount))
    logger.info("✅ Final total: %s", order.total)
    return 0
