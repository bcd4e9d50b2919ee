"""Read the ``TICKETS`` setting into a ``TicketPolicy``.

Keys missing from the setting fall back to the policy defaults.
"""

from collections.abc import Mapping

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from purchases.domain import TicketPolicy, TicketType

DEFAULT_POLICY = TicketPolicy()


def _ticket_type(name: str) -> TicketType:
    try:
        return TicketType(name)
    except ValueError:
        raise ImproperlyConfigured(f"TICKETS refers to unknown ticket type {name!r}") from None


def get_ticket_policy() -> TicketPolicy:
    """Build the policy from ``settings.TICKETS``.

    Raises:
        ImproperlyConfigured: If the setting or its PRICES is not a mapping,
            a price is negative, a ticket type is unknown
            or the per-purchase maximum is not a positive integer.
    """
    config = getattr(settings, "TICKETS", {})
    if not isinstance(config, Mapping):
        raise ImproperlyConfigured("TICKETS must be a mapping")

    configured_prices = config.get("PRICES", {})
    if not isinstance(configured_prices, Mapping):
        raise ImproperlyConfigured("TICKETS PRICES must be a mapping")

    prices = dict(DEFAULT_POLICY.prices)
    for name, price in configured_prices.items():
        if not isinstance(price, int) or isinstance(price, bool) or price < 0:
            raise ImproperlyConfigured(f"TICKETS price for {name} must be a non-negative integer")
        prices[_ticket_type(name)] = price

    if "SEATED_TYPES" in config:
        seated_types = frozenset(_ticket_type(name) for name in config["SEATED_TYPES"])
    else:
        seated_types = DEFAULT_POLICY.seated_types

    max_tickets = config.get("MAX_TICKETS_PER_PURCHASE", DEFAULT_POLICY.max_tickets_per_purchase)
    if not isinstance(max_tickets, int) or isinstance(max_tickets, bool) or max_tickets <= 0:
        raise ImproperlyConfigured("TICKETS MAX_TICKETS_PER_PURCHASE must be a positive integer")

    return TicketPolicy(
        prices=prices,
        seated_types=seated_types,
        max_tickets_per_purchase=max_tickets,
    )
