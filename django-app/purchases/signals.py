"""Django signals emitted by the purchases app.

``tickets_purchased`` is sent once both third-party calls have returned.
Receivers get ``result`` (a ``PurchaseResult``) as a keyword argument.
"""

import logging

from django.dispatch import Signal, receiver

audit_logger = logging.getLogger("purchases.audit")

tickets_purchased = Signal()


@receiver(tickets_purchased)
def log_purchase(sender, result, **kwargs):
    """Write an audit line for every accepted purchase."""
    audit_logger.info(
        "account=%s adult=%s child=%s infant=%s seats=%s amount=%s",
        result.account_id,
        result.totals.adult,
        result.totals.child,
        result.totals.infant,
        result.seats_to_reserve,
        result.amount_due,
    )
