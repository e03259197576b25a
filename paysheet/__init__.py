"""
paysheet — checkout core for a native payment sheet.

    from paysheet import catalog as CT   # Items for sale
    from paysheet import pricing as P    # Payment summaries and coupons
    from paysheet import gateway as G    # Payment platform boundary
    from paysheet import checkout as CO  # One payment attempt, end to end
"""

import logging

from paysheet import catalog
from paysheet import pricing
from paysheet import gateway
from paysheet import checkout
from paysheet import config
from paysheet._types import (
    Money,
    CENT,
    to_money,
    Country,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    "catalog",
    "pricing",
    "gateway",
    "checkout",
    "config",
    "Money",
    "CENT",
    "to_money",
    "Country",
)
