"""Catalogue item constants.

Production status of an item: it starts pending, goes into production
and ends done.  Moves between them follow ``modules.core.transitions``.
"""

from django.db import models


class ItemStatus(models.IntegerChoices):
    PENDING = 0, "Pending"
    IN_PRODUCTION = 1, "In production"
    DONE = 2, "Done"


ITEM_STATUS_TERMINAL: int = max(ItemStatus.values)

# Shape of ``Item.price``; prices outside it are rejected before saving.
PRICE_MAX_DIGITS = 10
PRICE_DECIMAL_PLACES = 2
