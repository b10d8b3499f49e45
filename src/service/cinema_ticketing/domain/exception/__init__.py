"""Cinema Ticketing Domain Exceptions"""

from src.service.cinema_ticketing.domain.exception.purchase_rejected_error import (
    PurchaseRejectedError,
    PurchaseRejectionCode,
)

__all__ = ['PurchaseRejectedError', 'PurchaseRejectionCode']
