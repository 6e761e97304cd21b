from src.service.movie_ticket.domain.enum.customer_role import CustomerRole
from src.service.movie_ticket.domain.enum.purchase_status import PurchaseStatus

__all__ = ['CustomerRole', 'PurchaseStatus']
