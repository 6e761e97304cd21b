from abc import ABC, abstractmethod

from src.service.movie_ticket.domain.entity.customer_entity import CustomerEntity


class ICustomerCommandRepo(ABC):
    """Customer command repository - handles write operations"""

    @abstractmethod
    async def create(self, *, customer: CustomerEntity) -> CustomerEntity:
        """Raises BusinessRuleViolationError when the email is already taken"""
        pass

    @abstractmethod
    async def update(self, *, customer: CustomerEntity) -> CustomerEntity:
        pass
