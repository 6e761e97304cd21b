from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.movie_ticket.domain.entity.customer_entity import CustomerEntity


class DisableCustomerUseCase:
    """Soft-disable: customers are never hard-deleted"""

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(cls, uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work])) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def disable(self, *, customer_id: int) -> CustomerEntity:
        async with self.uow:
            customer = await self.uow.customer_query_repo.get_enabled_by_id(
                customer_id=customer_id
            )
            if not customer:
                raise NotFoundError(f'Customer not found with id: {customer_id}')

            disabled = await self.uow.customer_command_repo.update(customer=customer.disable())
            await self.uow.commit()

        return disabled
