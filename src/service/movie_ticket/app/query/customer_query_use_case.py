from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.movie_ticket.app.interface.i_customer_query_repo import ICustomerQueryRepo
from src.service.movie_ticket.domain.entity.customer_entity import CustomerEntity


class CustomerQueryUseCase:
    def __init__(self, *, customer_query_repo: ICustomerQueryRepo) -> None:
        self.customer_query_repo = customer_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        customer_query_repo: ICustomerQueryRepo = Depends(Provide[Container.customer_query_repo]),
    ) -> Self:
        return cls(customer_query_repo=customer_query_repo)

    @Logger.io
    async def get_customer(self, *, customer_id: int) -> CustomerEntity:
        customer = await self.customer_query_repo.get_enabled_by_id(customer_id=customer_id)
        if not customer:
            raise NotFoundError(f'Customer not found with id: {customer_id}')
        return customer

    @Logger.io
    async def list_customers(self) -> List[CustomerEntity]:
        return await self.customer_query_repo.list_enabled()
