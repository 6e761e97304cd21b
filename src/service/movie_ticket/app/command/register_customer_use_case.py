from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import BusinessRuleViolationError
from src.platform.logging.loguru_io import Logger
from src.service.movie_ticket.app.interface.i_password_hasher import IPasswordHasher
from src.service.movie_ticket.domain.entity.customer_entity import CustomerEntity
from src.service.movie_ticket.domain.enum.customer_role import CustomerRole


class RegisterCustomerUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork, password_hasher: IPasswordHasher) -> None:
        self.uow = uow
        self.password_hasher = password_hasher

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
        password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
    ) -> Self:
        return cls(uow=uow, password_hasher=password_hasher)

    @Logger.io
    async def register(
        self,
        *,
        email: str,
        password: str,
        phone: str,
        first_name: str,
        last_name: str,
    ) -> CustomerEntity:
        customer = CustomerEntity(
            email=email,
            phone=phone,
            first_name=first_name,
            last_name=last_name,
            role=CustomerRole.CUSTOMER,
            enabled=True,
        )
        customer.set_password(password, self.password_hasher)

        async with self.uow:
            if await self.uow.customer_query_repo.exists_by_email(email=email):
                raise BusinessRuleViolationError('Email already registered')

            created = await self.uow.customer_command_repo.create(customer=customer)
            await self.uow.commit()

        return created
