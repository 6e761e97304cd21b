from sqlalchemy.exc import IntegrityError

from src.platform.exception.exceptions import BusinessRuleViolationError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.movie_ticket.app.interface.i_customer_command_repo import ICustomerCommandRepo
from src.service.movie_ticket.domain.entity.customer_entity import CustomerEntity
from src.service.movie_ticket.driven_adapter.model.customer_model import CustomerModel
from src.service.movie_ticket.driven_adapter.repo.model_mapper import customer_model_to_entity
from src.service.movie_ticket.driven_adapter.repo.session_aware_repo import SessionAwareRepo


class CustomerCommandRepoImpl(SessionAwareRepo, ICustomerCommandRepo):
    """Flushes only; the UnitOfWork commits"""

    @Logger.io
    async def create(self, *, customer: CustomerEntity) -> CustomerEntity:
        async with self._get_session() as session:
            customer_model = CustomerModel(
                email=customer.email,
                phone=customer.phone,
                first_name=customer.first_name,
                last_name=customer.last_name,
                hashed_password=customer.hashed_password,
                role=customer.role,
                enabled=customer.enabled,
            )
            session.add(customer_model)
            try:
                await session.flush()
            except IntegrityError as e:
                raise BusinessRuleViolationError('Email already registered') from e
            await session.refresh(customer_model)

            return customer_model_to_entity(customer_model)

    @Logger.io
    async def update(self, *, customer: CustomerEntity) -> CustomerEntity:
        async with self._get_session() as session:
            customer_model = await session.get(CustomerModel, customer.id)
            if customer_model is None:
                raise NotFoundError(f'Customer not found with id: {customer.id}')

            customer_model.phone = customer.phone
            customer_model.first_name = customer.first_name
            customer_model.last_name = customer.last_name
            customer_model.role = customer.role
            customer_model.enabled = customer.enabled
            await session.flush()

            return customer_model_to_entity(customer_model)
