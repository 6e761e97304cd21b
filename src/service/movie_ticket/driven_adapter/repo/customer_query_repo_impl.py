from typing import List, Optional

from sqlalchemy import select

from src.platform.logging.loguru_io import Logger
from src.service.movie_ticket.app.interface.i_customer_query_repo import ICustomerQueryRepo
from src.service.movie_ticket.domain.entity.customer_entity import CustomerEntity
from src.service.movie_ticket.driven_adapter.model.customer_model import CustomerModel
from src.service.movie_ticket.driven_adapter.repo.model_mapper import customer_model_to_entity
from src.service.movie_ticket.driven_adapter.repo.session_aware_repo import SessionAwareRepo


class CustomerQueryRepoImpl(SessionAwareRepo, ICustomerQueryRepo):
    @Logger.io
    async def get_by_id(self, *, customer_id: int) -> Optional[CustomerEntity]:
        async with self._get_session() as session:
            customer_model = await session.get(CustomerModel, customer_id)
            return customer_model_to_entity(customer_model) if customer_model else None

    @Logger.io
    async def get_enabled_by_id(self, *, customer_id: int) -> Optional[CustomerEntity]:
        async with self._get_session() as session:
            result = await session.execute(
                select(CustomerModel).where(
                    CustomerModel.id == customer_id, CustomerModel.enabled.is_(True)
                )
            )
            customer_model = result.scalar_one_or_none()
            return customer_model_to_entity(customer_model) if customer_model else None

    @Logger.io
    async def get_by_ids(self, *, customer_ids: List[int]) -> dict[int, CustomerEntity]:
        if not customer_ids:
            return {}
        async with self._get_session() as session:
            result = await session.execute(
                select(CustomerModel).where(CustomerModel.id.in_(set(customer_ids)))
            )
            return {model.id: customer_model_to_entity(model) for model in result.scalars()}

    @Logger.io
    async def get_by_email(self, *, email: str) -> Optional[CustomerEntity]:
        async with self._get_session() as session:
            result = await session.execute(
                select(CustomerModel).where(CustomerModel.email == email)
            )
            customer_model = result.scalar_one_or_none()
            return customer_model_to_entity(customer_model) if customer_model else None

    @Logger.io
    async def exists_by_email(self, *, email: str) -> bool:
        async with self._get_session() as session:
            result = await session.execute(
                select(CustomerModel.id).where(CustomerModel.email == email)
            )
            return result.scalar_one_or_none() is not None

    @Logger.io
    async def list_enabled(self) -> List[CustomerEntity]:
        async with self._get_session() as session:
            result = await session.execute(
                select(CustomerModel)
                .where(CustomerModel.enabled.is_(True))
                .order_by(CustomerModel.id)
            )
            return [customer_model_to_entity(model) for model in result.scalars()]
