"""
Unit of Work Pattern - owns the database session and the repositories bound to it

Architecture:
- UoW opens one session per `async with` block
- UoW is responsible for commit/rollback
- Repositories share the UoW session
- Use cases coordinate several repositories through one UoW
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, AsyncContextManager, Callable, Optional

from sqlalchemy.ext.asyncio import AsyncSession


if TYPE_CHECKING:
    from src.service.movie_ticket.app.interface.i_customer_command_repo import (
        ICustomerCommandRepo,
    )
    from src.service.movie_ticket.app.interface.i_customer_query_repo import ICustomerQueryRepo
    from src.service.movie_ticket.app.interface.i_movie_command_repo import IMovieCommandRepo
    from src.service.movie_ticket.app.interface.i_movie_query_repo import IMovieQueryRepo
    from src.service.movie_ticket.app.interface.i_ticket_purchase_command_repo import (
        ITicketPurchaseCommandRepo,
    )
    from src.service.movie_ticket.app.interface.i_ticket_purchase_query_repo import (
        ITicketPurchaseQueryRepo,
    )


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work for the Movie Ticket Service

    Responsibilities:
    - Manage database session lifecycle
    - Coordinate transactions across multiple repositories
    - Provide commit/rollback interface

    Usage:
        async with uow:
            purchase = await uow.ticket_purchase_command_repo.create(purchase=...)
            await uow.commit()
    """

    customer_command_repo: ICustomerCommandRepo
    customer_query_repo: ICustomerQueryRepo
    movie_command_repo: IMovieCommandRepo
    movie_query_repo: IMovieQueryRepo
    ticket_purchase_command_repo: ITicketPurchaseCommandRepo
    ticket_purchase_query_repo: ITicketPurchaseQueryRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args) -> None:
        # No-op after a successful commit; discards everything otherwise
        await self.rollback()

    async def commit(self) -> None:
        """Commit the transaction"""
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """
    SQLAlchemy implementation of Unit of Work

    Each `async with` opens a fresh session from session_factory, so one instance
    can run several attempts of the same transaction.
    """

    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory
        self.session: Optional[AsyncSession] = None
        self._session_context: Optional[AsyncContextManager[AsyncSession]] = None

    async def __aenter__(self) -> AbstractUnitOfWork:
        from src.service.movie_ticket.driven_adapter.repo.customer_command_repo_impl import (
            CustomerCommandRepoImpl,
        )
        from src.service.movie_ticket.driven_adapter.repo.customer_query_repo_impl import (
            CustomerQueryRepoImpl,
        )
        from src.service.movie_ticket.driven_adapter.repo.movie_command_repo_impl import (
            MovieCommandRepoImpl,
        )
        from src.service.movie_ticket.driven_adapter.repo.movie_query_repo_impl import (
            MovieQueryRepoImpl,
        )
        from src.service.movie_ticket.driven_adapter.repo.ticket_purchase_command_repo_impl import (
            TicketPurchaseCommandRepoImpl,
        )
        from src.service.movie_ticket.driven_adapter.repo.ticket_purchase_query_repo_impl import (
            TicketPurchaseQueryRepoImpl,
        )

        self._session_context = self.session_factory()
        self.session = await self._session_context.__aenter__()

        # Create repositories with shared session
        self.customer_command_repo = CustomerCommandRepoImpl(session=self.session)
        self.customer_query_repo = CustomerQueryRepoImpl(session=self.session)
        self.movie_command_repo = MovieCommandRepoImpl(session=self.session)
        self.movie_query_repo = MovieQueryRepoImpl(session=self.session)
        self.ticket_purchase_command_repo = TicketPurchaseCommandRepoImpl(session=self.session)
        self.ticket_purchase_query_repo = TicketPurchaseQueryRepoImpl(session=self.session)

        return await super().__aenter__()

    async def __aexit__(self, *args) -> None:
        try:
            await super().__aexit__(*args)
        finally:
            session_context, self._session_context, self.session = self._session_context, None, None
            if session_context is not None:
                await session_context.__aexit__(*args)

    async def _commit(self) -> None:
        assert self.session is not None, 'UnitOfWork used outside of async with'
        await self.session.commit()

    async def rollback(self) -> None:
        if self.session is not None:
            await self.session.rollback()
