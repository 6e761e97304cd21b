from typing import List

from src.service.movie_ticket.app.dto.ticket_purchase_detail import TicketPurchaseDetail
from src.service.movie_ticket.app.interface.i_customer_query_repo import ICustomerQueryRepo
from src.service.movie_ticket.app.interface.i_movie_query_repo import IMovieQueryRepo
from src.service.movie_ticket.domain.entity.ticket_purchase_entity import TicketPurchase


async def assemble_purchase_details(
    *,
    purchases: List[TicketPurchase],
    customer_query_repo: ICustomerQueryRepo,
    movie_query_repo: IMovieQueryRepo,
) -> List[TicketPurchaseDetail]:
    """
    Resolve customer names and movie titles with one batched lookup each.

    Uses the unfiltered lookups so history that points at disabled
    customers or movies still renders.
    """
    if not purchases:
        return []

    customers = await customer_query_repo.get_by_ids(
        customer_ids=[purchase.customer_id for purchase in purchases]
    )
    movies = await movie_query_repo.get_by_ids(
        movie_ids=[purchase.movie_id for purchase in purchases]
    )
    return [
        TicketPurchaseDetail.build(
            purchase=purchase,
            customer=customers.get(purchase.customer_id),
            movie=movies.get(purchase.movie_id),
        )
        for purchase in purchases
    ]
