from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


CONFIRMATION_CODE_CONSTRAINT = 'uq_ticket_purchase_confirmation_code'


class TicketPurchaseModel(Base):
    __tablename__ = 'ticket_purchase'
    __table_args__ = (UniqueConstraint('confirmation_code', name=CONFIRMATION_CODE_CONSTRAINT),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Plain FK columns: customer/movie are fetched explicitly, never lazy-loaded
    customer_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('customer.id'), nullable=False, index=True
    )
    movie_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('movie.id'), nullable=False, index=True
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    unit_price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    total_amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    status: Mapped[str] = mapped_column(String(20), default='PENDING', nullable=False)
    card_last_four: Mapped[str] = mapped_column(String(4), nullable=False)
    card_holder_name: Mapped[str] = mapped_column(String(255), nullable=False)
    confirmation_code: Mapped[str] = mapped_column(String(12), nullable=False)
    purchase_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False, index=True
    )

    def __repr__(self):
        return (
            f'<TicketPurchaseModel(id={self.id}, confirmation_code={self.confirmation_code}, '
            f'status={self.status})>'
        )
