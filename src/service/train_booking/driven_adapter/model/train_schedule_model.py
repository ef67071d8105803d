from datetime import date, datetime, time
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import JSON, Date, DateTime, Integer, String, Time, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.platform.database.orm_db_setting import Base

if TYPE_CHECKING:
    from src.service.train_booking.driven_adapter.model.train_class_model import TrainClassModel


class TrainScheduleModel(Base):
    __tablename__ = 'train_schedule'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    train_name: Mapped[str] = mapped_column(String(255), nullable=False)
    travel_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True, index=True)
    departure_time: Mapped[Optional[time]] = mapped_column(Time, nullable=True)
    arrival_time: Mapped[Optional[time]] = mapped_column(Time, nullable=True)
    start_station: Mapped[str] = mapped_column(String(255), nullable=False)
    stop_station: Mapped[str] = mapped_column(String(255), nullable=False)
    # {"First": ["FC1-A1", ...], "Second": [...]}
    unavailable_seats: Mapped[Optional[dict]] = mapped_column(JSON, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    # Relationships
    classes: Mapped[List['TrainClassModel']] = relationship(
        'TrainClassModel',
        back_populates='schedule',
        cascade='all, delete-orphan',
        lazy='selectin',
    )

    def __repr__(self):
        return f'<TrainScheduleModel(id={self.id}, train_name={self.train_name})>'
