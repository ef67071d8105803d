from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.platform.database.orm_db_setting import Base

if TYPE_CHECKING:
    from src.service.train_booking.driven_adapter.model.train_schedule_model import (
        TrainScheduleModel,
    )


class TrainClassModel(Base):
    __tablename__ = 'train_class'
    __table_args__ = (UniqueConstraint('train_id', 'class_name', name='uq_train_class_name'),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    train_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('train_schedule.id', ondelete='CASCADE'), nullable=False, index=True
    )
    class_name: Mapped[str] = mapped_column(String(20), nullable=False)
    carriages: Mapped[int] = mapped_column(Integer, nullable=False)
    seat_rows: Mapped[int] = mapped_column(Integer, nullable=False)
    seat_cols: Mapped[int] = mapped_column(Integer, nullable=False)
    # Written from the layout on insert; reads recompute it from the dimensions
    capacity: Mapped[int] = mapped_column(Integer, nullable=False)

    schedule: Mapped['TrainScheduleModel'] = relationship(
        'TrainScheduleModel', back_populates='classes'
    )
