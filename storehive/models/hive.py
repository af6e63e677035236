"""StoreHive model - a physical storage location."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from storehive.models.base import AuditMixin, Base, SoftDeleteMixin


class StoreHive(Base, AuditMixin, SoftDeleteMixin):
    """Hive (warehouse) - parent of hive sections."""

    __tablename__ = "store_hives"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(String(5), unique=True, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(60), nullable=False)
    address: Mapped[str] = mapped_column(String(300), nullable=False)

    def __repr__(self) -> str:
        return f"<StoreHive(id={self.id}, code='{self.code}')>"
