"""StoreHiveSection model - a subdivision within a hive."""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from storehive.models.base import AuditMixin, Base, SoftDeleteMixin


class StoreHiveSection(Base, AuditMixin, SoftDeleteMixin):
    """Hive section - belongs to exactly one hive.

    No relationship is mapped back to the hive: purging a hive never
    touches its sections.
    """

    __tablename__ = "store_hive_sections"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    store_hive_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("store_hives.id"),
        nullable=False,
        index=True,
    )
    code: Mapped[str] = mapped_column(String(5), unique=True, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(60), nullable=False)

    def __repr__(self) -> str:
        return f"<StoreHiveSection(id={self.id}, code='{self.code}')>"
