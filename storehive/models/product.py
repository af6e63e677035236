"""CatalogueProduct model - leaf of the product catalogue."""

from decimal import Decimal

from sqlalchemy import ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from storehive.models.base import AuditMixin, Base, SoftDeleteMixin


class CatalogueProduct(Base, AuditMixin, SoftDeleteMixin):
    """Catalogue product - belongs to exactly one category."""

    __tablename__ = "catalogue_products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    category_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("product_categories.id"),
        nullable=False,
        index=True,
    )
    code: Mapped[str] = mapped_column(String(5), unique=True, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(60), nullable=False)
    description: Mapped[str | None] = mapped_column(String(300), nullable=True)
    manufacturer_code: Mapped[str | None] = mapped_column(String(10), nullable=True)
    price: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False, default=Decimal("0"))

    def __repr__(self) -> str:
        return f"<CatalogueProduct(id={self.id}, code='{self.code}')>"
