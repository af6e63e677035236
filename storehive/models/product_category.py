"""CatalogueProductCategory model - parent of catalogue products."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from storehive.models.base import AuditMixin, Base, SoftDeleteMixin


class CatalogueProductCategory(Base, AuditMixin, SoftDeleteMixin):
    """Product category.

    Maps to the `product_categories` table; the description lives in the
    `category_description` column.
    """

    __tablename__ = "product_categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(String(5), unique=True, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(60), nullable=False)
    description: Mapped[str | None] = mapped_column(
        "category_description",
        String(300),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<CatalogueProductCategory(id={self.id}, code='{self.code}')>"
