"""Product aggregate and its repository.

Products are read-only as far as the cart is concerned: the cart copies a
product's id, name and cost into a line item when the product is added and
never re-reads the catalogue afterwards.
"""

from protean.exceptions import ObjectNotFoundError
from protean.fields import Float, String

from cartwise.domain import cartwise


@cartwise.aggregate
class Product:
    """A sellable item with a unit cost."""

    name: String(required=True, max_length=255)
    category: String(max_length=100)
    cost: Float(required=True, min_value=0.0)
    rating: Float(min_value=0.0, max_value=5.0, default=0.0)
    image: String(max_length=1000)

    @classmethod
    def create(cls, name, cost, category=None, rating=None, image=None):
        return cls(
            name=name,
            cost=cost,
            category=category,
            rating=rating or 0.0,
            image=image,
        )


@cartwise.repository(part_of=Product)
class ProductRepository:
    def find_by_id(self, product_id) -> Product | None:
        """Return the product, or ``None`` when the catalogue has no such id."""
        try:
            return self.get(product_id)
        except ObjectNotFoundError:
            return None

    def list_all(self) -> list[Product]:
        return self._dao.query.order_by("name").all().items
