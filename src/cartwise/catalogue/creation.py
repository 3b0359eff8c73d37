"""Product registration — command and handler."""

from protean import handle
from protean.fields import Float, String
from protean.utils.globals import current_domain

from cartwise.catalogue.product import Product
from cartwise.domain import cartwise


@cartwise.command(part_of="Product")
class AddProduct:
    name: String(required=True, max_length=255)
    category: String(max_length=100)
    cost: Float(required=True, min_value=0.0)
    rating: Float(min_value=0.0, max_value=5.0)
    image: String(max_length=1000)


@cartwise.command_handler(part_of=Product)
class AddProductHandler:
    @handle(AddProduct)
    def add_product(self, command):
        product = Product.create(
            name=command.name,
            cost=command.cost,
            category=command.category,
            rating=command.rating,
            image=command.image,
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)
