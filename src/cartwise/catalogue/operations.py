"""Catalogue operations used by the HTTP surface."""

from protean.utils.globals import current_domain

from cartwise.catalogue.creation import AddProduct
from cartwise.catalogue.product import Product
from cartwise.errors import PRODUCT_NOT_FOUND, NotFound


def list_products() -> list[Product]:
    return current_domain.repository_for(Product).list_all()


def get_product(product_id) -> Product:
    product = current_domain.repository_for(Product).find_by_id(product_id)
    if product is None:
        raise NotFound(PRODUCT_NOT_FOUND)
    return product


def add_product(name, cost, category=None, rating=None, image=None) -> str:
    command = AddProduct(name=name, cost=cost, category=category, rating=rating, image=image)
    return current_domain.process(command, asynchronous=False)
