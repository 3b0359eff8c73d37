import pytest
from cartwise.catalogue.product import Product
from protean.exceptions import ValidationError


class TestProductCreation:
    def test_create(self):
        product = Product.create(name="Tea", cost=100.0, category="Kitchen", image="https://cdn.example.com/tea.png")
        assert product.name == "Tea"
        assert product.cost == 100.0
        assert product.category == "Kitchen"
        assert product.rating == 0.0

    def test_free_products_are_allowed(self):
        assert Product.create(name="Sticker", cost=0.0).cost == 0.0

    def test_negative_cost_is_rejected(self):
        with pytest.raises(ValidationError):
            Product.create(name="Tea", cost=-1.0)

    def test_rating_is_capped(self):
        with pytest.raises(ValidationError):
            Product.create(name="Tea", cost=1.0, rating=6.0)
