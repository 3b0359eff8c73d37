"""Cartwise domain — product catalogue, user wallets and the shopping cart.

Carts and users live in one domain so that checkout can debit a wallet and
clear a cart inside a single unit of work.
"""

from protean.domain import Domain

from cartwise.utils.logging import configure_logging

# Configure logging for the application
configure_logging()

# Domain Composition Root
cartwise = Domain(name="cartwise")
