"""Runtime settings for the Cartwise domain, read from the environment."""

import os

DEFAULT_ADDRESS = os.getenv("CARTWISE_DEFAULT_ADDRESS", "ADDRESS_NOT_SET")
"""Placeholder address a user carries until they configure a real one."""

DEFAULT_WALLET_MONEY = float(os.getenv("CARTWISE_DEFAULT_WALLET_MONEY", "500"))
"""Opening wallet balance granted to every newly registered user."""
