"""Selectors for every Swag Labs screen, one module per page."""

from .cart_page import CartPageLocators
from .checkout_complete import CheckoutCompleteLocators
from .checkout_information import CheckoutInformationLocators
from .checkout_overview import CheckoutOverviewLocators
from .landing_page import LandingPageLocators
from .menu import MenuLocators
from .product_page import ProductPageLocators

__all__ = [
    "CartPageLocators",
    "CheckoutCompleteLocators",
    "CheckoutInformationLocators",
    "CheckoutOverviewLocators",
    "LandingPageLocators",
    "MenuLocators",
    "ProductPageLocators",
]
