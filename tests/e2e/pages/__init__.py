"""Page Object Model classes for the storefront E2E suite."""

from .base_page import BasePage
from .cart_page import CartPage
from .checkout_complete_page import CheckoutCompletePage
from .checkout_information_page import CheckoutInformationPage
from .checkout_overview_page import CheckoutOverviewPage
from .landing_page import LandingPage
from .menu_page import MenuPage
from .product_page import ProductPage

__all__ = [
    "BasePage",
    "CartPage",
    "CheckoutCompletePage",
    "CheckoutInformationPage",
    "CheckoutOverviewPage",
    "LandingPage",
    "MenuPage",
    "ProductPage",
]
