"""Inventory page object: product list, cart badge and sorting."""

from __future__ import annotations

from ..locators import ProductPageLocators
from .base_page import BasePage

SORT_OPTIONS = {
    "name-asc": "az",
    "name-desc": "za",
    "price-asc": "lohi",
    "price-desc": "hilo",
}


class ProductPage(BasePage):
    path = "/inventory.html"
    locators = ProductPageLocators

    def add_product_to_cart(self, product_name: str) -> None:
        self.click(self.locators.add_to_cart_button(product_name))

    def remove_product(self, product_name: str) -> None:
        """Remove *product_name* from the cart using its inventory card button."""
        self.click(self.locators.remove_button(product_name))

    def open_cart(self) -> None:
        self.click(self.locators.CART_LINK)

    def sort_by(self, order: str) -> None:
        """Sort the inventory; *order* is one of ``SORT_OPTIONS``."""
        if order not in SORT_OPTIONS:
            raise ValueError(f"Unknown sort order '{order}', expected one of {sorted(SORT_OPTIONS)}")
        self.locator(self.locators.PRODUCT_SORT).select_option(SORT_OPTIONS[order])

    def get_product_names(self) -> list[str]:
        return self.locator(self.locators.PRODUCT_NAME).all_text_contents()

    def expect_cart_badge(self, count: int) -> None:
        self.expect_text(self.locators.CART_BADGE, str(count))

    def expect_cart_badge_not_displayed(self) -> None:
        self.expect_hidden(self.locators.CART_BADGE)
