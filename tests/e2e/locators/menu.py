"""Selectors for the burger side menu, available on every logged-in page."""


class MenuLocators:
    MENU_BUTTON = "#react-burger-menu-btn"
    CLOSE_MENU_BUTTON = "#react-burger-cross-btn"
    LOGOUT_LINK = "#logout_sidebar_link"
    ALL_ITEMS_LINK = "#inventory_sidebar_link"
    ABOUT_LINK = "#about_sidebar_link"
    RESET_APP_STATE_LINK = "#reset_sidebar_link"
