"""
Healthy Breakfast Backend — Menu Service
========================================

What:  Owns the breakfast menu.
Why:   Keeps the data out of the route module so it can be tested without HTTP.
How:   The menu is a tuple of frozen MenuItem models built at import time.
       list_items() hands out a new list on every call.
"""

from typing import List, Sequence

from breakfast_backend.schemas.menu import MenuItem


MENU: Sequence[MenuItem] = (
    MenuItem(id=1, name="Oats Porridge", price=45),
    MenuItem(id=2, name="Vegetable Upma", price=50),
    MenuItem(id=3, name="Sprouts Salad", price=60),
)


class MenuService:
    """
    Read-only access to a fixed menu.

    Stateless apart from the immutable item table passed in, so a single
    module-level instance serves every request.
    """

    def __init__(self, items: Sequence[MenuItem] = MENU):
        self._items = tuple(items)

    def list_items(self) -> List[MenuItem]:
        """Return every menu item in id order."""
        return list(self._items)


menu_service = MenuService()
