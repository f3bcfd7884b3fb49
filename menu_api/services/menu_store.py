from __future__ import annotations

from menu_api.models.schemas import Category, MenuItem, MenuItemFields

STARTER_MENU: list[dict] = [
    {
        "id": 1,
        "name": "Classic Burger",
        "description": "Beef patty with lettuce, tomato, and cheese on a sesame seed bun",
        "price": 12.99,
        "category": Category.entree,
        "ingredients": ["beef", "lettuce", "tomato", "cheese", "bun"],
        "available": True,
    },
    {
        "id": 2,
        "name": "Chicken Caesar Salad",
        "description": "Grilled chicken breast over romaine lettuce with parmesan and croutons",
        "price": 11.5,
        "category": Category.entree,
        "ingredients": ["chicken", "romaine lettuce", "parmesan cheese", "croutons", "caesar dressing"],
        "available": True,
    },
    {
        "id": 3,
        "name": "Mozzarella Sticks",
        "description": "Crispy breaded mozzarella served with marinara sauce",
        "price": 8.99,
        "category": Category.appetizer,
        "ingredients": ["mozzarella cheese", "breadcrumbs", "marinara sauce"],
        "available": True,
    },
    {
        "id": 4,
        "name": "Chocolate Lava Cake",
        "description": "Warm chocolate cake with molten center, served with vanilla ice cream",
        "price": 7.99,
        "category": Category.dessert,
        "ingredients": ["chocolate", "flour", "eggs", "butter", "vanilla ice cream"],
        "available": True,
    },
    {
        "id": 5,
        "name": "Fresh Lemonade",
        "description": "House-made lemonade with fresh lemons and mint",
        "price": 3.99,
        "category": Category.beverage,
        "ingredients": ["lemons", "sugar", "water", "mint"],
        "available": True,
    },
    {
        "id": 6,
        "name": "Fish and Chips",
        "description": "Beer-battered cod with seasoned fries and coleslaw",
        "price": 14.99,
        "category": Category.entree,
        "ingredients": ["cod", "beer batter", "potatoes", "coleslaw", "tartar sauce"],
        "available": False,
    },
]


class MenuStore:
    """Process-local, ordered menu (resets on restart).

    Lookups are linear scans; the menu is small and only touched from the
    event loop, so there is no locking.
    """

    def __init__(self, items: list[MenuItem] | None = None) -> None:
        self._items: list[MenuItem] = list(items or [])

    @classmethod
    def seeded(cls) -> MenuStore:
        return cls([MenuItem.model_validate(row) for row in STARTER_MENU])

    def __len__(self) -> int:
        return len(self._items)

    def _index_of(self, item_id: int) -> int | None:
        for idx, item in enumerate(self._items):
            if item.id == item_id:
                return idx
        return None

    def next_id(self) -> int:
        return self._items[-1].id + 1 if self._items else 1

    def list(self) -> list[MenuItem]:
        return list(self._items)

    def get(self, item_id: int) -> MenuItem | None:
        idx = self._index_of(item_id)
        return None if idx is None else self._items[idx]

    def create(self, fields: MenuItemFields) -> MenuItem:
        item = MenuItem(
            id=self.next_id(),
            name=fields.name,
            description=fields.description,
            price=fields.price,
            category=fields.category,
            ingredients=list(fields.ingredients),
            available=True if fields.available is None else fields.available,
        )
        self._items.append(item)
        return item

    def update(self, item_id: int, fields: MenuItemFields) -> MenuItem | None:
        idx = self._index_of(item_id)
        if idx is None:
            return None

        current = self._items[idx]
        updated = current.model_copy(
            update={
                "name": fields.name,
                "description": fields.description,
                "price": fields.price,
                "category": fields.category,
                "ingredients": list(fields.ingredients),
                "available": current.available if fields.available is None else fields.available,
            }
        )
        self._items[idx] = updated
        return updated

    def delete(self, item_id: int) -> MenuItem | None:
        idx = self._index_of(item_id)
        if idx is None:
            return None
        return self._items.pop(idx)
