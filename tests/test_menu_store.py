from menu_api.models.schemas import Category, MenuItemFields
from menu_api.services.menu_store import MenuStore


def _fields(**overrides) -> MenuItemFields:
    values = {
        "name": "Garlic Bread",
        "description": "Toasted bread with garlic butter",
        "price": 4.5,
        "category": Category.appetizer,
        "ingredients": ["bread", "garlic", "butter"],
    }
    values.update(overrides)
    return MenuItemFields(**values)


def test_seeded_store_holds_starter_menu() -> None:
    store = MenuStore.seeded()
    assert len(store) == 6
    assert store.get(1).name == "Classic Burger"
    assert store.get(6).available is False
    assert store.next_id() == 7


def test_empty_store_starts_ids_at_one() -> None:
    store = MenuStore()
    assert store.list() == []
    first = store.create(_fields())
    second = store.create(_fields(name="Onion Rings"))
    assert (first.id, second.id) == (1, 2)
    assert first.available is True


def test_list_returns_a_copy() -> None:
    store = MenuStore.seeded()
    items = store.list()
    items.clear()
    assert len(store.list()) == 6


def test_update_preserves_id_position_and_available() -> None:
    store = MenuStore.seeded()
    updated = store.update(6, _fields())
    assert updated.id == 6
    assert updated.name == "Garlic Bread"
    assert updated.available is False
    assert store.list()[-1] == updated

    assert store.update(6, _fields(available=True)).available is True


def test_missing_ids_return_none() -> None:
    store = MenuStore.seeded()
    assert store.get(99) is None
    assert store.update(99, _fields()) is None
    assert store.delete(99) is None


def test_delete_removes_and_returns_item() -> None:
    store = MenuStore.seeded()
    removed = store.delete(1)
    assert removed.name == "Classic Burger"
    assert store.get(1) is None
    assert [item.id for item in store.list()] == [2, 3, 4, 5, 6]
