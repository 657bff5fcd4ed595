from techrot.item import Item


def test_fields_keep_constructor_values():
    item = Item(20001, 1.5, 25, "Scrap Plate")
    assert item.id == 20001
    assert item.weight == 1.5
    assert item.value == 25
    assert item.name == "Scrap Plate"


def test_keyword_construction_matches_positional():
    positional = Item(7, 0.25, 3, "Bolt")
    keyword = Item(id=7, weight=0.25, value=3, name="Bolt")
    assert positional == keyword


def test_items_with_different_ids_differ():
    assert Item(1, 1.0, 1, "A") != Item(2, 1.0, 1, "A")