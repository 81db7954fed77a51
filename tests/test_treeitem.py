from verimeta.treeitem import TreeItem


def make_tree():
    root = TreeItem(["Name", "Size"])
    first = root.add_child(["alpha", 10])
    second = root.add_child(["beta", 20])
    return root, first, second


def test_add_child_sets_parent_and_count():
    root, first, second = make_tree()
    assert root.child_count() == 2
    assert first.parent is root
    assert second.parent is root
    assert root.parent is None


def test_child_by_number_and_out_of_range():
    root, first, second = make_tree()
    assert root.child(0) is first
    assert root.child(1) is second
    assert root.child(2) is None
    assert root.child(-1) is None


def test_child_number():
    root, first, second = make_tree()
    assert first.child_number() == 0
    assert second.child_number() == 1
    assert root.child_number() == 0


def test_child_number_matches_position():
    root = TreeItem(["Name"])
    items = [root.add_child([f"n{i}"]) for i in range(5)]
    assert [item.child_number() for item in items] == list(range(5))
    assert [root.child(item.child_number()) for item in items] == items


def test_column_count_and_data():
    root, first, _ = make_tree()
    assert first.column_count() == 2
    assert first.data(0) == "alpha"
    assert first.data(1) == 10
    assert first.data(2) is None
    assert first.data(-1) is None


def test_set_data_in_and_out_of_range():
    _, first, _ = make_tree()
    assert first.set_data(1, 99) is True
    assert first.data(1) == 99
    assert first.set_data(5, "x") is False
    assert first.set_data(-1, "x") is False
    assert first.column_count() == 2


def test_data_is_copied_from_input():
    values = ["a", "b"]
    item = TreeItem(values)
    item.set_data(0, "changed")
    assert values == ["a", "b"]


def test_append_child():
    root = TreeItem(["Name"])
    orphan = TreeItem(["leaf"])
    root.append_child(orphan)
    assert root.child_count() == 1
    assert root.child(0) is orphan
    assert orphan.parent is None


def test_find_child():
    root, first, second = make_tree()
    assert root.find_child("alpha") is first
    assert root.find_child("beta") is second
    assert root.find_child("gamma") is None


def test_find_child_matches_empty_first_column():
    root = TreeItem(["Name", "Size"])
    blank = root.add_child([None, 1])
    assert root.find_child("") is blank


def test_children_property_is_ordered():
    root, first, second = make_tree()
    assert root.children == (first, second)