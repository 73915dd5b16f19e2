import pytest

from sukakpak.asset_manager import AssetHandle, AssetManager, AssetNotFoundError


def test_insert_and_get():
    manager = AssetManager()
    one = manager.insert(1)
    assert manager.get(one) == 1


def test_update_increments():
    manager = AssetManager()
    one = manager.insert(1)
    assert manager.update(one, lambda v: v + 1) == 2
    assert manager.get(one) == 2


def test_remove_returns_value():
    manager = AssetManager()
    one = manager.insert(1)
    assert manager.remove(one) == 1
    assert manager.get(one) is None


def test_remove_missing_raises():
    manager = AssetManager()
    one = manager.insert(1)
    manager.remove(one)
    with pytest.raises(AssetNotFoundError):
        manager.remove(one)


def test_drain():
    manager = AssetManager()
    manager.insert(1)
    assert [data for _, data in manager.drain()] == [1]
    assert len(manager) == 0


def test_iter_values():
    manager = AssetManager()
    manager.insert(1)
    assert [data for _, data in manager.items()] == [1]


def test_iter_mut_equivalent():
    manager = AssetManager()
    manager.insert(1)
    manager.insert(2)
    for handle in list(manager):
        manager.update(handle, lambda v: v + 1)
    assert [n for _, n in manager.items()] == [2, 3]


def test_stale_handle_does_not_match_reused_slot():
    manager = AssetManager()
    old = manager.insert("a")
    manager.remove(old)
    new = manager.insert("b")
    assert new.index == old.index
    assert old not in manager
    assert new in manager
    assert manager.get(old) is None
    assert manager.get(new) == "b"


def test_replace_returns_previous():
    manager = AssetManager()
    handle = manager.insert("x")
    assert manager.replace(handle, "y") == "x"
    assert manager.get(handle) == "y"


def test_replace_missing_raises():
    manager = AssetManager()
    with pytest.raises(AssetNotFoundError):
        manager.replace(AssetHandle(0, 0), "y")


def test_update_missing_raises():
    manager = AssetManager()
    with pytest.raises(AssetNotFoundError):
        manager.update(AssetHandle(3, 0), lambda v: v)


def test_len_and_contains():
    manager = AssetManager()
    handles = [manager.insert(i) for i in range(4)]
    assert len(manager) == 4
    manager.remove(handles[1])
    assert len(manager) == 3
    assert handles[1] not in manager
    assert all(h in manager for h in handles if h != handles[1])


def test_handles_are_hashable_and_equal():
    manager = AssetManager()
    handle = manager.insert(5)
    copy = AssetHandle(handle.index, handle.generation)
    assert copy == handle
    assert {handle: "v"}[copy] == "v"


def test_drain_invalidates_handles():
    manager = AssetManager()
    handle = manager.insert(7)
    manager.drain()
    assert handle not in manager
    fresh = manager.insert(8)
    assert fresh != handle
    assert manager.get(fresh) == 8