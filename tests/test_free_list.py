from sukakpak.free_list import FreeList


def test_build_freelist():
    free_list = FreeList()
    assert free_list.finish_renderpass(0) == set()


def test_run_simple_render():
    free_list = FreeList()
    free_list.push(1, 0)
    assert len(free_list.finish_renderpass(0)) == 0
    free_list.try_free(1)
    assert sorted(free_list.finish_renderpass(0)) == [1]


def test_is_used():
    free_list = FreeList()
    free_list.push(1, 0)
    assert free_list.is_used(1) is True
    assert len(free_list.finish_renderpass(0)) == 0
    free_list.try_free(1)
    assert sorted(free_list.finish_renderpass(0)) == [1]
    assert free_list.is_used(1) is False


def test_multiple_renders():
    free_list = FreeList()
    free_list.push(1, 0)
    free_list.push(1, 1)
    assert len(free_list.finish_renderpass(0)) == 0
    free_list.try_free(1)
    assert len(free_list.finish_renderpass(0)) == 0
    assert sorted(free_list.finish_renderpass(1)) == [1]


def test_freed_item_is_not_returned_twice():
    free_list = FreeList()
    free_list.try_free(2)
    assert free_list.finish_renderpass(5) == {2}
    assert free_list.finish_renderpass(5) == set()