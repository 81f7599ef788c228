import pytest

from chainview.constants import VISIBLE_WINDOW
from chainview.navigation import (
    NavigatorName,
    ScrollingNavigator,
    TabNavigator,
    ViewState,
    create_navigator,
)
from chainview.viewport import Rect


@pytest.fixture
def navigator():
    return ScrollingNavigator()


def _state(count: int, expanded: bool = False) -> ViewState:
    return ViewState.for_chain(count, expanded)


@pytest.mark.parametrize("count", [1, 2, 7, 25])
def test_move_down_count_times_returns_to_start(navigator, count):
    state = _state(count)
    state.cursor = count // 2
    navigator._reconcile(state)

    for _ in range(count):
        navigator.move(state, 1)

    assert state.cursor == count // 2


@pytest.mark.parametrize("count", [1, 3, 12])
def test_move_up_from_first_wraps_to_last(navigator, count):
    state = _state(count)
    navigator.move(state, -1)
    assert state.cursor == count - 1


def test_move_down_from_last_wraps_to_first(navigator):
    state = _state(4)
    state.cursor = 3
    navigator.move(state, 1)
    assert state.cursor == 0


@pytest.mark.parametrize("start", range(0, 12))
def test_page_down_clamps_at_last(navigator, start):
    state = _state(12)
    state.cursor = start
    navigator.page(state, 5)
    assert state.cursor == min(start + 5, 11)


@pytest.mark.parametrize("start", range(0, 12))
def test_page_up_clamps_at_first(navigator, start):
    state = _state(12)
    state.cursor = start
    navigator.page(state, -5)
    assert state.cursor == max(start - 5, 0)


def test_page_does_not_wrap(navigator):
    state = _state(6)
    state.cursor = 5
    navigator.page_down(state)
    assert state.cursor == 5
    state.cursor = 0
    navigator.page_up(state)
    assert state.cursor == 0


def test_scroll_invariant_holds_after_any_moves(navigator):
    count = 23
    state = _state(count)
    steps = [1] * 14 + [-1] * 3 + [5, 5, -5, 1, 1, 1, -1] * 4 + [-1] * 30 + [5] * 6

    for step in steps:
        if abs(step) == 1:
            navigator.move(state, step)
        else:
            navigator.page(state, step)
        assert state.scroll_offset <= state.cursor <= state.scroll_offset + VISIBLE_WINDOW - 1


def test_wrap_to_last_scrolls_to_end(navigator):
    state = _state(30)
    navigator.move(state, -1)
    assert state.cursor == 29
    assert state.scroll_offset == 20
    navigator.move(state, 1)
    assert state.cursor == 0
    assert state.scroll_offset == 0


def test_toggle_expand_twice_restores_flag(navigator):
    state = _state(3)
    state.cursor = 1

    navigator.toggle_expand(state)
    assert state.expanded == [False, True, False]
    navigator.toggle_expand(state)
    assert state.expanded == [False, False, False]


def test_toggle_greeks_ignores_selection(navigator):
    state = _state(3)
    assert state.show_greeks
    navigator.toggle_greeks(state)
    assert not state.show_greeks
    assert state.cursor == 0


@pytest.mark.parametrize("nav", [ScrollingNavigator(), TabNavigator()])
def test_empty_chain_navigation_is_a_no_op(nav):
    state = _state(0)
    before = ViewState(expanded=[], cursor=0, scroll_offset=0, show_greeks=True)

    nav.move(state, 1)
    nav.move(state, -1)
    nav.next(state)
    nav.prev(state)
    nav.page(state, 5)
    nav.page_down(state)
    nav.page_up(state)
    nav.toggle_expand(state)

    assert state == before


def test_default_expansion_depends_on_variant(chain):
    assert ScrollingNavigator().initial_state(chain).expanded == [False, False]
    assert TabNavigator().initial_state(chain).expanded == [True, True]


def test_initial_state_show_greeks_flag(chain):
    assert ScrollingNavigator().initial_state(chain).show_greeks
    assert not ScrollingNavigator().initial_state(chain, show_greeks=False).show_greeks


def test_scrolling_allocation_follows_expand_state(chain_factory):
    chain = chain_factory(expiration_count=4, pairs_per_expiration=3)
    navigator = ScrollingNavigator()
    state = navigator.initial_state(chain)
    state.cursor = 1
    navigator.toggle_expand(state)

    allocation = navigator.allocate(state, chain, Rect(1, 4, 100, 30))

    assert list(allocation.indices) == [0, 1, 2, 3]
    assert allocation.heights == (3, 8, 3, 3 + 13)
    assert allocation.regions[1].y == 7


def test_scrolling_allocation_starts_at_scroll_offset(chain_factory):
    chain = chain_factory(expiration_count=15, pairs_per_expiration=1)
    navigator = ScrollingNavigator()
    state = navigator.initial_state(chain)
    navigator.move(state, -1)

    allocation = navigator.allocate(state, chain, Rect(0, 0, 80, 40))

    assert allocation.start == 5
    assert list(allocation.indices) == list(range(5, 15))


def test_custom_window_and_page_size():
    navigator = ScrollingNavigator(visible_window=3, page_size=2)
    state = _state(10)

    navigator.page_down(state)
    navigator.page_down(state)
    assert state.cursor == 4
    assert state.scroll_offset == 2


class TestTabNavigator:

    def test_next_and_prev_rotate(self):
        navigator = TabNavigator()
        state = _state(3, expanded=True)

        navigator.prev(state)
        assert state.cursor == 2
        navigator.next(state)
        assert state.cursor == 0
        navigator.next(state)
        assert state.cursor == 1

    def test_page_is_a_no_op(self):
        navigator = TabNavigator()
        state = _state(8, expanded=True)
        state.cursor = 3

        navigator.page_down(state)
        navigator.page_up(state)

        assert state.cursor == 3
        assert state.scroll_offset == 0

    def test_selected_expiration_gets_whole_area(self, chain):
        navigator = TabNavigator()
        state = navigator.initial_state(chain)
        navigator.next(state)
        area = Rect(1, 5, 120, 30)

        allocation = navigator.allocate(state, chain, area)

        assert list(allocation.indices) == [1]
        assert allocation.regions == (area,)
        assert navigator.selected_expiration(state, chain) is chain.expirations[1]

    def test_empty_chain_allocates_nothing(self, chain_factory):
        chain = chain_factory(expiration_count=0)
        navigator = TabNavigator()
        state = navigator.initial_state(chain)

        assert navigator.allocate(state, chain, Rect(0, 0, 80, 20)).regions == ()
        assert navigator.selected_expiration(state, chain) is None


def test_create_navigator_by_name():
    assert isinstance(create_navigator("scroll"), ScrollingNavigator)
    assert isinstance(create_navigator(NavigatorName.TABS), TabNavigator)
    with pytest.raises(ValueError):
        create_navigator("grid")
