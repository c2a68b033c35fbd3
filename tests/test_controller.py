import pytest
from PySide6.QtCore import QThreadPool

from hero_explorer.controller import HeroSearchController, ScreenState
from tests.conftest import make_hero, make_response, wait_until


class FakeApi(object):
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.queries = []

    def search_heroes(self, query):
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def states():
    return []


def make_controller(api, pool, states):
    controller = HeroSearchController(api, pool)
    controller.state_changed.connect(states.append)
    return controller


def test_initial_state_is_empty(qapp, sync_pool):
    controller = HeroSearchController(FakeApi(), sync_pool)
    assert controller.state == ScreenState()
    assert not controller.state.can_search


def test_search_success_replaces_heroes(qapp, sync_pool, states, batman):
    api = FakeApi(response=make_response(batman))
    controller = make_controller(api, sync_pool, states)

    controller.search("Batman")

    assert api.queries == ["Batman"]
    loading, done = states
    assert loading.is_loading and loading.has_searched and loading.error_message is None
    assert done.heroes == (batman,)
    assert not done.is_loading
    assert done.error_message is None


def test_search_uses_current_query_when_not_given(qapp, sync_pool, states, batman):
    api = FakeApi(response=make_response(batman))
    controller = make_controller(api, sync_pool, states)
    controller.set_query("  Batman ")
    assert controller.state.can_search

    controller.search()

    assert api.queries == ["Batman"]
    assert controller.state.query == "  Batman "


def test_empty_results_show_not_found(qapp, sync_pool, states):
    controller = make_controller(FakeApi(response=make_response()), sync_pool, states)

    controller.search("Zzzznotahero")

    assert controller.state.error_message == "No heroes found with that name"
    assert not controller.state.is_loading
    assert controller.state.heroes == ()


def test_error_status_shows_not_found(qapp, sync_pool, states, batman):
    controller = make_controller(FakeApi(response=make_response(batman, status="error")), sync_pool, states)
    controller.search("Batman")
    assert controller.state.error_message == "No heroes found with that name"


@pytest.mark.parametrize("query", ["", "   ", "\t\n"])
def test_blank_query_is_a_noop(qapp, sync_pool, states, query):
    api = FakeApi(response=make_response())
    controller = make_controller(api, sync_pool, states)

    controller.search(query)

    assert api.queries == []
    assert sync_pool.started == []
    assert states == []
    assert controller.state == ScreenState()


def test_transport_failure_message(qapp, sync_pool, states):
    controller = make_controller(FakeApi(error=Exception("timeout")), sync_pool, states)

    controller.search("Batman")

    assert controller.state.error_message == "Error loading heroes: timeout"
    assert not controller.state.is_loading


def test_new_search_clears_previous_error(qapp, sync_pool, states, batman):
    api = FakeApi(error=Exception("timeout"))
    controller = make_controller(api, sync_pool, states)
    controller.search("Batman")

    api.error = None
    api.response = make_response(batman)
    controller.search("Batman")

    assert states[-2].error_message is None
    assert states[-2].is_loading
    assert controller.state.error_message is None
    assert controller.state.heroes == (batman,)


def test_failed_search_hides_previous_results(qapp, sync_pool, states, batman):
    api = FakeApi(response=make_response(batman))
    controller = make_controller(api, sync_pool, states)
    controller.search("Batman")

    api.response = make_response()
    controller.search("Zzzznotahero")

    assert controller.state.heroes == ()


def test_stale_response_is_discarded(qapp, deferred_pool, states):
    first = make_hero("1", "Superman")
    second = make_hero("2", "Supergirl")
    api = FakeApi()
    controller = make_controller(api, deferred_pool, states)

    api.response = make_response(first)
    controller.search("Superman")
    deferred_pool.pending[0].fn = lambda query: make_response(first)
    controller.search("Supergirl")
    deferred_pool.pending[1].fn = lambda query: make_response(second)

    # 后发出的请求先返回，之前的响应到达时已过期
    deferred_pool.run(1)
    deferred_pool.run(0)

    assert controller.state.heroes == (second,)
    assert not controller.state.is_loading


def test_stale_error_is_discarded(qapp, deferred_pool, states, batman):
    api = FakeApi(error=Exception("boom"))
    controller = make_controller(api, deferred_pool, states)
    controller.search("Batman")
    api.error, api.response = None, make_response(batman)
    controller.search("Batman")

    deferred_pool.run(1)
    api.error = Exception("boom")
    deferred_pool.run(0)

    assert controller.state.error_message is None
    assert controller.state.heroes == (batman,)


def test_select_and_clear_hero(qapp, sync_pool, states, batman):
    controller = make_controller(FakeApi(), sync_pool, states)

    controller.select_hero(batman)
    assert controller.state.selected_hero == batman

    controller.select_hero(None)
    assert controller.state.selected_hero is None
    assert len(states) == 2


def test_clearing_selection_when_hidden_is_idempotent(qapp, sync_pool, states):
    controller = make_controller(FakeApi(), sync_pool, states)
    before = controller.state

    controller.select_hero(None)

    assert controller.state is before
    assert states == []


def test_search_completes_on_real_thread_pool(qapp, states, batman):
    pool = QThreadPool()
    controller = make_controller(FakeApi(response=make_response(batman)), pool, states)

    controller.search("Batman")
    pool.waitForDone(5000)

    assert wait_until(qapp, lambda: not controller.state.is_loading)
    assert controller.state.heroes == (batman,)
    assert controller.state.error_message is None
    assert wait_until(qapp, lambda: not controller._workers)


def test_search_error_on_real_thread_pool(qapp, states):
    pool = QThreadPool()
    controller = make_controller(FakeApi(error=Exception("timeout")), pool, states)

    controller.search("Batman")
    pool.waitForDone(5000)

    assert wait_until(qapp, lambda: not controller.state.is_loading)
    assert controller.state.error_message == "Error loading heroes: timeout"
    assert controller.state.heroes == ()
