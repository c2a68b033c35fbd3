# controller.py
import logging
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from PySide6.QtCore import QObject, QThreadPool, Signal, Slot

from hero_explorer.api_client import ApiClient
from hero_explorer.models import ApiResponse, Hero
from hero_explorer.worker import Worker

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "No heroes found with that name"
LOAD_ERROR_MESSAGE = "Error loading heroes: {cause}"


@dataclass(frozen=True)
class ScreenState:
    query: str = ""
    heroes: Tuple[Hero, ...] = ()
    selected_hero: Optional[Hero] = None
    is_loading: bool = False
    has_searched: bool = False
    error_message: Optional[str] = None

    @property
    def can_search(self) -> bool:
        return bool(self.query.strip()) and not self.is_loading


class HeroSearchController(QObject):
    """
    持有 ScreenState，负责搜索请求与英雄选择。
    状态只会被整体替换，每次变化都会发出 state_changed。
    """

    state_changed = Signal(object)

    def __init__(self, api_client: ApiClient, thread_pool: Optional[QThreadPool] = None, parent=None):
        super().__init__(parent)
        self.api = api_client
        self.thread_pool = thread_pool or QThreadPool.globalInstance()
        self.state = ScreenState()
        # 每次搜索递增，过期的响应直接丢弃
        self.generation = 0
        # 运行中的 Worker，finished 之前必须保留引用，否则信号连接会随之失效
        self._workers = set()

    def _set_state(self, state: ScreenState):
        if state == self.state:
            return
        self.state = state
        self.state_changed.emit(state)

    @Slot(str)
    def set_query(self, text: str):
        self._set_state(replace(self.state, query=text))

    def search(self, query: Optional[str] = None):
        query = self.state.query if query is None else query
        if not query or not query.strip():
            return

        self.generation += 1
        generation = self.generation
        self._set_state(replace(self.state, query=query, error_message=None, is_loading=True, has_searched=True))

        worker = Worker(self.api.search_heroes, query.strip(), name=f"search[{generation}]")
        worker.signals.result.connect(lambda result: self.on_search_result(generation, result))
        worker.signals.error.connect(lambda message: self.on_search_error(generation, message))
        worker.signals.finished.connect(lambda: self._workers.discard(worker))
        self._workers.add(worker)
        self.thread_pool.start(worker)

    def on_search_result(self, generation: int, response: ApiResponse):
        if generation != self.generation:
            logger.info("Discarding stale search result (generation %d, current %d)", generation, self.generation)
            return
        if response.is_usable:
            self._set_state(replace(self.state, heroes=tuple(response.results), is_loading=False, error_message=None))
        else:
            logger.info("No heroes for %r: %s", self.state.query, response.error or response.response)
            self._set_state(replace(self.state, heroes=(), is_loading=False, error_message=NOT_FOUND_MESSAGE))

    def on_search_error(self, generation: int, message: str):
        if generation != self.generation:
            logger.info("Discarding stale search error (generation %d, current %d)", generation, self.generation)
            return
        logger.error("Error loading heroes for %r: %s", self.state.query, message)
        self._set_state(replace(self.state, heroes=(), is_loading=False, error_message=LOAD_ERROR_MESSAGE.format(cause=message)))

    @Slot(object)
    def select_hero(self, hero: Optional[Hero]):
        self._set_state(replace(self.state, selected_hero=hero))
