# main_window.py
import logging

from PySide6.QtWidgets import QMainWindow
from PySide6.QtCore import QThreadPool, Slot
from shiboken6 import isValid

from hero_explorer.api_client import ApiClient
from hero_explorer.controller import HeroSearchController, ScreenState
from hero_explorer.presentation import detail_summary
from hero_explorer.settings import Settings
from hero_explorer.theme import get_locale, get_theme
from hero_explorer.worker import Worker
from hero_explorer.widgets.hero_detail import HeroDetailDialog
from hero_explorer.widgets.search_page import SearchPage
from hero_explorer.widgets.utils import circular_image, decode_image

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, api_client: ApiClient, settings: Settings, thread_pool: QThreadPool = None):
        super().__init__()
        self.api = api_client
        self.settings = settings
        self.theme = get_theme(settings.theme)
        self.locale = get_locale(settings.locale)
        self.thread_pool = thread_pool or QThreadPool()
        self.detail_dialog = None
        # 运行中的 Worker，finished 之前必须保留引用
        self._workers = set()

        self.setWindowTitle(self.locale.title)
        self.setStyleSheet(f"QMainWindow {{ background-color: {self.theme.background}; }}")

        self.controller = HeroSearchController(self.api, self.thread_pool, parent=self)

        self.search_page = SearchPage(
            self.theme,
            self.locale,
            card_full_stats=settings.card_full_stats,
            avatar_loader=self.load_avatar,
        )
        self.setCentralWidget(self.search_page)

        self.search_page.query_changed.connect(self.controller.set_query)
        self.search_page.search_requested.connect(self.controller.search)
        self.search_page.hero_selected.connect(self.controller.select_hero)
        self.controller.state_changed.connect(self.on_state_changed)

        self.search_page.render(self.controller.state)

    def run_in_background(self, fn, on_result, on_error=None, on_finished=None):
        worker = Worker(fn)
        worker.signals.result.connect(on_result)
        if on_error:
            worker.signals.error.connect(on_error)
        if on_finished:
            worker.signals.finished.connect(on_finished)
        worker.signals.finished.connect(lambda: self._workers.discard(worker))
        self._workers.add(worker)
        self.thread_pool.start(worker)

    def load_avatar(self, url: str, target):
        """后台下载并裁剪头像，完成后在 UI 线程设置到 target（AvatarLabel）"""
        size = target.inner_size

        def fetch():
            return circular_image(decode_image(self.api.fetch_image(url)), size)

        def on_result(image):
            # 新的搜索可能已经销毁了旧卡片
            if isValid(target):
                target.set_image(image)

        self.run_in_background(
            fetch,
            on_result,
            on_error=lambda e_str: logger.warning("Failed to load avatar %s: %s", url, e_str),
        )

    @Slot(object)
    def on_state_changed(self, state: ScreenState):
        self.search_page.render(state)
        self.sync_detail_dialog(state.selected_hero)

    def sync_detail_dialog(self, hero):
        """弹窗只有 hidden / shown(hero) 两种状态，始终与 selected_hero 保持一致"""
        if self.detail_dialog is not None and self.detail_dialog.hero == hero:
            return
        self.close_detail_dialog()
        if hero is None:
            return

        logger.info("Showing details for hero %s (%s)", hero.name, hero.id)
        self.detail_dialog = HeroDetailDialog(
            detail_summary(hero, self.theme, self.locale),
            self.theme,
            avatar_loader=self.load_avatar,
            parent=self,
        )
        self.detail_dialog.finished.connect(self.on_detail_dismissed)
        self.detail_dialog.open()

    def close_detail_dialog(self):
        dialog, self.detail_dialog = self.detail_dialog, None
        if dialog is not None:
            dialog.finished.disconnect(self.on_detail_dismissed)
            dialog.close()
            dialog.deleteLater()

    @Slot(int)
    def on_detail_dismissed(self, _result):
        self.close_detail_dialog()
        self.controller.select_hero(None)

    def closeEvent(self, event):
        self.close_detail_dialog()
        self.thread_pool.clear()
        self.thread_pool.waitForDone(3000)
        self.api.close()
        super().closeEvent(event)
