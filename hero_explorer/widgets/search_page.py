# widgets/search_page.py

from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QPushButton, QScrollArea, QFrame
from PySide6.QtCore import Qt, Signal, Slot

from hero_explorer.controller import ScreenState
from hero_explorer.presentation import card_summary
from hero_explorer.theme import Locale, Theme
from hero_explorer.widgets.hero_card import HeroCard
from hero_explorer.widgets.loading_page import LoadingPanel


class SearchPage(QWidget):
    """
    搜索页：搜索框、加载提示、错误提示、空结果提示和英雄卡片列表。
    页面本身不保存状态，只根据 ScreenState 重新渲染。
    """

    query_changed = Signal(str)
    search_requested = Signal(str)
    hero_selected = Signal(object)

    def __init__(self, theme: Theme, locale: Locale, card_full_stats: bool = False, avatar_loader=None):
        super().__init__()
        self.theme = theme
        self.locale = locale
        self.card_full_stats = card_full_stats
        self.avatar_loader = avatar_loader
        self.cards = []
        self._rendered_heroes = ()

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(16, 16, 16, 16)

        self.title_label = QLabel(locale.title)
        font = self.title_label.font()
        font.setPointSize(22)
        font.setBold(True)
        self.title_label.setFont(font)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(f"color: {theme.primary_dark}; padding: 16px 0;")
        main_layout.addWidget(self.title_label)

        main_layout.addWidget(self._create_search_bar())

        self.loading_panel = LoadingPanel(locale.searching, theme.primary_dark)
        self.loading_panel.setVisible(False)
        main_layout.addWidget(self.loading_panel)

        self.error_label = QLabel()
        self.error_label.setWordWrap(True)
        self.error_label.setAlignment(Qt.AlignCenter)
        self.error_label.setStyleSheet(
            f"background-color: {theme.error_background}; color: {theme.error_text}; padding: 16px; border-radius: 8px;"
        )
        self.error_label.setVisible(False)
        main_layout.addWidget(self.error_label)

        self.empty_label = QLabel(locale.empty_state)
        self.empty_label.setAlignment(Qt.AlignCenter)
        self.empty_label.setMinimumHeight(200)
        self.empty_label.setStyleSheet("color: gray;")
        self.empty_label.setVisible(False)
        main_layout.addWidget(self.empty_label)

        self.count_label = QLabel()
        self.count_label.setStyleSheet(f"color: {theme.text_muted}; font-weight: 500; padding: 8px 0;")
        self.count_label.setVisible(False)
        main_layout.addWidget(self.count_label)

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setFrameShape(QFrame.NoFrame)
        self.list_container = QWidget()
        self.list_layout = QVBoxLayout(self.list_container)
        self.list_layout.setContentsMargins(0, 8, 0, 8)
        self.list_layout.setSpacing(12)
        self.list_layout.addStretch()
        self.scroll_area.setWidget(self.list_container)
        self.scroll_area.setVisible(False)
        main_layout.addWidget(self.scroll_area, 1)

        main_layout.addStretch()

    def _create_search_bar(self):
        bar = QFrame()
        bar.setObjectName("searchBar")
        bar.setStyleSheet(f"#searchBar {{ background-color: {self.theme.surface}; border-radius: 16px; }}")
        layout = QHBoxLayout(bar)
        layout.setContentsMargins(16, 8, 16, 8)

        self.search_input = QLineEdit()
        self.search_input.setPlaceholderText(self.locale.placeholder)
        self.search_button = QPushButton(self.locale.search_button)
        self.search_button.setEnabled(False)
        self.search_button.setStyleSheet(
            f"QPushButton {{ background-color: {self.theme.primary_dark}; color: white; border-radius: 8px; padding: 6px 14px; }}"
            "QPushButton:disabled { background-color: #9E9E9E; }"
        )

        layout.addWidget(self.search_input, 1)
        layout.addWidget(self.search_button)

        self.search_input.textChanged.connect(self.query_changed)
        self.search_button.clicked.connect(self._on_search_clicked)
        # 绑定回车信号到按钮点击，按钮禁用时 click() 不会触发
        self.search_input.returnPressed.connect(self.search_button.click)
        return bar

    @Slot()
    def _on_search_clicked(self):
        self.search_requested.emit(self.search_input.text())

    @Slot(object)
    def render(self, state: ScreenState):
        if self.search_input.text() != state.query:
            self.search_input.setText(state.query)
        self.search_button.setEnabled(state.can_search)

        self.loading_panel.setVisible(state.is_loading)

        self.error_label.setText(state.error_message or "")
        self.error_label.setVisible(state.error_message is not None)

        self.empty_label.setVisible(
            not state.heroes and not state.is_loading and state.has_searched and state.error_message is None
        )

        if state.heroes != self._rendered_heroes:
            self._rebuild_cards(state.heroes)
        has_heroes = bool(state.heroes)
        self.count_label.setText(self.locale.found_count.format(count=len(state.heroes)))
        self.count_label.setVisible(has_heroes)
        self.scroll_area.setVisible(has_heroes)

    def _rebuild_cards(self, heroes):
        for card in self.cards:
            self.list_layout.removeWidget(card)
            card.deleteLater()
        self.cards = []

        for index, hero in enumerate(heroes):
            summary = card_summary(hero, self.theme, self.locale, full_stats=self.card_full_stats)
            card = HeroCard(summary, self.theme, avatar_loader=self.avatar_loader)
            card.hero_selected.connect(self.hero_selected)
            self.list_layout.insertWidget(index, card)
            self.cards.append(card)
        self._rendered_heroes = heroes
        self.scroll_area.verticalScrollBar().setValue(0)
