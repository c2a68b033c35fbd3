# widgets/hero_detail.py

from PySide6.QtWidgets import QDialog, QVBoxLayout, QLabel, QPushButton, QScrollArea, QWidget, QFrame
from PySide6.QtCore import Qt

from hero_explorer.presentation import DetailSummary
from hero_explorer.theme import Theme
from hero_explorer.widgets.hero_card import AvatarLabel
from hero_explorer.widgets.stat_bar import StatBarWidget


class HeroDetailDialog(QDialog):
    """
    英雄详情弹窗：头像、名称、全部六项能力、ID 和关闭按钮。
    关闭方式（按钮、Esc、窗口关闭）最终都会触发 finished 信号。
    """

    def __init__(self, summary: DetailSummary, theme: Theme, avatar_loader=None, parent=None):
        super().__init__(parent)
        self.summary = summary
        self.setModal(True)
        self.setWindowTitle(summary.name)
        self.setMinimumWidth(420)
        self.setStyleSheet(f"QDialog {{ background-color: {theme.surface}; }}")

        outer_layout = QVBoxLayout(self)
        outer_layout.setContentsMargins(0, 0, 0, 0)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.NoFrame)
        content = QWidget()
        layout = QVBoxLayout(content)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setAlignment(Qt.AlignTop)

        self.avatar = AvatarLabel(150, summary.ring_colors, summary.avatar_alt)
        layout.addWidget(self.avatar, alignment=Qt.AlignHCenter)
        layout.addSpacing(16)

        self.name_label = QLabel(summary.name)
        font = self.name_label.font()
        font.setPointSize(20)
        font.setBold(True)
        self.name_label.setFont(font)
        self.name_label.setAlignment(Qt.AlignCenter)
        self.name_label.setStyleSheet(f"color: {summary.accent_color};")
        layout.addWidget(self.name_label)
        layout.addSpacing(24)

        self.section_label = QLabel(summary.section_title)
        self.section_label.setStyleSheet(f"color: {theme.text_muted}; font-weight: bold; font-size: 14px;")
        self.section_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.section_label)
        layout.addSpacing(8)

        self.stat_bars = []
        for bar in summary.bars:
            bar_widget = StatBarWidget(bar, theme, detail=True)
            self.stat_bars.append(bar_widget)
            layout.addWidget(bar_widget)
        layout.addSpacing(24)

        self.id_label = QLabel(summary.id_text)
        self.id_label.setAlignment(Qt.AlignCenter)
        self.id_label.setStyleSheet(f"color: {theme.text_muted};")
        layout.addWidget(self.id_label)
        layout.addSpacing(24)

        self.close_button = QPushButton(summary.close_text)
        self.close_button.setStyleSheet(
            f"QPushButton {{ background-color: {theme.primary}; color: {theme.text_strong}; border-radius: 8px; padding: 8px; }}"
        )
        self.close_button.clicked.connect(self.reject)
        layout.addWidget(self.close_button)

        scroll.setWidget(content)
        outer_layout.addWidget(scroll)

        if avatar_loader and summary.avatar_url:
            avatar_loader(summary.avatar_url, self.avatar)

    @property
    def hero(self):
        return self.summary.hero
