# widgets/hero_card.py

from PySide6.QtWidgets import QFrame, QHBoxLayout, QVBoxLayout, QLabel, QGraphicsDropShadowEffect
from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QColor

from hero_explorer.presentation import CardSummary
from hero_explorer.theme import Theme
from hero_explorer.widgets.stat_bar import StatBarWidget
from hero_explorer.widgets.utils import pil_to_qpixmap, placeholder_pixmap


class AvatarLabel(QLabel):
    """圆形头像，外圈为渐变色环"""

    def __init__(self, size: int, ring_colors, alt_text: str = "", parent=None):
        super().__init__(parent)
        self.avatar_size = size
        ring = 3 if size <= 100 else 4
        self.inner_size = size - 2 * ring
        self.setFixedSize(size, size)
        self.setAlignment(Qt.AlignCenter)
        self.setToolTip(alt_text)
        self.setAccessibleName(alt_text)
        self.setStyleSheet(
            f"background: qradialgradient(cx:0.5, cy:0.5, radius:0.5, fx:0.5, fy:0.5, "
            f"stop:0 {ring_colors[0]}, stop:1 {ring_colors[1]}); border-radius: {size // 2}px;"
        )
        self.setPixmap(placeholder_pixmap(self.inner_size, ring_colors[1]))

    def set_image(self, pil_image):
        self.setPixmap(pil_to_qpixmap(pil_image))


class HeroCard(QFrame):
    """
    结果列表中的一行。点击后发出 hero_selected。
    """

    hero_selected = Signal(object)

    def __init__(self, summary: CardSummary, theme: Theme, avatar_loader=None, parent=None):
        super().__init__(parent)
        self.summary = summary
        self.setObjectName("heroCard")
        self.setCursor(Qt.PointingHandCursor)

        border = f"2px solid {theme.gold}" if summary.notable else f"1px solid {theme.track}"
        self.setStyleSheet(f"#heroCard {{ background-color: {summary.background}; border: {border}; border-radius: 16px; }}")

        shadow = QGraphicsDropShadowEffect(self)
        shadow.setBlurRadius(summary.elevation * 2)
        shadow.setOffset(0, summary.elevation // 2)
        shadow.setColor(QColor(0, 0, 0, 120))
        self.setGraphicsEffect(shadow)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(16)

        self.avatar = AvatarLabel(100, summary.ring_colors, summary.avatar_alt)
        layout.addWidget(self.avatar, alignment=Qt.AlignVCenter)

        info_layout = QVBoxLayout()
        info_layout.setSpacing(2)

        self.name_label = QLabel(summary.name)
        font = self.name_label.font()
        font.setPointSize(16)
        font.setBold(True)
        self.name_label.setFont(font)
        self.name_label.setStyleSheet(f"color: {summary.accent_color}; border: none;")
        info_layout.addWidget(self.name_label)

        self.badge_label = None
        if summary.badge:
            self.badge_label = QLabel(summary.badge)
            self.badge_label.setStyleSheet(f"color: {theme.gold}; font-weight: bold; border: none;")
            info_layout.addWidget(self.badge_label)

        info_layout.addSpacing(4)
        self.stat_bars = []
        for bar in summary.bars:
            bar_widget = StatBarWidget(bar, theme)
            self.stat_bars.append(bar_widget)
            info_layout.addWidget(bar_widget)

        layout.addLayout(info_layout, 1)

        if avatar_loader and summary.avatar_url:
            avatar_loader(summary.avatar_url, self.avatar)

    @property
    def hero(self):
        return self.summary.hero

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.LeftButton and self.rect().contains(event.position().toPoint()):
            self.hero_selected.emit(self.summary.hero)
        super().mouseReleaseEvent(event)
