# widgets/stat_bar.py

from PySide6.QtWidgets import QWidget, QHBoxLayout, QLabel, QProgressBar
from PySide6.QtCore import Qt

from hero_explorer.presentation import StatBar
from hero_explorer.theme import Theme


class StatBarWidget(QWidget):
    """
    单项能力条：名称、进度条、数值。
    high 时名称加粗、进度条用渐变色；detail 模式下整行再加背景。
    """

    def __init__(self, bar: StatBar, theme: Theme, detail: bool = False, parent=None):
        super().__init__(parent)
        self.bar = bar

        layout = QHBoxLayout(self)
        if detail and bar.high:
            layout.setContentsMargins(8, 8, 8, 8)
        else:
            layout.setContentsMargins(0, 2, 0, 2)
        layout.setSpacing(8)

        self.name_label = QLabel(bar.label)
        self.name_label.setFixedWidth(100 if detail else 90)
        self.progress = QProgressBar()
        self.progress.setRange(0, 100)
        self.progress.setValue(round(bar.fraction * 100))
        self.progress.setTextVisible(False)
        self.progress.setFixedHeight(10 if detail else 8)
        self.value_label = QLabel(bar.raw)
        self.value_label.setMinimumWidth(30)
        self.value_label.setAlignment(Qt.AlignRight | Qt.AlignVCenter)

        layout.addWidget(self.name_label)
        layout.addWidget(self.progress, 1)
        layout.addWidget(self.value_label)

        self._apply_style(theme, detail)

    def _apply_style(self, theme: Theme, detail: bool):
        bar = self.bar
        radius = 5 if detail else 4
        if bar.high:
            chunk = f"qlineargradient(x1:0, y1:0, x2:1, y2:0, stop:0 {bar.color}, stop:1 #FFFFFF)"
            self.name_label.setStyleSheet(f"color: {theme.text_strong}; font-weight: bold;")
            self.value_label.setStyleSheet(f"color: {bar.color}; font-weight: 800;")
        else:
            chunk = bar.color
            self.name_label.setStyleSheet(f"color: {theme.text_muted};")
            self.value_label.setStyleSheet(f"color: {theme.text_muted}; font-weight: bold;")

        self.progress.setStyleSheet(
            f"QProgressBar {{ background-color: {theme.track}; border: none; border-radius: {radius}px; }}"
            f"QProgressBar::chunk {{ background: {chunk}; border-radius: {radius}px; }}"
        )

        if detail and bar.high:
            self.setAttribute(Qt.WA_StyledBackground, True)
            self.setStyleSheet(f"StatBarWidget {{ background-color: {theme.high_row}; border-radius: 8px; }}")
