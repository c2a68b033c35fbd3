# widgets/loading_page.py

from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel, QProgressBar
from PySide6.QtCore import Qt


class LoadingPanel(QWidget):
    """
    搜索进行中显示的加载提示。
    """
    def __init__(self, text: str = "", color: str = None):
        super().__init__()

        layout = QVBoxLayout(self)
        layout.setAlignment(Qt.AlignCenter)

        self.status_label = QLabel(text)
        font = self.status_label.font()
        font.setPointSize(12)
        self.status_label.setFont(font)
        self.status_label.setAlignment(Qt.AlignCenter)

        self.progress_bar = QProgressBar()
        self.progress_bar.setRange(0, 0)  # 不确定模式（滚动条动画）
        self.progress_bar.setTextVisible(False)
        self.progress_bar.setFixedWidth(200)
        if color:
            self.progress_bar.setStyleSheet(f"QProgressBar::chunk {{ background-color: {color}; }}")

        layout.addWidget(self.status_label)
        layout.addWidget(self.progress_bar, alignment=Qt.AlignCenter)
        self.setMinimumHeight(200)

    def set_status(self, text: str):
        self.status_label.setText(text)
