# worker.py
import logging

from PySide6.QtCore import QObject, Signal, Slot, QRunnable

logger = logging.getLogger(__name__)


class WorkerSignals(QObject):
    """定义工作线程可发出的信号"""
    finished = Signal()
    error = Signal(str)
    result = Signal(object)


class Worker(QRunnable):
    """
    通用工作线程，可运行任何函数并发出信号。
    信号对象在创建 Worker 的线程（UI 线程）中，槽函数因此在 UI 线程执行。
    """
    def __init__(self, fn, *args, name: str = None, **kwargs):
        super().__init__()
        self.fn = fn
        self.name = name or getattr(fn, "__name__", repr(fn))
        self.args = args
        self.kwargs = kwargs
        self.signals = WorkerSignals()

    @Slot()
    def run(self):
        try:
            result = self.fn(*self.args, **self.kwargs)
        except Exception as e:
            logger.warning("Task %s failed: %s", self.name, e, exc_info=logger.isEnabledFor(logging.DEBUG))
            # 部分 httpx 异常的 str() 为空
            self.signals.error.emit(str(e) or type(e).__name__)
        else:
            self.signals.result.emit(result)
        finally:
            self.signals.finished.emit()
