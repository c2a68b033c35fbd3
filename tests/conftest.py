import os
import time

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from hero_explorer.models import ApiResponse, Hero


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


class SyncThreadPool(object):
    """代替 QThreadPool，在当前线程立即执行 Worker"""

    def __init__(self):
        self.started = []

    def start(self, worker):
        self.started.append(worker)
        worker.run()

    def clear(self):
        pass

    def waitForDone(self, msecs=-1):
        return True


class DeferredThreadPool(object):
    """收集 Worker，由测试决定何时、以何种顺序执行"""

    def __init__(self):
        self.pending = []

    def start(self, worker):
        self.pending.append(worker)

    def run(self, index):
        self.pending[index].run()


@pytest.fixture
def sync_pool():
    return SyncThreadPool()


@pytest.fixture
def deferred_pool():
    return DeferredThreadPool()


def make_hero(hero_id="70", name="Batman", value="100", **stats):
    powerstats = {name_: value for name_ in ("intelligence", "strength", "speed", "durability", "power", "combat")}
    powerstats.update(stats)
    return Hero.model_validate({
        "id": hero_id,
        "name": name,
        "powerstats": powerstats,
        "image": {"url": f"https://www.superherodb.com/pictures2/portraits/10/100/{hero_id}.jpg"},
    })


def make_response(*heroes, status="success"):
    return ApiResponse.model_validate({
        "response": status,
        "results-for": heroes[0].name if heroes else "",
        "results": [hero.model_dump() for hero in heroes],
    })


@pytest.fixture
def batman():
    return make_hero()


def wait_until(app, predicate, timeout=5.0):
    """处理事件循环直到 predicate 成立，跨线程的信号需要事件循环投递"""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        app.processEvents()
        if predicate():
            return True
        time.sleep(0.01)
    app.processEvents()
    return predicate()
