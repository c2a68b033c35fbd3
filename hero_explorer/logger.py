# logger.py
import logging
from logging.handlers import TimedRotatingFileHandler

from rich.logging import RichHandler

from hero_explorer.settings import Settings

# 配置日志格式
log_format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

ROOT_LOGGER = 'hero_explorer'


def setup_logging(settings: Settings) -> logging.Logger:
    """控制台用 rich 输出，文件按天分割，错误日志单独保存"""
    logger = logging.getLogger(ROOT_LOGGER)
    if logger.handlers:
        return logger

    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.INFO

    settings.log_dir.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(log_format)

    client_handler = TimedRotatingFileHandler(
        settings.log_dir / 'client.log',
        when='D',
        interval=1,
        backupCount=30,
        encoding='utf-8',
        utc=False,
    )
    error_handler = TimedRotatingFileHandler(
        settings.log_dir / 'error.log',
        when='D',
        interval=1,
        backupCount=30,
        encoding='utf-8',
        utc=False,
    )
    client_handler.setFormatter(formatter)
    error_handler.setFormatter(formatter)
    client_handler.setLevel(level)
    error_handler.setLevel(logging.ERROR)

    console_handler = RichHandler(rich_tracebacks=True, show_path=False)
    console_handler.setLevel(level)

    logger.addHandler(client_handler)
    logger.addHandler(error_handler)
    logger.addHandler(console_handler)
    logger.setLevel(level)
    # httpx 的请求日志会带上 token
    logging.getLogger('httpx').setLevel(logging.WARNING)
    return logger
