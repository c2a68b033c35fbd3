# main_gui.py
import logging
import sys

from PySide6.QtWidgets import QApplication

from hero_explorer.api_client import ApiClient
from hero_explorer.logger import setup_logging
from hero_explorer.main_window import MainWindow
from hero_explorer.settings import SettingsError, TOKEN_ENV, load_settings


def main():
    try:
        settings = load_settings()
    except SettingsError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(2)

    logger = setup_logging(settings)
    if not settings.access_token:
        logger.warning("No API access token configured; set api.access_token in config.yaml or %s", TOKEN_ENV)

    app = QApplication(sys.argv)

    api_client = ApiClient(settings.base_url, settings.access_token, timeout=settings.timeout)

    window = MainWindow(api_client, settings)
    window.resize(480, 760)
    window.show()
    logging.getLogger(__name__).info("Hero Explorer started (theme=%s, locale=%s)", settings.theme, settings.locale)

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
