"""Точка входа в приложение предпросмотра идентиконов."""
from identicon.app import IdenticonApp
from identicon.config.loader import get_config
from identicon.core.logging_config import setup_logging


def main() -> None:
    """Загружает конфигурацию, создаёт и запускает главное окно приложения."""
    config = get_config()
    setup_logging(level=config.log_level, use_json=config.log_json)
    app = IdenticonApp(config)
    app.mainloop()


if __name__ == "__main__":
    main()
