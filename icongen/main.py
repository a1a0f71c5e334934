"""Точка входа: генерация icon.png и icon-maskable.png из логотипа бренда.

Запуск из корня репозитория:  python -m icongen.main
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path

from icongen.controllers.icon_controller import IconController
from icongen.errors import IconError
from icongen.models.icon_model import IconPaths, IconSpec

LOG_LEVELS = {
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warning': logging.WARNING,
    'error': logging.ERROR,
    'critical': logging.CRITICAL,
}


def setup_logging(log_level: str) -> logging.Logger:
    """Настраивает вывод логов в stderr."""
    level = LOG_LEVELS.get(log_level.lower(), logging.INFO)
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    return logging.getLogger('icongen')


def main() -> int:
    """Генерирует обе иконки; 0 при успехе, 1 при любой ошибке."""
    logger = setup_logging('info')
    controller = IconController(spec=IconSpec(), paths=IconPaths.from_root(Path.cwd()))
    try:
        controller.run()
    except IconError as exc:
        logger.error("Ошибка генерации иконок: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
