import logging
from typing import Any, Dict


def setup_logger(level: int = logging.INFO) -> logging.Logger:
    """
    Создаёт и настраивает корневой логгер проекта ``kmbench``.

    Логи пишутся в stderr, чтобы не смешиваться с таблицами в stdout.

    :param level: минимальный уровень логирования
    :return: настроенный экземпляр :class:`logging.Logger`
    """
    logger = logging.getLogger("kmbench")
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "[%(asctime)s] %(levelname)s: %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    # Чтобы сообщения не дублировались через root-логгер
    logger.propagate = False

    return logger


def format_case_prefix(meta: Dict[str, Any]) -> str:
    """
    Формирует текстовый префикс для логов по параметрам тестового случая.

    Ожидается словарь с ключами ``k``, ``dimensions`` и ``size``.
    """
    return f"[k={meta['k']} D={meta['dimensions']} N={meta['size']}]"
