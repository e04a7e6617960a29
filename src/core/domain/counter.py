"""
Counter — сокрытие данных (data hiding)

Состояние (_count) доступно только через read-only property и
единственный мутатор increment(). Инвариантов нет: счётчик не ограничен.
"""

import logging

logger = logging.getLogger(__name__)


class Counter:
    """Счётчик с закрытым состоянием."""

    def __init__(self):
        self._count = 0

    @property
    def count(self) -> int:
        return self._count

    def increment(self) -> int:
        """
        Увеличение счётчика на единицу.

        Returns:
            Новое значение счётчика
        """
        self._count += 1
        logger.debug("counter incremented to %d", self._count)
        return self._count

    def __repr__(self) -> str:
        return f"Counter(count={self._count})"
