"""
Dispatcher — выполнение задачи в нужном контексте

- main_async_if_needed: если вызов уже в главном контексте, fn выполняется
  синхронно; иначе ставится в очередь главного контекста
- global_async_if_needed: то же для фонового пула заданного QoS класса

Оба метода возвращают управление сразу после выполнения или постановки
задачи. Исключения синхронного выполнения пропагируют вызывающей стороне.
"""

import logging
from typing import Optional

from epskit.dispatch.contexts import (
    DEFAULT_QOS,
    Callback,
    ExecutionContext,
    QoSClass,
    WorkerPoolRegistry,
)

logger = logging.getLogger(__name__)


class Dispatcher:
    """
    Маршрутизация задач между главным и фоновыми контекстами.

    Не зависит от конкретного runtime: главный контекст и реестр пулов
    передаются снаружи.
    """

    def __init__(
        self,
        main: ExecutionContext,
        pools: Optional[WorkerPoolRegistry] = None,
    ):
        """
        Args:
            main: Главный контекст исполнения
            pools: Реестр фоновых пулов (default: создаётся автоматически)
        """
        self.main = main
        self.pools = pools or WorkerPoolRegistry()

    def main_async_if_needed(self, fn: Callback) -> None:
        """
        Выполнение fn в главном контексте.

        Args:
            fn: Задача без аргументов
        """
        _run_or_submit(self.main, fn, "main")

    def global_async_if_needed(self, fn: Callback, qos: QoSClass = DEFAULT_QOS) -> None:
        """
        Выполнение fn в фоновом пуле заданного QoS класса.

        Args:
            fn: Задача без аргументов
            qos: Класс приоритета (default: QoSClass.DEFAULT)
        """
        _run_or_submit(self.pools.get(qos), fn, qos.value)

    def shutdown(self, wait: bool = True) -> None:
        """Остановка фоновых пулов (главный контекст не трогается)"""
        self.pools.shutdown(wait=wait)


def _run_or_submit(context: ExecutionContext, fn: Callback, label: str) -> None:
    if context.is_current():
        logger.debug("Running callback inline on %s context", label)
        fn()
    else:
        logger.debug("Scheduling callback on %s context", label)
        context.submit(fn)
