"""
Execution Contexts — контексты исполнения для dispatch-хелперов

Контекст исполнения умеет две вещи:
- is_current(): вызывается ли код сейчас внутри этого контекста
- submit(fn): поставить fn в очередь контекста и сразу вернуть управление

Реализации:
- EventLoopContext: "главный" контекст на базе asyncio event loop
- WorkerPoolContext: фоновый пул потоков (ThreadPoolExecutor)
- WorkerPoolRegistry: по одному пулу на каждый QoSClass, создаются лениво

Порядок выполнения FIFO в пределах контекста обеспечивается
нижележащим планировщиком (event loop / очередь executor).
"""

import asyncio
import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Final, Protocol, runtime_checkable

logger = logging.getLogger(__name__)

Callback = Callable[[], None]

# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================

# Число потоков в пуле одного QoS класса по умолчанию
DEFAULT_MAX_WORKERS: Final[int] = 4

# Префикс имён потоков пулов
DEFAULT_THREAD_NAME_PREFIX: Final[str] = "epskit"


class QoSClass(str, Enum):
    """Класс приоритета фонового контекста"""

    USER_INTERACTIVE = "user_interactive"
    USER_INITIATED = "user_initiated"
    DEFAULT = "default"
    UTILITY = "utility"
    BACKGROUND = "background"


DEFAULT_QOS: Final[QoSClass] = QoSClass.DEFAULT


@dataclass(frozen=True)
class PoolConfig:
    """
    Конфигурация фоновых пулов.

    Attributes:
        max_workers: Число потоков в пуле каждого QoS класса
        thread_name_prefix: Префикс имён потоков
    """

    max_workers: int = DEFAULT_MAX_WORKERS
    thread_name_prefix: str = DEFAULT_THREAD_NAME_PREFIX

    def __post_init__(self) -> None:
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")
        if not self.thread_name_prefix:
            raise ValueError("thread_name_prefix must not be empty")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ContextClosedError(RuntimeError):
    """Попытка поставить задачу в закрытый контекст исполнения"""


# =============================================================================
# ПРОТОКОЛ
# =============================================================================


@runtime_checkable
class ExecutionContext(Protocol):
    """Контекст исполнения: проверка текущего контекста и постановка задачи"""

    def is_current(self) -> bool:
        ...

    def submit(self, fn: Callback) -> None:
        ...


# =============================================================================
# EVENT LOOP CONTEXT
# =============================================================================


class EventLoopContext:
    """
    Главный контекст на базе asyncio event loop.

    Текущим считается поток, в котором сейчас выполняется этот loop.
    Задачи из других потоков передаются через call_soon_threadsafe.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop):
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        return self._loop

    def is_current(self) -> bool:
        try:
            running = asyncio.get_running_loop()
        except RuntimeError:
            return False
        return running is self._loop

    def submit(self, fn: Callback) -> None:
        """
        Постановка fn в очередь event loop.

        Raises:
            ContextClosedError: Если loop закрыт
        """
        if self._loop.is_closed():
            raise ContextClosedError("event loop is closed")
        try:
            self._loop.call_soon_threadsafe(fn)
        except RuntimeError as error:
            # loop закрыт из другого потока после проверки
            raise ContextClosedError("event loop is closed") from error


# =============================================================================
# WORKER POOL CONTEXT
# =============================================================================


class WorkerPoolContext:
    """
    Фоновый контекст на базе ThreadPoolExecutor.

    Текущим считается любой рабочий поток этого пула. Исключения,
    выброшенные задачей, логируются и не возвращаются вызывающей стороне.
    """

    def __init__(
        self,
        name: str,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ):
        """
        Args:
            name: Имя пула (используется как префикс имён потоков)
            max_workers: Число рабочих потоков
        """
        self.name = name
        self._local = threading.local()
        self._lock = threading.Lock()
        self._closed = False
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix=name,
            initializer=self._mark_worker_thread,
        )

    def _mark_worker_thread(self) -> None:
        self._local.is_worker = True

    @property
    def closed(self) -> bool:
        return self._closed

    def is_current(self) -> bool:
        return getattr(self._local, "is_worker", False)

    def submit(self, fn: Callback) -> None:
        """
        Постановка fn в очередь пула.

        Raises:
            ContextClosedError: Если пул остановлен
        """
        with self._lock:
            if self._closed:
                raise ContextClosedError(f"worker pool {self.name} is shut down")
            future = self._executor.submit(fn)

        future.add_done_callback(self._report_failure)

    def _report_failure(self, future: Future) -> None:
        if future.cancelled():
            return
        error = future.exception()
        if error is not None:
            logger.error("Callback failed on worker pool %s", self.name, exc_info=error)

    def shutdown(self, wait: bool = True) -> None:
        """Остановка пула; уже поставленные задачи выполняются до конца"""
        with self._lock:
            self._closed = True
        self._executor.shutdown(wait=wait)


# =============================================================================
# РЕЕСТР ПУЛОВ ПО QoS
# =============================================================================


class WorkerPoolRegistry:
    """
    Реестр фоновых пулов: один WorkerPoolContext на QoSClass.

    Пулы создаются лениво при первом обращении. Потокобезопасен.
    """

    def __init__(self, config: PoolConfig = PoolConfig()):
        self.config = config
        self._pools: Dict[QoSClass, WorkerPoolContext] = {}
        self._lock = threading.Lock()
        self._closed = False

    def get(self, qos: QoSClass = DEFAULT_QOS) -> WorkerPoolContext:
        """
        Пул для заданного QoS класса.

        Raises:
            ContextClosedError: Если реестр остановлен
        """
        with self._lock:
            if self._closed:
                raise ContextClosedError("worker pool registry is shut down")

            pool = self._pools.get(qos)
            if pool is None:
                pool = WorkerPoolContext(
                    name=f"{self.config.thread_name_prefix}-{qos.value}",
                    max_workers=self.config.max_workers,
                )
                self._pools[qos] = pool
                logger.debug("Created worker pool %s", pool.name)

            return pool

    def shutdown(self, wait: bool = True) -> None:
        """Остановка всех созданных пулов"""
        with self._lock:
            self._closed = True
            pools = list(self._pools.values())

        for pool in pools:
            pool.shutdown(wait=wait)
