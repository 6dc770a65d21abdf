"""Dispatch — выполнение задач в главном или фоновом контексте исполнения.

- ExecutionContext: протокол контекста (is_current / submit)
- EventLoopContext, WorkerPoolContext, WorkerPoolRegistry: реализации
- Dispatcher: main_async_if_needed / global_async_if_needed
"""

from .contexts import (
    DEFAULT_QOS,
    ContextClosedError,
    EventLoopContext,
    ExecutionContext,
    PoolConfig,
    QoSClass,
    WorkerPoolContext,
    WorkerPoolRegistry,
)
from .dispatcher import Dispatcher

__all__ = [
    "DEFAULT_QOS",
    "ContextClosedError",
    "Dispatcher",
    "EventLoopContext",
    "ExecutionContext",
    "PoolConfig",
    "QoSClass",
    "WorkerPoolContext",
    "WorkerPoolRegistry",
]
