"""Provider dispatch use case: route an operation to a provider module."""

from __future__ import annotations

import asyncio
import inspect
import time
from collections.abc import Callable
from typing import Any

import structlog

from vegagate.domain.ports import ProviderContextFactoryPort, ProviderRegistryPort
from vegagate.domain.providers import (
    OPERATIONS,
    Operation,
    OperationNotSupportedError,
    ProviderCallError,
    ProviderContext,
    ProviderError,
    ProviderLoadError,
    get_export,
)

log = structlog.get_logger(__name__)

KwargsBuilder = Callable[[ProviderContext, asyncio.Event], dict[str, Any]]


class _CallTimedOut(Exception):
    """Internal marker: the gateway, not the provider, gave up on the call."""


class ProviderDispatcher:
    """Translates gateway operations into provider function calls.

    Flow per call:
        1. Resolve ``<providers_dir>/<provider_id>/<file>`` (404 if absent)
        2. Load the module fresh from disk
        3. Look up the export (501 if an optional export is missing)
        4. Build a fresh context and cancellation event
        5. Invoke, bounded by ``call_timeout`` (0 = unbounded)
        6. Return the provider's result untouched

    Errors from steps 2 and 5 surface as ``ProviderLoadError`` or
    ``ProviderCallError``; nothing a provider raises escapes as anything
    else.
    """

    def __init__(
        self,
        registry: ProviderRegistryPort,
        context_factory: ProviderContextFactoryPort,
        call_timeout: float = 0.0,
    ) -> None:
        self.registry = registry
        self.context_factory = context_factory
        self._call_timeout = call_timeout

    async def catalog(self, provider_id: str) -> Any:
        """Catalog feeds and genres.

        Providers either export ``get_catalog()`` or plain ``catalog`` and
        ``genres`` module attributes.
        """
        spec = OPERATIONS[Operation.CATALOG]
        path = self.registry.resolve(provider_id, spec)
        module = self._load(path)

        get_catalog = get_export(module, spec.export, required=False)
        if get_catalog is None:
            return {
                "catalog": getattr(module, "catalog", None) or [],
                "genres": getattr(module, "genres", None) or [],
            }
        return await self._invoke(
            provider_id, Operation.CATALOG, get_catalog, {}, asyncio.Event()
        )

    async def posts(self, provider_id: str, filter: Any, page: Any = 1) -> Any:
        return await self._dispatch(
            provider_id,
            Operation.POSTS,
            lambda context, signal: {
                "filter": filter,
                "page": page,
                "provider_value": provider_id,
                "signal": signal,
                "context": context,
            },
        )

    async def search(self, provider_id: str, query: Any, page: Any = 1) -> Any:
        return await self._dispatch(
            provider_id,
            Operation.SEARCH,
            lambda context, signal: {
                "search_query": query,
                "page": page,
                "provider_value": provider_id,
                "signal": signal,
                "context": context,
            },
        )

    async def meta(self, provider_id: str, link: Any) -> Any:
        return await self._dispatch(
            provider_id,
            Operation.META,
            lambda context, _signal: {"link": link, "context": context},
        )

    async def stream(self, provider_id: str, link: Any, type: Any) -> Any:
        return await self._dispatch(
            provider_id,
            Operation.STREAM,
            lambda context, signal: {
                "link": link,
                "type": type,
                "signal": signal,
                "context": context,
            },
        )

    async def episodes(self, provider_id: str, url: Any) -> Any:
        return await self._dispatch(
            provider_id,
            Operation.EPISODES,
            lambda context, _signal: {"url": url, "context": context},
        )

    async def _dispatch(
        self, provider_id: str, operation: Operation, build_kwargs: KwargsBuilder
    ) -> Any:
        spec = OPERATIONS[operation]
        path = self.registry.resolve(provider_id, spec)
        module = self._load(path)

        fn = get_export(module, spec.export, required=spec.required)
        if fn is None:
            log.info(
                "provider_operation_not_supported",
                provider_id=provider_id,
                operation=operation.value,
            )
            if operation is Operation.SEARCH:
                raise OperationNotSupportedError(
                    "Search not supported by this provider"
                )
            raise OperationNotSupportedError(
                f"Operation '{operation.value}' not supported by this provider"
            )

        signal = asyncio.Event()
        try:
            context = self.context_factory()
        except Exception as e:
            log.error(
                "provider_context_failed",
                provider_id=provider_id,
                operation=operation.value,
                exc_info=True,
            )
            raise ProviderCallError(_message(e)) from e

        return await self._invoke(
            provider_id, operation, fn, build_kwargs(context, signal), signal
        )

    def _load(self, path: Any) -> Any:
        try:
            return self.registry.load(path)
        except ProviderError:
            raise
        except Exception as e:
            raise ProviderLoadError(_message(e)) from e

    async def _invoke(
        self,
        provider_id: str,
        operation: Operation,
        fn: Callable[..., Any],
        kwargs: dict[str, Any],
        signal: asyncio.Event,
    ) -> Any:
        start = time.perf_counter()
        try:
            result = await self._bounded(_call(fn, kwargs), signal)
        except _CallTimedOut:
            log.error(
                "provider_call_timeout",
                provider_id=provider_id,
                operation=operation.value,
                timeout_seconds=self._call_timeout,
            )
            raise ProviderCallError(
                f"Provider call timed out after {self._call_timeout:g}s"
            ) from None
        except Exception as e:
            log.error(
                "provider_call_failed",
                provider_id=provider_id,
                operation=operation.value,
                error_type=type(e).__name__,
                error_message=str(e),
                exc_info=True,
            )
            raise ProviderCallError(_message(e)) from e

        log.info(
            "provider_call",
            provider_id=provider_id,
            operation=operation.value,
            duration_ms=round((time.perf_counter() - start) * 1000.0, 2),
        )
        return result

    async def _bounded(self, coro: Any, signal: asyncio.Event) -> Any:
        """Await ``coro``, giving up after ``call_timeout`` seconds.

        On expiry the call's ``signal`` is set before its task is cancelled,
        so providers polling the event can stop early. An exception raised by
        the provider itself (including its own TimeoutError) propagates as is.
        """
        if self._call_timeout <= 0:
            return await coro

        task = asyncio.ensure_future(coro)
        try:
            done, _ = await asyncio.wait({task}, timeout=self._call_timeout)
        except asyncio.CancelledError:
            task.cancel()
            raise
        if not done:
            signal.set()
            task.cancel()
            raise _CallTimedOut
        return task.result()


async def _call(fn: Callable[..., Any], kwargs: dict[str, Any]) -> Any:
    """Run a provider function without blocking the event loop.

    Coroutine functions are awaited directly; plain functions run in a
    worker thread. An awaitable returned by a plain function is awaited too.
    """
    if inspect.iscoroutinefunction(fn):
        result = await fn(**kwargs)
    else:
        result = await asyncio.to_thread(fn, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result


def _message(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__
