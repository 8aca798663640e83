"""Shared fixtures for tool registration tests."""

from collections.abc import Awaitable, Callable
from typing import Any, TypeAlias
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastmcp import Context

ToolFn: TypeAlias = Callable[..., Awaitable[Any]]


class FakeApp:
    """Minimal stand-in for FastMCP app to capture registered tools."""

    def __init__(self) -> None:
        self.tools: dict[str, ToolFn] = {}
        self.annotations: dict[str, dict[str, Any]] = {}

    def tool(
        self,
        *,
        name: str,
        description: str,
        annotations: dict[str, Any] | None = None,
    ) -> Callable[[ToolFn], ToolFn]:
        """Register a tool by name and return a decorator that captures the function."""

        def _decorator(func: ToolFn) -> ToolFn:
            _ = description
            self.tools[name] = func
            self.annotations[name] = annotations or {}
            return func

        return _decorator


@pytest.fixture
def fake_app() -> FakeApp:
    """Return an empty FakeApp."""
    return FakeApp()


@pytest.fixture
def mock_ctx() -> Context:
    """Return a Context-like AsyncMock for tool logging."""
    ctx = MagicMock(spec=Context)
    ctx.info = AsyncMock()
    ctx.warning = AsyncMock()
    ctx.error = AsyncMock()
    return ctx
