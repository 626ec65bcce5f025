from collections.abc import Callable
from itertools import count
from logging import Logger
from typing import Any, ClassVar

from fastmcp.utilities.logging import get_logger
from pydantic import BaseModel, ConfigDict, Field

from padhang_theme.shared.errors import HookError

DEFAULT_PRIORITY = 10
DEFAULT_ACCEPTED_ARGS = 1


class Hook(BaseModel):
    """A callback attached to a named filter or action."""

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    callback: Callable[..., Any]
    priority: int = DEFAULT_PRIORITY
    accepted_args: int = Field(default=DEFAULT_ACCEPTED_ARGS, ge=0)
    sequence: int = Field(description="Insertion order, used to keep equal priorities stable.")

    def __call__(self, *args: Any) -> Any:  # pyright: ignore[reportAny]
        return self.callback(*args[: self.accepted_args])


class HookRegistry:
    """Named extension points mapped to ordered handler lists.

    Filters thread a value through their handlers; actions only run them. Handlers run by ascending priority,
    and handlers with the same priority run in the order they were added."""

    hooks: dict[str, list[Hook]]
    logger: Logger

    def __init__(self, logger: Logger | None = None):
        self.hooks = {}
        self.logger = logger or get_logger(name=__name__)
        self._sequence = count()

    def add_filter(
        self, name: str, callback: Callable[..., Any], priority: int = DEFAULT_PRIORITY, accepted_args: int = DEFAULT_ACCEPTED_ARGS
    ) -> None:
        if not callable(callback):
            raise HookError(hook_name=name, message=f"Expected a callable, got {callback!r}")

        if accepted_args < 0:
            raise HookError(hook_name=name, message=f"accepted_args must be zero or more, got {accepted_args}")

        hook = Hook(callback=callback, priority=priority, accepted_args=accepted_args, sequence=next(self._sequence))

        handlers = self.hooks.setdefault(name, [])
        handlers.append(hook)
        handlers.sort(key=lambda handler: (handler.priority, handler.sequence))

        self.logger.debug(f"Added {getattr(callback, '__name__', repr(callback))} to {name} at priority {priority}")

    def add_action(
        self, name: str, callback: Callable[..., Any], priority: int = DEFAULT_PRIORITY, accepted_args: int = DEFAULT_ACCEPTED_ARGS
    ) -> None:
        self.add_filter(name=name, callback=callback, priority=priority, accepted_args=accepted_args)

    def remove_filter(self, name: str, callback: Callable[..., Any], priority: int = DEFAULT_PRIORITY) -> bool:
        handlers = self.hooks.get(name, [])

        for handler in handlers:
            if handler.callback == callback and handler.priority == priority:
                handlers.remove(handler)
                return True

        return False

    def remove_action(self, name: str, callback: Callable[..., Any], priority: int = DEFAULT_PRIORITY) -> bool:
        return self.remove_filter(name=name, callback=callback, priority=priority)

    def has_filter(self, name: str, callback: Callable[..., Any] | None = None) -> bool:
        handlers = self.hooks.get(name, [])

        if callback is None:
            return bool(handlers)

        return any(handler.callback == callback for handler in handlers)

    def has_action(self, name: str, callback: Callable[..., Any] | None = None) -> bool:
        return self.has_filter(name=name, callback=callback)

    def handlers(self, name: str) -> list[Hook]:
        return list(self.hooks.get(name, []))

    def apply_filters(self, name: str, value: Any, *args: Any) -> Any:  # pyright: ignore[reportAny]
        for handler in self.handlers(name):
            value = handler(value, *args)

        return value

    def do_action(self, name: str, *args: Any) -> None:
        for handler in self.handlers(name):
            _ = handler(*args)

    def render_action(self, name: str, *args: Any) -> str:
        """Run an action and collect the markup its handlers return."""
        output: list[str] = []

        for handler in self.handlers(name):
            result = handler(*args)
            if isinstance(result, str):
                output.append(result)

        return "".join(output)
