"""Delegates: callable wrappers around bound methods, plain functions and lambdas."""

from __future__ import annotations

import copy
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


class IDelegate:
    """Interface shared by every delegate."""

    def invoke(self, *args: Any) -> Any:
        raise NotImplementedError(f"{type(self).__name__} does not define invoke()")

    def clone(self) -> IDelegate | None:
        """A copy of this delegate, or ``None`` when it cannot be copied."""
        return None

    def is_no_dummy(self) -> bool:
        """Whether the delegate does real work when invoked."""
        return True

    def __call__(self, *args: Any) -> Any:
        return self.invoke(*args)


class Delegate(IDelegate, Generic[T]):
    """Calls ``function(instance, *args)``; an unbound delegate returns ``default``."""

    def __init__(
        self,
        instance: T | None = None,
        function: Callable[..., Any] | None = None,
        default: Any = None,
    ) -> None:
        self.instance = instance
        self.function = function
        self.default = default

    def bind(self, instance: T | None, function: Callable[..., Any] | None) -> None:
        self.instance = instance
        self.function = function

    def invoke(self, *args: Any) -> Any:
        if self.instance is not None and self.function is not None:
            return self.function(self.instance, *args)
        return self.default

    def clone(self) -> Delegate[T]:
        return copy.copy(self)

    def __repr__(self) -> str:
        return f"Delegate(instance={self.instance!r}, function={self.function!r})"


class FunctionDelegate(IDelegate):
    """Calls a plain function; with no function set it returns ``default``."""

    def __init__(
        self, function: Callable[..., Any] | None = None, default: Any = None
    ) -> None:
        self.function = function
        self.default = default

    def invoke(self, *args: Any) -> Any:
        if self.function is not None:
            return self.function(*args)
        return self.default

    def clone(self) -> FunctionDelegate:
        return copy.copy(self)

    def __repr__(self) -> str:
        return f"FunctionDelegate({self.function!r})"


class LambdaDelegate(IDelegate):
    """Wraps any callable, closures included."""

    def __init__(self, function: Callable[..., Any]) -> None:
        if not callable(function):
            raise TypeError(f"expected a callable, got {type(function).__name__}")
        self.function = function

    def invoke(self, *args: Any) -> Any:
        return self.function(*args)

    def clone(self) -> LambdaDelegate:
        return copy.copy(self)

    def __repr__(self) -> str:
        return f"LambdaDelegate({self.function!r})"


class UnbindDummy(IDelegate):
    """Placeholder stored by an empty ``AnyDelegate``: does nothing, returns ``default``."""

    def __init__(self, default: Any = None) -> None:
        self.default = default

    def invoke(self, *args: Any) -> Any:
        return self.default

    def is_no_dummy(self) -> bool:
        return False


class AnyDelegate:
    """Holds a copy of any delegate; empty, it holds an ``UnbindDummy``."""

    def __init__(self, delegate: IDelegate | None = None, default: Any = None) -> None:
        self.default = default
        self.delegate: IDelegate = UnbindDummy(default)
        if delegate is not None:
            self.assign(delegate)

    def assign(self, delegate: IDelegate) -> AnyDelegate:
        """Store a copy of ``delegate`` in place of the current one."""
        if not isinstance(delegate, IDelegate):
            raise TypeError(f"expected a delegate, got {type(delegate).__name__}")
        self.delegate = copy.copy(delegate)
        return self

    def invoke(self, *args: Any) -> Any:
        return self.delegate.invoke(*args)

    def __call__(self, *args: Any) -> Any:
        return self.delegate.invoke(*args)

    def __bool__(self) -> bool:
        return self.delegate.is_no_dummy()

    def __repr__(self) -> str:
        return f"AnyDelegate({self.delegate!r})"


def make_lambda_delegate(function: Callable[..., Any]) -> LambdaDelegate:
    """Wrap ``function`` in a ``LambdaDelegate``."""
    return LambdaDelegate(function)