"""Step outcomes, step-keyword matching and the scenario/step hook chain.

Hooks are plain callables. A hook signals an error by raising; it may return
a new context object, which replaces the current one, or None to keep it.
Hook errors never stop the remaining hooks from running: they are folded
into the error that the chain returns.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto
from typing import Any


class StepResultStatus(IntEnum):
    """Outcome of a single step."""

    PASSED = 0
    FAILED = 1
    SKIPPED = 2
    UNDEFINED = 3
    PENDING = 4

    def __str__(self) -> str:
        return self.name.lower()


class Keyword(Enum):
    """Keyword a step definition was registered for; NONE matches any step."""

    NONE = auto()
    GIVEN = auto()
    WHEN = auto()
    THEN = auto()


class PickleStepType(Enum):
    """Kind of a compiled scenario step."""

    UNKNOWN = "Unknown"
    CONTEXT = "Context"
    ACTION = "Action"
    OUTCOME = "Outcome"


class StepUndefinedError(Exception):
    """No step definition matches the step."""

    def __init__(self, message: str = "step is undefined"):
        super().__init__(message)


class StepPendingError(Exception):
    """The step's implementation is pending."""

    def __init__(self, message: str = "step implementation is pending"):
        super().__init__(message)


class StepSkippedError(Exception):
    """The step, and the rest of its scenario, are to be skipped."""

    def __init__(self, message: str = "skipped"):
        super().__init__(message)


class _WrappedError(Exception):
    """An error whose message extends another error it still stands for."""

    def __init__(self, message: str, wrapped: BaseException | None):
        super().__init__(message)
        self.wrapped = wrapped


def _wrap(message: str, error: BaseException | None) -> _WrappedError:
    return _WrappedError(message, error)


def _error_is(error: BaseException | None, kind: type[BaseException]) -> bool:
    while error is not None:
        if isinstance(error, kind):
            return True
        error = getattr(error, "wrapped", None)
    return False


def keyword_matches(keyword: Keyword, step_type: PickleStepType) -> bool:
    """Tell whether a definition registered for ``keyword`` may run a step."""
    if keyword is Keyword.NONE:
        return True
    if step_type is PickleStepType.CONTEXT:
        return keyword is Keyword.GIVEN
    if step_type is PickleStepType.ACTION:
        return keyword is Keyword.WHEN
    if step_type is PickleStepType.OUTCOME:
        return keyword is Keyword.THEN
    return True


def should_fail(error: BaseException | None, strict: bool) -> bool:
    """Tell whether an error fails the run; undefined and pending only when strict."""
    if error is None or _error_is(error, StepSkippedError):
        return False
    if _error_is(error, StepUndefinedError) or _error_is(error, StepPendingError):
        return strict
    return True


def step_status(
    error: BaseException | None, scenario_error: BaseException | None
) -> StepResultStatus:
    """Classify a step from its own error and the scenario's earlier error."""
    if _error_is(error, StepPendingError):
        return StepResultStatus.PENDING
    if _error_is(error, StepSkippedError) or (error is None and scenario_error is not None):
        return StepResultStatus.SKIPPED
    if _error_is(error, StepUndefinedError):
        return StepResultStatus.UNDEFINED
    if error is not None:
        return StepResultStatus.FAILED
    return StepResultStatus.PASSED


BeforeScenarioHook = Callable[[Any, Any], Any]
BeforeStepHook = Callable[[Any, Any], Any]
AfterStepHook = Callable[[Any, Any, StepResultStatus, "BaseException | None"], Any]
AfterScenarioHook = Callable[[Any, Any, "BaseException | None"], Any]


def _combine(hook_error: Exception, error: BaseException | None) -> BaseException:
    if error is None:
        return hook_error
    return _wrap(f"{hook_error}, {error}", error)


@dataclass
class HookChain:
    """Ordered scenario and step hooks, run with their errors combined."""

    before_scenario: list[BeforeScenarioHook] = field(default_factory=list)
    before_step: list[BeforeStepHook] = field(default_factory=list)
    after_step: list[AfterStepHook] = field(default_factory=list)
    after_scenario: list[AfterScenarioHook] = field(default_factory=list)

    def run_before_scenario(
        self, ctx: Any, scenario: Any
    ) -> tuple[Any, BaseException | None]:
        """Run the before-scenario hooks; return the context and any error."""
        error: BaseException | None = None
        for hook in self.before_scenario:
            try:
                new_ctx = hook(ctx, scenario)
            except Exception as hook_error:
                error = _combine(hook_error, error)
                new_ctx = None
            if new_ctx is not None:
                ctx = new_ctx
        if error is not None:
            error = _wrap(f"before scenario hook failed: {error}", error)
        return ctx, error

    def run_before_step(
        self, ctx: Any, step: Any, error: BaseException | None
    ) -> tuple[Any, BaseException | None]:
        """Run the before-step hooks on top of an existing error."""
        hooks_failed = False
        for hook in self.before_step:
            try:
                new_ctx = hook(ctx, step)
            except Exception as hook_error:
                hooks_failed = True
                error = _combine(hook_error, error)
                new_ctx = None
            if new_ctx is not None:
                ctx = new_ctx
        if hooks_failed:
            error = _wrap(f"before step hook failed: {error}", error)
        return ctx, error

    def run_after_step(
        self,
        ctx: Any,
        step: Any,
        status: StepResultStatus,
        error: BaseException | None,
    ) -> tuple[Any, BaseException | None]:
        """Run the after-step hooks, each seeing the error gathered so far."""
        for hook in self.after_step:
            try:
                new_ctx = hook(ctx, step, status, error)
            except Exception as hook_error:
                error = _combine(hook_error, error)
                new_ctx = None
            if new_ctx is not None:
                ctx = new_ctx
        return ctx, error

    def run_after_scenario(
        self, ctx: Any, scenario: Any, last_error: BaseException | None
    ) -> tuple[Any, BaseException | None]:
        """Run the after-scenario hooks with the last step's error."""
        error = last_error
        hooks_failed = False
        is_step_error = True
        for hook in self.after_scenario:
            try:
                new_ctx = hook(ctx, scenario, error)
            except Exception as hook_error:
                hooks_failed = True
                new_ctx = None
                if error is None:
                    is_step_error = False
                    error = hook_error
                else:
                    if is_step_error:
                        error = _wrap(f"step error: {error}", error)
                        is_step_error = False
                    error = _combine(hook_error, error)
            if new_ctx is not None:
                ctx = new_ctx
        if hooks_failed:
            error = _wrap(f"after scenario hook failed: {error}", error)
        return ctx, error