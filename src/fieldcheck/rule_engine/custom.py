"""Registry of user-supplied validation functions for ``custom`` rules."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from fieldcheck.rule_engine.models import CustomConfig, Outcome, Record

logger = logging.getLogger(__name__)

CustomFunction = Callable[[Any, Record, dict[str, Any]], Outcome | bool]


class CustomFunctionRegistry:
    _functions: dict[str, CustomFunction]

    def __init__(self) -> None:
        self._functions = {}

    def register(
        self, name: str, fn: CustomFunction | None = None
    ) -> CustomFunction | Callable[[CustomFunction], CustomFunction]:
        """Register ``fn`` under ``name``; without ``fn`` returns a decorator."""
        if fn is None:

            def decorator(func: CustomFunction) -> CustomFunction:
                self._functions[name] = func
                return func

            return decorator
        self._functions[name] = fn
        return fn

    def unregister(self, name: str) -> None:
        self._functions.pop(name, None)

    def get(self, name: str) -> CustomFunction | None:
        return self._functions.get(name)

    def names(self) -> list[str]:
        return sorted(self._functions)

    def __contains__(self, name: object) -> bool:
        return name in self._functions

    def validate(self, configuration: dict[str, Any], value: Any, record: Record) -> Outcome:
        """Run the function named by ``functionName``. Unregistered names pass."""
        config = CustomConfig.model_validate(configuration)
        if not config.function_name:
            return Outcome.ok()
        fn = self._functions.get(config.function_name)
        if fn is None:
            return Outcome.ok()

        try:
            result = fn(value, record, config.parameters)
        except Exception as e:
            logger.exception("Custom validation function %s raised", config.function_name)
            return Outcome.fail(f"Custom validation '{config.function_name}' raised: {e}")

        if isinstance(result, Outcome):
            return result
        if result:
            return Outcome.ok()
        return Outcome.fail(f"Custom validation '{config.function_name}' failed")
