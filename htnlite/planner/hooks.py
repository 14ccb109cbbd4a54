from dataclasses import dataclass
from htnlite.common.imports.typing import *


@dataclass
class PlannerHooks:
    """
    Optional callbacks the planner invokes while it searches. They are notifications only:
    return values are ignored and they cannot change the outcome of a run.

    :attribute on_task_expand: ``(task_name, depth)`` for every task taken off the pending queue
    :attribute on_method_try: ``(task_name, method_name, depth)`` for every applicable method about to be expanded
    :attribute on_backtrack: ``(task_name, method_name, depth)`` for every method whose subtree failed
    :attribute on_operator_apply: ``(operator_name, state_before, state_after)`` for every applied effect.
        The states are passed by reference and must not be mutated.
    """
    on_task_expand: Optional[Callable[[str, int], None]] = None
    on_method_try: Optional[Callable[[str, str, int], None]] = None
    on_backtrack: Optional[Callable[[str, str, int], None]] = None
    on_operator_apply: Optional[Callable[[str, Any, Any], None]] = None

    def task_expanded(self, task_name: str, depth: int) -> None:
        if self.on_task_expand is not None:
            self.on_task_expand(task_name, depth)

    def method_tried(self, task_name: str, method_name: str, depth: int) -> None:
        if self.on_method_try is not None:
            self.on_method_try(task_name, method_name, depth)

    def backtracked(self, task_name: str, method_name: str, depth: int) -> None:
        if self.on_backtrack is not None:
            self.on_backtrack(task_name, method_name, depth)

    def operator_applied(self, operator_name: str, state_before: Any, state_after: Any) -> None:
        if self.on_operator_apply is not None:
            self.on_operator_apply(operator_name, state_before, state_after)
