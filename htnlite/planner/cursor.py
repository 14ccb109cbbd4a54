from htnlite.common.imports.typing import *
from htnlite.domain.method import Method
from htnlite.domain.operators import Operator
from htnlite.domain.task import CompoundTask


class ChoicePoint:
    """
    A compound task whose methods are still being tried.

    :param task: The compound task being decomposed
    :param remaining: Pending task names that followed the compound task in the queue
    :param state: State the compound task was reached in; every method is tried against it
    :param depth: Depth at which the compound task was expanded
    :param plan_length: Length of the plan when the task was reached, used to rewind it
    """

    def __init__(self,
                 task: CompoundTask,
                 remaining: Tuple[str, ...],
                 state: Any,
                 depth: int,
                 plan_length: int):
        self.task = task
        self.remaining = remaining
        self.state = state
        self.depth = depth
        self.plan_length = plan_length
        # Index of the next method to examine
        self.method_index = 0
        # Method whose subtree is currently being explored
        self.current_method = None

    def next_method(self) -> Optional[Method]:
        """Advance to the next method, in registration order, whose condition holds."""
        methods = self.task.methods
        while self.method_index < len(methods):
            method = methods[self.method_index]
            self.method_index += 1
            if method.applicable(self.state):
                self.current_method = method
                return method
        self.current_method = None
        return None


class Cursor:
    """
    Keeps track of the current position in the search: the pending task queue, the
    simulated state, the depth and the plan built so far, plus the stack of choice
    points to backtrack to.
    """

    def __init__(self, tasks: Sequence[str] = (), state: Any = None):
        # Task names still to be resolved, front first
        self.queue = tuple(tasks)
        # Simulated state reached so far
        self.state = state
        self.depth = 0
        # Operators applied so far
        self.plan = []
        # Stack for backtracking [ChoicePoint]
        self.stack = []

    def pop_task(self) -> str:
        task_name = self.queue[0]
        self.queue = self.queue[1:]
        return task_name

    def advance(self, operator: Operator, new_state: Any) -> None:
        """Record an applied operator and move forward."""
        self.plan.append(operator)
        self.state = new_state
        self.depth += 1

    def push_context(self, task: CompoundTask) -> ChoicePoint:
        """Push a choice point for ``task`` before any of its methods is tried."""
        choice = ChoicePoint(task, self.queue, self.state, self.depth, len(self.plan))
        self.stack.append(choice)
        return choice

    def expand(self, choice: ChoicePoint, method: Method) -> None:
        """Splice the method's subtasks in front of whatever followed its task."""
        self.queue = method.subtasks + choice.remaining
        self.state = choice.state
        self.depth = choice.depth + 1

    def rewind(self, choice: ChoicePoint) -> None:
        """Drop every operator appended since ``choice`` was reached."""
        del self.plan[choice.plan_length:]

    def pop_context(self) -> Optional[ChoicePoint]:
        if not self.stack:
            return None
        return self.stack.pop()
