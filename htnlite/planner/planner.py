import logging
import time

from htnlite.common.imports.typing import *
from htnlite.domain.domain import Domain
from htnlite.domain.domain import TaskKind
from htnlite.domain.operators import Operator
from htnlite.exceptions import MaxDepthExceededException
from htnlite.planner.cursor import ChoicePoint
from htnlite.planner.cursor import Cursor
from htnlite.planner.hooks import PlannerHooks
from htnlite.planner.planner_logger import PlannerLogger
from htnlite.planner.result import FailureReason
from htnlite.planner.result import PlanningFailure
from htnlite.planner.result import PlanningResult
from htnlite.planner.result import PlanningSuccess
from htnlite.validation import find_unknown_task
from htnlite.validation import validate_domain
from htnlite.validation import validate_tasks

# Maximum search depth before the planner gives up with MaxDepthExceededException.
MAX_RECURSION_DEPTH = 1000


class HtnPlanner:
    """
    This planner implements HTN (Hierarchical Task Network) planning as a depth-first
    search with backtracking over the methods of compound tasks.

    Goals are resolved left to right. A compound task is replaced by the subtasks of its
    first applicable method; an operator is checked against the simulated state and its
    effect produces the next state. When a branch dead-ends the planner returns to the
    most recent compound task and tries its next method. The first complete plan found
    is returned.
    """

    def __init__(self,
                 domain: Domain,
                 initial_state: Any = None,
                 goals: Sequence[str] = None,
                 hooks: PlannerHooks = None,
                 validate_input: bool = False,
                 max_depth: int = MAX_RECURSION_DEPTH,
                 enable_logging: bool = False,
                 log_file: str = None,
                 log_level: int = logging.INFO,
                 console_output: bool = False):
        """
        Initialize the HTN planner.
        :param domain: The operators and compound tasks to plan with
        :param initial_state: World state planning starts from. It is never mutated.
        :param goals: Top-level task names, resolved left to right
        :param hooks: Optional search notifications
        :param validate_input: Validate the goal list and the domain before each run
        :param max_depth: Depth past which the search raises MaxDepthExceededException
        :param enable_logging: Log search events through a PlannerLogger
        :param log_file: File to write logs to when logging is enabled
        :param log_level: Logging level
        :param console_output: Also log to the console
        """
        self.domain = domain
        self.initial_state = initial_state
        self.goals = []
        self.hooks = hooks if hooks is not None else PlannerHooks()

        # Planning options
        self.validate = validate_input
        self.max_depth = max_depth
        self.enable_logging = enable_logging

        # Setup logger
        if self.enable_logging:
            self.logger = PlannerLogger(log_file, log_level, console_output)
            self.logger.info("HTN Planner initialized")
            self.logger.info(f"Domain has {len(domain.operators)} operators and "
                             f"{len(domain.compound_tasks)} compound tasks")
        else:
            self.logger = None

        self.planning_start_time = None

        if goals is not None:
            self.add_tasks(goals)

    def add_tasks(self, tasks: Union[str, Sequence[str]]) -> None:
        """
        Append goal task names to the planner.
        :param tasks: A task name or a list of task names.
        :return: None
        """
        if isinstance(tasks, str):
            tasks = [tasks]
        if self.validate:
            validate_tasks(tasks)
        self.goals.extend(tasks)

        if self.enable_logging:
            self.logger.info(f"Added tasks: {list(tasks)}")

    def clear_tasks(self):
        """Clear all goal tasks."""
        self.goals = []

    def print_network(self) -> None:
        """
        Print the domain as a tree of tasks, methods and subtasks.
        :return: None
        """
        strings = []
        tab = '\t'
        header = "PLANNER NETWORK"
        border = '#' * (len(header) + 4)
        print(border)
        print('# ' + header + ' #')
        print(border + '\n')

        for name in self.domain.operators:
            strings.append(0 * tab + f'Operator({name})')
        for task_name, task in self.domain.compound_tasks.items():
            strings.append(0 * tab + f'Task({task_name}, num_methods={len(task.methods)})')
            for method in task.methods:
                strings.append(1 * tab + f'Method({method.name})')
                for subtask in method.subtasks:
                    kind, _ = self.domain.lookup(subtask)
                    strings.append(2 * tab + f'{kind.value.title()}({subtask})')
        for s in strings:
            print(s)
        print('\n')

    def plan(self) -> PlanningResult:
        """
        Execute the planning process.
        :return: PlanningSuccess carrying the plan, or PlanningFailure carrying the reason
            and the task the failure is attributed to.
        """
        self.planning_start_time = time.time()
        goals = tuple(self.goals)

        if self.validate:
            validate_tasks(list(goals))
            validate_domain(self.domain)

        if self.enable_logging:
            self.logger.info(f"Starting planning for goals {list(goals)}")

        unknown_task = find_unknown_task(goals, self.domain)
        if unknown_task is not None:
            return self._fail(FailureReason.UNKNOWN_TASK, unknown_task)

        outcome = self._search(goals, self.initial_state)
        if outcome is None:
            return self._diagnose(goals)

        plan, final_state = outcome
        if self.enable_logging:
            self.logger.log_plan_complete(plan)
            self.logger.info(f"Planning took {time.time() - self.planning_start_time:.4f}s")
        return PlanningSuccess(plan, final_state)

    def _search(self, goals: Tuple[str, ...], state: Any) -> Optional[Tuple[List[Operator], Any]]:
        """
        Depth-first search over decompositions of ``goals``.
        :return: The plan and the final simulated state, or None when every branch fails.
        """
        cursor = Cursor(goals, state)
        while True:
            if cursor.depth > self.max_depth:
                if self.enable_logging:
                    self.logger.error(f"Maximum depth {self.max_depth} exceeded")
                raise MaxDepthExceededException(self.max_depth)

            if not cursor.queue:
                return list(cursor.plan), cursor.state

            task_name = cursor.pop_task()
            self.hooks.task_expanded(task_name, cursor.depth)
            if self.enable_logging:
                self.logger.log_task_expansion(task_name, cursor.depth)

            kind, element = self.domain.lookup(task_name)
            if kind == TaskKind.OPERATOR:
                success = self._apply_operator(cursor, element)
            elif kind == TaskKind.COMPOUND:
                success = self._try_next_method(cursor, cursor.push_context(element))
            else:
                if self.enable_logging:
                    self.logger.warning(f"Unknown task {task_name}")
                success = False

            if not success and not self._backtrack(cursor):
                return None

    def _apply_operator(self, cursor: Cursor, operator: Operator) -> bool:
        state_before = cursor.state
        if not operator.applicable(state_before):
            if self.enable_logging:
                self.logger.log_operator_rejected(operator.name)
            return False

        state_after = operator.apply(state_before)
        self.hooks.operator_applied(operator.name, state_before, state_after)
        if self.enable_logging:
            self.logger.log_operator_application(operator.name, state_before, state_after)
        cursor.advance(operator, state_after)
        return True

    def _try_next_method(self, cursor: Cursor, choice: ChoicePoint) -> bool:
        method = choice.next_method()
        if method is None:
            return False

        self.hooks.method_tried(choice.task.name, method.name, choice.depth)
        if self.enable_logging:
            self.logger.log_method_application(choice.task.name, method, choice.depth)
        cursor.expand(choice, method)
        return True

    def _backtrack(self, cursor: Cursor) -> bool:
        """
        Return to the most recent compound task with an untried applicable method.
        :return: Whether there was an alternative to continue with.
        """
        while cursor.stack:
            choice = cursor.stack[-1]
            if choice.current_method is not None:
                self.hooks.backtracked(choice.task.name, choice.current_method.name, choice.depth)
                if self.enable_logging:
                    self.logger.log_backtrack(choice.task.name, choice.current_method.name, choice.depth)
            cursor.rewind(choice)
            if self._try_next_method(cursor, choice):
                return True
            cursor.pop_context()

        if self.enable_logging:
            self.logger.warning("Backtracking failed, no alternative methods available")
        return False

    def _diagnose(self, goals: Tuple[str, ...]) -> PlanningFailure:
        """
        Attribute a failed search to a top-level goal, checking preconditions against the
        initial state only. Failures deeper in the tree fall through to the first goal.
        """
        for goal in goals:
            kind, element = self.domain.lookup(goal)
            if kind == TaskKind.OPERATOR and not element.applicable(self.initial_state):
                return self._fail(FailureReason.OPERATOR_PRECONDITION_FAILED, goal)
            if kind == TaskKind.COMPOUND and not element.has_applicable_method(self.initial_state):
                return self._fail(FailureReason.NO_APPLICABLE_METHOD, goal)
        return self._fail(FailureReason.NO_APPLICABLE_METHOD, goals[0] if goals else '(unknown)')

    def _fail(self, reason: FailureReason, task_name: str) -> PlanningFailure:
        failure = PlanningFailure(reason, task_name)
        if self.enable_logging:
            self.logger.log_failure(failure)
        return failure


def find_plan(domain: Domain,
              initial_state: Any,
              goals: Sequence[str],
              hooks: PlannerHooks = None) -> PlanningResult:
    """
    Plan for ``goals`` from ``initial_state`` in one call.

    :param domain: The operators and compound tasks to plan with
    :param initial_state: World state planning starts from
    :param goals: Top-level task names, resolved left to right
    :param hooks: Optional search notifications
    :return: PlanningSuccess or PlanningFailure
    """
    return HtnPlanner(domain, initial_state, goals, hooks=hooks).plan()
