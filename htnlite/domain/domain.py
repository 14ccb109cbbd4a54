from enum import Enum
from htnlite.common.imports.typing import *
from htnlite.domain.method import Method
from htnlite.domain.operators import Operator
from htnlite.domain.task import CompoundTask
from htnlite.exceptions import DomainValidationException


class TaskKind(Enum):
    OPERATOR = 'operator'
    COMPOUND = 'compound'
    UNKNOWN = 'unknown'


class Domain:
    """
    Registry of the operators and compound tasks available to the planner.

    Operators are stored by name and replaced wholesale on re-registration. Methods are
    appended to the compound task they decompose, which is created on first use. Lookups
    resolve operators before compound tasks, so a name registered as both is an operator.

    :param operators: Optional initial mapping of operator names to operators
    :param compound_tasks: Optional initial mapping of task names to compound tasks

    :attribute operators: Operators keyed by name
    :attribute compound_tasks: Compound tasks keyed by name
    """

    def __init__(self,
                 operators: Dict[str, Operator] = None,
                 compound_tasks: Dict[str, CompoundTask] = None):
        self.operators = dict(operators) if operators else {}
        self.compound_tasks = dict(compound_tasks) if compound_tasks else {}

    def register_operator(self, operator: Operator) -> 'Domain':
        """
        Register a primitive task. Overwrites any operator with the same name.

        :param operator: The operator to register
        :return: The domain, for chaining
        """
        if not operator.name:
            raise ValueError("Operator name must not be empty")
        self.operators[operator.name] = operator
        return self

    def register_method(self, task_name: str, method: Method) -> 'Domain':
        """
        Register a decomposition method under the compound task ``task_name``.

        :param task_name: Name of the compound task the method decomposes
        :param method: The method to append to the task's method list
        :return: The domain, for chaining
        """
        if not task_name:
            raise ValueError("Task name must not be empty")
        if not method.name:
            raise ValueError("Method name must not be empty")
        if task_name not in self.compound_tasks:
            self.compound_tasks[task_name] = CompoundTask(task_name)
        self.compound_tasks[task_name].add_method(method)
        return self

    def get_operator(self, name: str) -> Optional[Operator]:
        return self.operators.get(name)

    def get_compound_task(self, name: str) -> Optional[CompoundTask]:
        return self.compound_tasks.get(name)

    def get_method(self, name: str) -> Optional[Method]:
        """
        Find a method by its own name, searching every compound task in registration order.
        """
        for task in self.compound_tasks.values():
            for method in task.methods:
                if method.name == name:
                    return method
        return None

    def lookup(self, name: str) -> Tuple[TaskKind, Union[Operator, CompoundTask, None]]:
        """
        Resolve a task name against the whole namespace.

        :param name: Task name to resolve
        :return: ``(TaskKind.OPERATOR, operator)``, ``(TaskKind.COMPOUND, task)`` or ``(TaskKind.UNKNOWN, None)``
        """
        operator = self.operators.get(name)
        if operator is not None:
            return TaskKind.OPERATOR, operator
        task = self.compound_tasks.get(name)
        if task is not None:
            return TaskKind.COMPOUND, task
        return TaskKind.UNKNOWN, None

    def validate(self) -> 'Domain':
        """
        Check that every subtask referenced by every method resolves to a registered
        operator or compound task.

        :raises DomainValidationException: on the first unresolved subtask name
        :return: The domain, for chaining
        """
        for task in self.compound_tasks.values():
            for method in task.methods:
                for subtask in method.subtasks:
                    if subtask not in self.operators and subtask not in self.compound_tasks:
                        raise DomainValidationException(subtask)
        return self

    def __contains__(self, name):
        return name in self.operators or name in self.compound_tasks

    def __len__(self):
        return len(self.operators) + len(self.compound_tasks)

    def __repr__(self):
        return f'Domain(operators={list(self.operators)}, compound_tasks={list(self.compound_tasks)})'
