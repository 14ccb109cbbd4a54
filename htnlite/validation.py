from collections import deque
from typing import Iterable
from typing import List
from typing import Optional
from typing import Tuple
from typing import Union

from htnlite.domain.domain import Domain
from htnlite.domain.domain import TaskKind


def validate_domain(domain: Domain) -> None:
    """
    Validates a domain before planning.

    Args:
        domain: The domain to validate

    Raises:
        TypeError: If domain is not a Domain
        DomainValidationException: If a method references an unregistered task
    """
    if not isinstance(domain, Domain):
        raise TypeError(f"Domain must be a Domain instance, got {type(domain)}")
    domain.validate()


def validate_tasks(task_list: Union[List[str], Tuple[str, ...]]) -> None:
    """
    Validates a list of goal task names.

    Args:
        task_list: List of task names to validate

    Raises:
        ValueError: If any task name is empty
        TypeError: If task_list is not a list or tuple of strings
    """
    if not isinstance(task_list, (list, tuple)):
        raise TypeError("Input must be a list or tuple")

    for task_item in task_list:
        if not isinstance(task_item, str):
            raise TypeError(f"Task must be a string, got {type(task_item)}")
        if not task_item:
            raise ValueError("Task string cannot be empty")


def find_unknown_task(roots: Iterable[str], domain: Domain) -> Optional[str]:
    """
    Walks every task reachable from ``roots`` through method subtask lists and returns the
    first name that is neither an operator nor a compound task.

    Method conditions are ignored: the walk is structural, so a misspelled subtask is found
    however deep it sits and whatever the state turns out to be.

    Args:
        roots: Task names to start from
        domain: The domain to resolve names against

    Returns:
        The first unresolved task name, or None if every reachable task is known
    """
    visited = set()
    queue = deque(roots)
    while queue:
        task_name = queue.popleft()
        if task_name in visited:
            continue
        visited.add(task_name)

        kind, element = domain.lookup(task_name)
        if kind == TaskKind.OPERATOR:
            continue
        if kind == TaskKind.COMPOUND:
            for method in element.methods:
                queue.extend(method.subtasks)
            continue
        return task_name
    return None
