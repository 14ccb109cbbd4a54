from dataclasses import dataclass, field
from enum import Enum
from htnlite.common.imports.typing import *
from htnlite.domain.operators import Operator


class FailureReason(Enum):
    UNKNOWN_TASK = 'UNKNOWN_TASK'
    OPERATOR_PRECONDITION_FAILED = 'OPERATOR_PRECONDITION_FAILED'
    NO_APPLICABLE_METHOD = 'NO_APPLICABLE_METHOD'

    def __str__(self):
        return self.value


@dataclass
class PlanningSuccess:
    """
    Returned when a complete plan is found.

    :attribute plan: Operators in the order they are to be executed. These are the
        operator objects registered in the domain, not copies.
    :attribute final_state: The simulated state after the last operator
    """
    plan: List[Operator] = field(default_factory=list)
    final_state: Any = None
    success: bool = field(default=True, init=False)

    @property
    def operator_names(self) -> List[str]:
        return [op.name for op in self.plan]

    def __bool__(self):
        return True


@dataclass
class PlanningFailure:
    """
    Returned when no plan exists for the goals.

    :attribute reason: Why planning failed
    :attribute failed_task: The task the failure is attributed to
    """
    reason: FailureReason
    failed_task: str
    success: bool = field(default=False, init=False)

    def __bool__(self):
        return False

    def __str__(self):
        return f'{self.reason}: {self.failed_task}'


PlanningResult = Union[PlanningSuccess, PlanningFailure]
