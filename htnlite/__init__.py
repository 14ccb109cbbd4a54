from htnlite.domain import CompoundTask
from htnlite.domain import Domain
from htnlite.domain import Method
from htnlite.domain import Operator
from htnlite.domain import TaskKind
from htnlite.exceptions import DomainValidationException
from htnlite.exceptions import MaxDepthExceededException
from htnlite.exceptions import PlannerException
from htnlite.planner import FailureReason
from htnlite.planner import HtnPlanner
from htnlite.planner import MAX_RECURSION_DEPTH
from htnlite.planner import PlannerHooks
from htnlite.planner import PlanningFailure
from htnlite.planner import PlanningResult
from htnlite.planner import PlanningSuccess
from htnlite.planner import Trace
from htnlite.planner import TraceKind
from htnlite.planner import find_plan
from htnlite.validation import find_unknown_task
from htnlite.validation import validate_domain
from htnlite.validation import validate_tasks

__version__ = '0.1.0'

__all__ = ['CompoundTask', 'Domain', 'Method', 'Operator', 'TaskKind',
           'DomainValidationException', 'MaxDepthExceededException', 'PlannerException',
           'FailureReason', 'HtnPlanner', 'MAX_RECURSION_DEPTH', 'PlannerHooks', 'PlanningFailure',
           'PlanningResult', 'PlanningSuccess', 'Trace', 'TraceKind', 'find_plan',
           'find_unknown_task', 'validate_domain', 'validate_tasks']
