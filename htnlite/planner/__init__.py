from .hooks import PlannerHooks
from .result import FailureReason
from .result import PlanningFailure
from .result import PlanningResult
from .result import PlanningSuccess
from .trace import Trace
from .trace import TraceEntry
from .trace import TraceKind
from .planner import HtnPlanner
from .planner import MAX_RECURSION_DEPTH
from .planner import find_plan


__all__ = ['PlannerHooks', 'FailureReason', 'PlanningFailure', 'PlanningResult', 'PlanningSuccess',
           'Trace', 'TraceEntry', 'TraceKind', 'HtnPlanner', 'MAX_RECURSION_DEPTH', 'find_plan']
