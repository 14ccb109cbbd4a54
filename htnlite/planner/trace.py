import time
from enum import Enum
from tabulate import tabulate
from htnlite.common.imports.typing import *
from htnlite.planner.hooks import PlannerHooks


class TraceKind(Enum):
    EXPAND_TASK :    "TraceKind" = 1
    TRY_METHOD :     "TraceKind" = 2
    BACKTRACK :      "TraceKind" = 3
    APPLY_OPERATOR : "TraceKind" = 4


class TraceEntry:
    """A single search event."""
    def __init__(self,
            kind: TraceKind,
            task_name: str,
            method_name: str = None,
            depth: int = None,
            state_before=None,
            state_after=None):
        self.kind = kind
        self.task_name = task_name
        self.method_name = method_name
        self.depth = depth
        self.state_before = state_before
        self.state_after = state_after
        self.timestamp = time.time()

    def get_description(self):
        if(self.kind == TraceKind.EXPAND_TASK):
            return f"{self.task_name}"
        elif(self.kind == TraceKind.TRY_METHOD):
            return f"{self.method_name} for {self.task_name}"
        elif(self.kind == TraceKind.BACKTRACK):
            return f"From {self.method_name} of {self.task_name}"
        elif(self.kind == TraceKind.APPLY_OPERATOR):
            return f"{self.task_name}"
        else:
            return ""

    @property
    def entry_type(self):
        if(self.kind == TraceKind.EXPAND_TASK):
            return 'task'
        elif(self.kind == TraceKind.TRY_METHOD):
            return 'method'
        elif(self.kind == TraceKind.APPLY_OPERATOR):
            return 'operator'
        else:
            return 'backtrack'

    def __str__(self):
        return f"{self.kind.name}: {self.get_description()}"

    __repr__ = __str__


class Trace:
    """
    Records every notification the planner emits. Pass ``trace.as_hooks()`` as the
    planner's hooks, then inspect ``entries`` or print them.
    """
    def __init__(self):
        self.entries = []

    def add(self, kind: TraceKind, task_name: str, **kwargs):
        self.entries.append(TraceEntry(kind, task_name, **kwargs))

    def clear(self):
        self.entries = []

    def as_hooks(self) -> PlannerHooks:
        return PlannerHooks(
            on_task_expand=lambda name, depth: self.add(TraceKind.EXPAND_TASK, name, depth=depth),
            on_method_try=lambda name, method, depth: self.add(TraceKind.TRY_METHOD, name,
                                                               method_name=method, depth=depth),
            on_backtrack=lambda name, method, depth: self.add(TraceKind.BACKTRACK, name,
                                                              method_name=method, depth=depth),
            on_operator_apply=lambda name, before, after: self.add(TraceKind.APPLY_OPERATOR, name,
                                                                   state_before=before, state_after=after),
        )

    def entries_of(self, kind: TraceKind) -> List[TraceEntry]:
        return [e for e in self.entries if e.kind == kind]

    def applied_operators(self) -> List[str]:
        """
        Names of every operator whose effect was applied, in order. Unlike the final plan
        this includes operators later discarded by backtracking.
        """
        return [e.task_name for e in self.entries_of(TraceKind.APPLY_OPERATOR)]

    @staticmethod
    def print_plan(plan):
        """
        Print a plan.
        """
        print("┌─────────────────────────────────────────────────┐")
        print("│                      PLAN                       │")
        print("└─────────────────────────────────────────────────┘")

        if not plan:
            print("No actions in plan.")
            return

        for i, operator in enumerate(plan):
            print(f"Step {i + 1:02d}: {operator.name}")

        print(f"\nTotal actions: {len(plan)}")
        print("────────────────────────────────────────────────────")

    def print_trace(self, max_entries=None):
        """
        Prints the recorded trace.
        :param max_entries: Maximum number of entries to print (None for all)
        """
        start = 0 if max_entries is None else max(len(self.entries) - max_entries, 0)
        entries = self.entries[start:]

        print("┌─────────────────────────────────────────────────┐")
        print("│                PLANNING TRACE                   │")
        print("└─────────────────────────────────────────────────┘")

        if len(entries) == 0:
            print("No trace entries yet.")
            return

        rows = []
        for i, entry in enumerate(entries):
            timestamp = time.strftime("%H:%M:%S", time.localtime(entry.timestamp))
            depth = "" if entry.depth is None else entry.depth
            rows.append([f"{i + start + 1:03d}", timestamp, entry.kind.name, depth, entry.get_description()])
        print(tabulate(rows, headers=["#", "Time", "Kind", "Depth", "Description"], tablefmt="simple"))

        print(f"\nTotal entries: {len(entries)}")
        if max_entries is not None and len(self.entries) > max_entries:
            print(f"Showing last {max_entries} of {len(self.entries)} entries.")
