class PlannerException(Exception):
    """
    A generic exception for miscellaneous errors in the planning process.

    :param message: Description of the error

    :attribute message: Description of the error
    """

    def __init__(self, message=""):
        self.message = message
        super().__init__(self.message)

    def __str__(self):
        return self.message


class MaxDepthExceededException(PlannerException):
    """
    Exception raised when the search descends past the maximum decomposition depth.
    This almost always means a compound task re-expands itself without ever bottoming out.

    :param max_depth: The depth ceiling that was exceeded

    :attribute max_depth: The depth ceiling that was exceeded
    :attribute message: Explanation of the failure
    """

    def __init__(self, max_depth=1000):
        self.max_depth = max_depth
        self.message = (f'HTN planner exceeded the maximum recursion depth of {max_depth}. '
                        f'This usually indicates a cyclic task decomposition.')
        super().__init__(self.message)


class DomainValidationException(PlannerException):
    """
    Exception raised by domain validation when a method references a task that was never registered.

    :param unresolved_task: The subtask name that resolves to neither an operator nor a compound task

    :attribute unresolved_task: The unresolved subtask name
    :attribute message: Explanation of the failure
    """

    def __init__(self, unresolved_task):
        self.unresolved_task = unresolved_task
        self.message = (f'Domain validation failed: task "{unresolved_task}" is referenced as a subtask '
                        f'but is not registered as an operator or compound task.')
        super().__init__(self.message)
