import os
import logging
from time import strftime


class PlannerLogger:
    """
    A logger for the HTN planner that tracks and logs all planner actions.

    :param log_file: Path to the log file, or None to skip file output
    :param log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    :param console_output: Whether to also print logs to console
    """

    FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    def __init__(self, log_file: str = None, log_level: int = logging.INFO, console_output: bool = False):
        self.logger = logging.getLogger('htn_planner')
        self.logger.setLevel(log_level)
        formatter = logging.Formatter(self.FORMAT)

        if log_file:
            # Create log directory if it doesn't exist
            log_dir = os.path.dirname(log_file)
            if log_dir and not os.path.exists(log_dir):
                os.makedirs(log_dir)

            log_path = os.path.abspath(log_file)
            if not any(isinstance(h, logging.FileHandler) and h.baseFilename == log_path
                       for h in self.logger.handlers):
                file_handler = logging.FileHandler(log_file)
                file_handler.setLevel(log_level)
                file_handler.setFormatter(formatter)
                self.logger.addHandler(file_handler)

        if console_output:
            if not any(type(h) is logging.StreamHandler for h in self.logger.handlers):
                console_handler = logging.StreamHandler()
                console_handler.setLevel(log_level)
                console_handler.setFormatter(formatter)
                self.logger.addHandler(console_handler)

        timestamp = strftime('%Y-%m-%d %H:%M:%S')
        self.logger.info(f"HTN Planner Logger initialized at {timestamp}")

    def debug(self, message: str):
        self.logger.debug(message)

    def info(self, message: str):
        self.logger.info(message)

    def warning(self, message: str):
        self.logger.warning(message)

    def error(self, message: str):
        self.logger.error(message)

    def log_task_expansion(self, task_name: str, depth: int):
        """
        Log a task taken off the pending queue.

        :param task_name: Name of the task
        :param depth: Search depth at which the task is expanded
        """
        self.debug(f"Expanding task {task_name} at depth {depth}")

    def log_method_application(self, task_name: str, method, depth: int):
        """
        Log a method being tried for a compound task.

        :param task_name: Task the method decomposes
        :param method: Method being applied
        :param depth: Search depth of the compound task
        """
        self.info(f"Applying Method: {method.name} to task {task_name} (depth {depth})")
        self.debug(f"  Resulting in subtasks: {list(method.subtasks)}")

    def log_operator_application(self, operator_name: str, state_before, state_after):
        """
        Log an operator application.

        :param operator_name: Operator being applied
        :param state_before: State the operator was applied to
        :param state_after: State produced by the operator's effect
        """
        self.info(f"Applying Operator: {operator_name}")
        self.debug(f"  State before: {state_before}")
        self.debug(f"  State after: {state_after}")

    def log_operator_rejected(self, operator_name: str):
        self.debug(f"Operator {operator_name} precondition failed")

    def log_backtrack(self, task_name: str, method_name: str, depth: int):
        """
        Log a backtracking operation.

        :param task_name: Compound task being backtracked within
        :param method_name: Method whose subtree failed
        :param depth: Search depth of the compound task
        """
        self.info(f"Backtracking from method {method_name} of task {task_name} (depth {depth})")

    def log_plan_complete(self, plan):
        """
        Log a completed plan.

        :param plan: The completed plan
        """
        self.info(f"Plan completed with {len(plan)} steps")
        for idx, operator in enumerate(plan):
            self.info(f"  Step {idx+1}: {operator.name}")

    def log_failure(self, failure):
        self.warning(f"Planning failed: {failure.reason} (task {failure.failed_task})")
