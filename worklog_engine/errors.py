"""Exceptions raised at the mutation and auth seams."""


class WorkLogError(Exception):
    """Base class for work log errors."""


class LogNotFoundError(WorkLogError, LookupError):
    def __init__(self, log_id: str) -> None:
        super().__init__(f"Log not found: {log_id}")
        self.log_id = log_id


class UnauthorizedError(WorkLogError, PermissionError):
    pass


class DuplicateLogError(WorkLogError, ValueError):
    pass
