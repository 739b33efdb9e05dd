from typing import Optional


class ExpenseShareError(Exception):
    """Base error for the ExpenseShare client"""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class BackendError(ExpenseShareError):
    """The expense service answered with a non-2xx status"""

    status_code = 502

    @property
    def client_status(self) -> int:
        # 4xx is the caller's problem and passes through, anything else is ours
        if 400 <= self.status_code < 500:
            return self.status_code
        return 502


class BackendUnavailableError(BackendError):
    """The expense service could not be reached at all"""

    status_code = 503

    @property
    def client_status(self) -> int:
        return 503
