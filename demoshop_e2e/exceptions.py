# demoshop_e2e/exceptions.py

from typing import Optional


class DataFileError(FileNotFoundError):
    """A required test data file does not exist."""


class PageAssertionError(AssertionError):
    """An expected post-condition on a page did not hold."""

    def __init__(self, message: str, expected=None, actual=None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class CheckoutStepError(RuntimeError):
    """A checkout step failed. The journey is aborted and cannot be resumed."""

    def __init__(self, step, last_completed_step: Optional[object] = None):
        completed = last_completed_step.value if last_completed_step is not None else "none"
        super().__init__(f"Checkout failed at step '{step.value}' (last completed: {completed})")
        self.step = step
        self.last_completed_step = last_completed_step


class CheckoutAbortedError(RuntimeError):
    """Raised when advancing a checkout flow that already failed or finished."""
