"""
quiztower/errors.py

Exceptions raised by the recipe and campaign code. Views translate them into
JSON responses through the handlers registered in ``create_app``.
"""


class QuizTowerError(Exception):
    """Base class for every error the service raises on purpose."""

    status_code = 500

    def __init__(self, message: str = "", **payload):
        super().__init__(message)
        self.message = message or self.__class__.__doc__ or ""
        self.payload = payload

    def to_dict(self) -> dict:
        body = {"error": self.message}
        body.update(self.payload)
        return body


class InvalidSeedError(QuizTowerError, ValueError):
    """Seed must be a 64-character lowercase hex string."""

    status_code = 400


class InvalidFloorError(QuizTowerError, ValueError):
    """Floor numbers start at 1."""

    status_code = 400


class FloorLockedError(QuizTowerError):
    """Floor not accessible."""

    status_code = 403


class QuizExpiredError(QuizTowerError):
    """Quiz not found or expired."""

    status_code = 404


class QuizMismatchError(QuizTowerError):
    """Quiz was generated for a different floor or game mode."""

    status_code = 400


class ProgressConflictError(QuizTowerError):
    """Progress was updated concurrently; retry the submission."""

    status_code = 503

    def __init__(self, message: str = "", **payload):
        payload.setdefault("retryable", True)
        super().__init__(message, **payload)


class SamplerExhaustedError(QuizTowerError, RuntimeError):
    """Sampler could not collect enough distinct picks."""


class GenerationError(QuizTowerError):
    """Question generator returned unusable output."""

    status_code = 502
