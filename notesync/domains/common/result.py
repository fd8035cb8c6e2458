from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class FailureKind(str, Enum):
    """Категории ожидаемых ошибок use case'ов"""
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    AUTHORIZATION = "authorization"
    INVALID_OPERATION = "invalid_operation"
    CONFLICT = "conflict"
    DEADLINE_EXCEEDED = "deadline_exceeded"


class Result(Generic[T]):
    """Результат операции: значение или описание ошибки.

    Ожидаемые ошибки (невалидный ввод, отсутствие записи, нет прав)
    возвращаются как Result.fail, исключения остаются для непредвиденных
    состояний вроде недоступной БД.
    """

    def __init__(
        self,
        is_failed: bool,
        value: Optional[T] = None,
        error: Optional[str] = None,
        kind: Optional[FailureKind] = None
    ):
        self._is_failed = is_failed
        self._value = value
        self._error = error
        self._kind = kind

    @classmethod
    def ok(cls, value: Optional[T] = None) -> "Result[T]":
        return cls(is_failed=False, value=value)

    @classmethod
    def fail(cls, error: str, kind: FailureKind = FailureKind.INVALID_OPERATION) -> "Result[T]":
        return cls(is_failed=True, error=error, kind=kind)

    def is_failed(self) -> bool:
        return self._is_failed

    @property
    def kind(self) -> Optional[FailureKind]:
        return self._kind

    def get_value(self) -> T:
        if self._is_failed:
            raise RuntimeError(f"Cannot get value of a failed result: {self._error}")
        return self._value

    def get_error(self) -> str:
        if not self._is_failed:
            raise RuntimeError("Cannot get error of a successful result")
        return self._error

    def __repr__(self) -> str:
        if self._is_failed:
            return f"Result(failed, kind={self._kind.value}, error={self._error!r})"
        return f"Result(ok, value={self._value!r})"
