import uuid as uuid_lib
from enum import Enum

from notesync.domains.common.result import FailureKind, Result


class Uuid:
    """Валидированный строковый идентификатор.

    Ожидаемые ошибки ввода возвращает Uuid.create. Прямой вызов конструктора
    с неканоническим значением считается ошибкой программиста (ValueError).
    """

    __slots__ = ("_value",)

    def __init__(self, value: str):
        if not self._is_canonical(value):
            raise ValueError(f"Given value is not a valid uuid: {value!r}")
        self._value = value

    @property
    def value(self) -> str:
        return self._value

    @classmethod
    def create(cls, value) -> Result["Uuid"]:
        if not isinstance(value, str):
            return Result.fail(f"Given value is not a string: {value!r}", FailureKind.VALIDATION)

        if not value.strip():
            return Result.fail("Given value is empty", FailureKind.VALIDATION)

        normalized = value.lower()
        if not cls._is_canonical(normalized):
            return Result.fail(f"Given value is not a valid uuid: {value}", FailureKind.VALIDATION)

        return Result.ok(cls(normalized))

    @staticmethod
    def _is_canonical(value) -> bool:
        if not isinstance(value, str):
            return False
        try:
            parsed = uuid_lib.UUID(value)
        except ValueError:
            return False
        # UUID() принимает и формы без дефисов, в фигурных скобках, urn:uuid:...
        return str(parsed) == value

    @classmethod
    def generate(cls) -> "Uuid":
        return cls(str(uuid_lib.uuid4()))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Uuid):
            return False
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"Uuid({self._value})"


class SharedVaultUserPermission(str, Enum):
    """Уровень доступа участника к shared vault"""
    READ = "read"
    WRITE = "write"
    ADMIN = "admin"

    @classmethod
    def create(cls, value: str) -> Result["SharedVaultUserPermission"]:
        try:
            return Result.ok(cls(value))
        except ValueError:
            return Result.fail(f"Invalid shared vault user permission {value}", FailureKind.VALIDATION)
