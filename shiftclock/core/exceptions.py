# shiftclock/core/exceptions.py
# Custom exception hierarchy for shiftclock (pure - no I/O operations)

from pathlib import Path
from typing import Any


# * Format error message for display (pure string formatting, no I/O)
def format_error_message(error_type: str, message: str) -> str:
    return f"[red]{error_type}:[/] {message}"


# * Base exception for shiftclock
class ShiftClockError(Exception):
    pass


# * Input validation failed
class ValidationError(ShiftClockError):
    pass


# * Hourly wage input rejected; prior wage is retained
class InvalidWageError(ValidationError):
    def __init__(self, message: str, value: Any):
        super().__init__(message)
        self.value = value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, value={self.value!r})"


# * Shift start attempted without a positive wage configured
class WageNotSetError(ShiftClockError):
    pass


# * Export attempted while history holds no shifts
class EmptyHistoryError(ShiftClockError):
    pass


# * Configuration errors
class ConfigurationError(ShiftClockError):
    pass


# * Settings value validation failed
class SettingsValidationError(ConfigurationError):
    def __init__(self, message: str, setting_name: str, value: Any):
        super().__init__(message)
        self.setting_name = setting_name
        self.value = value

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, "
            f"setting_name={self.setting_name!r}, value={self.value!r})"
        )


# * JSON parsing errors
class JSONParsingError(ShiftClockError):
    pass


# * Base error for persisted state
class StorageError(ShiftClockError):
    pass


# * Persisted record has missing or mistyped fields
class CorruptRecordError(StorageError):
    def __init__(self, message: str, key: str):
        super().__init__(message)
        self.key = key

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, key={self.key!r})"


# * Base error for file I/O operations
class FileOperationError(StorageError):
    def __init__(self, message: str, path: Path | str):
        super().__init__(message)
        self.path = Path(path) if isinstance(path, str) else path

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, path={self.path!r})"


# * Failed to read file
class FileReadError(FileOperationError):
    pass


# * Failed to write file
class FileWriteError(FileOperationError):
    pass
