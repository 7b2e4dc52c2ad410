"""
Custom exception hierarchy for trackbook.

Every error a build can hit is fatal: nothing below the command-line layer
catches these, so each one carries enough context (offending path, raw tool
output, suggestion) to be reported directly to the user.
"""


class TrackbookError(Exception):
    """Base exception for all application-specific errors."""

    def __init__(self, message, error_code=None, suggestion=None):
        self.error_code = error_code
        self.suggestion = suggestion
        super().__init__(message)

    def get_user_message(self):
        """Get a user-friendly error message with suggestions."""
        message = str(self)
        if self.suggestion:
            message += f"\n\nSuggestion: {self.suggestion}"
        if self.error_code:
            message += f"\nError Code: {self.error_code}"
        return message


class DependencyError(TrackbookError):
    """Raised when required external dependencies are not found or invalid."""

    def __init__(self, dependency_name, message=None):
        self.dependency_name = dependency_name

        if not message:
            message = f"Required dependency '{dependency_name}' is not available"

        suggestion = self._get_dependency_suggestion(dependency_name)
        super().__init__(message, error_code="DEP001", suggestion=suggestion)

    def _get_dependency_suggestion(self, dependency_name):
        """Provide specific installation suggestions for different dependencies."""
        suggestions = {
            "ffmpeg": "Install FFmpeg from https://ffmpeg.org/ and ensure it's in your system PATH",
        }
        return suggestions.get(dependency_name.lower(), f"Please install {dependency_name}")


class FileProcessingError(TrackbookError):
    """Base class for errors tied to a single source file."""

    def __init__(self, message, filename, operation=None):
        self.filename = filename
        self.operation = operation

        full_message = message
        if filename:
            full_message += f" (file: {filename})"
        if operation:
            full_message += f" (operation: {operation})"

        super().__init__(full_message, error_code="FILE001")


class FormatError(FileProcessingError):
    """Raised when a track's base name does not follow the naming convention."""

    def __init__(self, base_name, filename=None):
        self.base_name = base_name

        super().__init__(f"Invalid track name: {base_name!r}", filename, "parse")
        self.suggestion = (
            "Track names must be five digits (book, chapter, section, sub-section, track), "
            "the second may be 'X' for chapter 10, optionally followed by 'N'"
        )
        self.error_code = "FMT001"


class ProbeError(FileProcessingError):
    """Raised when the duration of a track cannot be determined."""

    def __init__(self, message, filename, output=None):
        self.output = output

        full_message = f"Duration probe failed: {message}"
        if output:
            full_message += f"\n--- ffmpeg output ---\n{output.rstrip()}\n---"

        super().__init__(full_message, filename, "probe")
        self.suggestion = "Check that the file is a readable audio file and that FFmpeg can open it"
        self.error_code = "PROBE001"


class CacheCorruptionError(TrackbookError):
    """Raised when the persisted duration cache cannot be parsed."""

    def __init__(self, message, cache_path):
        self.cache_path = cache_path

        full_message = f"Duration cache is corrupt: {message} (cache: {cache_path})"
        suggestion = "Fix the file by hand or delete it to re-probe every track"
        super().__init__(full_message, error_code="CACHE001", suggestion=suggestion)


class ValidationError(TrackbookError):
    """Raised when input validation fails."""

    def __init__(self, message, validation_type, value=None):
        self.validation_type = validation_type
        self.value = value

        full_message = f"Validation failed ({validation_type}): {message}"
        if value is not None:
            full_message += f" (value: {value})"

        suggestion = self._get_validation_suggestion(validation_type)
        super().__init__(full_message, error_code="VAL001", suggestion=suggestion)

    def _get_validation_suggestion(self, validation_type):
        """Provide specific suggestions for different validation failures."""
        suggestions = {
            "path": "Ensure the book directory exists and you have appropriate permissions",
        }
        return suggestions.get(validation_type, "Please check the input and try again")


class ConfigurationError(TrackbookError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message, config_key=None, config_value=None):
        self.config_key = config_key
        self.config_value = config_value

        full_message = f"Configuration error: {message}"
        if config_key:
            full_message += f" (key: {config_key})"
        if config_value is not None:
            full_message += f" (value: {config_value})"

        suggestion = "Check your configuration settings and ensure all required values are provided"
        super().__init__(full_message, error_code="CFG001", suggestion=suggestion)
