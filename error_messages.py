# error_messages.py
"""
Error message definitions and exception classes for the calendar layout layer.
Layout algorithms never raise for event data; these errors are raised while
normalizing raw events or reading settings, and are caught and logged by the caller.
"""

class ErrorMessages:
    """Centralized error message definitions with recovery suggestions."""

    # Event Data Errors
    INVALID_EVENT_FORMAT = {
        'title': 'Invalid Event',
        'message': 'An event could not be read because its data is malformed.',
        'suggestions': [
            'Check that the event has a start and an end',
            'Verify event times and dates',
            'Try refreshing calendar data'
        ],
        'code': 'EVENT_001'
    }

    MISSING_EVENT_TIME = {
        'title': 'Missing Event Time',
        'message': 'An event is missing its start or end time.',
        'suggestions': [
            'Edit the event and set both start and end',
            'Try refreshing calendar data'
        ],
        'code': 'EVENT_002'
    }

    INVALID_EVENT_TIME = {
        'title': 'Invalid Event Time',
        'message': 'An event time is not a valid ISO 8601 date or date-time.',
        'suggestions': [
            'Verify event times and dates'
        ],
        'code': 'EVENT_003'
    }

    MISSING_EVENT_ID = {
        'title': 'Missing Event ID',
        'message': 'An event has no id and cannot be told apart from other events.',
        'suggestions': [
            'Check that the calendar provider returns an id for every event'
        ],
        'code': 'EVENT_004'
    }

    # Configuration Errors
    INVALID_START_DAY = {
        'title': 'Invalid Configuration',
        'message': 'The first day of the week must be a number from 0 (Monday) to 6 (Sunday).',
        'suggestions': [
            'Reconfigure your preferences',
            'Settings will use default values'
        ],
        'code': 'CONFIG_001'
    }

    UNEXPECTED_ERROR = {
        'title': 'Unexpected Error',
        'message': 'An unexpected error has occurred.',
        'suggestions': [
            'Try the operation again',
            'Report this issue to support with error details'
        ],
        'code': 'APP_001'
    }

    @staticmethod
    def get_message(error_type):
        """
        Get error message details by error type.

        Args:
            error_type (str): The error type constant name

        Returns:
            dict: Error message details with title, message, suggestions, and code
        """
        return getattr(ErrorMessages, error_type, ErrorMessages.UNEXPECTED_ERROR)


class CalendarError(Exception):
    """Base exception class for calendar-specific errors."""

    def __init__(self, message, error_code=None, suggestions=None):
        super().__init__(message)
        self.error_code = error_code
        self.suggestions = suggestions or []

    @classmethod
    def from_error_type(cls, error_type, detail=None):
        info = ErrorMessages.get_message(error_type)
        message = info['message'] if not detail else f"{info['message']} ({detail})"
        return cls(message, error_code=info['code'], suggestions=list(info['suggestions']))


class EventFormatError(CalendarError):
    """Exception for events that cannot be normalized for layout."""
    pass


class SettingsError(CalendarError):
    """Exception for settings and configuration errors."""
    pass
