"""Error hierarchy for fetching and exporting class schedules.

Every failure the run can hit derives from ShowClassesError so the CLI can
report it with one handler per kind.
"""


class ShowClassesError(Exception):
    """Base exception for all showclasses errors."""

    pass


class NetworkError(ShowClassesError):
    """Connection or transport failure talking to the show API."""

    pass


class HttpStatusError(ShowClassesError):
    """The show API answered with a non-2xx status."""

    def __init__(self, status_code: int, reason: str, url: str) -> None:
        self.status_code = status_code
        self.reason = reason
        self.url = url
        super().__init__(f"{status_code} {reason}".strip())


class DecodeError(ShowClassesError):
    """Response body does not match the expected JSON shape."""

    def __init__(self, message: str, url: str | None = None) -> None:
        self.url = url
        super().__init__(message)


class DateFormatError(ShowClassesError, ValueError):
    """scheduled_date is not laid out as YYYY-MM-DD."""

    pass


class CsvWriteError(ShowClassesError):
    """The CSV export could not be written."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"{path}: {reason}")
