"""Domain exceptions for reports."""

from elitescope.core.exceptions import NotFoundException


class ReportNotFoundError(NotFoundException):
    """Raised when a report is not found."""

    def __init__(self, report_id: int):
        """Initialize with the missing id."""
        self.report_id = report_id
        super().__init__(f"Report {report_id} not found")
