"""Custom exceptions for the report ingestion engine."""


class ReportError(RuntimeError):
    """Base error for report ingestion."""


class SchemaError(ReportError):
    """Raised when a grid does not have the shape a report kind expects."""


class UnsupportedReportKindError(ReportError):
    """Raised when no decoder is registered for the requested report kind."""
