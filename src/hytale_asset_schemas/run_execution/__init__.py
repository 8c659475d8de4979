"""Run execution domain exports."""

from .run_contracts import (
    ExtractionOutcome,
    ExtractionRequest,
    FileFailure,
    PublicationRequest,
    PublicationSummary,
)
from .schema_extraction_use_case import ExtractionError, execute_schema_extraction
from .schema_publication_use_case import (
    COMMON_OUTPUT_FILENAME,
    PublicationError,
    publish_generated_schemas,
    published_filename,
)

__all__ = [
    "COMMON_OUTPUT_FILENAME",
    "ExtractionError",
    "ExtractionOutcome",
    "ExtractionRequest",
    "FileFailure",
    "PublicationError",
    "PublicationRequest",
    "PublicationSummary",
    "execute_schema_extraction",
    "publish_generated_schemas",
    "published_filename",
]
