"""
Summary: Public surface of the rename use cases.
Why: Provide a stable import path for the application service and tests.
"""

from .directory_runner import log_event, rename_record, run_directory_renaming
from .processing_types import ProcessingEvent, RenameLogContext, RenameResult, RenameStatus

__all__ = [
    "ProcessingEvent",
    "RenameLogContext",
    "RenameResult",
    "RenameStatus",
    "log_event",
    "rename_record",
    "run_directory_renaming",
]
