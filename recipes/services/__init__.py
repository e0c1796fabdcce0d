from .step_dependencies import StepDependencyService
from .step_deletion import StepDeletionService
from .step_references import (
    StepReferenceService,
    validate_new_step_references,
    validate_step_reference,
)
from .step_reorder import StepReorderService

__all__ = [
    "StepDependencyService",
    "StepDeletionService",
    "StepReferenceService",
    "StepReorderService",
    "validate_new_step_references",
    "validate_step_reference",
]
