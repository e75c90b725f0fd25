from .workspace import AllocationWorkspace, UploadOutcome

__all__ = ["AllocationWorkspace", "UploadOutcome"]
