"""
Spreadsheet Upload API Routes.

Accepts client, worker and task spreadsheets (CSV or XLSX). Each file is
classified by its name, its columns are mapped onto the record schema and
the matching collection is replaced.
"""

from fastapi import APIRouter, File, HTTPException, UploadFile, status

from resource_allocation.api.deps import WorkspaceDep
from resource_allocation.application.dtos import UploadedFileResponse, UploadResponse
from resource_allocation.core.config import settings
from resource_allocation.core.observability import get_logger
from resource_allocation.domain.allocation.value_objects import EntityKind
from resource_allocation.domain.shared.exceptions import (
    SpreadsheetFormatError,
    UnrecognizedDatasetError,
)
from resource_allocation.infrastructure.ingestion import read_spreadsheet

logger = get_logger(__name__)

router = APIRouter(prefix="/uploads", tags=["uploads"])


@router.post(
    "/",
    summary="Upload spreadsheets",
    description="Upload up to three client, worker or task spreadsheets.",
    response_model=UploadResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Unreadable file or too many files"},
        422: {"description": "File name does not identify a dataset"},
    },
)
async def upload_spreadsheets(
    workspace: WorkspaceDep,
    files: list[UploadFile] = File(..., description="CSV or XLSX spreadsheets"),
) -> UploadResponse:
    """
    Upload spreadsheets and revalidate the dataset.

    Every file is read and classified before any collection is replaced, so
    a bad file leaves the workspace untouched.
    """
    if len(files) > settings.MAX_UPLOAD_FILES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"At most {settings.MAX_UPLOAD_FILES} files can be uploaded at once",
        )

    parsed = []
    try:
        for upload in files:
            filename = upload.filename or ""
            if EntityKind.from_filename(filename) is None:
                raise UnrecognizedDatasetError(filename)
            content = await upload.read()
            rows = read_spreadsheet(
                filename, content, settings.ACCEPTED_UPLOAD_EXTENSIONS
            )
            parsed.append((filename, rows))
    except SpreadsheetFormatError as e:
        logger.warning("Upload rejected", filename=e.filename, error=e.message)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=e.to_dict()
        ) from e
    except UnrecognizedDatasetError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=e.to_dict()
        ) from e

    outcomes = [workspace.load_upload(rows, filename) for filename, rows in parsed]
    return UploadResponse(
        files=[UploadedFileResponse.from_outcome(outcome) for outcome in outcomes],
        validation_summary=workspace.validation_summary(),
    )
