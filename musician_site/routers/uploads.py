from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from loguru import logger

from musician_site.config import settings
from musician_site.core.security import get_current_user
from musician_site.schemas.upload import UploadCompleteResponse, UploadRequest, UploadURLResponse
from musician_site.services.uploads import LocalUploadStorage, get_upload_storage

router = APIRouter()


@router.post("/request-url", response_model=UploadURLResponse, dependencies=[Depends(get_current_user)])
def request_upload_url(
    payload: UploadRequest,
    request: Request,
    uploads: LocalUploadStorage = Depends(get_upload_storage),
):
    """
    First half of the upload handshake: mint an id and tell the client
    where to PUT the file.  The object path carries no extension.
    """
    base_url = settings.PUBLIC_BASE_URL or str(request.base_url)
    target = uploads.mint(base_url)
    return UploadURLResponse(
        upload_url=target["upload_url"],
        object_path=target["object_path"],
        metadata={"name": payload.name, "size": payload.size, "content_type": payload.content_type},
    )


@router.put("/{file_id}", response_model=UploadCompleteResponse)
async def upload_file(
    file_id: str,
    request: Request,
    uploads: LocalUploadStorage = Depends(get_upload_storage),
):
    """
    Second half of the handshake: stream the raw request body to disk.
    No session is needed; the minted id is the credential and works once.
    Cross-origin preflights are answered by the CORS middleware.
    """
    file_id = uploads.validate_file_id(file_id)
    uploads.claim(file_id)

    try:
        await uploads.write_stream(file_id, request.stream())
    except Exception as e:
        logger.exception(f"Upload {file_id} failed: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Failed to save file"},
        )

    body = UploadCompleteResponse(object_path=uploads.public_path(file_id), file_id=file_id)
    return JSONResponse(content=body.model_dump(by_alias=True))
