from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

class UploadRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1)
    size: Optional[int] = Field(None, ge=0)
    content_type: Optional[str] = Field(None, alias="contentType")

class UploadMetadata(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    size: Optional[int] = None
    content_type: Optional[str] = Field(None, alias="contentType")

class UploadURLResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    upload_url: str = Field(..., alias="uploadURL")
    object_path: str = Field(..., alias="objectPath")
    metadata: UploadMetadata

class UploadCompleteResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    object_path: str = Field(..., alias="objectPath")
    file_id: str = Field(..., alias="fileId")
