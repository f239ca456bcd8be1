from .auth import *
from .user import *
from .content import *
from .album import *
from .track import *
from .video import *
from .event import *
from .press import *
from .photo import *
from .message import *
from .upload import *

__all__ = [
    # Auth
    "Login", "StatusMessage", "UserResponse",

    # Content
    "ContentBlockCreate", "ContentBlockResponse",

    # Discography
    "AlbumBase", "AlbumCreate", "AlbumResponse",
    "TrackBase", "TrackCreate", "TrackResponse",

    # Media
    "VideoCategory", "VideoBase", "VideoCreate", "VideoResponse",
    "PhotoBase", "PhotoCreate", "PhotoReorder", "PhotoResponse",

    # Agenda / press
    "EventType", "EventBase", "EventCreate", "EventResponse",
    "PressBase", "PressCreate", "PressResponse",

    # Contact
    "MessageCreate", "MessageResponse",

    # Uploads
    "UploadRequest", "UploadMetadata", "UploadURLResponse", "UploadCompleteResponse",
]
