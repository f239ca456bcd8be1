from .user import User
from .content_block import ContentBlock
from .album import Album
from .track import Track
from .video import Video
from .event import Event
from .press import Press
from .photo import Photo
from .message import Message

__all__ = [
    "User", "ContentBlock", "Album", "Track", "Video",
    "Event", "Press", "Photo", "Message"
]
