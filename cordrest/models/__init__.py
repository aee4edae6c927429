""" attrs mirrors of discord's JSON objects, built with `from_json`
and turned back into JSON with `to_json`.
"""

from .base import *
from .channel import *
from .embed import *
from .file import *
from .guild import *
from .invite import *
from .message import *
from .user import *

__all__ = (
    base.__all__
    + channel.__all__
    + embed.__all__
    + file.__all__
    + guild.__all__
    + invite.__all__
    + message.__all__
    + user.__all__
)
