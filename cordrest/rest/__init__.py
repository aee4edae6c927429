""" This module contains the transport side of discord's REST API:
routes, request bodies, rate limit buckets and the client that
sends everything over an aiohttp session.
"""

from .builders import *
from .client import *
from .errors import *
from .ratelimit import *
from .request import *
from .response import *
from .route import *

__all__ = (
    builders.__all__
    + client.__all__
    + errors.__all__
    + ratelimit.__all__
    + request.__all__
    + response.__all__
    + route.__all__
)
