""" A thin asynchronous binding to discord's REST API: typed models,
per-resource endpoint wrappers and a rate limit aware HTTP client.
"""

import logging

__version__ = "0.3.0"

from .api import *
from .models import *
from .resources import *
from .rest import *

logging.getLogger(__name__).addHandler(logging.NullHandler())
