""" Endpoint wrappers, one per REST resource. They are independent
of each other and share nothing but the REST client.
"""

from .base import *
from .channels import *
from .guilds import *
from .invites import *
from .messages import *
from .reactions import *

__all__ = (
    base.__all__
    + channels.__all__
    + guilds.__all__
    + invites.__all__
    + messages.__all__
    + reactions.__all__
)
