"""Constants module for the API response helpers.

This module contains the constants shared by the formatter, the transport
adapters and the tests.
"""

# Wildcard imports make every constant reachable from a single import point.
from .api_response_constants import *  # noqa: F403
from .http_status_constants import *  # noqa: F403
