"""Constants for API response values.

Payload field names, status labels and content types used when shaping
success and error responses.
"""

# Content types
CONTENT_TYPE_JSON = "application/json"

# Header names
HEADER_CONTENT_TYPE = "Content-Type"

# Payload field names
FIELD_STATUS = "status"
FIELD_MESSAGE = "message"
FIELD_DATA = "data"

# Payload status labels
STATUS_SUCCESS = "success"
STATUS_ERROR = "error"

# Separator used when a header carries several values
HEADER_VALUE_SEPARATOR = ", "

# Message sent when a payload cannot be serialized
ENCODING_FAILURE_MESSAGE = "Failed to encode response payload"
