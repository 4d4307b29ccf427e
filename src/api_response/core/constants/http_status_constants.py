"""Constants for HTTP status codes.

Only the codes the response helpers default to are listed here.
"""

# 2xx Success
HTTP_200_OK = 200

# 4xx Client Errors
HTTP_400_BAD_REQUEST = 400

# 5xx Server Errors
HTTP_500_INTERNAL_SERVER_ERROR = 500
