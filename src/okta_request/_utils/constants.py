# Environment variables
ENV_OKTA_ORG = "OKTA_ORG"
ENV_OKTA_API_KEY = "OKTA_API_KEY"
ENV_OKTA_PREVIEW = "OKTA_PREVIEW"

# Hosts
OKTA_DOMAIN = "okta.com"
OKTA_PREVIEW_DOMAIN = "oktapreview.com"
API_PATH = "/api/v1/"

# Headers
HEADER_ACCEPT = "Accept"
HEADER_AUTHORIZATION = "Authorization"
HEADER_USER_AGENT = "User-Agent"

CONTENT_TYPE_JSON = "application/json"
AUTH_SCHEME = "SSWS"
USER_AGENT_PREFIX = "okta-request-python"

# Requests
HTTP_METHODS = ("GET", "POST", "PUT", "DELETE")
SUCCESS_STATUS_CODES = frozenset({200, 201, 202, 203, 204, 205, 206})

# Logging
LOGGER_NAME = "okta_request"
