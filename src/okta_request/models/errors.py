from .exceptions import OktaError


class OrgMissingError(OktaError):
    def __init__(
        self,
        message="Okta organization is not set. Pass org=... or set the OKTA_ORG environment variable to your Okta subdomain.",
    ):
        self.message = message
        super().__init__(self.message)


class ApiKeyMissingError(OktaError):
    def __init__(
        self,
        message="Okta API key is not set. Pass api_key=... or set the OKTA_API_KEY environment variable to a valid API token.",
    ):
        self.message = message
        super().__init__(self.message)
