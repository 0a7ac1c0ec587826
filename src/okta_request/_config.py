import re

from pydantic import BaseModel, Field, field_validator

from ._utils.constants import API_PATH, OKTA_DOMAIN, OKTA_PREVIEW_DOMAIN

_ORG_PATTERN = re.compile(r"^[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?$")


class Config(BaseModel):
    org: str
    api_key: str
    preview: bool = False
    headers: dict[str, str] = Field(default_factory=dict)

    @field_validator("org", mode="before")
    @classmethod
    def validate_org(cls, value: str) -> str:
        # the tenant subdomain only, e.g. "dev-123456" for dev-123456.okta.com
        assert isinstance(value, str) and _ORG_PATTERN.match(value), (
            "Invalid org, expected the Okta subdomain (e.g. 'dev-123456')"
        )
        return value

    @field_validator("api_key", mode="before")
    @classmethod
    def validate_api_key(cls, value: str) -> str:
        assert isinstance(value, str) and value.strip(), "Invalid API key"
        return value

    @property
    def domain(self) -> str:
        return OKTA_PREVIEW_DOMAIN if self.preview else OKTA_DOMAIN

    @property
    def base_url(self) -> str:
        return f"https://{self.org}.{self.domain}{API_PATH}"
