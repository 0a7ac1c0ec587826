from dataclasses import dataclass, field
from typing import Any, Mapping, Union

from httpx import USE_CLIENT_DEFAULT

# option name -> httpx keyword argument
OPTION_KWARGS = {
    "query": "params",
    "headers": "headers",
    "body": "content",
    "json": "json",
    "form_params": "data",
}


@dataclass
class RequestSpec:
    """Encapsulates the configuration for making an HTTP request.

    Built from the option bag accumulated by a ``Request``: recognised option
    names are translated to the matching httpx keyword arguments, and any other
    option is kept in ``extra`` and forwarded to the client untouched. Query
    and header values that are not mappings (a query string, a list of header
    tuples) are forwarded as they are.
    """

    method: str
    endpoint: str
    params: Any = field(default_factory=dict)
    headers: Any = field(default_factory=dict)
    content: Any | None = None
    json: Any | None = None
    data: Any | None = None
    timeout: Union[int, float, None, Any] = USE_CLIENT_DEFAULT
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_options(
        cls, method: str, endpoint: str, options: Mapping[str, Any]
    ) -> "RequestSpec":
        spec = cls(method=method, endpoint=endpoint)

        for key, value in options.items():
            if key == "timeout":
                spec.timeout = _timeout_kwarg(value)
            elif key in OPTION_KWARGS:
                attr = OPTION_KWARGS[key]
                if attr in ("params", "headers") and isinstance(value, Mapping):
                    value = dict(value)
                setattr(spec, attr, value)
            else:
                spec.extra[key] = value

        return spec

    def to_httpx_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for ``httpx.Client.request``, only those that are set."""
        kwargs: dict[str, Any] = {}
        if self.params:
            kwargs["params"] = self.params
        if self.headers:
            kwargs["headers"] = self.headers
        if self.content is not None:
            kwargs["content"] = self.content
        if self.json is not None:
            kwargs["json"] = self.json
        if self.data is not None:
            kwargs["data"] = self.data
        if self.timeout is not USE_CLIENT_DEFAULT:
            kwargs["timeout"] = self.timeout
        kwargs.update(self.extra)
        return kwargs


def _timeout_kwarg(value: Any) -> Any:
    # numeric 0 means wait indefinitely; httpx.Timeout and tuples pass through
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return None if value == 0 else float(value)
    return value
