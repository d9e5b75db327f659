import os
from typing import Mapping
from typing import Optional

from pydantic import BaseModel

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080

_TRUTHY = {"1", "true", "yes", "on"}


def _flag(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() in _TRUTHY


class FunctionConfig(BaseModel):
    """
    Configuration for the function runtime.
    """

    listener: Optional[str] = None
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    # reject inbound MIME strings outside the accepted table instead of
    # decoding them as JSON
    strict_content_type: bool = False
    json_logging: bool = False

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None
    ) -> "FunctionConfig":
        env = os.environ if environ is None else environ
        return cls(
            listener=env.get("FN_LISTENER") or None,
            host=env.get("FN_HOST", DEFAULT_HOST),
            port=int(env.get("FN_PORT", DEFAULT_PORT)),
            strict_content_type=_flag(env.get("FN_STRICT_CONTENT_TYPE")),
            json_logging=_flag(env.get("FN_JSON_LOGGING")),
        )

    @property
    def socket_path(self) -> Optional[str]:
        """Filesystem path of a `unix:` listener, if one is configured."""
        if self.listener and self.listener.startswith("unix:"):
            return self.listener[len("unix:") :]
        return None
