import logging
import yaml
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class ConfigFile:
    """
    Optional deployment settings (credentials, region, and defaults for the
    reporting flags). Every key is optional.
    """

    @classmethod
    def load(cls, file_path: str) -> "ConfigFile":
        with open(file_path, "r", encoding="UTF-8") as file:
            raw = yaml.load(file, Loader=yaml.SafeLoader)
        if raw is None:
            # Empty file.
            raw = {}
        if not isinstance(raw, dict):
            raise ValueError(
                "Expected a mapping at the top level of {}".format(file_path)
            )
        logger.debug("Loaded configuration from %s", file_path)
        return cls(raw)

    def __init__(self, raw_parsed: Dict[str, Any]) -> None:
        self._raw = raw_parsed

    @property
    def aws_access_key(self) -> Optional[str]:
        return self._raw.get("aws_access_key", None)

    @property
    def aws_access_key_secret(self) -> Optional[str]:
        return self._raw.get("aws_access_key_secret", None)

    @property
    def aws_region(self) -> Optional[str]:
        return self._raw.get("aws_region", None)

    @property
    def scheme(self) -> Optional[str]:
        if "scheme" not in self._raw:
            return None
        value = self._raw["scheme"]
        # A bare `scheme:` entry means "no prefix".
        return "" if value is None else str(value)

    @property
    def fetch_age_s(self) -> Optional[int]:
        return self._optional_int("fetch_age")

    @property
    def period_s(self) -> Optional[int]:
        return self._optional_int("period")

    @property
    def unit(self) -> Optional[str]:
        return self._raw.get("unit", None)

    def has_credentials(self) -> bool:
        return (
            self.aws_access_key is not None
            and self.aws_access_key_secret is not None
        )

    def _optional_int(self, key: str) -> Optional[int]:
        value = self._raw.get(key, None)
        if value is None:
            return None
        return int(value)
