import os
from dataclasses import dataclass
from typing import Optional

from .filtering import ALWAYS_TRUE, Predicate
from .rules import must_parse_rules, parse_rules


@dataclass
class FilterConfig:
    """Configuration for rule-based log filtering"""

    rules: str = "*"
    enabled: bool = True
    strict: bool = True  # exit on invalid rules instead of raising

    @classmethod
    def _parse_bool_env(cls, key: str, default: str = "false") -> bool:
        """Parse boolean from environment variable"""
        return os.getenv(key, default).lower() == "true"

    @classmethod
    def from_env(cls) -> "FilterConfig":
        """Create configuration from environment variables"""
        return cls(
            rules=os.getenv("LOGFILTER_RULES", "*"),
            enabled=cls._parse_bool_env("LOGFILTER_ENABLED", "true"),
            strict=cls._parse_bool_env("LOGFILTER_STRICT", "true"),
        )

    def build_predicate(self) -> Predicate:
        """Compile the configured rules"""
        if not self.enabled:
            return ALWAYS_TRUE
        if self.strict:
            return must_parse_rules(self.rules)
        return parse_rules(self.rules)


_default_config: Optional[FilterConfig] = None


def get_default_config() -> FilterConfig:
    """Get the default configuration instance"""
    global _default_config
    if _default_config is None:
        _default_config = FilterConfig.from_env()
    return _default_config


def set_default_config(config: Optional[FilterConfig]) -> None:
    """Set the default configuration instance"""
    global _default_config
    _default_config = config
