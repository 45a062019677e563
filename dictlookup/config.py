#!/usr/bin/env python3
"""
Centralized Configuration Management for Dictionary Lookup
Manages the lookup endpoint, request headers and logging settings
"""

import os
from typing import Optional
from urllib.parse import quote


class LookupConfig:
    """Centralized configuration for the lookup tool"""

    # Endpoint Configuration
    BASE_URL = 'https://www.wordnik.com/words/'
    USER_AGENT = (
        'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
        '(KHTML, like Gecko) Chrome/74.0.3729.169 Safari/537.36'
    )

    # Request Settings (seconds)
    TIMEOUT = 30.0

    # Logging Configuration
    LOGGING = {
        'level': 'WARNING',
        'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    }

    def __init__(self, base_url: Optional[str] = None, user_agent: Optional[str] = None,
                 timeout: Optional[float] = None):
        self.base_url = base_url if base_url is not None else self.BASE_URL
        self.user_agent = user_agent if user_agent is not None else self.USER_AGENT
        self.timeout = timeout if timeout is not None else self.TIMEOUT

    def word_url(self, word: str) -> str:
        """Get the lookup page URL for a word"""
        return self.base_url + quote(word, safe='')

    @classmethod
    def from_env(cls) -> 'LookupConfig':
        """Create configuration from environment variables"""
        timeout = None
        if os.getenv('DICTLOOKUP_TIMEOUT'):
            try:
                timeout = float(os.getenv('DICTLOOKUP_TIMEOUT'))
            except ValueError:
                raise ValueError(
                    f"DICTLOOKUP_TIMEOUT must be a number, got {os.getenv('DICTLOOKUP_TIMEOUT')!r}"
                )

        return cls(
            base_url=os.getenv('DICTLOOKUP_BASE_URL') or None,
            user_agent=os.getenv('DICTLOOKUP_USER_AGENT') or None,
            timeout=timeout,
        )


# Global configuration instance
config = LookupConfig()


def validate_config(conf: Optional[LookupConfig] = None) -> bool:
    """Validate configuration settings"""
    conf = conf or config
    errors = []

    if not conf.base_url.startswith(('http://', 'https://')):
        errors.append(f"Base URL must be http(s): {conf.base_url}")
    if not conf.base_url.endswith('/'):
        errors.append(f"Base URL must end with '/': {conf.base_url}")
    if not conf.user_agent:
        errors.append("Missing User-Agent")
    if conf.timeout <= 0:
        errors.append(f"Timeout must be positive: {conf.timeout}")

    if errors:
        raise ValueError(f"Configuration validation failed: {', '.join(errors)}")

    return True
