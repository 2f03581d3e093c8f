#!/usr/bin/env python3
"""
Configuration Management
========================
Loads registrar affiliate ids from the environment or a .env file.
"""

import os
from pathlib import Path
from dataclasses import dataclass
from typing import Dict, Optional


@dataclass
class Config:
    """Application configuration"""
    godaddy_affiliate_id: Optional[str] = None
    namecheap_affiliate_id: Optional[str] = None

    @property
    def affiliate_ids(self) -> Dict[str, str]:
        """Registrar key -> affiliate id, for the ids that are set."""
        ids = {
            'godaddy': self.godaddy_affiliate_id,
            'namecheap': self.namecheap_affiliate_id,
        }
        return {k: v for k, v in ids.items() if v}


def load_env(env_path: Path = None) -> dict:
    """Load environment variables from .env file."""
    if env_path is None:
        env_path = Path.cwd() / '.env'

    env_vars = {}
    if env_path.exists():
        for line in env_path.read_text().splitlines():
            line = line.strip()
            if '=' in line and not line.startswith('#'):
                key, value = line.split('=', 1)
                value = value.strip().strip('"').strip("'")
                env_vars[key.strip()] = value
                os.environ.setdefault(key.strip(), value)

    return env_vars


def get_config(env_path: Path = None) -> Config:
    """Get configuration from environment."""
    env = load_env(env_path)

    return Config(
        godaddy_affiliate_id=env.get('GODADDY_AFFILIATE_ID') or os.environ.get('GODADDY_AFFILIATE_ID'),
        namecheap_affiliate_id=env.get('NAMECHEAP_AFFILIATE_ID') or os.environ.get('NAMECHEAP_AFFILIATE_ID'),
    )


# Singleton config
_config = None

def config() -> Config:
    """Get the singleton config instance."""
    global _config
    if _config is None:
        _config = get_config()
    return _config
