"""
Deployment Settings
Resolves deployment configuration from the environment and .env
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional
from dotenv import find_dotenv, load_dotenv


DEFAULT_RPC_URL = "http://127.0.0.1:8545"


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


def _get_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw, 0)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


@dataclass
class DeploySettings:
    """Configuration for a single deployment run"""

    rpc_url: str = DEFAULT_RPC_URL
    chain_id: Optional[int] = None
    private_keys: List[str] = field(default_factory=list)
    artifacts_dir: str = "artifacts"
    confirmation_timeout: float = 300.0
    rpc_timeout: float = 30.0
    gas_limit_multiplier: float = 1.2
    deployments_dir: Optional[str] = None
    log_level: str = "INFO"
    log_file: Optional[str] = None

    def __repr__(self):
        return (
            f"DeploySettings(rpc_url={self.rpc_url!r}, chain_id={self.chain_id!r}, "
            f"private_keys=<{len(self.private_keys)} configured>, "
            f"artifacts_dir={self.artifacts_dir!r})"
        )


def load_settings(dotenv: bool = True) -> DeploySettings:
    """
    Build settings from environment variables

    Args:
        dotenv: Load a .env file from the working directory first

    Returns:
        DeploySettings
    """
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    keys_raw = os.getenv('DEPLOYER_PRIVATE_KEYS') or os.getenv('DEPLOYER_PRIVATE_KEY') or ""
    private_keys = [key.strip() for key in keys_raw.split(',') if key.strip()]

    multiplier = _get_float('GAS_LIMIT_MULTIPLIER', 1.2)
    if multiplier < 1:
        raise ValueError(f"GAS_LIMIT_MULTIPLIER must be at least 1, got {multiplier}")

    return DeploySettings(
        rpc_url=os.getenv('RPC_URL') or DEFAULT_RPC_URL,
        chain_id=_get_int('CHAIN_ID'),
        private_keys=private_keys,
        artifacts_dir=os.getenv('ARTIFACTS_DIR') or "artifacts",
        confirmation_timeout=_get_float('CONFIRMATION_TIMEOUT', 300.0),
        rpc_timeout=_get_float('RPC_TIMEOUT', 30.0),
        gas_limit_multiplier=multiplier,
        deployments_dir=os.getenv('DEPLOYMENTS_DIR') or None,
        log_level=(os.getenv('LOG_LEVEL') or "INFO").upper(),
        log_file=os.getenv('LOG_FILE') or None,
    )
