"""
Network Provider
Connects to the JSON-RPC node deployments are sent to
"""

from web3 import Web3
from loguru import logger

from blockchain.errors import NetworkUnavailableError
from utils.config import DeploySettings


def connect(settings: DeploySettings) -> Web3:
    """
    Open a Web3 HTTP connection

    Args:
        settings: Deployment settings (rpc_url, rpc_timeout, chain_id)

    Returns:
        Connected Web3 instance
    """
    w3 = Web3(Web3.HTTPProvider(
        settings.rpc_url,
        request_kwargs={'timeout': settings.rpc_timeout}
    ))

    if not w3.is_connected():
        raise NetworkUnavailableError(f"Cannot reach RPC endpoint at {settings.rpc_url}")

    chain_id = w3.eth.chain_id

    if settings.chain_id is not None and chain_id != settings.chain_id:
        raise NetworkUnavailableError(
            f"RPC endpoint reports chain id {chain_id}, expected {settings.chain_id}"
        )

    logger.info(f"Connected to {settings.rpc_url} (chain id {chain_id})")
    return w3
