"""
Signers
Accounts able to authorize the deployment transaction.

Two kinds are supported:
- Local signers: private keys from the environment, signed in-process
- Node signers: accounts unlocked on the RPC node (Hardhat, Anvil, Ganache)
"""

from typing import Dict, List, Union
from web3 import Web3
from eth_account import Account
from eth_account.signers.local import LocalAccount
from hexbytes import HexBytes
from loguru import logger

from blockchain.errors import NoSignerError
from utils.config import DeploySettings


class LocalSigner:
    """Signs transactions with a private key held in memory"""

    def __init__(self, account: LocalAccount):
        self.account = account
        self.address = account.address

    @classmethod
    def from_key(cls, private_key: str) -> "LocalSigner":
        try:
            return cls(Account.from_key(private_key))
        except (ValueError, TypeError) as e:
            raise NoSignerError(f"Invalid deployer private key: {type(e).__name__}") from e

    def send_transaction(self, w3: Web3, transaction: Dict) -> HexBytes:
        """
        Sign locally and broadcast as a raw transaction

        Args:
            w3: Web3 instance
            transaction: Fully built transaction dict

        Returns:
            Transaction hash
        """
        signed_tx = self.account.sign_transaction(transaction)
        return w3.eth.send_raw_transaction(signed_tx.raw_transaction)

    def __repr__(self):
        return f"LocalSigner({self.address})"


class NodeSigner:
    """Account managed and unlocked by the connected node"""

    def __init__(self, address: str):
        self.address = Web3.to_checksum_address(address)

    def send_transaction(self, w3: Web3, transaction: Dict) -> HexBytes:
        # The node signs with its own chain id
        tx = {key: value for key, value in transaction.items() if key != 'chainId'}
        tx['from'] = self.address
        return w3.eth.send_transaction(tx)

    def __repr__(self):
        return f"NodeSigner({self.address})"


Signer = Union[LocalSigner, NodeSigner]


def get_signers(w3: Web3, settings: DeploySettings) -> List[Signer]:
    """
    List available signers, deployer first

    Configured private keys take precedence over node accounts.

    Args:
        w3: Web3 instance
        settings: Deployment settings

    Returns:
        Non-empty list of signers
    """
    if settings.private_keys:
        signers = [LocalSigner.from_key(key) for key in settings.private_keys]
        logger.debug(f"Loaded {len(signers)} local signer(s)")
    else:
        signers = [NodeSigner(address) for address in w3.eth.accounts]
        logger.debug(f"Node exposes {len(signers)} account(s)")

    if not signers:
        raise NoSignerError(
            "No signer available: set DEPLOYER_PRIVATE_KEY or use a node with unlocked accounts"
        )

    return signers
