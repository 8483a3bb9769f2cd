"""
Contract Factory
Binds a compiled artifact to a signer and deploys it
"""

from typing import Dict, Optional
from web3 import Web3
from web3.utils.address import get_create_address
from hexbytes import HexBytes
from loguru import logger

from blockchain.artifacts import ArtifactStore, ContractArtifact
from blockchain.errors import DeploymentFailedError, InvalidArtifactError
from blockchain.signers import Signer


class DeployedContract:
    """
    Handle to a contract-creation transaction and, once confirmed, the contract
    """

    def __init__(
        self,
        w3: Web3,
        artifact: ContractArtifact,
        address: str,
        transaction_hash: HexBytes,
        deployer: str,
        confirmation_timeout: float = 300
    ):
        self.w3 = w3
        self.artifact = artifact
        self.address = address
        self.transaction_hash = transaction_hash
        self.deployer = deployer
        self.confirmation_timeout = confirmation_timeout
        self.receipt = None
        self.contract = None

    @property
    def abi(self):
        return self.artifact.abi

    def deployed(self, timeout: Optional[float] = None) -> "DeployedContract":
        """
        Wait until the creation transaction is mined and code is at the address

        Args:
            timeout: Seconds to wait for the receipt (None = factory default)

        Returns:
            self, with receipt and contract populated
        """
        if self.receipt is not None:
            return self

        tx_hex = Web3.to_hex(self.transaction_hash)
        logger.info(f"Waiting for confirmation of {tx_hex}...")

        receipt = self.w3.eth.wait_for_transaction_receipt(
            self.transaction_hash,
            timeout=timeout if timeout is not None else self.confirmation_timeout
        )

        if receipt['status'] != 1:
            raise DeploymentFailedError(
                f"Deployment of {self.artifact.contract_name} reverted (tx {tx_hex})"
            )

        contract_address = receipt['contractAddress']
        if not contract_address:
            raise DeploymentFailedError(f"Receipt for {tx_hex} has no contract address")

        contract_address = Web3.to_checksum_address(contract_address)
        code = self.w3.eth.get_code(contract_address)

        if len(code) == 0:
            raise DeploymentFailedError(f"No contract code at {contract_address} after {tx_hex}")

        self.address = contract_address
        self.receipt = receipt
        self.contract = self.w3.eth.contract(address=contract_address, abi=self.abi)

        logger.success(
            f"{self.artifact.contract_name} deployed at {contract_address} "
            f"(block {receipt['blockNumber']}, gas used {receipt['gasUsed']})"
        )
        return self


class ContractFactory:
    """
    Deploys one compiled contract from one signer
    """

    def __init__(
        self,
        w3: Web3,
        artifact: ContractArtifact,
        signer: Signer,
        gas_limit_multiplier: float = 1.2,
        confirmation_timeout: float = 300
    ):
        """
        Initialize Contract Factory

        Args:
            w3: Web3 instance
            artifact: Deployable artifact
            signer: Account paying for and signing the deployment
            gas_limit_multiplier: Buffer applied to the gas estimate
            confirmation_timeout: Default receipt wait in seconds
        """
        if not artifact.is_deployable:
            raise InvalidArtifactError(
                f"{artifact.fully_qualified_name} is abstract and can't be deployed"
            )
        if artifact.needs_linking:
            raise InvalidArtifactError(
                f"{artifact.fully_qualified_name} has unlinked library references"
            )

        self.w3 = w3
        self.artifact = artifact
        self.signer = signer
        self.gas_limit_multiplier = gas_limit_multiplier
        self.confirmation_timeout = confirmation_timeout

        self._contract = w3.eth.contract(abi=artifact.abi, bytecode=artifact.bytecode)

    def build_deploy_transaction(self, *args, overrides: Optional[Dict] = None) -> Dict:
        """
        Build the contract-creation transaction

        Args:
            *args: Constructor arguments
            overrides: Transaction fields to force (gas, nonce, value, fees)

        Returns:
            Transaction dict ready to sign
        """
        sender = self.signer.address
        constructor = self._contract.constructor(*args)

        if overrides and 'from' in overrides:
            raise ValueError("'from' cannot be overridden; it is always the factory's signer")

        tx_params = {'from': sender}
        tx_params.update(overrides or {})

        if 'nonce' not in tx_params:
            tx_params['nonce'] = self.w3.eth.get_transaction_count(sender, 'pending')

        if 'gas' not in tx_params:
            estimate_params = {'from': sender}
            if 'value' in tx_params:
                estimate_params['value'] = tx_params['value']
            gas_estimate = constructor.estimate_gas(estimate_params)
            tx_params['gas'] = int(gas_estimate * self.gas_limit_multiplier)

        transaction = constructor.build_transaction(tx_params)
        transaction['from'] = sender

        logger.info(f"Gas limit: {transaction['gas']}")
        if 'maxFeePerGas' in transaction:
            logger.info(f"Max fee: {self.w3.from_wei(transaction['maxFeePerGas'], 'gwei')} gwei")
        elif 'gasPrice' in transaction:
            logger.info(f"Gas price: {self.w3.from_wei(transaction['gasPrice'], 'gwei')} gwei")

        return transaction

    def deploy(self, *args, overrides: Optional[Dict] = None) -> DeployedContract:
        """
        Send the creation transaction without waiting for it to be mined

        Args:
            *args: Constructor arguments
            overrides: Transaction fields to force

        Returns:
            DeployedContract holding the predicted address and tx hash
        """
        logger.info(f"Deploying {self.artifact.contract_name} from {self.signer.address}")

        transaction = self.build_deploy_transaction(*args, overrides=overrides)
        predicted_address = get_create_address(self.signer.address, transaction['nonce'])

        tx_hash = self.signer.send_transaction(self.w3, transaction)
        logger.info(f"Transaction sent: {Web3.to_hex(tx_hash)}")

        return DeployedContract(
            self.w3,
            self.artifact,
            predicted_address,
            tx_hash,
            self.signer.address,
            confirmation_timeout=self.confirmation_timeout
        )


def get_contract_factory(
    w3: Web3,
    name: str,
    signer: Signer,
    store: ArtifactStore,
    gas_limit_multiplier: float = 1.2,
    confirmation_timeout: float = 300
) -> ContractFactory:
    """
    Resolve a contract by name and bind it to a signer

    Args:
        w3: Web3 instance
        name: Contract name or fully-qualified name
        signer: Deployer
        store: Artifact lookup
        gas_limit_multiplier: Buffer applied to the gas estimate
        confirmation_timeout: Default receipt wait in seconds

    Returns:
        ContractFactory
    """
    artifact = store.get_artifact(name)
    return ContractFactory(
        w3,
        artifact,
        signer,
        gas_limit_multiplier=gas_limit_multiplier,
        confirmation_timeout=confirmation_timeout
    )
