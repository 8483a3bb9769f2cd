"""
Deployment Records
Persists where a contract was deployed so later tooling can find it
"""

import os
import json
from datetime import datetime, timezone
from web3 import Web3
from loguru import logger


def save_deployment(directory: str, chain_id: int, deployed_contract) -> str:
    """
    Write <directory>/<chain_id>/<ContractName>.json

    Args:
        directory: Root directory for deployment records
        chain_id: Chain the contract lives on
        deployed_contract: Confirmed DeployedContract

    Returns:
        Path of the written record
    """
    receipt = deployed_contract.receipt
    if receipt is None:
        raise ValueError("Deployment must be confirmed before it can be recorded")

    artifact = deployed_contract.artifact
    record = {
        'contractName': artifact.contract_name,
        'sourceName': artifact.source_name,
        'address': deployed_contract.address,
        'transactionHash': Web3.to_hex(deployed_contract.transaction_hash),
        'blockNumber': receipt['blockNumber'],
        'deployer': deployed_contract.deployer,
        'chainId': chain_id,
        'deployedAt': datetime.now(timezone.utc).isoformat(),
        'abi': artifact.abi,
    }

    chain_dir = os.path.join(directory, str(chain_id))
    os.makedirs(chain_dir, exist_ok=True)

    path = os.path.join(chain_dir, f"{artifact.contract_name}.json")
    with open(path, 'w') as f:
        json.dump(record, f, indent=2)

    logger.success(f"Deployment record written to {path}")
    return path
