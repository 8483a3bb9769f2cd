"""
Shared test fixtures
"""

import json
import sys
import pytest
from loguru import logger
from web3 import Web3, EthereumTesterProvider


# Creation code returning a one-byte runtime (STOP)
VERIFIER_BYTECODE = "0x6001600c60003960016000f300"

VERIFIER_ABI = [
    {
        "inputs": [],
        "stateMutability": "nonpayable",
        "type": "constructor"
    }
]

CONFIG_VARS = [
    'RPC_URL',
    'CHAIN_ID',
    'DEPLOYER_PRIVATE_KEY',
    'DEPLOYER_PRIVATE_KEYS',
    'ARTIFACTS_DIR',
    'CONFIRMATION_TIMEOUT',
    'RPC_TIMEOUT',
    'GAS_LIMIT_MULTIPLIER',
    'DEPLOYMENTS_DIR',
    'LOG_LEVEL',
    'LOG_FILE'
]


def write_artifact(artifacts_dir, source_name, contract_name, bytecode=VERIFIER_BYTECODE, **extra):
    """Write a Hardhat-style artifact and its debug companion"""
    contract_dir = artifacts_dir / source_name
    contract_dir.mkdir(parents=True, exist_ok=True)

    artifact = {
        "_format": "hh-sol-artifact-1",
        "contractName": contract_name,
        "sourceName": source_name,
        "abi": VERIFIER_ABI,
        "bytecode": bytecode,
        "deployedBytecode": "0x00",
        "linkReferences": {},
        "deployedLinkReferences": {}
    }
    artifact.update(extra)

    path = contract_dir / f"{contract_name}.json"
    path.write_text(json.dumps(artifact))
    (contract_dir / f"{contract_name}.dbg.json").write_text(
        json.dumps({"_format": "hh-sol-dbg-1", "buildInfo": "../../build-info/abc.json"})
    )
    return path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate every test from the developer's environment and .env"""
    for name in CONFIG_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def reset_logger():
    """Entry points replace loguru sinks; restore the default afterwards"""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def artifacts_dir(tmp_path):
    """Artifacts tree holding a compiled Verifier"""
    root = tmp_path / "artifacts"
    write_artifact(root, "contracts/Verifier.sol", "Verifier")
    (root / "build-info").mkdir()
    (root / "build-info" / "abc.json").write_text("{}")
    return root


@pytest.fixture
def tester_w3():
    """In-process chain with ten funded, unlocked accounts"""
    return Web3(EthereumTesterProvider())
