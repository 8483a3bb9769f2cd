"""
Verifier Deployment Script
Deploys the compiled Verifier contract and prints its address
"""

import sys
from loguru import logger

from blockchain.artifacts import ArtifactStore
from blockchain.contract_factory import get_contract_factory
from blockchain.provider import connect
from blockchain.signers import get_signers
from utils.config import DeploySettings, load_settings
from utils.deployment_record import save_deployment
from utils.log_config import configure_logging


CONTRACT_NAME = "Verifier"


def deploy_verifier(settings: DeploySettings):
    """
    Deploy Verifier from the first available signer

    Returns:
        Confirmed DeployedContract
    """
    w3 = connect(settings)

    deployer = get_signers(w3, settings)[0]
    logger.info(f"Deploying from: {deployer.address}")

    balance = w3.eth.get_balance(deployer.address)
    logger.info(f"Account balance: {w3.from_wei(balance, 'ether')} ETH")

    Verifier = get_contract_factory(
        w3,
        CONTRACT_NAME,
        deployer,
        ArtifactStore(settings.artifacts_dir),
        gas_limit_multiplier=settings.gas_limit_multiplier,
        confirmation_timeout=settings.confirmation_timeout
    )
    verifier = Verifier.deploy()
    verifier.deployed()

    if settings.deployments_dir:
        save_deployment(settings.deployments_dir, w3.eth.chain_id, verifier)

    return verifier


def main() -> int:
    """Run the deployment; returns the process exit code"""
    configure_logging()

    try:
        settings = load_settings()
        configure_logging(settings.log_level, settings.log_file)

        verifier = deploy_verifier(settings)
        print(f"verifier address: {verifier.address}", flush=True)
        return 0

    except Exception:
        logger.exception("Verifier deployment failed")
        return 1


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
