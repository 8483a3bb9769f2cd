"""
System Check Script
Verifies configuration, node connection, signer and artifact before deploying
"""

import sys
from loguru import logger

from blockchain.artifacts import ArtifactStore
from blockchain.contract_factory import ContractFactory
from blockchain.provider import connect
from blockchain.signers import get_signers
from utils.config import load_settings
from utils.log_config import configure_logging


CONTRACT_NAME = "Verifier"


class SystemCheck:
    """Runs preflight checks in order; later checks reuse earlier results"""

    def __init__(self):
        self.settings = None
        self.w3 = None
        self.signers = []
        self.artifact = None

    def check_settings(self):
        """Check that the environment parses"""
        logger.info("Checking settings...")
        self.settings = load_settings()
        logger.info(f"  RPC URL: {self.settings.rpc_url}")
        logger.info(f"  Artifacts: {self.settings.artifacts_dir}")
        logger.success("✓ Settings loaded")
        return True

    def check_rpc_connection(self):
        """Check RPC endpoint connection"""
        logger.info("Checking RPC connection...")
        if self.settings is None:
            logger.error("  Settings unavailable - skipping")
            return False

        self.w3 = connect(self.settings)
        logger.success(f"  ✓ Connected (Block: {self.w3.eth.block_number})")
        return True

    def check_signers(self):
        """Check that a deployer exists and report balances"""
        logger.info("Checking signers...")
        if self.w3 is None:
            logger.error("  No RPC connection - skipping")
            return False

        self.signers = get_signers(self.w3, self.settings)

        for index, signer in enumerate(self.signers):
            balance = self.w3.from_wei(self.w3.eth.get_balance(signer.address), 'ether')
            role = "deployer" if index == 0 else f"signer {index}"
            logger.info(f"  {role}: {signer.address} ({balance:.4f} ETH)")

            if index == 0 and balance == 0:
                logger.warning("  ⚠ Deployer has no funds")

        logger.success(f"✓ {len(self.signers)} signer(s) available")
        return True

    def check_artifact(self):
        """Check that the contract artifact resolves and is deployable"""
        logger.info(f"Checking {CONTRACT_NAME} artifact...")
        if self.settings is None:
            logger.error("  Settings unavailable - skipping")
            return False

        self.artifact = ArtifactStore(self.settings.artifacts_dir).get_artifact(CONTRACT_NAME)

        if self.w3 is not None and self.signers:
            # Factory construction rejects abstract and unlinked artifacts
            ContractFactory(self.w3, self.artifact, self.signers[0])
        elif not self.artifact.is_deployable or self.artifact.needs_linking:
            logger.error(f"  ✗ {self.artifact.fully_qualified_name} is not deployable")
            return False

        logger.success(f"  ✓ {self.artifact.fully_qualified_name} ({self.artifact.path})")
        return True

    def run(self) -> int:
        """Run all checks; returns the process exit code"""
        logger.info("=" * 70)
        logger.info("Verifier Deployment System Check")
        logger.info("=" * 70)

        checks = [
            ("Settings", self.check_settings),
            ("RPC Connection", self.check_rpc_connection),
            ("Signers", self.check_signers),
            ("Contract Artifact", self.check_artifact),
        ]

        results = []

        for name, check_func in checks:
            logger.info("")
            try:
                result = check_func()
            except Exception as e:
                logger.error(f"Error in {name}: {e}")
                result = False
            results.append((name, result))

        logger.info("")
        logger.info("=" * 70)
        logger.info("Summary")
        logger.info("=" * 70)

        passed = sum(1 for _, result in results if result)
        total = len(results)

        for name, result in results:
            status = "✓ PASS" if result else "✗ FAIL"
            logger.info(f"  {status}: {name}")

        logger.info("")
        logger.info(f"Total: {passed}/{total} checks passed")

        if passed == total:
            logger.success("✅ Ready to deploy: python deploy.py")
            return 0

        logger.error("❌ Not ready to deploy - fix issues above")
        return 1


def main() -> int:
    configure_logging()

    try:
        settings = load_settings()
        configure_logging(settings.log_level, settings.log_file)
    except ValueError as e:
        # Reported again by check_settings
        logger.error(f"Invalid settings: {e}")

    return SystemCheck().run()


if __name__ == "__main__":
    sys.exit(main())
