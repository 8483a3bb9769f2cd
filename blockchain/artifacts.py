"""
Contract Artifacts
Locates compiled contracts in a Hardhat artifacts tree:

    artifacts/contracts/Verifier.sol/Verifier.json
    artifacts/contracts/Verifier.sol/Verifier.dbg.json   (ignored)
    artifacts/build-info/*.json                          (ignored)
"""

import os
import json
from dataclasses import dataclass, field
from typing import Dict, List
from loguru import logger

from blockchain.errors import (
    AmbiguousArtifactError,
    ArtifactNotFoundError,
    InvalidArtifactError,
)


@dataclass
class ContractArtifact:
    """Compiled contract: ABI plus creation bytecode"""

    contract_name: str
    source_name: str
    abi: List[Dict]
    bytecode: str
    path: str
    link_references: Dict = field(default_factory=dict)

    @property
    def fully_qualified_name(self) -> str:
        return f"{self.source_name}:{self.contract_name}"

    @property
    def is_deployable(self) -> bool:
        """Abstract contracts and interfaces compile to empty bytecode"""
        return self.bytecode not in ("", "0x")

    @property
    def needs_linking(self) -> bool:
        return bool(self.link_references) or "__$" in self.bytecode


class ArtifactStore:
    """
    Resolves contract names to compiled artifacts
    """

    def __init__(self, artifacts_dir: str = "artifacts"):
        """
        Initialize Artifact Store

        Args:
            artifacts_dir: Root of the compiler output
        """
        self.artifacts_dir = artifacts_dir

    def get_artifact(self, name: str) -> ContractArtifact:
        """
        Load an artifact by contract name or fully-qualified name

        Args:
            name: "Verifier" or "contracts/Verifier.sol:Verifier"

        Returns:
            ContractArtifact
        """
        if ':' in name:
            source_name, contract_name = name.rsplit(':', 1)
            path = os.path.join(self.artifacts_dir, source_name, f"{contract_name}.json")
            if not os.path.isfile(path):
                raise ArtifactNotFoundError(
                    f"Artifact for contract \"{name}\" not found in {self.artifacts_dir}"
                )
            return self._load(path)

        matches = self._find(name)

        if not matches:
            raise ArtifactNotFoundError(
                f"Artifact for contract \"{name}\" not found in {self.artifacts_dir}. "
                "Compile the contracts first"
            )

        if len(matches) > 1:
            candidates = sorted(self._fully_qualified_name(path) for path in matches)
            raise AmbiguousArtifactError(
                f"There are multiple artifacts for contract \"{name}\", "
                f"use a fully-qualified name: {', '.join(candidates)}"
            )

        return self._load(matches[0])

    def _find(self, contract_name: str) -> List[str]:
        """Walk the tree for <contract_name>.json, skipping debug files and build-info"""
        if not os.path.isdir(self.artifacts_dir):
            logger.warning(f"Artifacts directory {self.artifacts_dir} does not exist")
            return []

        target = f"{contract_name}.json"
        matches = []

        for root, dirs, files in os.walk(self.artifacts_dir):
            if root == self.artifacts_dir and 'build-info' in dirs:
                dirs.remove('build-info')
            if target in files:
                matches.append(os.path.join(root, target))

        return matches

    def _fully_qualified_name(self, path: str) -> str:
        source_dir = os.path.relpath(os.path.dirname(path), self.artifacts_dir)
        contract_name = os.path.splitext(os.path.basename(path))[0]
        return f"{source_dir.replace(os.sep, '/')}:{contract_name}"

    def _load(self, path: str) -> ContractArtifact:
        try:
            with open(path, 'r') as f:
                contract_json = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise InvalidArtifactError(f"Cannot read artifact {path}: {e}") from e

        if not isinstance(contract_json, dict):
            raise InvalidArtifactError(f"Artifact {path} is not a JSON object")

        missing = [key for key in ('abi', 'bytecode') if key not in contract_json]
        if missing:
            raise InvalidArtifactError(f"Artifact {path} is missing {', '.join(missing)}")

        fqn = self._fully_qualified_name(path)
        default_source, default_name = fqn.rsplit(':', 1)

        bytecode = contract_json['bytecode']
        if isinstance(bytecode, dict):
            # solc standard-json style {"object": "..."}
            bytecode = bytecode.get('object', '')
        if bytecode and not bytecode.startswith('0x'):
            bytecode = '0x' + bytecode

        artifact = ContractArtifact(
            contract_name=contract_json.get('contractName', default_name),
            source_name=contract_json.get('sourceName', default_source),
            abi=contract_json['abi'],
            bytecode=bytecode or '0x',
            path=path,
            link_references=contract_json.get('linkReferences') or {},
        )

        logger.debug(f"Loaded artifact {artifact.fully_qualified_name} from {path}")
        return artifact
