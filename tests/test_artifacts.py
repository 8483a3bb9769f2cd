"""
Artifact Lookup Tests
"""

import pytest

from blockchain.artifacts import ArtifactStore
from blockchain.errors import (
    AmbiguousArtifactError,
    ArtifactNotFoundError,
    InvalidArtifactError,
)
from conftest import VERIFIER_BYTECODE, write_artifact


class TestArtifactStore:
    """Test resolving contract names to artifacts"""

    def test_bare_name(self, artifacts_dir):
        """Bare contract name resolves to the single matching artifact"""
        artifact = ArtifactStore(str(artifacts_dir)).get_artifact("Verifier")

        assert artifact.contract_name == "Verifier"
        assert artifact.source_name == "contracts/Verifier.sol"
        assert artifact.fully_qualified_name == "contracts/Verifier.sol:Verifier"
        assert artifact.bytecode == VERIFIER_BYTECODE
        assert artifact.path.endswith("Verifier.json")
        assert not artifact.path.endswith(".dbg.json")

    def test_fully_qualified_name(self, artifacts_dir):
        """Fully-qualified names map straight to a path"""
        artifact = ArtifactStore(str(artifacts_dir)).get_artifact("contracts/Verifier.sol:Verifier")

        assert artifact.contract_name == "Verifier"

    def test_missing_contract(self, artifacts_dir):
        """Unknown contract raises ArtifactNotFoundError"""
        with pytest.raises(ArtifactNotFoundError, match="Groth16Verifier"):
            ArtifactStore(str(artifacts_dir)).get_artifact("Groth16Verifier")

    def test_missing_fully_qualified_name(self, artifacts_dir):
        with pytest.raises(ArtifactNotFoundError):
            ArtifactStore(str(artifacts_dir)).get_artifact("contracts/Other.sol:Verifier")

    def test_missing_directory(self, tmp_path):
        """Uncompiled project is reported as not found"""
        with pytest.raises(ArtifactNotFoundError):
            ArtifactStore(str(tmp_path / "artifacts")).get_artifact("Verifier")

    def test_ambiguous_name(self, artifacts_dir):
        """Two sources defining the same contract need a fully-qualified name"""
        write_artifact(artifacts_dir, "contracts/legacy/Verifier.sol", "Verifier")

        with pytest.raises(AmbiguousArtifactError) as exc_info:
            ArtifactStore(str(artifacts_dir)).get_artifact("Verifier")

        assert "contracts/Verifier.sol:Verifier" in str(exc_info.value)
        assert "contracts/legacy/Verifier.sol:Verifier" in str(exc_info.value)

    def test_build_info_ignored(self, artifacts_dir):
        """build-info JSON never counts as a contract artifact"""
        (artifacts_dir / "build-info" / "Verifier.json").write_text("{}")

        artifact = ArtifactStore(str(artifacts_dir)).get_artifact("Verifier")

        assert "build-info" not in artifact.path

    def test_missing_bytecode(self, tmp_path):
        """Artifact without bytecode is invalid"""
        path = tmp_path / "artifacts" / "contracts" / "Verifier.sol"
        path.mkdir(parents=True)
        (path / "Verifier.json").write_text('{"abi": []}')

        with pytest.raises(InvalidArtifactError, match="bytecode"):
            ArtifactStore(str(tmp_path / "artifacts")).get_artifact("Verifier")

    def test_corrupt_json(self, tmp_path):
        path = tmp_path / "artifacts" / "contracts" / "Verifier.sol"
        path.mkdir(parents=True)
        (path / "Verifier.json").write_text('{"abi": [')

        with pytest.raises(InvalidArtifactError):
            ArtifactStore(str(tmp_path / "artifacts")).get_artifact("Verifier")


class TestContractArtifact:
    """Test deployability flags"""

    def test_interface_not_deployable(self, tmp_path):
        """Interfaces compile to empty bytecode"""
        write_artifact(tmp_path / "artifacts", "contracts/IVerifier.sol", "IVerifier", bytecode="0x")

        artifact = ArtifactStore(str(tmp_path / "artifacts")).get_artifact("IVerifier")

        assert not artifact.is_deployable

    def test_unprefixed_bytecode(self, tmp_path):
        """Bytecode without 0x prefix is normalized"""
        write_artifact(tmp_path / "artifacts", "contracts/Verifier.sol", "Verifier",
                       bytecode=VERIFIER_BYTECODE[2:])

        artifact = ArtifactStore(str(tmp_path / "artifacts")).get_artifact("Verifier")

        assert artifact.bytecode == VERIFIER_BYTECODE
        assert artifact.is_deployable

    def test_link_references(self, tmp_path):
        """Library placeholders mark the artifact as needing linking"""
        write_artifact(
            tmp_path / "artifacts",
            "contracts/Verifier.sol",
            "Verifier",
            bytecode="0x73__$d7b3b1e5e0b7c3b2a6b8e7a9c4d3f2e1ab$__",
            linkReferences={"contracts/Pairing.sol": {"Pairing": [{"length": 20, "start": 1}]}}
        )

        artifact = ArtifactStore(str(tmp_path / "artifacts")).get_artifact("Verifier")

        assert artifact.needs_linking
