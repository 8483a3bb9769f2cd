"""
Blockchain Interaction Package
Handles node connection, signers, artifact lookup and contract deployment
"""

from .artifacts import ArtifactStore, ContractArtifact
from .contract_factory import ContractFactory, DeployedContract, get_contract_factory
from .provider import connect
from .signers import LocalSigner, NodeSigner, get_signers

__all__ = [
    'ArtifactStore',
    'ContractArtifact',
    'ContractFactory',
    'DeployedContract',
    'get_contract_factory',
    'connect',
    'LocalSigner',
    'NodeSigner',
    'get_signers'
]
