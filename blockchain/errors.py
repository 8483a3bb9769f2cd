"""
Deployment Errors
"""


class DeploymentError(Exception):
    """Base class for errors raised by the deployment tooling"""


class NetworkUnavailableError(DeploymentError):
    """RPC endpoint unreachable or on the wrong chain"""


class NoSignerError(DeploymentError):
    """No account is available to sign the deployment"""


class ArtifactError(DeploymentError):
    """Compiled contract artifact problem"""


class ArtifactNotFoundError(ArtifactError):
    pass


class AmbiguousArtifactError(ArtifactError):
    pass


class InvalidArtifactError(ArtifactError):
    pass


class DeploymentFailedError(DeploymentError):
    """Deployment transaction reverted or left no code behind"""
