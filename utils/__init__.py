"""
Utilities Package
Settings, logging setup and deployment records
"""

from .config import DeploySettings, load_settings
from .deployment_record import save_deployment
from .log_config import configure_logging

__all__ = [
    'DeploySettings',
    'load_settings',
    'save_deployment',
    'configure_logging'
]
