"""Clients for the external tools the pipeline drives."""

from deployer.services.git import GitClient
from deployer.services.heroku import HerokuClient
from deployer.services.localeapp import LocaleappClient
from deployer.services.security import SecurityScanner

__all__ = [
    "GitClient",
    "HerokuClient",
    "LocaleappClient",
    "SecurityScanner",
]
