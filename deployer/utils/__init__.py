"""Utility functions for the deployer."""

from deployer.utils.logging import configure_logging, get_logger
from deployer.utils.records import build_deploy_record, save_deploy_record

__all__ = [
    "build_deploy_record",
    "configure_logging",
    "get_logger",
    "save_deploy_record",
]
