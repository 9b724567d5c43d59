"""
Utility functions for the stack tooling.

Provides logging setup and output utilities.
"""

from tracer_iac.utils.logger import configure_logging, get_logger
from tracer_iac.utils.outputs import write_outputs_to_env

__all__ = [
    "configure_logging",
    "get_logger",
    "write_outputs_to_env",
]
