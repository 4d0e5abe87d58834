# asyncontract/tasks/__init__.py
"""
Build tasks: the entry points a build host (or the CLI) calls.
"""

from asyncontract.tasks.generate_contracts import ContractsTaskResult, generate_contracts
from asyncontract.tasks.generate_spec import SpecTaskResult, generate_spec, load_producer_catalog

__all__ = [
    "ContractsTaskResult",
    "SpecTaskResult",
    "generate_contracts",
    "generate_spec",
    "load_producer_catalog",
]
