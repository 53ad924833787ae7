"""
Process-reaping integration for msbuildkit.
"""

from msbuildkit.process.killing_veto import (
    MsBuildKillingVeto,
    ProcessSnapshot,
    VetoCause,
    VETO_MESSAGE,
)

__all__ = [
    "MsBuildKillingVeto",
    "ProcessSnapshot",
    "VetoCause",
    "VETO_MESSAGE",
]
