from dex_e2e.matrix.builder import (
    DEFAULT_SIDE_TO_CONTRACT_METHODS,
    expand_scenario,
    is_untestable_combination,
    register_network_scenario,
    register_scenario,
)
from dex_e2e.matrix.case_tree import CaseTree, RegisteredCase

__all__ = [
    "CaseTree",
    "DEFAULT_SIDE_TO_CONTRACT_METHODS",
    "RegisteredCase",
    "expand_scenario",
    "is_untestable_combination",
    "register_network_scenario",
    "register_scenario",
]
