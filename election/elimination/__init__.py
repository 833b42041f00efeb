from election.elimination.policy import (
    EliminationPolicy,
    GlobalMinimumPolicy,
    SampledMinimumPolicy,
)
from election.elimination.process import EliminationProcess, run_global, run_sampled

__all__ = [
    "EliminationPolicy",
    "GlobalMinimumPolicy",
    "SampledMinimumPolicy",
    "EliminationProcess",
    "run_global",
    "run_sampled",
]
