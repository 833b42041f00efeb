from election.experiment.result import ExperimentResult
from election.experiment.runner import (
    ElectionExperiment,
    build_policy,
    run_backward,
    run_trial,
)

__all__ = [
    "ExperimentResult",
    "ElectionExperiment",
    "build_policy",
    "run_backward",
    "run_trial",
]
