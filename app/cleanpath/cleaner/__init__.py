"""Traversal and selective deletion engine.

This module provides candidate selection, pre-deletion backup, the
safe-mode confirmation gate, deletion, and the walker that ties them
together for a cleanup run.
"""

from cleanpath.cleaner.backup import BackupWriter
from cleanpath.cleaner.config import CleanConfig, check_config
from cleanpath.cleaner.errors import (
    BackupConflictError,
    ConfigurationError,
    InvalidPatternError,
    TargetNotFoundError,
)
from cleanpath.cleaner.gate import (
    ConfirmationGate,
    ConsoleDecisions,
    DecisionProvider,
    ScriptedDecisions,
)
from cleanpath.cleaner.matcher import PatternMatcher, split_pattern_list
from cleanpath.cleaner.models import (
    ActionResult,
    Candidate,
    CandidateKind,
    CandidateReason,
    DirectoryPassResult,
    FailureKind,
    RunResult,
    SelectionResult,
    WalkState,
)
from cleanpath.cleaner.operator import DeletionExecutor
from cleanpath.cleaner.selector import CandidateSelector
from cleanpath.cleaner.transcript import Transcript
from cleanpath.cleaner.walker import Walker

__all__ = [
    "ActionResult",
    "BackupConflictError",
    "BackupWriter",
    "Candidate",
    "CandidateKind",
    "CandidateReason",
    "CandidateSelector",
    "CleanConfig",
    "ConfigurationError",
    "ConfirmationGate",
    "ConsoleDecisions",
    "DecisionProvider",
    "DeletionExecutor",
    "DirectoryPassResult",
    "FailureKind",
    "InvalidPatternError",
    "PatternMatcher",
    "RunResult",
    "ScriptedDecisions",
    "SelectionResult",
    "TargetNotFoundError",
    "Transcript",
    "WalkState",
    "Walker",
    "check_config",
    "split_pattern_list",
]
