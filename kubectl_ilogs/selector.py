"""
Pod discovery and selection.

The selector lists pods in the context scope, keeps the ones whose name
contains the filter term, orders them newest first and lets the user pick
one of them or all of them.
"""

import logging
from datetime import datetime, timezone
from typing import Callable

from .exceptions import EmptyScopeError, NoMatchError, UsageError
from .kube import KubeContext, list_pods
from .models import PodRecord, describe_scope
from .prompt import select_one

log = logging.getLogger(__name__)

ALL_LABEL = "All"
SELECT_MESSAGE = "Select pods:"

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def _created(pod: PodRecord) -> datetime:
    return pod.creation_timestamp or _OLDEST


def filter_pods(pods: list[PodRecord], filter_term: str) -> list[PodRecord]:
    """Keep pods whose name contains filter_term (case-sensitive), newest first."""
    matched = [pod for pod in pods if filter_term in pod.name]
    # reverse=True keeps pods with equal timestamps in listing order
    return sorted(matched, key=_created, reverse=True)


class PodSelector:
    """
    Finds candidate pods and resolves the user's choice among them.

    Args:
        kube: Cluster context providing the API client and namespace scope
        prompt: Callable taking a message and the ordered labels and returning
            the chosen label
    """

    def __init__(self, kube: KubeContext, prompt: Callable[[str, list[str]], str] = select_one):
        self.kube = kube
        self.prompt = prompt

    def list_candidates(self, filter_term: str) -> list[PodRecord]:
        """
        Return the pods matching filter_term, most recently created first.

        Raises:
            UsageError: If filter_term is empty
            TransportError: If listing pods fails
            EmptyScopeError: If the scope holds no pods at all
            NoMatchError: If no pod name contains filter_term
        """
        if not filter_term:
            raise UsageError("pod filter is required")

        pods = list_pods(self.kube)
        if not pods:
            raise EmptyScopeError(f"no pods found in {describe_scope(self.kube.namespace)}")

        candidates = filter_pods(pods, filter_term)
        log.debug("%d of %d pods match %r", len(candidates), len(pods), filter_term)
        if not candidates:
            raise NoMatchError(filter_term)
        return candidates

    def resolve_selection(self, candidates: list[PodRecord]) -> list[PodRecord]:
        """
        Ask the user for one pod or all of them.

        Returns the whole candidate list for "All", otherwise a one-element
        list with the first candidate of that name. A label that names no
        candidate yields an empty list.

        Raises:
            PromptError: If the prompt fails
        """
        if not candidates:
            raise ValueError("candidates must not be empty")

        labels = [ALL_LABEL] + [pod.name for pod in candidates]
        choice = self.prompt(SELECT_MESSAGE, labels)
        if choice == ALL_LABEL:
            return candidates

        for pod in candidates:
            if pod.name == choice:
                return [pod]
        log.debug("no candidate named %r", choice)
        return []
