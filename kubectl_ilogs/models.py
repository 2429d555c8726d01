"""Plain records passed between the selector and the log stage."""

from dataclasses import dataclass
from datetime import datetime

from kubernetes import client


@dataclass(frozen=True)
class PodRecord:
    name: str
    namespace: str
    creation_timestamp: datetime | None = None

    @classmethod
    def from_pod(cls, pod: client.V1Pod) -> "PodRecord":
        return cls(
            name=pod.metadata.name,
            namespace=pod.metadata.namespace,
            creation_timestamp=pod.metadata.creation_timestamp,
        )


@dataclass(frozen=True)
class LogRequest:
    """One pod (and optionally one container) to fetch trailing log lines from."""

    pod: PodRecord
    container: str | None
    tail_lines: int


def describe_scope(namespace: str) -> str:
    """Human label for a listing scope; the empty namespace means all of them."""
    if not namespace:
        return "all namespaces"
    return f"namespace '{namespace}'"
