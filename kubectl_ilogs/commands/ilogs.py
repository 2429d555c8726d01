"""Ilogs command - Pick pods by name substring for log viewing"""

import logging
from datetime import datetime, timezone
from functools import partial
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from kubectl_ilogs.exceptions import IlogsError, UsageError
from kubectl_ilogs.kube import load_kube
from kubectl_ilogs.models import LogRequest, PodRecord
from kubectl_ilogs.prompt import select_one
from kubectl_ilogs.selector import PodSelector

console = Console()
err_console = Console(stderr=True)

log = logging.getLogger(__name__)


def ilogs_wrapper(
    filter_term: str = typer.Argument(..., metavar="FILTER", help="Substring to match in pod names"),
    container: Optional[str] = typer.Option(
        None, "--container", "-c", help="Container name. If omitted, logs from all containers are shown."
    ),
    tail: int = typer.Option(
        100, "--tail", "-f", help="Lines of recent log file to display"
    ),
    all_namespaces: bool = typer.Option(
        False, "--all-namespaces", "-A",
        help="List pods across all namespaces. Namespace in current context is ignored even if set with --namespace."
    ),
    namespace: Optional[str] = typer.Option(
        None, "--namespace", "-n", help="Namespace to search pods in (ignored if --all-namespaces is set)"
    ),
    context: Optional[str] = typer.Option(
        None, "--context", help="Kubernetes context to use"
    ),
    kubeconfig: Optional[str] = typer.Option(
        None, "--kubeconfig", help="Path to the kubeconfig file"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Print debug logging"
    ),
):
    """Select pods whose name contains FILTER, newest first."""
    setup_logging(verbose)
    try:
        ilogs(
            filter_term=filter_term,
            container=container,
            tail=tail,
            all_namespaces=all_namespaces,
            namespace=namespace,
            context=context,
            kubeconfig=kubeconfig,
        )
    except IlogsError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)


def setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )
    # the kubernetes client logs every request body at debug level
    logging.getLogger("kubernetes").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def ilogs(
    filter_term: str,
    container: str | None = None,
    tail: int = 100,
    all_namespaces: bool = False,
    namespace: str | None = None,
    context: str | None = None,
    kubeconfig: str | None = None,
) -> list[LogRequest]:
    """
    Find pods by name substring, let the user pick, and prepare log requests.

    Runs in three phases: validate (check the log options before touching the
    cluster), complete (list, filter and select pods) and run (build one log
    request per selected pod and show the selection). Log lines are not fetched.
    """
    validate(container, tail)
    selected = complete(filter_term, all_namespaces, namespace, context, kubeconfig)
    return run(selected, container, tail)


def complete(
    filter_term: str,
    all_namespaces: bool,
    namespace: str | None,
    context: str | None,
    kubeconfig: str | None,
) -> list[PodRecord]:
    if not filter_term:
        raise UsageError("pod filter is required")

    kube = load_kube(
        kubeconfig=kubeconfig,
        context=context,
        namespace=namespace,
        all_namespaces=all_namespaces,
    )
    selector = PodSelector(kube, prompt=partial(select_one, console=console))
    candidates = selector.list_candidates(filter_term)
    return selector.resolve_selection(candidates)


def validate(container: str | None, tail: int):
    if tail < 0:
        raise UsageError(f"--tail must not be negative, got {tail}")
    if container is not None and not container.strip():
        raise UsageError("--container must not be blank")


def build_log_requests(
    selected: list[PodRecord], container: str | None, tail: int
) -> list[LogRequest]:
    return [LogRequest(pod=pod, container=container, tail_lines=tail) for pod in selected]


def format_age(created: datetime | None, now: datetime | None = None) -> str:
    """Format the time since created the way kubectl does (5d, 3h, 12m, 40s)."""
    if created is None:
        return "<unknown>"
    now = now or datetime.now(timezone.utc)
    seconds = max(int((now - created).total_seconds()), 0)
    if seconds >= 86400:
        return f"{seconds // 86400}d"
    if seconds >= 3600:
        return f"{seconds // 3600}h"
    if seconds >= 60:
        return f"{seconds // 60}m"
    return f"{seconds}s"


def run(selected: list[PodRecord], container: str | None, tail: int) -> list[LogRequest]:
    requests = build_log_requests(selected, container, tail)
    if not requests:
        console.print("[yellow]No pods selected[/yellow]")
        return requests

    table = Table(title=f"Selected Pods (last {tail} lines)")
    table.add_column("Namespace", style="cyan", no_wrap=True)
    table.add_column("Pod Name", style="cyan", no_wrap=True)
    table.add_column("Age", style="magenta", justify="right")
    table.add_column("Container", style="yellow")

    for request in requests:
        table.add_row(
            request.pod.namespace,
            request.pod.name,
            format_age(request.pod.creation_timestamp),
            request.container or "(all)",
        )

    console.print()
    console.print(table)
    console.print()
    log.debug("log streaming is not performed; %d request(s) prepared", len(requests))
    return requests
