"""
Kubernetes client access for kubectl-ilogs.

Everything that talks to the cluster lives here: loading the configuration,
resolving which namespace to look in, and listing pods. The result of loading
is a KubeContext that is passed explicitly to whoever needs the cluster, so no
client state is kept at module level.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml
from kubernetes import client, config
from kubernetes.client.exceptions import ApiException
from urllib3.exceptions import HTTPError

from .exceptions import ConfigError, TransportError
from .models import PodRecord, describe_scope

log = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "default"
SERVICE_ACCOUNT_NAMESPACE_FILE = Path("/var/run/secrets/kubernetes.io/serviceaccount/namespace")

# unreadable or malformed kubeconfig files surface as these rather than ConfigException
UNREADABLE_CONFIG_ERRORS = (yaml.YAMLError, OSError)


@dataclass(frozen=True)
class KubeContext:
    """
    Cluster access for one invocation.

    Attributes:
        core: CoreV1Api client used for pod listing
        namespace: Namespace to list pods in; empty string means all namespaces
    """

    core: client.CoreV1Api
    namespace: str

    @property
    def all_namespaces(self) -> bool:
        return not self.namespace


def resolve_namespace(kubeconfig: str | None, context: str | None) -> str:
    """
    Return the namespace configured for a kubeconfig context.

    Uses the named context when given, the active one otherwise. A context
    without a namespace falls back to "default".

    Raises:
        ConfigError: If the kubeconfig cannot be read or the context does not exist
    """
    try:
        contexts, active_context = config.list_kube_config_contexts(config_file=kubeconfig)
    except (config.ConfigException, *UNREADABLE_CONFIG_ERRORS) as e:
        raise ConfigError(str(e)) from e

    if context:
        active_context = next((c for c in contexts or [] if c.get("name") == context), None)
        if active_context is None:
            raise ConfigError(f"context '{context}' not found in kubeconfig")

    if not active_context:
        return DEFAULT_NAMESPACE
    return active_context.get("context", {}).get("namespace") or DEFAULT_NAMESPACE


def _incluster_namespace() -> str:
    try:
        return SERVICE_ACCOUNT_NAMESPACE_FILE.read_text().strip() or DEFAULT_NAMESPACE
    except OSError:
        return DEFAULT_NAMESPACE


def load_kube(
    kubeconfig: str | None = None,
    context: str | None = None,
    namespace: str | None = None,
    all_namespaces: bool = False,
) -> KubeContext:
    """
    Load the Kubernetes configuration and build the context for this run.

    When neither a kubeconfig path nor a context was asked for and no
    kubeconfig can be found, the in-cluster service account configuration is
    tried instead.

    Args:
        kubeconfig: Path to kubeconfig (defaults to the client's loading rules)
        context: Kubeconfig context name (defaults to the current context)
        namespace: Explicit namespace, overriding the one from the context
        all_namespaces: List across all namespaces; namespace is ignored

    Returns:
        KubeContext: API client plus the resolved namespace scope

    Raises:
        ConfigError: If no usable configuration is found
    """
    in_cluster = False
    try:
        config.load_kube_config(config_file=kubeconfig, context=context)
    except config.ConfigException as e:
        if kubeconfig or context:
            raise ConfigError(str(e)) from e
        try:
            config.load_incluster_config()
        except config.ConfigException:
            raise ConfigError(str(e)) from e
        in_cluster = True
    except UNREADABLE_CONFIG_ERRORS as e:
        raise ConfigError(str(e)) from e

    if all_namespaces:
        scope = ""
    elif namespace:
        scope = namespace
    elif in_cluster:
        scope = _incluster_namespace()
    else:
        scope = resolve_namespace(kubeconfig, context)

    log.debug("listing scope: %s", describe_scope(scope))
    return KubeContext(core=client.CoreV1Api(), namespace=scope)


def list_pods(kube: KubeContext) -> list[PodRecord]:
    """
    List every pod visible in the context scope.

    Raises:
        TransportError: If the API call fails; the client's message is kept
        ConfigError: If refreshing the kubeconfig credentials fails
    """
    try:
        if kube.all_namespaces:
            pods = kube.core.list_pod_for_all_namespaces(watch=False)
        else:
            pods = kube.core.list_namespaced_pod(namespace=kube.namespace, watch=False)
    except (ApiException, HTTPError) as e:
        raise TransportError(str(e)) from e
    except config.ConfigException as e:
        raise ConfigError(str(e)) from e

    return [PodRecord.from_pod(pod) for pod in pods.items]
