from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest
from kubernetes import client

from kubectl_ilogs.kube import KubeContext

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)

KUBECONFIG = """
apiVersion: v1
kind: Config
current-context: dev
clusters:
- name: local
  cluster:
    server: https://127.0.0.1:6443
users:
- name: admin
  user:
    token: not-a-real-token
contexts:
- name: dev
  context:
    cluster: local
    user: admin
    namespace: team-a
- name: bare
  context:
    cluster: local
    user: admin
"""


def make_pod(name, namespace="default", minutes=0, created=...):
    """Build a V1Pod created `minutes` after T0."""
    if created is ...:
        created = T0 + timedelta(minutes=minutes)
    return client.V1Pod(
        metadata=client.V1ObjectMeta(name=name, namespace=namespace, creation_timestamp=created)
    )


def set_pods(core, pods):
    core.list_namespaced_pod.return_value = client.V1PodList(items=pods)
    core.list_pod_for_all_namespaces.return_value = client.V1PodList(items=pods)


@pytest.fixture
def core():
    core = MagicMock(spec=client.CoreV1Api)
    set_pods(core, [])
    return core


@pytest.fixture
def kube(core):
    return KubeContext(core=core, namespace="default")


@pytest.fixture
def kubeconfig(tmp_path):
    path = tmp_path / "config"
    path.write_text(KUBECONFIG)
    return str(path)
