"""Shared test fixtures for podcheck."""

from __future__ import annotations

from pathlib import Path

import pytest

from podcheck.models.errors import Diagnostic
from podcheck.parser.loader import TrackedLoader
from podcheck.service.checker import ManifestChecker
from podcheck.validation.driver import validate_documents

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def loader() -> TrackedLoader:
    return TrackedLoader()


@pytest.fixture
def checker() -> ManifestChecker:
    return ManifestChecker()


def diagnose(yaml_text: str, filename: str = "pod.yaml") -> list[Diagnostic]:
    """Parse *yaml_text* and run the validator over every document."""
    documents = TrackedLoader().load_string(yaml_text)
    return validate_documents(documents, filename).diagnostics


def messages(yaml_text: str) -> list[str]:
    return [d.message for d in diagnose(yaml_text)]


def rendered(yaml_text: str, filename: str = "pod.yaml") -> list[str]:
    return [d.render(filename) for d in diagnose(yaml_text, filename)]


VALID_CONTAINER = (
    '{name: web, image: "registry.bigbrother.io/web:1.0", '
    "resources: {limits: {cpu: 1, memory: 128Mi}}}"
)


def pod_with_container(container: str = VALID_CONTAINER, *, os: str | None = None) -> str:
    """A valid pod whose single container (line 7, or 8 with ``os``) is *container*."""
    os_line = f"  os: {os}\n" if os is not None else ""
    return (
        "apiVersion: v1\n"
        "kind: Pod\n"
        "metadata:\n"
        "  name: web\n"
        "spec:\n"
        f"{os_line}"
        "  containers:\n"
        f"    - {container}\n"
    )


VALID_POD_YAML = """\
apiVersion: v1
kind: Pod
metadata:
  name: web
  namespace: default
  labels:
    app: web
spec:
  os: linux
  containers:
    - name: web_server
      image: registry.bigbrother.io/web:1.2
      ports:
        - containerPort: 8080
          protocol: TCP
      readinessProbe:
        httpGet:
          path: /ready
          port: 8080
      livenessProbe:
        httpGet:
          path: /healthz
          port: 8080
      resources:
        limits:
          cpu: 2
          memory: 512Mi
        requests:
          cpu: 1
          memory: 256Mi
"""

INVALID_POD_YAML = """\
apiVersion: v2
kind: Pod
metadata:
  namespace: [a]
  labels:
    tier: [x]
spec:
  os: {name: darwin}
  containers:
    - name: Web-Server
      image: docker.io/web:1.0
      ports:
        - containerPort: "80"
          protocol: SCTP
        - containerPort: 70000
      readinessProbe:
        httpGet:
          path: ready
          port: 0
      livenessProbe:
        exec: {}
      resources:
        limits:
          cpu: "2"
          memory: 512mi
        requests:
          cpu: -1
          memory: 512
    - just-a-string
"""

INVALID_POD_DIAGNOSTICS = [
    "pod.yaml:1 apiVersion has unsupported value 'v2'",
    "pod.yaml:4 name is required",
    "pod.yaml:4 namespace must be string",
    "pod.yaml:6 labels value must be string",
    "pod.yaml:8 os has unsupported value 'darwin'",
    "pod.yaml:10 name has invalid format 'Web-Server'",
    "pod.yaml:11 image has invalid format 'docker.io/web:1.0'",
    "pod.yaml:13 containerPort must be int",
    "pod.yaml:14 protocol has unsupported value 'SCTP'",
    "pod.yaml:15 containerPort value out of range",
    "pod.yaml:18 path has invalid format 'ready'",
    "pod.yaml:19 port value out of range",
    "pod.yaml:21 httpGet is required",
    "pod.yaml:24 cpu must be int",
    "pod.yaml:25 memory has invalid format '512mi'",
    "pod.yaml:27 cpu value out of range",
    "pod.yaml:28 memory has invalid format '512'",
    "pod.yaml:29 container must be object",
]

MULTI_DOCUMENT_YAML = VALID_POD_YAML + """\
---
apiVersion: v1
kind: Pod
spec:
  containers:
    - name: worker
      image: registry.bigbrother.io/worker:2.0
      resources: {}
"""
