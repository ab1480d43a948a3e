"""Shared fixtures: a chart used across tests and Pulumi mocks recording registrations."""

from dataclasses import dataclass
from typing import Optional

import pulumi
import pytest

from thunder_helm.lib.config import core
from thunder_helm.lib.helm import Chart, ChartArgs
from thunder_helm.lib.utils import keyed

NGINX_TYPE = "thunder-helm:index:Nginx"
NGINX_CHART = "nginx"
NGINX_REPO = "https://charts.example.com"
RELEASE_TYPE = "kubernetes:helm.sh/v3:Release"


@dataclass
class NginxController:
    replica_count: Optional[int] = None
    ingress_class: Optional[str] = keyed("ingressClassResource", default=None)


@dataclass
class NginxArgs(ChartArgs):
    replica_count: Optional[int] = None
    controller: Optional[NginxController] = None
    extra_args: Optional[list[str]] = None


class NginxChart(Chart):
    @classmethod
    def get_type(cls) -> str:
        return NGINX_TYPE

    @classmethod
    def default_chart_name(cls) -> str:
        return NGINX_CHART

    @classmethod
    def default_repo_url(cls) -> str:
        return NGINX_REPO


class RecordingMocks(pulumi.runtime.Mocks):
    def __init__(self):
        self.resources = []

    def new_resource(self, args: pulumi.runtime.MockResourceArgs):
        self.resources.append(args)
        return [f"{args.name}_id", args.inputs]

    def call(self, args: pulumi.runtime.MockCallArgs):
        return {}

    def of_type(self, typ: str) -> list:
        return [resource for resource in self.resources if resource.typ == typ]


@pytest.fixture
def mocks() -> RecordingMocks:
    recording = RecordingMocks()
    pulumi.runtime.set_mocks(recording, preview=False)
    return recording


@pytest.fixture(autouse=True)
def no_thunder_env(monkeypatch):
    """Keep Thunder.common.yaml files of the machine running the tests out of the way"""
    monkeypatch.setattr(core, "get_thunder_env", lambda: {})
