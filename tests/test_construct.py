"""Tests for constructing chart components."""

from unittest import mock

import pulumi
import pytest
from dacite import DaciteError
from pulumi_kubernetes import helm

from thunder_helm.lib.helm import ChartArgsError, ChartTypeMismatchError, construct, FIELD_HELM_STATUS_OUTPUT

from .conftest import NginxArgs, NginxChart, NGINX_CHART, NGINX_REPO, NGINX_TYPE, RELEASE_TYPE


def _fake_release():
    release = mock.MagicMock()
    release.status = pulumi.Output.from_input({"status": "deployed"})
    return release


def test_type_mismatch_registers_nothing(mocks) -> None:
    with mock.patch.object(NginxChart, "__init__", return_value=None) as chart_init:
        with pytest.raises(ChartTypeMismatchError, match="unknown resource type thunder-helm:index:Apache"):
            construct(NginxChart, NginxArgs, "thunder-helm:index:Apache", "web", {}, None)

    chart_init.assert_not_called()
    assert mocks.resources == []


def test_bad_inputs_register_nothing(mocks) -> None:
    with mock.patch.object(NginxChart, "__init__", return_value=None) as chart_init:
        with pytest.raises(ChartArgsError, match="^setting args") as exc_info:
            construct(NginxChart, NginxArgs, NGINX_TYPE, "web", {"replicas": 2}, None)

    assert isinstance(exc_info.value.__cause__, DaciteError)
    chart_init.assert_not_called()
    assert mocks.resources == []


@pulumi.runtime.test
def test_release_is_child_of_chart(mocks):
    with mock.patch.object(helm.v3, "Release", return_value=_fake_release()) as release_cls:
        result = construct(NginxChart, NginxArgs, NGINX_TYPE, "web", {"replicaCount": 2}, None)

    release_cls.assert_called_once()
    (name, release_args), kwargs = release_cls.call_args
    assert name == "web-helm"
    assert isinstance(kwargs["opts"].parent, NginxChart)
    assert pulumi.get(release_args, "chart") == NGINX_CHART
    assert pulumi.get(release_args, "values") == {"replicaCount": 2}

    def check(status):
        assert status == {"status": "deployed"}

    return result.state[FIELD_HELM_STATUS_OUTPUT].apply(check)


@pulumi.runtime.test
def test_release_failure_propagates(mocks):
    error = RuntimeError("release rejected")

    with mock.patch.object(helm.v3, "Release", side_effect=error):
        with pytest.raises(RuntimeError) as exc_info:
            construct(NginxChart, NginxArgs, NGINX_TYPE, "web", {}, None)

    assert exc_info.value is error


@pulumi.runtime.test
def test_chart_outputs(mocks):
    with mock.patch.object(helm.v3, "Release", return_value=_fake_release()):
        result = construct(NginxChart, NginxArgs, NGINX_TYPE, "web", {}, None)

    def check(args):
        urn, status = args
        assert urn.endswith(f"{NGINX_TYPE}::web")
        assert status == {"status": "deployed"}

    return pulumi.Output.all(result.urn, result.state[FIELD_HELM_STATUS_OUTPUT]).apply(check)


@pulumi.runtime.test
def test_empty_inputs_release_args(mocks):
    with mock.patch.object(helm.v3, "Release", return_value=_fake_release()) as release_cls:
        result = construct(NginxChart, NginxArgs, NGINX_TYPE, "web", {}, None)

    (_, release_args), _ = release_cls.call_args
    assert pulumi.get(release_args, "chart") == NGINX_CHART
    assert pulumi.get(pulumi.get(release_args, "repository_opts"), "repo") == NGINX_REPO
    assert pulumi.get(release_args, "values") == {}

    return result.state[FIELD_HELM_STATUS_OUTPUT]


@pulumi.runtime.test
def test_defaults_reach_release(mocks):
    result = construct(NginxChart, NginxArgs, NGINX_TYPE, "web", {}, None)

    def check(_):
        releases = mocks.of_type(RELEASE_TYPE)
        assert len(releases) == 1
        assert releases[0].name == "web-helm"
        assert releases[0].inputs["chart"] == NGINX_CHART
        assert releases[0].inputs["repositoryOpts"]["repo"] == NGINX_REPO

    return result.state[FIELD_HELM_STATUS_OUTPUT].apply(check)


@pulumi.runtime.test
def test_typed_values_reach_release(mocks):
    inputs = {
        "replicaCount": 3,
        "controller": {"ingressClassResource": "nginx"},
        "helmOptions": {"namespace": "ingress", "values": {"replicaCount": 1, "podLabels": {"team": "infra"}}},
    }
    result = construct(NginxChart, NginxArgs, NGINX_TYPE, "web", inputs, None)

    def check(_):
        (release,) = mocks.of_type(RELEASE_TYPE)
        assert release.inputs["namespace"] == "ingress"
        assert release.inputs["values"] == {
            "replicaCount": 3,
            "podLabels": {"team": "infra"},
            "controller": {"ingressClassResource": "nginx"},
        }

    return result.state[FIELD_HELM_STATUS_OUTPUT].apply(check)
