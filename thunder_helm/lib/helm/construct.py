from typing import Any, Mapping, Optional, Type

from dacite import DaciteError
from pulumi import ResourceOptions, log, provider
from pulumi_kubernetes import helm

from thunder_helm.lib.config import decode_inputs, get_repo_override
from .chart import Chart, ChartArgs
from .convert import to_release_args
from .defaults import init_defaults
from .errors import ChartArgsError, ChartTypeMismatchError
from .release import ReleaseType, FIELD_HELM_STATUS_OUTPUT


def release_options(chart_cls: Type[Chart], args: ChartArgs) -> ReleaseType:
    """Return the release options of ``args`` with the chart's defaults applied

    Allocates empty release options when the user supplied none.

    :param chart_cls: The chart class
    :param args: Decoded chart args
    :return: The release options, also reachable as ``args.helm_options``
    """
    if args.helm_options is None:
        args.helm_options = ReleaseType()

    chart_name = chart_cls.default_chart_name()

    return init_defaults(
        args.helm_options,
        chart_name,
        get_repo_override(chart_name) or chart_cls.default_repo_url(),
        args,
    )


def construct(
    chart_cls: Type[Chart],
    args_cls: Type[ChartArgs],
    typ: str,
    name: str,
    inputs: Mapping[str, Any],
    opts: Optional[ResourceOptions] = None,
) -> provider.ConstructResult:
    """Create, register and return a new chart component

    The component is registered first, then its Helm Release as a child of it.

    :param chart_cls: The chart class
    :param args_cls: The chart's args dataclass
    :param typ: Type token of the construct request
    :param name: Name of the component
    :param inputs: Input bag of the construct request
    :param opts: Resource options of the construct request
    :return: The construct result for the engine
    """
    if typ != (expected := chart_cls.get_type()):
        raise ChartTypeMismatchError(typ, expected)

    try:
        args = decode_inputs(inputs, args_cls)
    except DaciteError as e:
        raise ChartArgsError(f"setting args: {e}") from e

    chart = chart_cls(name, opts)

    release_args = to_release_args(release_options(chart_cls, args))

    log.debug(f"creating helm release `{name}-helm` for `{typ}`")

    release = helm.v3.Release(f"{name}-helm", release_args, opts=ResourceOptions(parent=chart))
    chart.set_outputs(release.status)

    chart.register_outputs({FIELD_HELM_STATUS_OUTPUT: release.status})

    return provider.ConstructResult(urn=chart.urn, state={FIELD_HELM_STATUS_OUTPUT: release.status})
