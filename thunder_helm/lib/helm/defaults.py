from pulumi import log

from thunder_helm.lib.utils import values_from_args
from .release import ReleaseType, RepositoryOpts, FIELD_HELM_OPTIONS_INPUT


def init_defaults(args: ReleaseType, chart: str, repo: str, values: object) -> ReleaseType:
    """Copy the default chart, repo and values onto the release options

    Modifies ``args`` in place.

    :param args: Release options supplied by the user
    :param chart: Default chart name
    :param repo: Default repo URL
    :param values: Strongly typed chart args, blitted onto the values map
    :return: ``args``
    """
    # The user might override the chart and repository, so only fill them in when unset.
    if not args.chart:
        args.chart = chart
    if args.repository_opts is None:
        args.repository_opts = RepositoryOpts()
    if args.repository_opts.repo is None:
        args.repository_opts.repo = repo

    if args.values is None:
        args.values = {}

    # In the event a value is present in both, the strongly typed values override the weakly typed map. A payload
    # that cannot be expressed as values is a programming error and raises.
    args.values.update(values_from_args(values))

    # The release options are not a chart value and would make the values reference themselves.
    args.values.pop(FIELD_HELM_OPTIONS_INPUT, None)

    log.debug(f"release defaults applied: chart `{args.chart}` from `{args.repository_opts.repo}`")

    return args
