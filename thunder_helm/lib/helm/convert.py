from typing import Any, Optional

from pulumi_kubernetes import helm

from .release import ReleaseType, RepositoryOpts


def _to_asset_or_archive_list(assets: Optional[list[Any]]) -> list[Any]:
    # Assets are not forwarded to the Release yet, whatever was supplied. Anything relying on `valueYamlFiles`
    # must pass the content through `values` instead.
    # TODO: forward the assets once the Release accepts them as plain inputs from a component provider.
    return []


def _repository_opts_dict(opts: RepositoryOpts) -> dict[str, Any]:
    return {
        "ca_file": opts.ca_file,
        "cert_file": opts.cert_file,
        "key_file": opts.key_file,
        "password": opts.password,
        "repo": opts.repo,
        "username": opts.username,
    }


def release_args_dict(args: ReleaseType) -> dict[str, Any]:
    """Turn the release options into the keyword arguments of ``helm.v3.ReleaseArgs``

    Every field converts on its own: unset stays ``None``, set values pass through. ``status`` is output only and
    is left out.

    :param args: Release options, after defaults have been applied
    :return: dict of ``ReleaseArgs`` keyword arguments, with ``repository_opts`` as a dict
    """
    return {
        "atomic": args.atomic,
        "chart": args.chart,
        "cleanup_on_fail": args.cleanup_on_fail,
        "create_namespace": args.create_namespace,
        "dependency_update": args.dependency_update,
        "description": args.description,
        "devel": args.devel,
        "disable_crd_hooks": args.disable_crd_hooks,
        "disable_openapi_validation": args.disable_openapi_validation,
        "disable_webhooks": args.disable_webhooks,
        "force_update": args.force_update,
        "keyring": args.keyring,
        "lint": args.lint,
        "manifest": dict(args.manifest) if args.manifest is not None else None,
        "max_history": args.max_history,
        "name": args.name,
        "namespace": args.namespace,
        "postrender": args.postrender,
        "recreate_pods": args.recreate_pods,
        "render_subchart_notes": args.render_subchart_notes,
        "replace": args.replace,
        "repository_opts": _repository_opts_dict(args.repository_opts or RepositoryOpts()),
        "reset_values": args.reset_values,
        "resource_names": {k: list(v) for k, v in args.resource_names.items()}
        if args.resource_names is not None
        else None,
        "reuse_values": args.reuse_values,
        "skip_await": args.skip_await,
        "skip_crds": args.skip_crds,
        "timeout": args.timeout,
        "value_yaml_files": _to_asset_or_archive_list(args.value_yaml_files),
        "values": dict(args.values) if args.values is not None else None,
        "verify": args.verify,
        "version": args.version,
        "wait_for_jobs": args.wait_for_jobs,
    }


def to_release_args(args: ReleaseType) -> helm.v3.ReleaseArgs:
    """Turn the release options into Helm-ready ``ReleaseArgs``

    :param args: Release options, after defaults have been applied
    :return: ReleaseArgs
    """
    kwargs = release_args_dict(args)

    return helm.v3.ReleaseArgs(
        **{
            **kwargs,
            "repository_opts": helm.v3.RepositoryOptsArgs(**kwargs["repository_opts"]),
        }
    )
