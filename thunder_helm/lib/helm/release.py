from dataclasses import dataclass, field
from typing import Any, Optional

from thunder_helm.lib.utils import keyed

FIELD_HELM_STATUS_OUTPUT = "status"
"""Name of the component output carrying the Helm Release status."""

FIELD_HELM_OPTIONS_INPUT = "helmOptions"
"""Input key carrying the release options. Never forwarded as a chart value, it would reference itself."""


@dataclass
class RepositoryOpts:
    """Specification defining the Helm chart repository to use."""

    repo: Optional[str] = None
    """Repository where to locate the requested chart. If it's a URL the chart is installed without installing the
    repository."""

    username: Optional[str] = None
    """Username for HTTP basic authentication"""

    password: Optional[str] = None
    """Password for HTTP basic authentication"""

    ca_file: Optional[str] = None
    """The Repository's CA File"""

    cert_file: Optional[str] = None
    """The repository's cert file"""

    key_file: Optional[str] = None
    """The repository's cert key file"""


@dataclass
class ReleaseType:
    """
    Options of the Helm Release backing a chart component. Everything is optional, ``None`` means unset and leaves
    the decision to the Release resource.
    """

    atomic: Optional[bool] = None
    """If set, installation process purges chart on fail. `skipAwait` will be disabled automatically if atomic is
    used."""

    chart: Optional[str] = None
    """Chart name to be installed. A path may be used."""

    cleanup_on_fail: Optional[bool] = None
    """Allow deletion of new resources created in this upgrade when upgrade fails."""

    create_namespace: Optional[bool] = None
    """Create the namespace if it does not exist."""

    dependency_update: Optional[bool] = None
    """Run helm dependency update before installing the chart."""

    description: Optional[str] = None
    """Add a custom description"""

    devel: Optional[bool] = None
    """Use chart development versions, too. Equivalent to version '>0.0.0-0'. If `version` is set, this is ignored."""

    disable_crd_hooks: Optional[bool] = keyed("disableCRDHooks", default=None)
    """Prevent CRD hooks from running, but run other hooks. See helm install --no-crd-hook"""

    disable_openapi_validation: Optional[bool] = None
    """If set, the installation process will not validate rendered templates against the Kubernetes OpenAPI Schema"""

    disable_webhooks: Optional[bool] = None
    """Prevent hooks from running."""

    force_update: Optional[bool] = None
    """Force resource update through delete/recreate if needed."""

    keyring: Optional[str] = None
    """Location of public keys used for verification. Used only if `verify` is true"""

    lint: Optional[bool] = None
    """Run helm lint when planning."""

    manifest: Optional[dict[str, Any]] = None
    """The rendered manifests as JSON. Not yet supported."""

    max_history: Optional[int] = None
    """Limit the maximum number of revisions saved per release. Use 0 for no limit."""

    name: Optional[str] = None
    """Release name."""

    namespace: Optional[str] = None
    """Namespace to install the release into."""

    postrender: Optional[str] = None
    """Postrender command to run."""

    recreate_pods: Optional[bool] = None
    """Perform pods restart during upgrade/rollback."""

    render_subchart_notes: Optional[bool] = None
    """If set, render subchart notes along with the parent."""

    replace: Optional[bool] = None
    """Re-use the given name, even if that name is already used. This is unsafe in production"""

    repository_opts: RepositoryOpts = field(default_factory=RepositoryOpts)
    """Specification defining the Helm chart repository to use."""

    reset_values: Optional[bool] = None
    """When upgrading, reset the values to the ones built into the chart."""

    resource_names: Optional[dict[str, list[str]]] = None
    """Names of resources created by the release grouped by "kind/version"."""

    reuse_values: Optional[bool] = None
    """When upgrading, reuse the last release's values and merge in any overrides. If 'resetValues' is specified,
    this is ignored"""

    skip_await: Optional[bool] = None
    """By default, the provider waits until all resources are in a ready state before marking the release as
    successful. Setting this to true will skip such await logic."""

    skip_crds: Optional[bool] = None
    """If set, no CRDs will be installed. By default, CRDs are installed if not already present."""

    status: Optional[dict[str, Any]] = None
    """Status of the deployed release. Output only."""

    timeout: Optional[int] = None
    """Time in seconds to wait for any individual kubernetes operation."""

    value_yaml_files: Optional[list[Any]] = None
    """List of assets (raw yaml files). Content is read and merged with values. Not yet supported."""

    values: Optional[dict[str, Any]] = None
    """Custom values set for the release."""

    verify: Optional[bool] = None
    """Verify the package before installing it."""

    version: Optional[str] = None
    """Specify the exact chart version to install. If this is not specified, the latest version is installed."""

    wait_for_jobs: Optional[bool] = None
    """Will wait until all Jobs have been completed before marking the release as successful. This is ignored if
    `skipAwait` is enabled."""
