from thunder_helm import PACKAGE_NAME
from thunder_helm.lib.helm import Chart


class SealedSecrets(Chart):
    """
    Controller for one-way encrypted Secrets (https://github.com/bitnami-labs/sealed-secrets)
    """

    @classmethod
    def get_type(cls) -> str:
        return f"{PACKAGE_NAME}:index:SealedSecrets"

    @classmethod
    def default_chart_name(cls) -> str:
        return "sealed-secrets"

    @classmethod
    def default_repo_url(cls) -> str:
        return "https://bitnami-labs.github.io/sealed-secrets"
