from thunder_helm import PACKAGE_NAME
from thunder_helm.lib.helm import Chart


class KubernetesDashboard(Chart):
    """
    Because a picture is worth a thousand words
    """

    @classmethod
    def get_type(cls) -> str:
        return f"{PACKAGE_NAME}:index:KubernetesDashboard"

    @classmethod
    def default_chart_name(cls) -> str:
        return "kubernetes-dashboard"

    @classmethod
    def default_repo_url(cls) -> str:
        return "https://kubernetes.github.io/dashboard/"
