from thunder_helm import PACKAGE_NAME
from thunder_helm.lib.helm import Chart


class KubeletRubberStamp(Chart):
    # for auto approving kubelet serving csrs

    @classmethod
    def get_type(cls) -> str:
        return f"{PACKAGE_NAME}:index:KubeletRubberStamp"

    @classmethod
    def default_chart_name(cls) -> str:
        return "kubelet-rubber-stamp"

    @classmethod
    def default_repo_url(cls) -> str:
        return "https://flexkube.github.io/charts/"
