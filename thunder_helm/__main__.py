from thunder_helm.cli import run

run()
