def kebab_from_snake(v: str) -> str:
    """Convert a chart package name from snake to kebab case

    ``kubelet_rubber_stamp`` becomes ``kubelet-rubber-stamp``, which is how charts are named in Helm repositories.

    :param v: String in snake case
    :return: String in kebab case
    """
    return v.replace("_", "-")
