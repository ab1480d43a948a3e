def camel_from_snake(v: str) -> str:
    """Convert string from snake to lower camel case

    :param v: String in snake case
    :return: String in lower camel case
    """
    head, *rest = v.split("_")
    return head + "".join(part.capitalize() for part in rest)
