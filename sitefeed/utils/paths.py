"""Output path helpers."""


def ensure_extension(path: str, extension: str) -> str:
    """
    Make sure an output path ends with the given extension.

    A trailing slash is replaced by the extension, so '/feed/' becomes
    '/feed.xml' rather than '/feed/.xml'.
    """
    if path.endswith(extension):
        return path
    if path.endswith("/"):
        return f"{path[:-1]}{extension}"
    return f"{path}{extension}"
