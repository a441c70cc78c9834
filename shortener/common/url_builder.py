"""Short URL composition."""


def build_short_url(code: str, base_url: str, path_prefix: str = "") -> str:
    """Return ``base_url + "/" + code``, with ``path_prefix`` between them if set.

    Slashes at the edges of ``base_url`` and ``path_prefix`` are dropped
    so the parts are joined by exactly one ``/``.

    Raises:
        ValueError: If ``code`` is empty
    """
    if not code:
        raise ValueError("short code must not be empty")

    parts = [base_url.rstrip("/"), path_prefix.strip("/"), code]
    return "/".join(part for part in parts if part)
