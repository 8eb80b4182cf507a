"""Query-string helpers for list endpoints."""

from urllib.parse import urlencode

from schlep_engine.client.models import ListParams


def with_query(path: str, params: ListParams | None = None) -> str:
    """
    Append list parameters to ``path`` as a query string.

    Null fields are omitted and values are percent-encoded. When nothing is
    left (no params, or every field null) the path is returned unchanged.

    Example:
        >>> with_query("/ml/pipelines", ListParams(page=2, status="active"))
        '/ml/pipelines?page=2&status=active'
    """
    if params is None:
        return path

    pairs = [
        (key, str(value))
        for key, value in params.model_dump(mode="json").items()
        if value is not None
    ]
    if not pairs:
        return path

    return f"{path}?{urlencode(pairs)}"
