"""Directory emulation over B2's flat key space.

B2 stores objects under flat keys; "directories" exist only as shared key
prefixes. Listing a directory therefore means fetching the whole bucket
listing and keeping the names that fall under the requested prefix.

Matching cases, by ``(recursive, directory)``:

    =========  ============  ==============================================
    recursive  directory     matched names
    =========  ============  ==============================================
    True       ""            everything
    True       "d"           names starting with "d/", any depth
    False      ""            names without any "/"
    False      "d"           names starting with "d/" with no further "/"
    =========  ============  ==============================================

Directory names are compared literally, so characters such as ``.`` or ``(``
never act as patterns.
"""

from typing import Any, Iterable, Optional

from pydantic import ValidationError as PydanticValidationError

from b2fs.core import get_logger
from b2fs.core.exceptions import InvalidQueryError
from b2fs.schemas import ListingQuery, NormalizedAttributes, RemoteObject

logger = get_logger(__name__)

SEPARATOR = "/"


def build_query(directory: Any = "", recursive: Any = False) -> ListingQuery:
    """Validate raw listing arguments into a ListingQuery.

    Raises:
        InvalidQueryError: If the directory is not a string (or None) or the
            recursion flag is not a bool
    """
    try:
        return ListingQuery(directory=directory, recursive=recursive)
    except PydanticValidationError as e:
        raise InvalidQueryError(
            f"Invalid listing query (directory={directory!r}, "
            f"recursive={recursive!r}): {e}"
        ) from e


def matches(name: str, query: ListingQuery) -> bool:
    """Return True if the object name belongs to the queried directory."""
    if query.recursive is True and query.directory == "":
        return True
    elif query.recursive is True and query.directory != "":
        return name.startswith(query.directory + SEPARATOR)
    elif query.recursive is False and query.directory == "":
        return SEPARATOR not in name
    elif query.recursive is False and query.directory != "":
        prefix = query.directory + SEPARATOR
        return name.startswith(prefix) and SEPARATOR not in name[len(prefix) :]
    raise InvalidQueryError(f"Unsupported listing query: {query!r}")


def filter_objects(
    objects: Iterable[RemoteObject], directory: Any = "", recursive: Any = False
) -> list[RemoteObject]:
    """Keep the objects that belong to a directory, preserving input order.

    Args:
        objects: Flat, fully materialized bucket listing
        directory: Emulated directory; "" or None means the bucket root
        recursive: Include descendants at any depth instead of direct children

    Returns:
        The matching objects, in their original order

    Raises:
        InvalidQueryError: If the arguments are outside the listing contract
    """
    query = build_query(directory, recursive)
    selected = [obj for obj in objects if matches(obj.name, query)]
    logger.debug(
        "Listing filtered",
        directory=query.directory,
        recursive=query.recursive,
        matched=len(selected),
    )
    return selected


def to_seconds(upload_timestamp: Optional[int]) -> Optional[int]:
    """Truncate a millisecond timestamp to whole seconds, keeping None as None."""
    if upload_timestamp is None:
        return None
    return upload_timestamp // 1000


def normalize_attributes(obj: RemoteObject) -> NormalizedAttributes:
    """Project a RemoteObject onto the filesystem-facing attribute shape."""
    return NormalizedAttributes(
        path=obj.name,
        timestamp=to_seconds(obj.upload_timestamp),
        size=obj.size,
        mime_type=obj.content_type,
    )


class PathListingFilter:
    """Callable wrapper binding the filter and normalization steps together."""

    def __call__(
        self,
        objects: Iterable[RemoteObject],
        directory: Any = "",
        recursive: Any = False,
    ) -> list[RemoteObject]:
        return filter_objects(objects, directory, recursive)

    def list_attributes(
        self,
        objects: Iterable[RemoteObject],
        directory: Any = "",
        recursive: Any = False,
    ) -> list[NormalizedAttributes]:
        """Filter the listing and normalize every surviving object."""
        return [
            normalize_attributes(obj)
            for obj in filter_objects(objects, directory, recursive)
        ]
