"""Utility for deriving the checked counterpart of a marked name."""


def counterpart_name(name: str, marker: str) -> str:
    """Remove every occurrence of the marker from a declaration name.

    fetch_unchecked -> fetch, get_unchecked_mut -> get_mut.
    """
    return name.replace(marker, "")
