"""Error raised for item shapes with no public representation."""


class UnsupportedItemError(Exception):
    """The converter met an internal item (or type) kind it cannot output.

    Fatal for the whole run: a partially converted document is not trusted.
    """
