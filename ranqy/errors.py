class RanqyError(Exception):
    """base class for every error raised by ranqy itself"""


class ConstructionError(RanqyError):
    """
    a view was composed (or drained) in a way its structure does not allow,
    independent of the element values. e.g. reversing an unbounded view,
    materializing an infinite one, projecting past a tuple's width.
    """


class ExhaustionError(RanqyError, LookupError):
    """a cursor was read or advanced while already at its terminator"""
