"""Core domain types and logic."""

from .determine import (
    Determination,
    DeterminationRequest,
    DistribError,
    build_request,
    determine,
)
from .errors import ErrorCode
from .locate import find_dist_file
from .paths import parse_path, path_value
from .result import Err, Ok, Result

__all__ = [
    # determine
    "Determination",
    "DeterminationRequest",
    "DistribError",
    "build_request",
    "determine",
    # errors
    "ErrorCode",
    # locate
    "find_dist_file",
    # paths
    "parse_path",
    "path_value",
    # result
    "Err",
    "Ok",
    "Result",
]
