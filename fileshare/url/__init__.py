from .file_url_parts import FileURLParts
from .file_url_parts import SHARE_SNAPSHOT_QUERY_KEY
from .file_url_parts import build_file_url
from .file_url_parts import parse_file_url
from .sas_query_parameters import IPRange
from .sas_query_parameters import SASProtocol
from .sas_query_parameters import SASQueryParameters

__all__ = (
    "FileURLParts",
    "SHARE_SNAPSHOT_QUERY_KEY",
    "build_file_url",
    "parse_file_url",
    "IPRange",
    "SASProtocol",
    "SASQueryParameters",
)
