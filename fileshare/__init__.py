from .url.file_url_parts import FileURLParts
from .url.file_url_parts import SHARE_SNAPSHOT_QUERY_KEY
from .url.file_url_parts import build_file_url
from .url.file_url_parts import parse_file_url
from .url.sas_query_parameters import IPRange
from .url.sas_query_parameters import SASProtocol
from .url.sas_query_parameters import SASQueryParameters

__all__ = (
    "FileURLParts",
    "SHARE_SNAPSHOT_QUERY_KEY",
    "build_file_url",
    "parse_file_url",
    "IPRange",
    "SASProtocol",
    "SASQueryParameters",
)
