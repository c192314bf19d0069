"""Static header tables used by the translator."""

# Identifiers of the ``HttpHeader`` enum, compared against hyphen-stripped names.
KNOWN_HEADERS: tuple[str, ...] = (
    "Accept",
    "AcceptCharset",
    "AcceptLanguage",
    "AcceptDatetime",
    "CacheControl",
    "ContentType",
    "Date",
    "Expect",
    "From",
    "IfMatch",
    "IfModifiedSince",
    "IfNoneMatch",
    "IfRange",
    "IfUnmodifiedSince",
    "MaxForwards",
    "Pragma",
    "Range",
    "Referer",
    "Origin",
    "Upgrade",
    "UpgradeInsecureRequests",
    "UserAgent",
    "Via",
    "Warning",
    "DNT",
    "AccessControlAllowOrigin",
    "AcceptRanges",
    "Age",
    "Allow",
    "ContentEncoding",
    "ContentLanguage",
    "ContentLength",
    "ContentLocation",
    "ContentMD5",
    "ContentDisposition",
    "ContentRange",
    "ETag",
    "Expires",
    "LastModified",
    "Link",
    "Location",
    "P3P",
    "Refresh",
    "RetryAfter",
    "Server",
    "TransferEncoding",
)

# Raw header names that are always dropped. Matched exactly, hyphens included.
EXCLUDED_HEADERS: tuple[str, ...] = (
    "Cookie",
    "Content-Length",
    "Host",
)

DEFAULT_REQUEST_VARIABLE = "httpRequest"
DEFAULT_HEADER_ENUM = "HttpHeader"
