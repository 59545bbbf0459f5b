"""JSON schema format tags.

Values are the JSON Schema ``format`` keywords rendered into generated
schema documentation for properties of a registered type.
"""

from enum import Enum


class JsonSchemaFormat(str, Enum):
    """JSON Schema ``format`` keyword for a property.

    Attributes:
        DATE_TIME: RFC 3339 date-time
        DATE: RFC 3339 full-date
        TIME: RFC 3339 full-time
        EMAIL: RFC 5321 mailbox
        HOSTNAME: RFC 1123 host name
        IPV4: Dotted-quad IPv4 address
        IPV6: RFC 4291 IPv6 address
        URI: RFC 3986 URI
        UUID: RFC 4122 UUID
    """

    DATE_TIME = "date-time"
    DATE = "date"
    TIME = "time"
    EMAIL = "email"
    HOSTNAME = "hostname"
    IPV4 = "ipv4"
    IPV6 = "ipv6"
    URI = "uri"
    UUID = "uuid"

    def __str__(self) -> str:
        return self.value
