"""Description key resolution for metadata documents.

Descriptions of resources and their properties are looked up by key in a
message mapping (typically loaded from a messages file per locale). Keys
follow the ``rest.description.<resource>[.<property>]`` convention.

When a key has no message, ``MetadataConfiguration.omit_unresolvable_description_keys``
decides what is rendered:

- True (default): nothing, the documentation entry is omitted
- False: the supplied default text, or the key itself
"""

from collections.abc import Mapping

import structlog

from restmeta.metadata.configuration import MetadataConfiguration

logger = structlog.get_logger(__name__)

DESCRIPTION_KEY_PREFIX = "rest.description"


class DescriptionResolver:
    """Resolves description keys against a message mapping.

    Args:
        configuration: Source of the omit-unresolvable policy.
        messages: Message key to text mapping.
    """

    def __init__(
        self,
        configuration: MetadataConfiguration,
        messages: Mapping[str, str] | None = None,
    ) -> None:
        self._configuration = configuration
        self._messages: Mapping[str, str] = dict(messages or {})

    @staticmethod
    def key_for(resource: str, property: str | None = None) -> str:
        """Build the description key for a resource or one of its properties.

        Example:
            >>> DescriptionResolver.key_for("person", "first_name")
            'rest.description.person.first_name'
        """
        if property is None:
            return f"{DESCRIPTION_KEY_PREFIX}.{resource}"
        return f"{DESCRIPTION_KEY_PREFIX}.{resource}.{property}"

    def resolve(self, key: str, default: str | None = None) -> str | None:
        """Resolve a description key.

        Args:
            key: Message key.
            default: Text rendered for an unresolvable key when omission is
                disabled. Falls back to the key itself.

        Returns:
            The message, the fallback text, or None when the entry is omitted.
        """
        message = self._messages.get(key)
        if message is not None:
            return message

        if self._configuration.omit_unresolvable_description_keys:
            logger.debug("description_key_omitted", key=key)
            return None

        return default if default is not None else key
