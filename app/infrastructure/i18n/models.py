"""Translation models for i18n system.

Defines core data structures for locale tags, header preferences and
message catalogs.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterator, List, Mapping, Optional, Tuple, Union

from infrastructure.i18n.exceptions import InvalidCatalogError, InvalidNamespaceError

KEY_SEPARATOR = "."


def language_of(tag: str) -> str:
    """Get language part of a locale tag (e.g., "en" from "en-US").

    Args:
        tag: Locale tag in `lang` or `lang-REGION` form.

    Returns:
        Lowercased language code.
    """
    return tag.split("-")[0].lower()


@dataclass(frozen=True)
class PreferenceEntry:
    """One language range parsed from an Accept-Language header.

    Attributes:
        code: Lowercased language range (e.g., "fr-ca").
        quality: Preference weight in [0, 1].
        valid: False when the header carried a `q` value that could not be parsed.
    """

    code: str
    quality: float = 1.0
    valid: bool = True


@dataclass(frozen=True)
class MessageLeaf:
    """A translated message string at the end of a key path."""

    value: str


@dataclass(frozen=True)
class MessageNode:
    """A subtree of a catalog: message segments mapped to leaves or nodes.

    Children are exposed through a read-only mapping.
    """

    children: Mapping[str, Union["MessageNode", MessageLeaf]] = field(
        default_factory=dict
    )

    def __post_init__(self) -> None:
        if not isinstance(self.children, MappingProxyType):
            object.__setattr__(self, "children", MappingProxyType(dict(self.children)))

    def child(self, segment: str) -> Optional[Union["MessageNode", MessageLeaf]]:
        return self.children.get(segment)

    def __len__(self) -> int:
        return len(self.children)


CatalogEntry = Union[MessageNode, MessageLeaf]


def build_node(data: Mapping[str, Any], path: str = "") -> MessageNode:
    """Compile a nested dict of strings into a MessageNode tree.

    Args:
        data: Nested mapping whose leaves are strings.
        path: Dotted path of `data` inside the catalog (for error messages).

    Returns:
        Immutable MessageNode.

    Raises:
        InvalidCatalogError: If a key is not a string or a value is neither a
            string nor a mapping.
    """
    children = {}
    for segment, value in data.items():
        if not isinstance(segment, str):
            raise InvalidCatalogError(
                f"Catalog keys must be strings, got {segment!r} under '{path or '<root>'}'"
            )
        child_path = f"{path}{KEY_SEPARATOR}{segment}" if path else segment

        if isinstance(value, (MessageNode, MessageLeaf)):
            children[segment] = value
        elif isinstance(value, str):
            children[segment] = MessageLeaf(value)
        elif isinstance(value, Mapping):
            children[segment] = build_node(value, child_path)
        else:
            raise InvalidCatalogError(
                f"Catalog value at '{child_path}' must be a string or mapping, "
                f"got {type(value).__name__}"
            )
    return MessageNode(children)


@dataclass(frozen=True)
class TranslationCatalog:
    """Immutable message tree for a single locale.

    Built once from a nested dict and shared read-only across requests.

    Attributes:
        locale: Locale tag this catalog translates to.
        root: Root node of the message tree.
    """

    locale: str
    root: MessageNode = field(default_factory=MessageNode)

    @classmethod
    def from_dict(cls, locale: str, messages: Mapping[str, Any]) -> "TranslationCatalog":
        """Create a catalog from a nested dict of message strings.

        Args:
            locale: Locale tag (e.g., "fr-FR").
            messages: Nested dict structure {segment: {segment: message}}.

        Returns:
            TranslationCatalog instance.

        Raises:
            InvalidCatalogError: If the dict contains non-string leaves.
        """
        if not isinstance(messages, Mapping):
            raise InvalidCatalogError(
                f"Catalog for locale '{locale}' must be a mapping, "
                f"got {type(messages).__name__}"
            )
        return cls(locale=locale, root=build_node(messages))

    @classmethod
    def empty(cls, locale: str = "") -> "TranslationCatalog":
        return cls(locale=locale)

    def find(self, path: str) -> Optional[CatalogEntry]:
        """Walk a dotted path through the tree.

        Args:
            path: Dot-separated key path (e.g., "errors.not_found").

        Returns:
            The MessageLeaf or MessageNode at `path`, or None if any segment
            is missing or the walk passes through a leaf.
        """
        entry: CatalogEntry = self.root
        for segment in path.split(KEY_SEPARATOR):
            if not isinstance(entry, MessageNode):
                return None
            entry = entry.child(segment)
            if entry is None:
                return None
        return entry

    def has_message(self, path: str) -> bool:
        return isinstance(self.find(path), MessageLeaf)

    def has_namespace(self, namespace: str) -> bool:
        return isinstance(self.find(namespace), MessageNode)

    def message_keys(self, namespace: Optional[str] = None) -> List[str]:
        """List the leaf paths reachable from a namespace.

        Args:
            namespace: Optional dotted subtree path. Keys are returned relative
                to it.

        Returns:
            Dotted leaf paths in catalog declaration order.

        Raises:
            InvalidNamespaceError: If namespace does not name a subtree.
        """
        start = self.root
        if namespace is not None:
            start = self.find(namespace)
            if not isinstance(start, MessageNode):
                raise InvalidNamespaceError(
                    f"Namespace '{namespace}' is not a subtree of catalog '{self.locale}'"
                )
        return [path for path, entry in _walk(start) if isinstance(entry, MessageLeaf)]

    def namespaces(self) -> List[str]:
        """List every subtree path usable as a namespace."""
        return [path for path, entry in _walk(self.root) if isinstance(entry, MessageNode)]

    def __len__(self) -> int:
        return len(self.message_keys())


def _walk(node: MessageNode, prefix: str = "") -> Iterator[Tuple[str, CatalogEntry]]:
    for segment, entry in node.children.items():
        path = f"{prefix}{KEY_SEPARATOR}{segment}" if prefix else segment
        yield path, entry
        if isinstance(entry, MessageNode):
            yield from _walk(entry, path)


@dataclass(frozen=True)
class ResolutionResult:
    """Outcome of looking up a key path in a catalog.

    Attributes:
        found: True when the path named a message leaf.
        value: The message on success; the looked-up path on failure.
    """

    found: bool
    value: str

    def __bool__(self) -> bool:
        return self.found
