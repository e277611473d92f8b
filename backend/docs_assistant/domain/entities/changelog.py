"""Domain entities for SDK changelogs."""

from dataclasses import dataclass
from enum import Enum


class SDKName(str, Enum):
    """SDKs whose release notes can be fetched."""

    JS_SDK = "JavaScript SDK"
    REACT = "React Components"
    REACT_NATIVE = "React Native SDK"
    SWIFT_IOS = "Swift SDK (iOS/macOS)"
    ANDROID = "Android SDK (Kotlin)"
    FLUTTER = "Flutter SDK"
    UNITY = "Unity SDK"
    RUST = "Rust SDK"
    PYTHON_AGENTS = "Python Agents SDK"
    SERVER_SDK_NODE = "Server SDK (Node.js)"
    SERVER_SDK_GO = "Server SDK (Go)"
    SERVER_SDK_PYTHON = "Server SDK (Python)"
    SERVER_SDK_RUBY = "Server SDK (Ruby)"
    SERVER_SDK_KOTLIN = "Server SDK (Kotlin)"
    COMPONENTS_ANDROID = "Android Components"
    COMPONENTS_FLUTTER = "Flutter Components"
    TRACK_PROCESSORS_JS = "Track Processors JS"

    @property
    def slug(self) -> str:
        """URL-safe identifier, e.g. ``python-agents``."""
        return self.name.lower().replace("_", "-")

    @classmethod
    def from_identifier(cls, identifier: str) -> "SDKName":
        """Look up an SDK by slug or display name; raises ValueError if unknown."""
        for sdk in cls:
            if identifier in (sdk.slug, sdk.value):
                return sdk
        raise ValueError(f"Unknown SDK: {identifier}")


class ChangelogSourceType(str, Enum):
    """How a changelog source is published."""

    CHANGELOG = "changelog"          # Plain CHANGELOG.md
    RELEASES_ATOM = "releases_atom"  # GitHub Releases Atom feed


@dataclass(frozen=True)
class SDKSource:
    """Location of one SDK's release notes."""

    url: str
    type: ChangelogSourceType


@dataclass
class Changelog:
    """Formatted release notes for one SDK."""

    sdk: SDKName
    link: str
    content: str


_RAW = "https://raw.githubusercontent.com/livekit"
_GH = "https://github.com/livekit"

SDK_SOURCES: dict[SDKName, SDKSource] = {
    SDKName.JS_SDK: SDKSource(f"{_RAW}/client-sdk-js/main/CHANGELOG.md", ChangelogSourceType.CHANGELOG),
    SDKName.REACT: SDKSource(f"{_RAW}/components-js/main/packages/react/CHANGELOG.md", ChangelogSourceType.CHANGELOG),
    SDKName.REACT_NATIVE: SDKSource(f"{_RAW}/client-sdk-react-native/main/CHANGELOG.md", ChangelogSourceType.CHANGELOG),
    SDKName.SWIFT_IOS: SDKSource(f"{_GH}/client-sdk-swift/releases.atom", ChangelogSourceType.RELEASES_ATOM),
    SDKName.ANDROID: SDKSource(f"{_GH}/client-sdk-android/releases.atom", ChangelogSourceType.RELEASES_ATOM),
    SDKName.FLUTTER: SDKSource(f"{_RAW}/client-sdk-flutter/main/CHANGELOG.md", ChangelogSourceType.CHANGELOG),
    SDKName.UNITY: SDKSource(f"{_GH}/client-sdk-unity/releases.atom", ChangelogSourceType.RELEASES_ATOM),
    SDKName.RUST: SDKSource(f"{_GH}/rust-sdks/releases.atom", ChangelogSourceType.RELEASES_ATOM),
    SDKName.PYTHON_AGENTS: SDKSource(f"{_GH}/agents/releases.atom", ChangelogSourceType.RELEASES_ATOM),
    SDKName.SERVER_SDK_NODE: SDKSource(
        f"{_RAW}/node-sdks/main/packages/livekit-server-sdk/CHANGELOG.md", ChangelogSourceType.CHANGELOG
    ),
    SDKName.SERVER_SDK_GO: SDKSource(f"{_GH}/server-sdk-go/releases.atom", ChangelogSourceType.RELEASES_ATOM),
    SDKName.SERVER_SDK_PYTHON: SDKSource(f"{_GH}/python-sdks/releases.atom", ChangelogSourceType.RELEASES_ATOM),
    SDKName.SERVER_SDK_RUBY: SDKSource(f"{_RAW}/server-sdk-ruby/main/CHANGELOG.md", ChangelogSourceType.CHANGELOG),
    SDKName.SERVER_SDK_KOTLIN: SDKSource(f"{_GH}/server-sdk-kotlin/releases.atom", ChangelogSourceType.RELEASES_ATOM),
    SDKName.COMPONENTS_ANDROID: SDKSource(f"{_GH}/components-android/releases.atom", ChangelogSourceType.RELEASES_ATOM),
    SDKName.COMPONENTS_FLUTTER: SDKSource(
        f"{_RAW}/components-flutter/main/CHANGELOG.md", ChangelogSourceType.CHANGELOG
    ),
    SDKName.TRACK_PROCESSORS_JS: SDKSource(
        f"{_RAW}/track-processors-js/main/CHANGELOG.md", ChangelogSourceType.CHANGELOG
    ),
}
