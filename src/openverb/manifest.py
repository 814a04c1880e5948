"""
Verb Manifest System

Defines verb families, their verbs and input/output schemas, and the
registry used to look them up. Manifests are loaded once at startup and
are read-only afterwards.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

BUNDLED_MANIFESTS_DIR = Path(__file__).parent / "manifests"

# Canonical load order for the bundled Level 0 families
STANDARD_FAMILIES: Tuple[str, ...] = (
    "ui.theme",
    "ui.nav",
    "ui.search",
    "ui.toast",
    "ui.modal",
    "ui.form",
    "user.session",
)


class ManifestError(ValueError):
    pass


class DuplicateFamilyError(ManifestError):
    pass


@dataclass(frozen=True)
class VerbDefinition:
    """
    A single verb: its id, version, summary, and input/output schemas.
    """

    id: str
    version: str
    summary: str
    input: Dict[str, Any] = field(default_factory=lambda: {"type": "object"})
    output: Dict[str, Any] = field(default_factory=lambda: {"type": "object"})

    @property
    def family(self) -> str:
        """Namespace prefix of the id (everything before the last dot)"""
        return self.id.rsplit(".", 1)[0]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "version": self.version,
            "summary": self.summary,
            "input": self.input,
            "output": self.output,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VerbDefinition":
        """Create from dictionary. Raises ManifestError on missing fields."""
        try:
            return cls(
                id=data["id"],
                version=data["version"],
                summary=data["summary"],
                input=dict(data["input"]),
                output=dict(data["output"]),
            )
        except (KeyError, TypeError) as e:
            raise ManifestError(f"Malformed verb definition {data!r}: {e}") from e


@dataclass(frozen=True)
class VerbManifest:
    """
    Declarative description of a verb family.

    A manifest owns its verbs exclusively; every verb id starts with
    "<family>.".
    """

    family: str
    version: str
    verbs: Tuple[VerbDefinition, ...]

    def __post_init__(self):
        if not self.verbs:
            raise ManifestError(f"Manifest {self.family} declares no verbs")
        prefix = self.family + "."
        for verb in self.verbs:
            if not verb.id.startswith(prefix):
                raise ManifestError(
                    f"Verb {verb.id} does not belong to family {self.family}"
                )

    def verb_ids(self) -> List[str]:
        return [v.id for v in self.verbs]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "family": self.family,
            "version": self.version,
            "verbs": [v.to_dict() for v in self.verbs],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VerbManifest":
        """Create from dictionary (parsed manifest JSON)"""
        if not isinstance(data, dict):
            raise ManifestError(f"Manifest must be an object, got {type(data).__name__}")
        try:
            family = data["family"]
            version = data["version"]
            raw_verbs = data["verbs"]
        except KeyError as e:
            raise ManifestError(f"Manifest missing field {e}") from e
        if not isinstance(raw_verbs, list):
            raise ManifestError(f"Manifest {family} 'verbs' must be a list")
        return cls(
            family=family,
            version=version,
            verbs=tuple(VerbDefinition.from_dict(v) for v in raw_verbs),
        )


class ManifestRegistry:
    """
    Index of loaded verb manifests.

    Built exactly once from the loaded manifest set; family names must be
    unique across that set.
    """

    def __init__(self, manifests: Iterable[VerbManifest]):
        self._manifests: Dict[str, VerbManifest] = {}
        for manifest in manifests:
            if manifest.family in self._manifests:
                raise DuplicateFamilyError(f"Duplicate manifest family: {manifest.family}")
            self._manifests[manifest.family] = manifest

        self._verbs: Tuple[VerbDefinition, ...] = tuple(
            verb for manifest in self._manifests.values() for verb in manifest.verbs
        )
        self._verb_index: Dict[str, VerbDefinition] = {}
        for verb in self._verbs:
            self._verb_index.setdefault(verb.id, verb)

        logger.info(
            f"Manifest registry built: {len(self._manifests)} families, {len(self._verbs)} verbs"
        )

    @property
    def manifests(self) -> List[VerbManifest]:
        """Manifests in load order"""
        return list(self._manifests.values())

    def families(self) -> List[str]:
        return list(self._manifests.keys())

    def get_manifest(self, family: str) -> Optional[VerbManifest]:
        """Get a manifest by family name"""
        return self._manifests.get(family)

    def get_all_verbs(self) -> List[VerbDefinition]:
        """All verb definitions across all families, in load order"""
        return list(self._verbs)

    def find_verb(self, verb_id: str) -> Optional[VerbDefinition]:
        """Find a specific verb definition by id"""
        return self._verb_index.get(verb_id)

    def __len__(self) -> int:
        return len(self._manifests)

    def __contains__(self, family: str) -> bool:
        return family in self._manifests


def load_manifest_file(path: Path) -> VerbManifest:
    """
    Load a single manifest JSON file.

    Raises:
        ManifestError: If the file cannot be read or is malformed
    """
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ManifestError(f"Cannot load manifest {path}: {e}") from e
    return VerbManifest.from_dict(raw)


def load_manifests(
    directory: Path, families: Optional[Sequence[str]] = None
) -> List[VerbManifest]:
    """
    Load manifests from a directory.

    Args:
        directory: Directory holding <family>.json files
        families: Load exactly these families in this order. If None, load
                  every *.json file in name order.

    Returns:
        Loaded manifests
    """
    directory = Path(directory)
    if families is None:
        paths = sorted(directory.glob("*.json"))
    else:
        paths = [directory / f"{family}.json" for family in families]

    manifests = [load_manifest_file(p) for p in paths]
    logger.debug(f"Loaded {len(manifests)} manifests from {directory}")
    return manifests


def default_registry() -> ManifestRegistry:
    """Registry over the bundled standard manifests, in canonical order"""
    return ManifestRegistry(load_manifests(BUNDLED_MANIFESTS_DIR, STANDARD_FAMILIES))
