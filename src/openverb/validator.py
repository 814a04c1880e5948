"""
Manifest Validator

Statically checks raw manifest sources before they are trusted by the
registry. Every violation across every source is collected so a single run
reports all problems; a bad source never stops the rest of the batch.

Checks:
1. Valid JSON
2. Has required top-level fields: family, version, verbs
3. Each verb has: id, version, summary, input, output
4. Verb ids start with the family name
5. Input and output are objects with "type": "object"
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from .observability.metrics import metrics_collector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Violation:
    """A single rule violation found in a manifest source"""

    source: str
    message: str
    verb_id: Optional[str] = None

    def __str__(self) -> str:
        return f"{self.source}: {self.message}"


@dataclass
class SourceResult:
    """Outcome of validating one manifest source"""

    source: str
    family: Optional[str] = None
    verb_count: int = 0
    verbs_checked: int = 0
    well_formed: bool = False
    violations: List[Violation] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.violations

    def fail(self, message: str, verb_id: Optional[str] = None):
        self.violations.append(Violation(self.source, message, verb_id))


@dataclass
class ValidationReport:
    """
    Aggregate result of a validation run.

    Attributes:
        sources: Per-source results, in the order validated
        families: Count of manifests that passed the top-level checks
        verbs: Count of verbs checked (verbs with a usable id)
    """

    sources: List[SourceResult] = field(default_factory=list)
    families: int = 0
    verbs: int = 0

    @property
    def violations(self) -> List[Violation]:
        return [v for s in self.sources for v in s.violations]

    @property
    def error_count(self) -> int:
        return sum(len(s.violations) for s in self.sources)

    @property
    def no_sources(self) -> bool:
        return not self.sources

    @property
    def ok(self) -> bool:
        return not self.no_sources and self.error_count == 0

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1

    def render(self) -> List[str]:
        """Human-readable report lines"""
        if self.no_sources:
            return ["No manifest files found"]

        lines = []
        for result in self.sources:
            for violation in result.violations:
                lines.append(f"  FAIL  {violation}")
            if result.passed:
                lines.append(
                    f"  OK    {result.source} — {result.family} ({result.verb_count} verbs)"
                )
        lines.append("")
        lines.append(
            f"{self.families} families, {self.verbs} verbs validated "
            f"across {len(self.sources)} files."
        )
        if self.error_count:
            lines.append(f"{self.error_count} error(s) found.")
        else:
            lines.append("All manifests valid.")
        return lines


def _non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def _is_object_schema(value: Any) -> bool:
    return isinstance(value, dict) and value.get("type") == "object"


class ManifestValidator:
    """
    Validates manifest sources against the manifest file contract.

    Operates on raw, untrusted data: text or already-parsed JSON values.
    """

    def validate_data(self, source: str, manifest: Any) -> SourceResult:
        """
        Validate one parsed manifest.

        Args:
            source: Name used in violation messages (usually the file name)
            manifest: Parsed JSON value

        Returns:
            SourceResult with every violation found
        """
        result = SourceResult(source=source)

        if not isinstance(manifest, dict):
            result.fail("Manifest must be a JSON object")
            return result

        family = manifest.get("family")
        family_ok = _non_empty_str(family)
        if not family_ok:
            result.fail('Missing or invalid "family" field')
        else:
            result.family = family

        if not _non_empty_str(manifest.get("version")):
            result.fail('Missing or invalid "version" field')

        verbs = manifest.get("verbs")
        if not isinstance(verbs, list) or not verbs:
            result.fail('Missing or empty "verbs" array')
            return result

        result.well_formed = family_ok and result.passed
        result.verb_count = len(verbs)

        for verb in verbs:
            if not isinstance(verb, dict) or not _non_empty_str(verb.get("id")):
                result.fail('Verb missing "id"')
                continue

            verb_id = verb["id"]
            # Without a usable family there is no prefix to compare against;
            # the family violation already reports the manifest
            if family_ok and not verb_id.startswith(family + "."):
                result.fail(f'Verb "{verb_id}" does not start with family "{family}."', verb_id)

            if not verb.get("version"):
                result.fail(f'Verb "{verb_id}" missing "version"', verb_id)

            if not _non_empty_str(verb.get("summary")):
                result.fail(f'Verb "{verb_id}" missing "summary"', verb_id)

            if not _is_object_schema(verb.get("input")):
                result.fail(f'Verb "{verb_id}" input must be {{ type: "object", ... }}', verb_id)

            if not _is_object_schema(verb.get("output")):
                result.fail(f'Verb "{verb_id}" output must be {{ type: "object", ... }}', verb_id)

            result.verbs_checked += 1

        return result

    def validate_text(self, source: str, text: str) -> SourceResult:
        """Validate one manifest given as JSON text"""
        try:
            manifest = json.loads(text)
        except json.JSONDecodeError as e:
            result = SourceResult(source=source)
            result.fail(f"Invalid JSON: {e}")
            return result
        return self.validate_data(source, manifest)

    def validate_file(self, path: Path) -> SourceResult:
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            result = SourceResult(source=path.name)
            result.fail(f"Invalid JSON: {e}")
            return result
        return self.validate_text(path.name, text)

    def validate_sources(self, sources: Dict[str, str]) -> ValidationReport:
        """Validate several named JSON texts as one batch"""
        report = ValidationReport()
        for name, text in sources.items():
            self._add(report, self.validate_text(name, text))
        return report

    def validate_directory(self, directory: Path) -> ValidationReport:
        """
        Validate every *.json file in a directory, in name order.

        A missing directory is treated the same as an empty one.
        """
        directory = Path(directory)
        report = ValidationReport()
        files = sorted(directory.glob("*.json")) if directory.is_dir() else []

        if not files:
            logger.warning(f"No manifest files found in {directory}")
            return report

        for path in files:
            self._add(report, self.validate_file(path))

        logger.info(
            f"Validated {len(files)} manifest files in {directory}: "
            f"{report.error_count} violation(s)"
        )
        return report

    def _add(self, report: ValidationReport, result: SourceResult):
        report.sources.append(result)
        if result.well_formed:
            report.families += 1
        report.verbs += result.verbs_checked
        for violation in result.violations:
            logger.debug(f"Manifest violation: {violation}")
        metrics_collector.record_violations(result.source, len(result.violations))


def validate_directory(directory: Path) -> ValidationReport:
    """Validate every manifest file in a directory"""
    return ManifestValidator().validate_directory(directory)
