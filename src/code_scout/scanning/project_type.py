"""Project type detection from marker files.

Each marker found directly inside the directory adds 1.0 to its
ecosystem's score. A generic package manifest together with a framework
config adds a further bonus to the framework, so the more specific label
wins over the runtime it is built on.

Confidence is the winner's score divided by the number of markers in the
table: a rough normalization, not a probability.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union

from ..exceptions import FileAccessError
from ..logging_config import get_logger
from ..models import ProjectTypeGuess

logger = get_logger(__name__)

UNKNOWN = "Unknown"

# (marker, ecosystem) in priority order; "*.ext" markers match by suffix
MARKERS: Tuple[Tuple[str, str], ...] = (
    ("package.json", "Node.js"),
    ("next.config.js", "Next.js"),
    ("next.config.mjs", "Next.js"),
    ("next.config.ts", "Next.js"),
    ("Cargo.toml", "Rust"),
    ("requirements.txt", "Python"),
    ("pyproject.toml", "Python"),
    ("Pipfile", "Python"),
    ("go.mod", "Go"),
    ("pom.xml", "Java/Maven"),
    ("build.gradle", "Java/Gradle"),
    ("Gemfile", "Ruby"),
    ("composer.json", "PHP"),
    ("*.csproj", "C#/.NET"),
)


@dataclass(frozen=True)
class FrameworkBonus:
    """Extra score for a framework whose config sits next to a generic manifest."""

    manifest: str
    configs: Tuple[str, ...]
    framework: str
    bonus: float = 2.0


BONUSES: Tuple[FrameworkBonus, ...] = (
    FrameworkBonus(
        manifest="package.json",
        configs=("next.config.js", "next.config.mjs", "next.config.ts"),
        framework="Next.js",
    ),
)


class ProjectTypeDetector:
    """Scores a directory against a fixed marker table."""

    def __init__(
        self,
        markers: Sequence[Tuple[str, str]] = MARKERS,
        bonuses: Sequence[FrameworkBonus] = BONUSES,
    ):
        if not markers:
            raise ValueError("markers must not be empty")
        self.markers = tuple(markers)
        self.bonuses = tuple(bonuses)

    def detect(self, directory: Union[str, Path]) -> ProjectTypeGuess:
        """
        Guess the ecosystem of a directory.

        Args:
            directory: Directory whose immediate children are inspected

        Returns:
            ProjectTypeGuess; "Unknown" with confidence 0.0 if no marker is found

        Raises:
            FileAccessError: If the directory is missing or cannot be listed
        """
        root = Path(directory)
        if not root.is_dir():
            raise FileAccessError(root, "Directory does not exist")

        try:
            children = {child.name for child in root.iterdir() if child.is_file()}
        except OSError as e:
            raise FileAccessError(root, f"Cannot list directory: {e}") from e

        indicators: List[str] = []
        scores: Dict[str, float] = {}
        found_markers = set()

        for marker, ecosystem in self.markers:
            matches = self._match_marker(marker, children)
            if not matches:
                continue
            found_markers.add(marker)
            indicators.extend(matches)
            scores[ecosystem] = scores.get(ecosystem, 0.0) + 1.0

        for rule in self.bonuses:
            if rule.manifest in found_markers and found_markers.intersection(rule.configs):
                scores[rule.framework] = scores.get(rule.framework, 0.0) + rule.bonus

        winner = self._pick_winner(scores)
        if winner is None:
            logger.debug(f"No project markers in {root}")
            return ProjectTypeGuess(detected_type=UNKNOWN, confidence=0.0, indicators=[])

        confidence = min(1.0, scores[winner] / len(self.markers))
        logger.debug(f"{root}: {winner} (scores={scores})")
        return ProjectTypeGuess(detected_type=winner, confidence=confidence, indicators=indicators)

    @staticmethod
    def _match_marker(marker: str, children: set) -> List[str]:
        if marker.startswith("*."):
            suffix = marker[1:]
            return sorted(name for name in children if name.endswith(suffix) and name != suffix)
        return [marker] if marker in children else []

    def _pick_winner(self, scores: Dict[str, float]) -> Optional[str]:
        """Highest score wins; ties go to the ecosystem listed first in the table."""
        best: Optional[str] = None
        order = [ecosystem for _, ecosystem in self.markers]
        order.extend(rule.framework for rule in self.bonuses)
        for ecosystem in order:
            if ecosystem not in scores:
                continue
            if best is None or scores[ecosystem] > scores[best]:
                best = ecosystem
        return best


def detect_project_type(directory: Union[str, Path]) -> ProjectTypeGuess:
    """Detect a directory's project type with the default marker table."""
    return ProjectTypeDetector().detect(directory)
