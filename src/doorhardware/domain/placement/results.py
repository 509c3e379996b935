"""Result types for hardware placement, validation and conflict detection."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from doorhardware.domain.value_objects import (
    ConflictSeverity,
    HardwareKind,
    Point3D,
    Transform3D,
)


class FailureCategory(str, Enum):
    """Broad classes of validation failure."""

    STRUCTURAL = "structural"
    RANGE = "range"
    PHYSICAL = "physical"
    PROXIMITY = "proximity"


class FailureRule(str, Enum):
    """The placement rule a validation failure violates."""

    MINIMUM_HINGE_COUNT_VIOLATION = "minimum_hinge_count_violation"
    NO_POSITIONS_SPECIFIED = "no_positions_specified"
    HEIGHT_OUT_OF_RANGE = "height_out_of_range"
    EDGE_OFFSET_OUT_OF_RANGE = "edge_offset_out_of_range"
    OFFSET_OUT_OF_RANGE = "offset_out_of_range"
    INSUFFICIENT_OFFSET_SPACE = "insufficient_offset_space"
    THICKNESS_INSUFFICIENT = "thickness_insufficient"
    HINGE_PROXIMITY_VIOLATION = "hinge_proximity_violation"

    @property
    def category(self) -> FailureCategory:
        return _RULE_CATEGORIES[self]


_RULE_CATEGORIES: dict[FailureRule, FailureCategory] = {
    FailureRule.MINIMUM_HINGE_COUNT_VIOLATION: FailureCategory.STRUCTURAL,
    FailureRule.NO_POSITIONS_SPECIFIED: FailureCategory.STRUCTURAL,
    FailureRule.HEIGHT_OUT_OF_RANGE: FailureCategory.RANGE,
    FailureRule.EDGE_OFFSET_OUT_OF_RANGE: FailureCategory.RANGE,
    FailureRule.OFFSET_OUT_OF_RANGE: FailureCategory.RANGE,
    FailureRule.INSUFFICIENT_OFFSET_SPACE: FailureCategory.PHYSICAL,
    FailureRule.THICKNESS_INSUFFICIENT: FailureCategory.PHYSICAL,
    FailureRule.HINGE_PROXIMITY_VIOLATION: FailureCategory.PROXIMITY,
}


@dataclass(frozen=True)
class ValidationFailure:
    """A single violated placement rule.

    Attributes:
        rule: The rule that was violated.
        message: Human-readable description of the failure.
        details: Offending parameter values, keyed by parameter name.
    """

    rule: FailureRule
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def formatted_message(self) -> str:
        """Message prefixed with the violated rule."""
        return f"[{self.rule.value}] {self.message}"


@dataclass(frozen=True)
class ValidationResult:
    """Result of validating a hardware selection against a leaf.

    A selection is valid when no failures were recorded.

    Attributes:
        failures: Tuple of violated rules.
    """

    failures: tuple[ValidationFailure, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        """Check if validation passed (no failures).

        Returns:
            True if there are no failures, False otherwise.
        """
        return len(self.failures) == 0

    @property
    def rules(self) -> tuple[FailureRule, ...]:
        """The violated rules, in the order they were checked."""
        return tuple(f.rule for f in self.failures)

    @property
    def messages(self) -> tuple[str, ...]:
        return tuple(f.formatted_message for f in self.failures)

    def has_rule(self, rule: FailureRule) -> bool:
        return rule in self.rules

    @classmethod
    def ok(cls) -> ValidationResult:
        """Create a successful validation result."""
        return cls()

    @classmethod
    def fail(cls, failures: list[ValidationFailure]) -> ValidationResult:
        """Create a failed validation result.

        Args:
            failures: List of violated rules.

        Returns:
            A ValidationResult carrying the provided failures.
        """
        return cls(failures=tuple(failures))

    @classmethod
    def from_failures(cls, failures: list[ValidationFailure]) -> ValidationResult:
        """Create a result that is valid exactly when ``failures`` is empty."""
        return cls.fail(failures) if failures else cls.ok()


class PlacementValidationError(Exception):
    """Raised when hardware cannot be placed because validation failed.

    Calculators validate before computing any geometry and raise this error
    instead of returning partial or clamped placements.

    Attributes:
        kind: The hardware kind that failed validation.
        result: The failed ValidationResult with every violated rule.
    """

    def __init__(self, kind: HardwareKind, result: ValidationResult) -> None:
        self.kind = kind
        self.result = result
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        lines = [f"{self.kind.value.capitalize()} placement failed validation:"]
        lines.extend(f"  - {message}" for message in self.result.messages)
        return "\n".join(lines)

    @property
    def rules(self) -> tuple[FailureRule, ...]:
        return self.result.rules


@dataclass(frozen=True)
class PlacementMetadata:
    """Descriptive data attached to a placement.

    Attributes:
        index: Position of the placement within its kind, in placement order
            (vertical order for hinges).
        hardware_type: The selected type value (e.g. "butt", "mortise").
        side: Edge or face the hardware is mounted on.
        y_position: Computed height above the bottom of the leaf (mm).
        length: Length of continuous hardware such as piano hinges (mm).
        mount_offset: Type-specific refinement from the placement anchor to
            the hardware body, applied by the geometry layer.
        group: Assembly identifier shared by placements that form one
            through-leaf assembly (both faces of a handle set).
    """

    index: int
    hardware_type: str
    side: str
    y_position: float
    length: float | None = None
    mount_offset: Point3D | None = None
    group: str | None = None


@dataclass(frozen=True)
class HardwarePlacement:
    """Computed placement of one piece of hardware.

    Placements are value objects produced fresh on every call; a new
    configuration yields a new placement set.

    Attributes:
        id: Identifier, unique within one placement call.
        kind: Hardware kind.
        transform: Anchor position and orientation in door-local space.
        metadata: Descriptive data about the placement.
    """

    id: str
    kind: HardwareKind
    transform: Transform3D
    metadata: PlacementMetadata

    @property
    def position(self) -> Point3D:
        return self.transform.position

    @property
    def mounted_position(self) -> Point3D:
        """Anchor position with the type-specific mount offset applied."""
        if self.metadata.mount_offset is None:
            return self.transform.position
        return self.transform.position + self.metadata.mount_offset


@dataclass(frozen=True)
class HardwareConflict:
    """Two placements closer than their required clearance.

    Attributes:
        first_id: Id of the first placement.
        second_id: Id of the second placement.
        distance: Measured centroid distance (mm).
        required_clearance: Clearance required for this pair of kinds (mm).
        severity: ERROR when the distance is below half the requirement,
            otherwise WARNING.
    """

    first_id: str
    second_id: str
    distance: float
    required_clearance: float
    severity: ConflictSeverity

    @property
    def is_error(self) -> bool:
        return self.severity is ConflictSeverity.ERROR

    @property
    def formatted_message(self) -> str:
        prefix = "[FAIL]" if self.is_error else "[WARN]"
        return (
            f"{prefix} {self.first_id} and {self.second_id} are "
            f"{self.distance:.1f}mm apart (requires {self.required_clearance:.1f}mm)"
        )
