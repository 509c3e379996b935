"""Output formatters and exporters for hardware placements."""

from __future__ import annotations

import json
from typing import Any

from doorhardware.application import PlacementOutput, ValidationOutput
from doorhardware.domain.placement import (
    DoubleDoorPlacement,
    HardwareConflict,
    HardwarePlacement,
    LeafPlacement,
    ValidationResult,
)


class PlacementReportFormatter:
    """Formats placement sets as a readable table.

    One row per placement with its id, type, position and rotation,
    followed by any clearance conflicts.
    """

    def format(self, output: PlacementOutput) -> str:
        """Format a placement output, or its errors when placement failed."""
        if not output.is_valid:
            lines = ["PLACEMENT FAILED", "=" * 72]
            for error in output.errors:
                lines.append(str(error))
            return "\n".join(lines)
        if output.double is not None:
            return self.format_double(output.double)
        assert output.single is not None
        return self.format_leaf(output.single)

    def format_leaf(self, placement: LeafPlacement, title: str | None = None) -> str:
        """Format the placement set of one leaf.

        Args:
            placement: Leaf placement set.
            title: Report title; defaults to the leaf id.

        Returns:
            Formatted report string.
        """
        leaf = placement.leaf
        lines = [
            title or f"HARDWARE PLACEMENT: {leaf.leaf_id}",
            "=" * 72,
            f"Leaf: {leaf.width:.0f} x {leaf.height:.0f} x {leaf.leaf_thickness:.0f} mm, "
            f"{leaf.hinge_side.value}-hung, opens {leaf.opening_direction.value}",
            "",
            f"{'Id':<28} {'Type':<10} {'X':>8} {'Y':>8} {'Z':>8} {'Rot':>7}",
            "-" * 72,
        ]
        for item in placement.placements:
            lines.append(self._format_row(item))

        lines.append("")
        lines.extend(self._format_conflicts(placement.conflicts))
        return "\n".join(lines)

    def format_double(self, placement: DoubleDoorPlacement) -> str:
        lines = [
            "DOUBLE DOOR HARDWARE PLACEMENT",
            "=" * 72,
            f"Astragal: {placement.config.astragal.value} "
            f"(meeting gap {placement.meeting_gap:.1f} mm)",
            f"Left leaf: {placement.left_leaf.leaf_id}, "
            f"right leaf: {placement.right_leaf.leaf_id}",
            "",
            self.format_leaf(
                placement.active, f"ACTIVE LEAF: {placement.active.leaf.leaf_id}"
            ),
            "",
            self.format_leaf(
                placement.inactive, f"INACTIVE LEAF: {placement.inactive.leaf.leaf_id}"
            ),
        ]
        return "\n".join(lines)

    def _format_row(self, item: HardwarePlacement) -> str:
        pos = item.position
        return (
            f"{item.id:<28} {item.metadata.hardware_type:<10} "
            f"{pos.x:>8.1f} {pos.y:>8.1f} {pos.z:>8.1f} "
            f"{item.transform.rotation.angle:>7.1f}"
        )

    def _format_conflicts(self, conflicts: tuple[HardwareConflict, ...]) -> list[str]:
        if not conflicts:
            return ["No clearance conflicts."]
        lines = ["CLEARANCE CONFLICTS"]
        lines.extend(f"  {c.formatted_message}" for c in conflicts)
        return lines


class ValidationReportFormatter:
    """Formats validation results per leaf."""

    def format(
        self,
        output: ValidationOutput,
        conflicts: tuple[HardwareConflict, ...] = (),
    ) -> str:
        """Format validation results, listing clearance conflicts as warnings."""
        lines = ["HARDWARE VALIDATION", "=" * 72]
        for leaf_id, result in output.results.items():
            lines.append(self.format_result(leaf_id, result))
        if conflicts:
            lines.append("")
            lines.append("Warnings:")
            lines.extend(f"  {c.formatted_message}" for c in conflicts)
        lines.append("")
        if not output.is_valid:
            lines.append("Result: FAILED")
        elif conflicts:
            lines.append(f"Result: PASSED with {len(conflicts)} warning(s)")
        else:
            lines.append("Result: PASSED")
        return "\n".join(lines)

    def format_result(self, leaf_id: str, result: ValidationResult) -> str:
        if result.is_valid:
            return f"[PASS] {leaf_id}"
        lines = [f"[FAIL] {leaf_id}"]
        lines.extend(f"  - {message}" for message in result.messages)
        return "\n".join(lines)


class JsonExporter:
    """Exports placements and validation results as JSON.

    Placements are written in door-local millimeters with rotations as
    axis-angle in degrees.
    """

    def export(self, output: PlacementOutput) -> str:
        """Export a placement output as a JSON string."""
        return json.dumps(self.to_dict(output), indent=2)

    def export_validation(
        self,
        output: ValidationOutput,
        conflicts: tuple[HardwareConflict, ...] = (),
    ) -> str:
        """Export validation results, with advisory conflicts as warnings."""
        data = {
            "valid": output.is_valid,
            "warnings": [self._format_conflict(c) for c in conflicts],
            "leaves": {
                leaf_id: self._format_result(result)
                for leaf_id, result in output.results.items()
            },
        }
        return json.dumps(data, indent=2)

    def to_dict(self, output: PlacementOutput) -> dict[str, Any]:
        if not output.is_valid:
            return {
                "errors": [
                    {"kind": error.kind.value, **self._format_result(error.result)}
                    for error in output.errors
                ]
            }
        if output.double is not None:
            double = output.double
            return {
                "double_door": {
                    "astragal": double.config.astragal.value,
                    "meeting_gap": double.meeting_gap,
                    "left_leaf": double.left_leaf.leaf_id,
                    "active": self._format_leaf(double.active),
                    "inactive": self._format_leaf(double.inactive),
                }
            }
        assert output.single is not None
        return {"leaf": self._format_leaf(output.single)}

    def _format_leaf(self, placement: LeafPlacement) -> dict[str, Any]:
        leaf = placement.leaf
        return {
            "leaf_id": leaf.leaf_id,
            "height": leaf.height,
            "width": leaf.width,
            "leaf_thickness": leaf.leaf_thickness,
            "hinge_side": leaf.hinge_side.value,
            "opening_direction": leaf.opening_direction.value,
            "placements": [self._format_placement(p) for p in placement.placements],
            "conflicts": [self._format_conflict(c) for c in placement.conflicts],
        }

    def _format_placement(self, item: HardwarePlacement) -> dict[str, Any]:
        """Format a single placement for JSON output.

        Optional metadata fields are included only when set.
        """
        rotation = item.transform.rotation
        metadata = item.metadata
        result: dict[str, Any] = {
            "id": item.id,
            "kind": item.kind.value,
            "position": list(item.position.as_tuple()),
            "rotation": {"axis": list(rotation.axis), "angle": rotation.angle},
            "metadata": {
                "index": metadata.index,
                "hardware_type": metadata.hardware_type,
                "side": metadata.side,
                "y_position": metadata.y_position,
            },
        }
        if metadata.length is not None:
            result["metadata"]["length"] = metadata.length
        if metadata.mount_offset is not None:
            result["metadata"]["mount_offset"] = list(metadata.mount_offset.as_tuple())
        if metadata.group is not None:
            result["metadata"]["group"] = metadata.group
        return result

    def _format_conflict(self, conflict: HardwareConflict) -> dict[str, Any]:
        return {
            "first_id": conflict.first_id,
            "second_id": conflict.second_id,
            "distance": round(conflict.distance, 3),
            "required_clearance": conflict.required_clearance,
            "severity": conflict.severity.value,
        }

    def _format_result(self, result: ValidationResult) -> dict[str, Any]:
        return {
            "valid": result.is_valid,
            "failures": [
                {
                    "rule": f.rule.value,
                    "category": f.rule.category.value,
                    "message": f.message,
                    "details": f.details,
                }
                for f in result.failures
            ],
        }
