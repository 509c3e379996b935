"""Adapters converting configuration schemas to domain objects.

The schemas describe what a configuration file may contain; the functions
here translate them into the frozen value objects consumed by the
placement services.
"""

from __future__ import annotations

from dataclasses import dataclass

from doorhardware.application.config.schemas import (
    BoltConfigSchema,
    DoorHardwareConfiguration,
    DoorLeafConfigSchema,
    DoubleDoorConfigSchema,
    HandleConfigSchema,
    HingeConfigSchema,
    LeafHardwareConfigSchema,
    LockConfigSchema,
    PlacementTuningSchema,
)
from doorhardware.domain.placement import (
    DEFAULT_PLACEMENT_CONFIG,
    DoubleDoorHardware,
    LeafHardware,
    PlacementConfig,
)
from doorhardware.domain.value_objects import (
    BoltSpec,
    DoorLeafConfig,
    DoubleDoorConfig,
    HandleSpec,
    HingePlacementRules,
    HingeSpec,
    LockSpec,
)


@dataclass(frozen=True)
class SingleDoorJob:
    """A single leaf and its hardware, ready for placement."""

    leaf: DoorLeafConfig
    hardware: LeafHardware


@dataclass(frozen=True)
class DoubleDoorJob:
    """A double door and its hardware, ready for coordination."""

    door: DoubleDoorConfig
    hardware: DoubleDoorHardware


def config_to_leaf(schema: DoorLeafConfigSchema) -> DoorLeafConfig:
    return DoorLeafConfig(
        height=schema.height,
        width=schema.width,
        leaf_thickness=schema.leaf_thickness,
        hinge_side=schema.hinge_side,
        opening_direction=schema.opening_direction,
        leaf_id=schema.leaf_id,
        weight_kg=schema.weight_kg,
        core=schema.core,
    )


def config_to_hinge_spec(schema: HingeConfigSchema) -> HingeSpec:
    """Convert a hinge schema, keeping default rules when none are given."""
    if schema.placement_rules is None:
        return HingeSpec(count=schema.count, hinge_type=schema.hinge_type)
    rules = schema.placement_rules
    return HingeSpec(
        count=schema.count,
        hinge_type=schema.hinge_type,
        placement_rules=HingePlacementRules(
            top_offset=rules.top_offset,
            bottom_offset=rules.bottom_offset,
            distribution_mode=rules.distribution_mode,
        ),
    )


def config_to_lock_spec(schema: LockConfigSchema) -> LockSpec:
    return LockSpec(
        lock_type=schema.lock_type,
        height=schema.height,
        edge_offset=schema.edge_offset,
        edge=schema.edge,
        backset=schema.backset,
    )


def config_to_handle_spec(schema: HandleConfigSchema) -> HandleSpec:
    return HandleSpec(
        handle_type=schema.handle_type,
        height=schema.height,
        side=schema.side,
        edge=schema.edge,
        edge_offset=schema.edge_offset,
    )


def config_to_bolt_spec(schema: BoltConfigSchema) -> BoltSpec:
    return BoltSpec(
        bolt_type=schema.bolt_type,
        positions=frozenset(schema.positions),
        top_offset=schema.top_offset,
        bottom_offset=schema.bottom_offset,
        meeting_edge=schema.meeting_edge,
    )


def config_to_leaf_hardware(schema: LeafHardwareConfigSchema | None) -> LeafHardware:
    """Convert single-leaf hardware; a missing section means hinges only."""
    if schema is None:
        return LeafHardware()
    return LeafHardware(
        hinges=config_to_hinge_spec(schema.hinges),
        lock=config_to_lock_spec(schema.lock) if schema.lock else None,
        handles=config_to_handle_spec(schema.handles) if schema.handles else None,
        bolts=config_to_bolt_spec(schema.bolts) if schema.bolts else None,
    )


def config_to_double_door(schema: DoubleDoorConfigSchema) -> DoubleDoorJob:
    hardware = schema.hardware
    return DoubleDoorJob(
        door=DoubleDoorConfig(
            active_leaf=config_to_leaf(schema.active_leaf),
            inactive_leaf=config_to_leaf(schema.inactive_leaf),
            astragal=schema.astragal,
        ),
        hardware=DoubleDoorHardware(
            active_hinges=config_to_hinge_spec(hardware.active_hinges),
            lock=config_to_lock_spec(hardware.lock),
            handles=config_to_handle_spec(hardware.handles),
            inactive_hinges=config_to_hinge_spec(hardware.inactive_hinges),
            bolts=config_to_bolt_spec(hardware.bolts),
        ),
    )


def config_to_placement_config(schema: PlacementTuningSchema | None) -> PlacementConfig:
    """Overlay configured tunables on the standard placement configuration.

    Args:
        schema: Placement tuning section, or None for the standard values.

    Returns:
        PlacementConfig with every configured field replaced. Clearance and
        lock thickness entries replace the matching standard entries only.
    """
    if schema is None:
        return DEFAULT_PLACEMENT_CONFIG
    overrides = schema.model_dump(
        exclude_none=True, exclude={"clearances", "lock_min_thickness"}
    )
    if schema.clearances:
        clearances = dict(DEFAULT_PLACEMENT_CONFIG.clearances)
        for rule in schema.clearances:
            clearances[frozenset(rule.kinds)] = rule.clearance
        overrides["clearances"] = clearances
    if schema.lock_min_thickness:
        overrides["lock_min_thickness"] = {
            **DEFAULT_PLACEMENT_CONFIG.lock_min_thickness,
            **schema.lock_min_thickness,
        }
    if not overrides:
        return DEFAULT_PLACEMENT_CONFIG
    return PlacementConfig(**overrides)


def config_to_job(config: DoorHardwareConfiguration) -> SingleDoorJob | DoubleDoorJob:
    """Convert a validated root configuration into a placement job.

    Args:
        config: Validated configuration holding either ``door`` or
            ``double_door``.

    Returns:
        SingleDoorJob or DoubleDoorJob.
    """
    if config.double_door is not None:
        return config_to_double_door(config.double_door)
    assert config.door is not None
    return SingleDoorJob(
        leaf=config_to_leaf(config.door),
        hardware=config_to_leaf_hardware(config.hardware),
    )
