"""
World integrity checker - validates consistency of a World Model

Checks:
- The current location names a known Setting
- Inventory and location entries name known objects and places
- Every object is in at most one place (inventory or a single location)
- Character locations name known characters and Settings
- Entity names are unique, and no object shares a name with a Setting
- Containers do not (transitively) contain themselves
- Warnings: contents of non-containers, unplaced characters, unknown
  read effects
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

from storyloom.errors import WorldIntegrityError
from storyloom.models.properties import KNOWN_READ_EFFECTS, PropertyKey
from storyloom.models.world import WorldModel


@dataclass
class IntegrityReport:
    """Result of an integrity check"""

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """World is valid if there are no errors (warnings are OK)"""
        return len(self.errors) == 0

    def add_error(self, message: str):
        self.errors.append(message)

    def add_warning(self, message: str):
        self.warnings.append(message)


class WorldValidator:
    """Validates World Model consistency"""

    def __init__(self, world: WorldModel):
        self.world = world
        self.result = IntegrityReport()

        self.setting_names = {s.name for s in world.settings}
        self.object_names = {o.name for o in world.objects}
        self.character_names = {c.name for c in world.characters}

    def validate(self) -> IntegrityReport:
        """Run all integrity checks"""
        self._validate_unique_names()
        self._validate_current_location()
        self._validate_object_placement()
        self._validate_character_locations()
        self._detect_placement_cycles()
        self._validate_read_effects()

        return self.result

    def _validate_unique_names(self):
        for kind, names in (
            ("Setting", [s.name for s in self.world.settings]),
            ("Object", [o.name for o in self.world.objects]),
            ("Character", [c.name for c in self.world.characters]),
        ):
            for name, count in Counter(names).items():
                if count > 1:
                    self.result.add_error(f"{kind} name '{name}' is used {count} times")

        # Settings and objects share the location namespace
        settings_by_key = {s.name.lower(): s.name for s in self.world.settings}
        for obj in self.world.objects:
            setting = settings_by_key.get(obj.name.lower())
            if setting is not None:
                self.result.add_error(
                    f"Object '{obj.name}' has the same name as setting '{setting}'"
                )

    def _validate_current_location(self):
        current = self.world.world_state.current_location
        if current not in self.setting_names:
            self.result.add_error(f"Current location '{current}' is not a known setting")

    def _validate_object_placement(self):
        """Every placement names real things, and nothing is in two places"""
        state = self.world.world_state
        placements: Counter[str] = Counter()

        for name in state.player_inventory:
            placements[name] += 1
            if name not in self.object_names:
                self.result.add_error(f"Inventory contains unknown object '{name}'")

        for entry in state.object_locations:
            placements[entry.object_name] += 1
            if entry.object_name not in self.object_names:
                self.result.add_error(
                    f"Object location names unknown object '{entry.object_name}'"
                )
            location = entry.location_name
            if location in self.setting_names:
                continue
            container = self.world.get_object(location)
            if container is None:
                self.result.add_error(
                    f"Object '{entry.object_name}' has invalid location '{location}'"
                )
            elif not container.flag(PropertyKey.IS_CONTAINER):
                self.result.add_warning(
                    f"Object '{entry.object_name}' is inside '{location}', "
                    f"which is not a container"
                )

        for name, count in placements.items():
            if count > 1:
                self.result.add_error(f"Object '{name}' is placed {count} times")

    def _validate_character_locations(self):
        placed = set()
        for entry in self.world.world_state.character_locations:
            if entry.character_name not in self.character_names:
                self.result.add_error(
                    f"Character location names unknown character '{entry.character_name}'"
                )
            if entry.location_name is None:
                continue
            placed.add(entry.character_name)
            if entry.location_name not in self.setting_names:
                self.result.add_error(
                    f"Character '{entry.character_name}' has invalid location "
                    f"'{entry.location_name}'"
                )

        for character in self.world.characters:
            if character.name not in placed:
                self.result.add_warning(f"Character '{character.name}' is not placed anywhere")

    def _detect_placement_cycles(self):
        parent = {
            entry.object_name: entry.location_name
            for entry in self.world.world_state.object_locations
        }
        reported: set[str] = set()
        for start in parent:
            seen = [start]
            current = parent.get(start)
            while current is not None and current in parent:
                if current in seen:
                    cycle = seen[seen.index(current):]
                    key = min(cycle)
                    if key not in reported:
                        reported.add(key)
                        path = " -> ".join(cycle + [current])
                        self.result.add_error(f"Objects contain each other: {path}")
                    break
                seen.append(current)
                current = parent.get(current)

    def _validate_read_effects(self):
        for obj in self.world.objects:
            effect = obj.get(PropertyKey.ON_READ_EFFECT)
            if effect is not None and effect not in KNOWN_READ_EFFECTS:
                self.result.add_warning(
                    f"Object '{obj.name}' has unknown on_read_effect '{effect}'"
                )


def check_world(world: WorldModel) -> IntegrityReport:
    """Run every integrity check on a World Model"""
    return WorldValidator(world).validate()


def ensure_integrity(world: WorldModel) -> WorldModel:
    """Return the world unchanged, or raise WorldIntegrityError"""
    report = check_world(world)
    if not report.is_valid:
        raise WorldIntegrityError(report.errors)
    return world
